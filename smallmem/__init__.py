"""Quotas, a stack, intrusive lists, a cyclic scratch buffer and red-black trees."""

__version__ = "0.1.0"
__all__ = ["lifo", "quota", "quota_lessor", "rlist", "static", "rbtree"]