# smallmem

Small building blocks for memory accounting and ordered containers:

- `smallmem.quota.Quota` is a memory limit kept in 1 KiB units. All sizes passed to it are rounded up to whole units. Its `use`, `release`, `set` and `total_and_used` calls hold a lock, so several threads can share one quota.
- `smallmem.quota_lessor.QuotaLessor` takes chunks of at least 1 MiB from a `Quota` and hands out byte-exact leases. It is meant for use from one thread.
- `smallmem.lifo.Lifo` is a minimal last-in, first-out stack.
- `smallmem.rlist.RList` is an intrusive, circular, doubly linked list. Each link has an `entry` attribute that points to the object that owns it.
- `smallmem.static.StaticBuffer` is a fixed-size cyclic scratch buffer. `thread_buffer()` returns the buffer that belongs to the calling thread.
- `smallmem.rbtree.RBTree` is a left-leaning red-black tree of `RBNode` objects. Comparators and an augmentation callback are optional.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Quota and lessor

```python
from smallmem.quota import Quota, QuotaError
from smallmem.quota_lessor import QuotaLessor

quota = Quota(64 * 1024 * 1024)
quota.use(100)             # 1024: rounded up to one unit
quota.release(100)         # 1024

with QuotaLessor(quota) as lessor:
    lessor.lease(100)      # 100; 1 MiB is taken from the quota
    lessor.leased()        # 100
    lessor.available()     # 1048476
    lessor.end_lease(100)
# leaving the block calls close(), which returns everything to the quota
```

`Quota.use`, `Quota.set` and `QuotaLessor.lease` raise `QuotaError` when a request does not fit. Invalid sizes raise `ValueError`. Examples are negative sizes, releasing more than is used, or closing a lessor that still has leases.

`end_lease` does not hand memory back to the quota until at least 2 MiB are unused. Even then it keeps about 1 MiB in reserve, so that repeated lease and release calls do not keep taking memory from the quota and returning it.

## Stack and intrusive list

```python
from smallmem.lifo import Lifo
from smallmem.rlist import RList

stack = Lifo().push(1).push(2)
stack.pop()                # 2
stack.pop()                # 1
stack.pop()                # None

class Item:
    def __init__(self, no):
        self.no = no
        self.link = RList(self)

head = RList()
items = [Item(i) for i in range(3)]
for item in items:
    head.add_tail(item.link)
[i.no for i in head.entries()]           # [0, 1, 2]
[i.no for i in head.entries_reversed()]  # [2, 1, 0]
items[1].link.delete()
```

`RList` also offers `add`, `shift`, `shift_tail`, `first`, `last`, `move`, `move_tail`, `swap`, `splice`, `splice_tail`, `cut_before` and `prev_entry_or_none`. You may remove the current link while iterating over a list.

## Static buffer

```python
from smallmem.static import StaticBuffer, thread_buffer

buf = StaticBuffer()               # 12288 bytes
offset = buf.alloc(10)             # 0
aligned = buf.aligned_alloc(3, 8)  # 16: the offset is rounded up to a multiple of 8
buf.view(offset, 10)[:] = b"0123456789"
```

The methods return offsets into `buf.buffer`. If a request does not fit in the space left, the buffer wraps to the start. A request larger than the whole buffer raises `ValueError`. `reserve` and `aligned_reserve` return an offset without moving the position. `reset` starts again from offset 0.

## Red-black tree

```python
from smallmem.rbtree import RBNode, RBTree

tree = RBTree()
for k in range(10):
    tree.insert(RBNode(k, 2 * k))

tree.search(3).value       # 6
tree.nsearch(20)           # None
tree.psearch(20).key       # 9
tree.next(tree.first()).key  # 1
[n.key for n in tree]      # 0 .. 9 in order
[n.key for n in reversed(tree)]
tree.remove(tree.search(3))
```

By default nodes are ordered by `key`. To order them differently, pass `cmp(node_a, node_b)` and, if needed, `key_cmp(key, node)`. Either function returns a negative number, zero or a positive number. `aug(node, left, right)` is called bottom-up on every node whose subtree changes. It can keep per-subtree data such as sizes. Inserting a node equal to one already in the tree raises `ValueError`. So does removing a node that is not in the tree.

## What is not included

The tree can be traversed only with `iter()`, `reversed()`, `first`/`last` and `next`/`prev`. The package has no iterator object that stays at a position between calls. It has no pre-order walk and no callback-driven traversal. Bounded searches other than `nsearch` and `psearch` have to be built from these calls.