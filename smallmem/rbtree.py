"""Left-leaning 2-3 red-black trees with optional augmentation.

Nodes are :class:`RBNode` objects (or subclasses) that carry their own
links and colour. The tree orders them with a node comparator and finds
them with a key comparator. Both return a negative number, zero or a
positive number. An optional augmentation callback
``aug(node, left, right)`` runs bottom-up on every node whose subtree
changes during an insertion or a removal. It can maintain per-subtree
data such as sizes.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional

NodeCmp = Callable[["RBNode", "RBNode"], int]
KeyCmp = Callable[[Any, "RBNode"], int]
AugFn = Callable[["RBNode", Optional["RBNode"], Optional["RBNode"]], None]


class RBNode:
    """A tree node holding a ``key``, a ``value`` and its tree linkage."""

    def __init__(self, key: Any = None, value: Any = None) -> None:
        self.key = key
        self.value = value
        self.left: Optional[RBNode] = None
        self.right: Optional[RBNode] = None
        self.red = True

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.key!r}, value={self.value!r})"


def _default_cmp(a: RBNode, b: RBNode) -> int:
    return (a.key > b.key) - (a.key < b.key)


def _default_key_cmp(key: Any, node: RBNode) -> int:
    return (key > node.key) - (key < node.key)


def _rotate_left(node: RBNode) -> RBNode:
    top = node.right
    node.right = top.left
    top.left = node
    return top


def _rotate_right(node: RBNode) -> RBNode:
    top = node.left
    node.left = top.right
    top.right = node
    return top


class _Step:
    __slots__ = ("node", "cmp")

    def __init__(self, node: Optional[RBNode], cmp: int = 0) -> None:
        self.node = node
        self.cmp = cmp


class RBTree:
    """An ordered set of :class:`RBNode` objects.

    ``cmp`` orders two nodes; by default it compares ``node.key``.
    ``key_cmp`` compares a search key with a node; it defaults to
    ``cmp`` when only ``cmp`` is given (keys are then nodes), and to a
    comparison with ``node.key`` otherwise.
    """

    def __init__(
        self,
        cmp: Optional[NodeCmp] = None,
        key_cmp: Optional[KeyCmp] = None,
        aug: Optional[AugFn] = None,
    ) -> None:
        if cmp is None:
            self._cmp: NodeCmp = _default_cmp
            self._key_cmp: KeyCmp = key_cmp or _default_key_cmp
        else:
            self._cmp = cmp
            self._key_cmp = key_cmp or cmp
        self._aug = aug
        self.root: Optional[RBNode] = None

    # Comparators are exposed for the iterator helpers.
    @property
    def cmp(self) -> NodeCmp:
        return self._cmp

    @property
    def key_cmp(self) -> KeyCmp:
        return self._key_cmp

    def is_empty(self) -> bool:
        """Return True if the tree holds no nodes."""
        return self.root is None

    def __bool__(self) -> bool:
        return self.root is not None

    def first(self) -> Optional[RBNode]:
        """Return the smallest node, or ``None`` if the tree is empty."""
        node = self.root
        if node is not None:
            while node.left is not None:
                node = node.left
        return node

    def last(self) -> Optional[RBNode]:
        """Return the largest node, or ``None`` if the tree is empty."""
        node = self.root
        if node is not None:
            while node.right is not None:
                node = node.right
        return node

    def next(self, node: RBNode) -> Optional[RBNode]:
        """Return the successor of ``node``, or ``None`` if it is last."""
        if node.right is not None:
            ret = node.right
            while ret.left is not None:
                ret = ret.left
            return ret
        ret = None
        tnode = self.root
        while True:
            if tnode is None:
                raise ValueError("node is not in the tree")
            c = self._cmp(node, tnode)
            if c < 0:
                ret = tnode
                tnode = tnode.left
            elif c > 0:
                tnode = tnode.right
            else:
                return ret

    def prev(self, node: RBNode) -> Optional[RBNode]:
        """Return the predecessor of ``node``, or ``None`` if it is first."""
        if node.left is not None:
            ret = node.left
            while ret.right is not None:
                ret = ret.right
            return ret
        ret = None
        tnode = self.root
        while True:
            if tnode is None:
                raise ValueError("node is not in the tree")
            c = self._cmp(node, tnode)
            if c < 0:
                tnode = tnode.left
            elif c > 0:
                ret = tnode
                tnode = tnode.right
            else:
                return ret

    def search(self, key: Any) -> Optional[RBNode]:
        """Return a node matching ``key``, or ``None``."""
        node = self.root
        while node is not None:
            c = self._key_cmp(key, node)
            if c == 0:
                return node
            node = node.left if c < 0 else node.right
        return None

    def nsearch(self, key: Any) -> Optional[RBNode]:
        """Return the largest matching node, else the key's successor."""
        ret = None
        successor = None
        tnode = self.root
        while tnode is not None:
            c = self._key_cmp(key, tnode)
            if c < 0:
                successor = tnode
                tnode = tnode.left
            elif c > 0:
                tnode = tnode.right
            else:
                ret = tnode
                tnode = tnode.right
        return successor if ret is None else ret

    def psearch(self, key: Any) -> Optional[RBNode]:
        """Return the smallest matching node, else the key's predecessor."""
        ret = None
        predecessor = None
        tnode = self.root
        while tnode is not None:
            c = self._key_cmp(key, tnode)
            if c < 0:
                tnode = tnode.left
            elif c > 0:
                predecessor = tnode
                tnode = tnode.right
            else:
                ret = tnode
                tnode = tnode.left
        return predecessor if ret is None else ret

    # -- augmentation helpers -------------------------------------------

    def _augment(self, node: RBNode) -> None:
        if self._aug is not None:
            self._aug(node, node.left, node.right)

    def _propagate(self, path: list[_Step], start: int) -> None:
        if self._aug is None:
            return
        for step in reversed(path[: start + 1]):
            self._augment(step.node)

    def _replace_subtree(self, path: list[_Step], i: int, child: Optional[RBNode]) -> None:
        if i == 0:
            self.root = child
            return
        parent = path[i - 1]
        if parent.cmp < 0:
            parent.node.left = child
        else:
            parent.node.right = child

    # -- modification ---------------------------------------------------

    def insert(self, node: RBNode) -> None:
        """Insert ``node``; raises ValueError if an equal node is present."""
        path: list[_Step] = []
        cur = self.root
        while cur is not None:
            c = self._cmp(node, cur)
            if c == 0:
                raise ValueError("an equal node is already in the tree")
            path.append(_Step(cur, c))
            cur = cur.left if c < 0 else cur.right
        node.left = None
        node.right = None
        node.red = True
        self._augment(node)
        path.append(_Step(node))

        for i in range(len(path) - 2, -1, -1):
            cnode = path[i].node
            child = path[i + 1].node
            if path[i].cmp < 0:
                cnode.left = child
                if not child.red:
                    self._propagate(path, i)
                    return
                leftleft = child.left
                if leftleft is not None and leftleft.red:
                    # Fix up a 4-node.
                    leftleft.red = False
                    tnode = _rotate_right(cnode)
                    self._augment(cnode)
                    self._augment(tnode)
                    cnode = tnode
                else:
                    self._augment(cnode)
            else:
                cnode.right = child
                if not child.red:
                    self._propagate(path, i)
                    return
                left = cnode.left
                if left is not None and left.red:
                    # Split a 4-node.
                    left.red = False
                    child.red = False
                    cnode.red = True
                    self._augment(cnode)
                else:
                    # Lean left.
                    tred = cnode.red
                    tnode = _rotate_left(cnode)
                    tnode.red = tred
                    cnode.red = True
                    self._augment(cnode)
                    self._augment(tnode)
                    cnode = tnode
            path[i].node = cnode

        self.root = path[0].node
        self.root.red = False

    def remove(self, node: RBNode) -> None:
        """Remove ``node``; raises ValueError if it is not in the tree."""
        self._remove(node)
        node.left = None
        node.right = None

    def _remove(self, node: RBNode) -> None:
        path: list[_Step] = [_Step(self.root)]
        nodep: Optional[int] = None
        idx = 0
        while path[idx].node is not None:
            cur = path[idx].node
            c = self._cmp(node, cur)
            path[idx].cmp = c
            if c < 0:
                path.append(_Step(cur.left))
            else:
                path.append(_Step(cur.right))
                if c == 0:
                    # Find the successor, in preparation for a swap.
                    path[idx].cmp = 1
                    nodep = idx
                    idx += 1
                    while path[idx].node is not None:
                        path[idx].cmp = -1
                        path.append(_Step(path[idx].node.left))
                        idx += 1
                    break
            idx += 1
        if nodep is None or path[nodep].node is not node:
            raise ValueError("node is not in the tree")

        p = idx - 1
        if path[p].node is not node:
            # Swap the node with its successor.
            succ = path[p].node
            tred = succ.red
            succ.red = node.red
            succ.left = node.left
            succ.right = node.right
            node.red = tred
            path[nodep].node = succ
            path[p].node = node
            self._replace_subtree(path, nodep, succ)
        else:
            left = node.left
            if left is not None:
                # No successor, but a left child: splice the node out.
                left.red = False
                self._replace_subtree(path, p, left)
                if p > 0:
                    self._propagate(path, p - 1)
                return
            if p == 0:
                self.root = None
                return

        if path[p].node.red:
            # Prune a red leaf; no fixup needed.
            path[p - 1].node.left = None
            self._propagate(path, p - 1)
            return

        # The pruned node is black: unwind until balance is restored.
        path[p].node = None
        for i in range(p - 1, -1, -1):
            step = path[i]
            cur = step.node
            if step.cmp < 0:
                cur.left = path[i + 1].node
                right = cur.right
                rightleft = right.left
                if cur.red:
                    if rightleft is not None and rightleft.red:
                        cur.red = False
                        tnode = _rotate_right(right)
                        self._augment(right)
                        self._augment(tnode)
                        cur.right = tnode
                        tnode = _rotate_left(cur)
                        self._augment(cur)
                        self._augment(tnode)
                    else:
                        tnode = _rotate_left(cur)
                        self._augment(cur)
                        self._augment(tnode)
                    self._replace_subtree(path, i, tnode)
                    self._propagate(path, i - 1)
                    return
                if rightleft is not None and rightleft.red:
                    rightleft.red = False
                    tnode = _rotate_right(right)
                    self._augment(right)
                    self._augment(tnode)
                    cur.right = tnode
                    tnode = _rotate_left(cur)
                    self._augment(cur)
                    self._augment(tnode)
                    self._replace_subtree(path, i, tnode)
                    self._propagate(path, i - 1)
                    return
                cur.red = True
                tnode = _rotate_left(cur)
                self._augment(cur)
                self._augment(tnode)
                step.node = tnode
            else:
                cur.right = path[i + 1].node
                left = cur.left
                if left.red:
                    leftright = left.right
                    leftrightleft = leftright.left
                    if leftrightleft is not None and leftrightleft.red:
                        leftrightleft.red = False
                        unode = _rotate_right(cur)
                        tnode = _rotate_right(cur)
                        unode.right = tnode
                        self._augment(cur)
                        self._augment(tnode)
                        tnode = _rotate_left(unode)
                        self._augment(unode)
                        self._augment(tnode)
                    else:
                        leftright.red = True
                        tnode = _rotate_right(cur)
                        self._augment(cur)
                        self._augment(tnode)
                        tnode.red = False
                    self._replace_subtree(path, i, tnode)
                    self._propagate(path, i - 1)
                    return
                leftleft = left.left
                if cur.red:
                    if leftleft is not None and leftleft.red:
                        cur.red = False
                        left.red = True
                        leftleft.red = False
                        tnode = _rotate_right(cur)
                        self._augment(cur)
                        self._augment(tnode)
                        self._replace_subtree(path, i, tnode)
                        self._propagate(path, i - 1)
                        return
                    left.red = True
                    cur.red = False
                    self._propagate(path, i)
                    return
                if leftleft is not None and leftleft.red:
                    leftleft.red = False
                    tnode = _rotate_right(cur)
                    self._augment(cur)
                    self._augment(tnode)
                    self._replace_subtree(path, i, tnode)
                    self._propagate(path, i - 1)
                    return
                left.red = True
                self._augment(cur)

        self.root = path[0].node

    # -- traversal -----------------------------------------------------

    def __iter__(self) -> Iterator[RBNode]:
        """Iterate over the nodes in ascending order."""
        stack: list[RBNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def __reversed__(self) -> Iterator[RBNode]:
        """Iterate over the nodes in descending order."""
        stack: list[RBNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.right
            node = stack.pop()
            yield node
            node = node.left

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"RBTree({[n.key for n in self]!r})"