"""Intrusive circular doubly linked lists.

An :class:`RList` is both a list head and a link that an object embeds
to take part in a list. A link knows the object that owns it through
its ``entry`` attribute, so a list can be walked either link by link or
entry by entry.
"""

from __future__ import annotations

from typing import Any, Iterator, Optional


class RList:
    """A list head, or a link embedded in an entry object."""

    __slots__ = ("prev", "next", "entry")

    def __init__(self, entry: Any = None) -> None:
        self.prev: RList = self
        self.next: RList = self
        self.entry = entry

    def _reset(self) -> None:
        self.prev = self
        self.next = self

    def add(self, item: "RList") -> None:
        """Insert ``item`` right after this head."""
        item.prev = self
        item.next = self.next
        item.prev.next = item
        item.next.prev = item

    def add_tail(self, item: "RList") -> None:
        """Insert ``item`` right before this head, at the list tail."""
        item.next = self
        item.prev = self.prev
        item.prev.next = item
        item.next.prev = item

    def delete(self) -> None:
        """Unlink this link from whatever list holds it."""
        self.prev.next = self.next
        self.next.prev = self.prev
        self._reset()

    def shift(self) -> "RList":
        """Remove and return the first link of the list."""
        if self.is_empty():
            raise IndexError("shift from an empty list")
        shifted = self.next
        self.next = shifted.next
        shifted.next.prev = self
        shifted._reset()
        return shifted

    def shift_tail(self) -> "RList":
        """Remove and return the last link of the list."""
        if self.is_empty():
            raise IndexError("shift from an empty list")
        shifted = self.prev
        shifted.delete()
        return shifted

    def first(self) -> Optional["RList"]:
        """Return the first link, or ``None`` if the list is empty."""
        return None if self.is_empty() else self.next

    def last(self) -> Optional["RList"]:
        """Return the last link, or ``None`` if the list is empty."""
        return None if self.is_empty() else self.prev

    def is_empty(self) -> bool:
        """Return True if no link is attached to this head."""
        return self.next is self.prev and self.next is self

    def move(self, item: "RList") -> None:
        """Take ``item`` out of its list and put it at the head of this one."""
        item.delete()
        self.add(item)

    def move_tail(self, item: "RList") -> None:
        """Take ``item`` out of its list and put it at the tail of this one."""
        item.prev.next = item.next
        item.next.prev = item.prev
        item.next = self
        item.prev = self.prev
        item.prev.next = item
        item.next.prev = item

    def swap(self, other: "RList") -> None:
        """Exchange the contents of this list and ``other``."""
        if other is self:
            return
        rhs, lhs = self, other
        rhs.prev, lhs.prev = lhs.prev, rhs.prev
        rhs.next, lhs.next = lhs.next, rhs.next
        if lhs.next is rhs:
            lhs.next = lhs
        lhs.next.prev = lhs
        lhs.prev.next = lhs
        if rhs.next is lhs:
            rhs.next = rhs
        rhs.next.prev = rhs
        rhs.prev.next = rhs

    def splice(self, other: "RList") -> None:
        """Move every link of ``other`` to the head of this list."""
        if other.is_empty():
            return
        self.next.prev = other.prev
        other.prev.next = self.next
        self.next = other.next
        other.next.prev = self
        other._reset()

    def splice_tail(self, other: "RList") -> None:
        """Move every link of ``other`` to the tail of this list."""
        if other.is_empty():
            return
        self.prev.next = other.next
        other.next.prev = self.prev
        self.prev = other.prev
        other.prev.next = self
        other._reset()

    def cut_before(self, source: "RList", item: "RList") -> None:
        """Move the links of ``source`` that precede ``item`` into this list.

        The previous content of this list is discarded.
        """
        if source.next is item:
            self._reset()
            return
        self.next = source.next
        self.next.prev = self
        self.prev = item.prev
        self.prev.next = self
        source.next = item
        item.prev = source

    def __iter__(self) -> Iterator["RList"]:
        """Iterate over the links, front to back; the current may be removed."""
        link = self.next
        while link is not self:
            following = link.next
            yield link
            link = following

    def __reversed__(self) -> Iterator["RList"]:
        """Iterate over the links, back to front; the current may be removed."""
        link = self.prev
        while link is not self:
            preceding = link.prev
            yield link
            link = preceding

    def entries(self) -> Iterator[Any]:
        """Iterate over the entries that own the links, front to back."""
        for link in self:
            yield link.entry

    def entries_reversed(self) -> Iterator[Any]:
        """Iterate over the entries that own the links, back to front."""
        for link in reversed(self):
            yield link.entry

    def prev_entry_or_none(self, head: "RList") -> Any:
        """Return the entry before this link, or ``None`` if it is ``head``."""
        if self.prev is head:
            return None
        return self.prev.entry

    def __repr__(self) -> str:
        return f"RList(entry={self.entry!r})"