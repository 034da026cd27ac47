"""A plain last-in, first-out stack of arbitrary elements."""

from __future__ import annotations

from typing import Any, Iterator


class Lifo:
    """A LIFO stack; popping or peeking an empty stack yields ``None``."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, elem: Any) -> "Lifo":
        """Put ``elem`` on top of the stack and return the stack."""
        self._items.append(elem)
        return self

    def pop(self) -> Any:
        """Remove and return the top element, or ``None`` if empty."""
        if not self._items:
            return None
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top element without removing it, or ``None``."""
        if not self._items:
            return None
        return self._items[-1]

    def is_empty(self) -> bool:
        """Return True if the stack holds no elements."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"Lifo({list(self)!r})"