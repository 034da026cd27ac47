"""A fixed-size cyclic scratch buffer, one per thread.

Allocations hand out offsets into the buffer. When a request does not
fit before the end, the buffer wraps around to the start; earlier
allocations are then silently reused.
"""

from __future__ import annotations

import threading
from typing import Optional

SMALL_STATIC_SIZE = 4096 * 3


def _align(value: int, alignment: int) -> int:
    return (value + alignment - 1) & ~(alignment - 1)


class StaticBuffer:
    """A cyclic buffer of ``size`` bytes that never grows.

    ``buffer`` is the underlying storage and ``pos`` the next free
    offset. Reservation and allocation methods return offsets into
    ``buffer``.
    """

    __slots__ = ("buffer", "pos")

    def __init__(self, size: int = SMALL_STATIC_SIZE) -> None:
        if size <= 0:
            raise ValueError("buffer size must be positive")
        self.buffer = bytearray(size)
        self.pos = 0

    @property
    def size(self) -> int:
        """Capacity of the buffer in bytes."""
        return len(self.buffer)

    def reset(self) -> None:
        """Start handing out memory from the beginning again."""
        self.pos = 0

    def reserve(self, size: int) -> int:
        """Return the offset of at least ``size`` contiguous free bytes.

        The position is not advanced. Raises ValueError if ``size``
        exceeds the whole buffer.
        """
        if size < 0:
            raise ValueError("size must not be negative")
        if self.pos + size > len(self.buffer):
            if size > len(self.buffer):
                raise ValueError(
                    f"{size} bytes do not fit in a {len(self.buffer)} byte buffer"
                )
            self.pos = 0
        return self.pos

    def alloc(self, size: int) -> int:
        """Reserve ``size`` bytes, advance past them and return their offset."""
        offset = self.reserve(size)
        self.pos += size
        return offset

    def aligned_reserve(self, size: int, alignment: int) -> int:
        """Like :meth:`reserve`, with the offset aligned to ``alignment``."""
        if alignment <= 0 or alignment & (alignment - 1):
            raise ValueError("alignment must be a power of two")
        unaligned = self.reserve(size + alignment - 1)
        return _align(unaligned, alignment)

    def aligned_alloc(self, size: int, alignment: int) -> int:
        """Like :meth:`alloc`, with the offset aligned to ``alignment``."""
        offset = self.aligned_reserve(size, alignment)
        self.pos = offset + size
        return offset

    def view(self, offset: int, size: int) -> memoryview:
        """Return a writable view of ``size`` bytes starting at ``offset``."""
        if offset < 0 or size < 0 or offset + size > len(self.buffer):
            raise ValueError("view out of buffer bounds")
        return memoryview(self.buffer)[offset : offset + size]

    def __repr__(self) -> str:
        return f"StaticBuffer(size={len(self.buffer)}, pos={self.pos})"


_local = threading.local()


def thread_buffer() -> StaticBuffer:
    """Return the calling thread's own static buffer."""
    buf: Optional[StaticBuffer] = getattr(_local, "buffer", None)
    if buf is None:
        buf = StaticBuffer()
        _local.buffer = buf
    return buf