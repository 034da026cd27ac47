"""A thread-safe memory usage limit counted in 1 KiB units."""

from __future__ import annotations

import threading

QUOTA_UNIT_SIZE = 1024
_UINT32_MAX = 0xFFFFFFFF
QUOTA_MAX = QUOTA_UNIT_SIZE * _UINT32_MAX


class QuotaError(Exception):
    """Raised when a quota limit cannot be honoured."""


def _to_units(size: int) -> int:
    return (size + QUOTA_UNIT_SIZE - 1) // QUOTA_UNIT_SIZE


class Quota:
    """A limit on memory usage.

    Both the limit and the usage are kept in units of
    ``QUOTA_UNIT_SIZE`` bytes; every size passed in is rounded up.
    """

    def __init__(self, total: int) -> None:
        if total < 0 or total > QUOTA_MAX:
            raise ValueError(f"quota total out of range: {total}")
        self._lock = threading.Lock()
        self._total_units = _to_units(total)
        self._used_units = 0

    def total(self) -> int:
        """Return the current limit in bytes."""
        return self._total_units * QUOTA_UNIT_SIZE

    def used(self) -> int:
        """Return the current usage in bytes."""
        return self._used_units * QUOTA_UNIT_SIZE

    def total_and_used(self) -> tuple[int, int]:
        """Return a consistent ``(total, used)`` snapshot in bytes."""
        with self._lock:
            return (
                self._total_units * QUOTA_UNIT_SIZE,
                self._used_units * QUOTA_UNIT_SIZE,
            )

    def set(self, new_total: int) -> int:
        """Change the limit and return the aligned limit that was set.

        Raises QuotaError if current usage exceeds the new limit.
        """
        if new_total < 0 or new_total > QUOTA_MAX:
            raise ValueError(f"quota total out of range: {new_total}")
        units = _to_units(new_total)
        with self._lock:
            if units < self._used_units:
                raise QuotaError(
                    "cannot lower the limit below the current usage"
                )
            self._total_units = units
        return units * QUOTA_UNIT_SIZE

    def use(self, size: int) -> int:
        """Consume ``size`` bytes and return the aligned amount consumed.

        Raises QuotaError if the limit would be exceeded.
        """
        if size > QUOTA_MAX:
            raise QuotaError(f"size {size} exceeds the maximal quota")
        units = _to_units(size)
        if units <= 0:
            raise ValueError("size must be positive")
        with self._lock:
            new_used = self._used_units + units
            if new_used > self._total_units:
                raise QuotaError("quota limit reached")
            self._used_units = new_used
        return units * QUOTA_UNIT_SIZE

    def release(self, size: int) -> int:
        """Give back ``size`` bytes and return the aligned amount released."""
        if size >= QUOTA_MAX:
            raise ValueError(f"size {size} exceeds the maximal quota")
        units = _to_units(size)
        if units <= 0:
            raise ValueError("size must be positive")
        with self._lock:
            if units > self._used_units:
                raise ValueError("releasing more than is used")
            self._used_units -= units
        return units * QUOTA_UNIT_SIZE

    def __repr__(self) -> str:
        total, used = self.total_and_used()
        return f"Quota(total={total}, used={used})"