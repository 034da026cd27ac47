"""Byte-precise, single-threaded leasing on top of a shared Quota.

The lessor takes big chunks (at least 1 MiB) from the source quota and
leases small pieces of them, releasing memory back only once enough of
it has accumulated. It is not thread-safe: use one lessor per thread.
"""

from __future__ import annotations

from .quota import QUOTA_UNIT_SIZE, Quota, QuotaError

QUOTA_USE_MIN = QUOTA_UNIT_SIZE * 1024


class QuotaLessor:
    """Lease memory from a source quota with one-byte precision."""

    def __init__(self, source: Quota) -> None:
        if source.total() < QUOTA_USE_MIN:
            raise ValueError(
                f"source quota must be at least {QUOTA_USE_MIN} bytes"
            )
        self.source = source
        self._used = 0
        self._leased = 0

    def leased(self) -> int:
        """Return the number of bytes leased."""
        return self._leased

    def available(self) -> int:
        """Return the bytes taken from the source but not leased yet."""
        return self._used - self._leased

    def lease(self, size: int) -> int:
        """Lease ``size`` bytes and return ``size``.

        Raises QuotaError if the source quota cannot supply enough.
        """
        if size < 0:
            raise ValueError("size must not be negative")
        if self._leased + size <= self._used:
            self._leased += size
            return size
        required = size + self._leased - self._used
        use = max(required, QUOTA_USE_MIN)
        while use >= required:
            try:
                taken = self.source.use(use)
            except QuotaError:
                use //= 2
                continue
            self._used += taken
            self._leased += size
            return size
        raise QuotaError(f"not enough quota to lease {size} bytes")

    def end_lease(self, size: int) -> int:
        """End the lease of ``size`` bytes and return ``size``."""
        if size < 0:
            raise ValueError("size must not be negative")
        if size > self._leased:
            raise ValueError("ending a lease larger than what is leased")
        self._leased -= size
        available = self._used - self._leased
        if available >= 2 * QUOTA_USE_MIN:
            # Keep some slack to avoid oscillation.
            release = available - QUOTA_USE_MIN - QUOTA_UNIT_SIZE
            self._used -= self.source.release(release)
        return size

    def close(self) -> None:
        """Return all memory to the source; nothing may still be leased."""
        if self._leased != 0:
            raise ValueError("cannot close a lessor with active leases")
        if self._used == 0:
            return
        self.source.release(self._used)
        self._used = 0

    def __enter__(self) -> "QuotaLessor":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()