import pytest

from smallmem.quota import QUOTA_MAX, QUOTA_UNIT_SIZE, Quota, QuotaError
from smallmem.quota_lessor import QUOTA_USE_MIN, QuotaLessor


def test_basic():
    q = Quota(QUOTA_MAX)
    lessor = QuotaLessor(q)
    assert lessor.lease(100) == 100
    assert lessor.leased() == 100
    assert lessor.available() == QUOTA_USE_MIN - 100
    assert q.used() == QUOTA_USE_MIN

    # Lease without source quota usage.
    assert lessor.lease(200) == 200
    assert lessor.leased() == 300
    assert lessor.available() == QUOTA_USE_MIN - 300
    assert q.used() == QUOTA_USE_MIN

    # Lease several chunks.
    assert lessor.lease(QUOTA_USE_MIN * 3) == QUOTA_USE_MIN * 3
    assert lessor.leased() == QUOTA_USE_MIN * 3 + 300
    assert lessor.available() == QUOTA_UNIT_SIZE - 300
    assert q.used() == QUOTA_USE_MIN * 3 + QUOTA_UNIT_SIZE

    # End lease.
    lessor.end_lease(300)
    assert lessor.available() == QUOTA_UNIT_SIZE
    assert lessor.leased() == QUOTA_USE_MIN * 3
    assert q.used() == QUOTA_USE_MIN * 3 + QUOTA_UNIT_SIZE

    lessor.end_lease(QUOTA_USE_MIN * 2 + 100)
    assert lessor.leased() == QUOTA_USE_MIN - 100
    assert lessor.available() == 100 + QUOTA_USE_MIN
    assert q.used() == QUOTA_USE_MIN * 2

    lessor.end_lease(QUOTA_USE_MIN - 100)
    assert lessor.leased() == 0
    assert lessor.available() > 0
    assert lessor.available() == q.used()

    lessor.close()
    assert lessor.available() == 0
    assert q.used() == 0


def test_hard_lease():
    quota_total = QUOTA_USE_MIN + QUOTA_USE_MIN // 8
    q = Quota(quota_total)
    lessor = QuotaLessor(q)
    assert lessor.lease(QUOTA_USE_MIN) == QUOTA_USE_MIN
    assert lessor.available() == 0
    assert lessor.leased() == QUOTA_USE_MIN
    assert q.used() == QUOTA_USE_MIN

    with pytest.raises(QuotaError):
        lessor.lease(QUOTA_USE_MIN)

    assert lessor.lease(QUOTA_UNIT_SIZE) == QUOTA_UNIT_SIZE
    assert lessor.leased() == QUOTA_UNIT_SIZE + QUOTA_USE_MIN
    assert lessor.available() == QUOTA_USE_MIN // 8 - QUOTA_UNIT_SIZE
    assert q.used() == quota_total

    lessor.end_lease(lessor.leased())
    lessor.close()
    assert lessor.available() == 0
    assert lessor.leased() == 0
    assert q.used() == 0


def test_source_too_small_rejected():
    with pytest.raises(ValueError):
        QuotaLessor(Quota(QUOTA_USE_MIN - QUOTA_UNIT_SIZE))


def test_close_with_active_lease_rejected():
    lessor = QuotaLessor(Quota(QUOTA_MAX))
    lessor.lease(10)
    with pytest.raises(ValueError):
        lessor.close()
    assert lessor.leased() == 10


def test_end_lease_too_big_rejected():
    lessor = QuotaLessor(Quota(QUOTA_MAX))
    lessor.lease(10)
    with pytest.raises(ValueError):
        lessor.end_lease(11)


def test_context_manager_returns_memory():
    q = Quota(QUOTA_MAX)
    with QuotaLessor(q) as lessor:
        assert lessor.lease(500) == 500
        assert q.used() == QUOTA_USE_MIN
        lessor.end_lease(500)
    assert q.used() == 0