from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest

from src.timekeeping.timekeeping.accounting.cache import DailyRecordCache, fingerprint

DAY = date(2026, 3, 10)


def test_cache_returns_same_record_for_same_punch_set(make_event):
    events = [make_event("clock_in", datetime(2026, 3, 10, 9)), make_event("clock_out", datetime(2026, 3, 10, 17))]
    cache = DailyRecordCache()

    first = cache.get_or_compute(1, DAY, events)
    second = cache.get_or_compute(1, DAY, list(reversed(events)))

    assert first is second
    assert len(cache) == 1


def test_cache_recomputes_when_punch_set_changes(make_event):
    clock_in = make_event("clock_in", datetime(2026, 3, 10, 9))
    cache = DailyRecordCache()

    stale = cache.get_or_compute(1, DAY, [clock_in])
    fresh = cache.get_or_compute(1, DAY, [clock_in, make_event("clock_out", datetime(2026, 3, 10, 12))])

    assert stale.net_ms == 0
    assert fresh.worked_ms == 3 * 3_600_000


def test_evict_and_clear(make_event):
    cache = DailyRecordCache()
    cache.get_or_compute(1, DAY, [make_event("clock_in", datetime(2026, 3, 10, 9))])
    cache.get_or_compute(2, DAY, [make_event("clock_in", datetime(2026, 3, 10, 9), employee_id=2)])

    cache.evict(1, DAY)
    assert (1, DAY) not in cache
    assert (2, DAY) in cache

    cache.evict(1, DAY)
    cache.clear()
    assert len(cache) == 0


def test_fingerprint_ignores_order(make_event):
    a = make_event("clock_in", datetime(2026, 3, 10, 9))
    b = make_event("clock_out", datetime(2026, 3, 10, 17))

    assert fingerprint([a, b]) == fingerprint([b, a])


def test_cache_size_stays_within_bound(make_event):
    cache = DailyRecordCache(max_entries=3)
    days = [DAY + timedelta(days=i) for i in range(5)]

    for day in days:
        cache.get_or_compute(1, day, [make_event("clock_in", datetime.combine(day, datetime.min.time()))])

    assert len(cache) == 3
    assert (1, days[0]) not in cache
    assert (1, days[-1]) in cache


def test_cache_drops_least_recently_used(make_event):
    cache = DailyRecordCache(max_entries=2)
    first, second, third = (DAY + timedelta(days=i) for i in range(3))
    events = {d: [make_event("clock_in", datetime.combine(d, datetime.min.time()))] for d in (first, second, third)}

    cache.get_or_compute(1, first, events[first])
    cache.get_or_compute(1, second, events[second])
    cache.get_or_compute(1, first, events[first])
    cache.get_or_compute(1, third, events[third])

    assert (1, first) in cache
    assert (1, second) not in cache


def test_cache_needs_room_for_one_entry():
    with pytest.raises(ValueError):
        DailyRecordCache(max_entries=0)
