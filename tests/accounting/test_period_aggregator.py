from __future__ import annotations

from datetime import date, datetime

import pytest

from src.timekeeping.timekeeping.accounting.cache import DailyRecordCache
from src.timekeeping.timekeeping.accounting.period import PeriodAggregator, group_by_day, worked_hours
from src.timekeeping.timekeeping.punches.service import PunchService


def test_range_sums_net_hours_of_days_inside(punch_repo, work_day):
    events = (
        work_day(date(2026, 3, 2), pause_minutes=30)
        + work_day(date(2026, 3, 4))
        + work_day(date(2026, 3, 9))
        + work_day(date(2026, 3, 4), employee_id=2)
    )
    periods = PeriodAggregator(punch_repo(list(reversed(events))))

    assert periods.aggregate_range(1, date(2026, 3, 1), date(2026, 3, 8)) == pytest.approx(15.5)
    assert periods.aggregate_range(1, date(2026, 3, 4), date(2026, 3, 4)) == pytest.approx(8)
    assert periods.aggregate_range(2, date(2026, 3, 1), date(2026, 3, 31)) == pytest.approx(8)


def test_days_without_punches_contribute_zero(punch_repo):
    periods = PeriodAggregator(punch_repo())

    assert periods.aggregate_range(1, date(2026, 1, 1), date(2026, 12, 31)) == 0
    assert periods.daily_records(1, date(2026, 1, 1), date(2026, 1, 31)) == []


def test_inverted_range_is_empty(punch_repo, work_day):
    periods = PeriodAggregator(punch_repo(work_day(date(2026, 3, 4))))

    assert periods.aggregate_range(1, date(2026, 3, 31), date(2026, 3, 1)) == 0


def test_daily_records_are_in_date_order(punch_repo, work_day):
    events = work_day(date(2026, 3, 9)) + work_day(date(2026, 3, 2))
    periods = PeriodAggregator(punch_repo(events))

    records = periods.daily_records(1, date(2026, 3, 1), date(2026, 3, 31))

    assert [r.calendar_date for r in records] == [date(2026, 3, 2), date(2026, 3, 9)]


def test_pure_worked_hours_filters_employee_and_range(work_day):
    events = work_day(date(2026, 3, 2), hours=6) + work_day(date(2026, 3, 3), employee_id=2) + work_day(date(2026, 4, 1))

    assert worked_hours(events, 1, date(2026, 3, 1), date(2026, 3, 31)) == pytest.approx(6)
    assert worked_hours(events, 2, date(2026, 3, 1), date(2026, 3, 31)) == pytest.approx(8)


def test_group_by_day_partitions_per_employee_and_date(work_day):
    events = work_day(date(2026, 3, 2)) + work_day(date(2026, 3, 2), employee_id=2)

    groups = group_by_day(events)

    assert set(groups) == {(1, date(2026, 3, 2)), (2, date(2026, 3, 2))}
    assert all(len(day_events) == 2 for day_events in groups.values())


def test_cached_records_are_refreshed_after_a_new_punch(punch_repo, employee_repo, employees, make_event):
    repo = punch_repo([make_event("clock_in", datetime(2026, 3, 10, 9))])
    cache = DailyRecordCache()
    periods = PeriodAggregator(repo, cache=cache)
    punches = PunchService(repo, employee_repo(employees), cache=cache)
    day = date(2026, 3, 10)

    assert periods.aggregate_range(1, day, day) == 0
    assert (1, day) in cache

    punches.record_punch(1, "clock_out", now=datetime(2026, 3, 10, 17))
    assert (1, day) not in cache

    assert periods.aggregate_range(1, day, day) == pytest.approx(8)
