from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Iterable, Optional

from ..core.constants import MS_PER_HOUR
from ..punches.model import PunchEvent
from ..punches.repository import PunchRepository
from .aggregator import aggregate_day
from .cache import DailyRecordCache
from .model import DailyWorkRecord


def group_by_day(events: Iterable[PunchEvent]) -> dict[tuple[int, date], list[PunchEvent]]:
    groups: dict[tuple[int, date], list[PunchEvent]] = defaultdict(list)
    for event in events:
        groups[(event.employee_id, event.calendar_date)].append(event)
    return dict(groups)


def worked_hours(events: Iterable[PunchEvent], employee_id: int, start: date, end: date) -> float:
    """Net worked hours of `employee_id` for punches dated within [start, end]."""

    total_ms = 0
    for (emp_id, day), day_events in group_by_day(events).items():
        if emp_id != employee_id or not (start <= day <= end):
            continue
        total_ms += aggregate_day(day_events).net_ms
    return total_ms / MS_PER_HOUR


class PeriodAggregator:
    """Sums per-day records of one employee over an inclusive date range."""

    def __init__(self, punches: PunchRepository, *, cache: Optional[DailyRecordCache] = None):
        self._punches = punches
        self._cache = cache

    def daily_records(self, employee_id: int, start: date, end: date) -> list[DailyWorkRecord]:
        if start > end:
            return []

        events = self._punches.events_for_employee_in_range(employee_id, start, end)
        records = []
        for (emp_id, day), day_events in sorted(group_by_day(events).items(), key=lambda kv: kv[0][1]):
            # Repositories may hand back a wider set; only the requested employee-days count.
            if emp_id != employee_id or not (start <= day <= end):
                continue
            if self._cache is not None:
                records.append(self._cache.get_or_compute(emp_id, day, day_events))
            else:
                records.append(aggregate_day(day_events))
        return records

    def aggregate_range(self, employee_id: int, start: date, end: date) -> float:
        total_ms = sum(r.net_ms for r in self.daily_records(employee_id, start, end))
        return total_ms / MS_PER_HOUR
