from __future__ import annotations

import logging
from collections import OrderedDict
from datetime import date
from threading import Lock
from typing import Sequence

from ..core.constants import DEFAULT_DAILY_CACHE_SIZE
from ..punches.model import PunchEvent
from .aggregator import aggregate_day
from .model import DailyWorkRecord

logger = logging.getLogger(__name__)

_Key = tuple[int, date]


def fingerprint(events: Sequence[PunchEvent]) -> tuple[int, ...]:
    """Version stamp of a day's punch set (punches are immutable)."""
    return tuple(sorted(e.event_id for e in events))


class DailyRecordCache:
    """LRU memo of DailyWorkRecord per (employee_id, calendar_date).

    Holds at most `max_entries` employee-days. Writers must call `evict`
    after inserting a punch for an employee-day; the fingerprint check
    additionally refuses records built from a different punch set.
    """

    def __init__(self, max_entries: int = DEFAULT_DAILY_CACHE_SIZE):
        if max_entries < 1:
            raise ValueError("max_entries must be >= 1")
        self._max_entries = max_entries
        self._lock = Lock()
        self._records: OrderedDict[_Key, tuple[tuple[int, ...], DailyWorkRecord]] = OrderedDict()

    @property
    def max_entries(self) -> int:
        return self._max_entries

    def get_or_compute(self, employee_id: int, calendar_date: date, events: Sequence[PunchEvent]) -> DailyWorkRecord:
        key = (employee_id, calendar_date)
        stamp = fingerprint(events)

        with self._lock:
            cached = self._records.get(key)
            if cached and cached[0] == stamp:
                self._records.move_to_end(key)
                logger.debug("Daily record cache hit for %s", key)
                return cached[1]

        logger.debug("Daily record cache miss for %s", key)
        record = aggregate_day(events, employee_id=employee_id, calendar_date=calendar_date)
        with self._lock:
            self._records[key] = (stamp, record)
            self._records.move_to_end(key)
            while len(self._records) > self._max_entries:
                self._records.popitem(last=False)
        return record

    def evict(self, employee_id: int, calendar_date: date) -> None:
        with self._lock:
            self._records.pop((employee_id, calendar_date), None)

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def __contains__(self, key: _Key) -> bool:
        with self._lock:
            return key in self._records

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
