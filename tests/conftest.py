from __future__ import annotations

import itertools
from datetime import date, datetime
from typing import Optional

import pytest

from src.timekeeping.timekeeping.common.datetime_utils import to_timestamp_ms
from src.timekeeping.timekeeping.contracts.model import NO_CONTRACT, Contract, ContractConfig
from src.timekeeping.timekeeping.core.enums import PeriodKind, PunchKind, Role
from src.timekeeping.timekeeping.employees.model import Employee
from src.timekeeping.timekeeping.punches.model import PunchEvent


class InMemoryPunches:
    def __init__(self, events=()):
        self._events: list[PunchEvent] = list(events)
        self._next_id = max((e.event_id for e in self._events), default=0) + 1
        self.range_queries = 0

    def events_for_employee_on_date(self, employee_id: int, calendar_date: date):
        return [e for e in self._events if e.employee_id == employee_id and e.calendar_date == calendar_date]

    def events_for_employee_in_range(self, employee_id: int, start: date, end: date):
        return self.events_in_range(start=start, end=end, employee_id=employee_id)

    def events_in_range(self, *, start: date, end: date, employee_id: Optional[int] = None):
        self.range_queries += 1
        return [
            e
            for e in self._events
            if start <= e.calendar_date <= end and (employee_id is None or e.employee_id == employee_id)
        ]

    def add(self, *, employee_id, kind, calendar_date, timestamp_ms, location_present=False) -> PunchEvent:
        event = PunchEvent(
            event_id=self._next_id,
            employee_id=employee_id,
            kind=kind,
            calendar_date=calendar_date,
            timestamp_ms=timestamp_ms,
            location_present=location_present,
        )
        self._next_id += 1
        self._events.append(event)
        return event


class InMemoryEmployees:
    def __init__(self, employees=()):
        self._by_id = {e.employee_id: e for e in employees}

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._by_id.get(employee_id)

    def list_all(self):
        return sorted(self._by_id.values(), key=lambda e: (e.name, e.employee_id))


class InMemoryContracts:
    def __init__(self, contracts: Optional[dict[int, ContractConfig]] = None):
        self._by_employee: dict[int, ContractConfig] = dict(contracts or {})

    def get_for_employee(self, employee_id: int) -> ContractConfig:
        return self._by_employee.get(employee_id, NO_CONTRACT)

    def list_contracts(self):
        return {k: v for k, v in self._by_employee.items() if isinstance(v, Contract)}

    def save(self, employee_id: int, contract: ContractConfig) -> None:
        self._by_employee[employee_id] = contract


@pytest.fixture
def fixed_now() -> datetime:
    # Wednesday; the ISO week started on Monday 2026-03-09.
    return datetime(2026, 3, 11, 18, 0, 0)


@pytest.fixture
def make_event():
    ids = itertools.count(1)

    def _make(kind, when: datetime, *, employee_id: int = 1, location: bool = False, event_id: Optional[int] = None):
        return PunchEvent(
            event_id=event_id if event_id is not None else next(ids),
            employee_id=employee_id,
            kind=PunchKind(kind),
            calendar_date=when.date(),
            timestamp_ms=to_timestamp_ms(when),
            location_present=location,
        )

    return _make


@pytest.fixture
def work_day(make_event):
    """Punches for a full day: in at `start`, out after `hours`, optional pause."""

    def _day(day: date, *, employee_id: int = 1, start: int = 9, hours: int = 8, pause_minutes: int = 0):
        at = lambda hour, minute=0: datetime(day.year, day.month, day.day, hour, minute)  # noqa: E731
        events = [make_event("clock_in", at(start), employee_id=employee_id)]
        if pause_minutes:
            events.append(make_event("pause_start", at(start + 3), employee_id=employee_id))
            events.append(make_event("pause_end", at(start + 3, pause_minutes), employee_id=employee_id))
        events.append(make_event("clock_out", at(start + hours), employee_id=employee_id))
        return events

    return _day


@pytest.fixture
def employees():
    return [
        Employee(employee_id=1, name="María"),
        Employee(employee_id=2, name="Juan"),
        Employee(employee_id=3, name="Guti", role=Role.ADMIN),
    ]


@pytest.fixture
def weekly_40():
    return Contract(hours_per_period=40, period_kind=PeriodKind.WEEKLY)


@pytest.fixture
def monthly_160():
    return Contract(hours_per_period=160, period_kind=PeriodKind.MONTHLY)


@pytest.fixture
def punch_repo():
    return InMemoryPunches


@pytest.fixture
def employee_repo():
    return InMemoryEmployees


@pytest.fixture
def contract_repo():
    return InMemoryContracts
