from __future__ import annotations

from typing import Iterable, Optional, Sequence, Union

from ..accounting.aggregator import aggregate_day
from ..accounting.period import group_by_day
from ..common.datetime_utils import format_duration_ms, from_timestamp_ms, parse_year_month
from ..common.validators import require_positive_int
from ..core.constants import REPORT_FILTER_ALL
from ..employees.model import Employee
from ..punches.model import PunchEvent
from .model import ReportRow

EmployeeFilter = Union[int, str]
YearMonth = Union[str, tuple[int, int]]


def parse_employee_filter(value: EmployeeFilter) -> Optional[int]:
    """`"all"` (or empty) means every employee; anything else is an id."""
    if value is None or str(value).strip().lower() in {"", REPORT_FILTER_ALL}:
        return None
    return require_positive_int(value, "employee")


def resolve_year_month(value: YearMonth) -> tuple[int, int]:
    if isinstance(value, tuple):
        return parse_year_month(f"{int(value[0]):04d}-{int(value[1]):02d}")
    return parse_year_month(value)


def describe_punches(events: Sequence[PunchEvent]) -> str:
    return " | ".join(
        f"{e.kind.value.replace('_', ' ')}: {from_timestamp_ms(e.timestamp_ms).strftime('%H:%M:%S')}"
        for e in events
    )


def generate(
    employee_filter: EmployeeFilter,
    year_month: YearMonth,
    employees: Sequence[Employee],
    events: Iterable[PunchEvent],
) -> list[ReportRow]:
    """One row per employee-day of the month, newest day first.

    Rows of the same day are ordered by employee name. Days of employees
    missing from `employees` are left out.
    """

    year, month = resolve_year_month(year_month)
    employee_id = parse_employee_filter(employee_filter)
    names = {e.employee_id: e.name for e in employees}

    selected = [
        e
        for e in events
        if e.calendar_date.year == year
        and e.calendar_date.month == month
        and (employee_id is None or e.employee_id == employee_id)
    ]

    rows: list[ReportRow] = []
    for (emp_id, _day), day_events in group_by_day(selected).items():
        name = names.get(emp_id)
        if name is None:
            continue

        record = aggregate_day(day_events)
        rows.append(
            ReportRow(
                employee_id=emp_id,
                employee_name=name,
                calendar_date=record.calendar_date,
                worked=format_duration_ms(record.net_ms),
                paused=format_duration_ms(record.paused_ms),
                net_ms=record.net_ms,
                tracked=record.tracked,
                details=describe_punches(record.source_events),
            )
        )

    rows.sort(key=lambda r: (r.employee_name, r.employee_id))
    rows.sort(key=lambda r: r.calendar_date, reverse=True)
    return rows
