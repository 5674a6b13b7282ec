from __future__ import annotations

import calendar
from datetime import date

from ..employees.repository import EmployeeRepository
from ..punches.repository import PunchRepository
from .generator import EmployeeFilter, YearMonth, generate, parse_employee_filter, resolve_year_month
from .model import ReportRow


class ReportService:
    """Use case: monthly per-day report, optionally for a single employee."""

    def __init__(self, punches: PunchRepository, employees: EmployeeRepository):
        self._punches = punches
        self._employees = employees

    def monthly_report(self, *, employee_filter: EmployeeFilter, year_month: YearMonth) -> list[ReportRow]:
        year, month = resolve_year_month(year_month)
        employee_id = parse_employee_filter(employee_filter)

        start = date(year, month, 1)
        end = date(year, month, calendar.monthrange(year, month)[1])
        events = self._punches.events_in_range(start=start, end=end, employee_id=employee_id)

        return generate(employee_filter, (year, month), self._employees.list_all(), events)
