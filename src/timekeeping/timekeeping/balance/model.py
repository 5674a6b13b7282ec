from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class PeriodBalance:
    """Progress of the current week/month against the full period target."""

    employee_id: int
    range_start: date
    range_end: date
    worked_hours: float
    target_hours: float
    progress_percent: float

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "range_start": self.range_start.isoformat(),
            "range_end": self.range_end.isoformat(),
            "worked_hours": self.worked_hours,
            "target_hours": self.target_hours,
            "progress_percent": self.progress_percent,
        }


@dataclass(frozen=True)
class AnnualBalance:
    """Year-to-date balance; positive is a surplus, negative a deficit."""

    employee_id: int
    year: int
    worked_hours: float
    expected_hours: float
    employee_name: Optional[str] = None

    @property
    def balance_hours(self) -> float:
        return self.worked_hours - self.expected_hours

    @property
    def in_favor(self) -> bool:
        return self.balance_hours >= 0

    @property
    def label(self) -> str:
        return "a favor" if self.in_favor else "en contra"

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "year": self.year,
            "worked_hours": self.worked_hours,
            "expected_hours": self.expected_hours,
            "balance_hours": self.balance_hours,
            "label": self.label,
        }
