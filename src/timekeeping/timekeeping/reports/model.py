from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class ReportRow:
    """Read-model for the monthly report table and its exports."""

    employee_id: int
    employee_name: str
    calendar_date: date
    worked: str
    paused: str
    net_ms: int
    tracked: bool
    details: str = ""

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "calendar_date": self.calendar_date.isoformat(),
            "worked": self.worked,
            "paused": self.paused,
            "net_ms": self.net_ms,
            "tracked": self.tracked,
            "details": self.details,
        }
