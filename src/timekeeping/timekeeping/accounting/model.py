from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from ..core.constants import MS_PER_HOUR
from ..punches.model import PunchEvent


@dataclass(frozen=True)
class DailyWorkRecord:
    """Read-model: worked/paused time of one employee on one calendar day."""

    employee_id: int
    calendar_date: date
    worked_ms: int = 0
    paused_ms: int = 0
    source_events: tuple[PunchEvent, ...] = field(default_factory=tuple)

    @property
    def net_ms(self) -> int:
        return self.worked_ms - self.paused_ms

    @property
    def net_hours(self) -> float:
        return self.net_ms / MS_PER_HOUR

    @property
    def tracked(self) -> bool:
        return any(e.location_present for e in self.source_events)

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "calendar_date": self.calendar_date.isoformat(),
            "worked_ms": self.worked_ms,
            "paused_ms": self.paused_ms,
            "net_ms": self.net_ms,
            "source_events": [e.to_dict() for e in self.source_events],
        }
