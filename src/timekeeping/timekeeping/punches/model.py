from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import PunchKind


@dataclass(frozen=True)
class PunchEvent:
    """Domain entity: a single clock action.

    `timestamp_ms` is local wall-clock epoch milliseconds; `event_id` breaks
    ties between punches sharing a timestamp.
    """

    event_id: int
    employee_id: int
    kind: PunchKind
    calendar_date: date
    timestamp_ms: int
    location_present: bool = False

    @property
    def sort_key(self) -> tuple[int, int]:
        return (self.timestamp_ms, self.event_id)

    def to_dict(self) -> dict:
        return {
            "event_id": self.event_id,
            "employee_id": self.employee_id,
            "kind": self.kind.value,
            "calendar_date": self.calendar_date.isoformat(),
            "timestamp_ms": self.timestamp_ms,
            "location_present": self.location_present,
        }


def sort_events(events) -> list[PunchEvent]:
    return sorted(events, key=lambda e: e.sort_key)
