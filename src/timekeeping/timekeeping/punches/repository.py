from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import PunchKind
from .model import PunchEvent


class PunchRepository(Protocol):
    """Repository interface for punch events.

    Services depend on this interface, never on a concrete database.
    """

    def events_for_employee_on_date(self, employee_id: int, calendar_date: date) -> Sequence[PunchEvent]:
        raise NotImplementedError

    def events_for_employee_in_range(self, employee_id: int, start: date, end: date) -> Sequence[PunchEvent]:
        raise NotImplementedError

    def events_in_range(
        self,
        *,
        start: date,
        end: date,
        employee_id: Optional[int] = None,
    ) -> Sequence[PunchEvent]:
        raise NotImplementedError

    def add(
        self,
        *,
        employee_id: int,
        kind: PunchKind,
        calendar_date: date,
        timestamp_ms: int,
        location_present: bool = False,
    ) -> PunchEvent:
        raise NotImplementedError
