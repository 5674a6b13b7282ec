from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional

from ..accounting.cache import DailyRecordCache
from ..common.datetime_utils import now_local, to_timestamp_ms
from ..common.validators import require_enum
from ..core.enums import PunchKind
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import PunchEvent, sort_events
from .repository import PunchRepository

logger = logging.getLogger(__name__)

_AVAILABLE_AFTER: dict[Optional[PunchKind], frozenset[PunchKind]] = {
    None: frozenset({PunchKind.CLOCK_IN}),
    PunchKind.CLOCK_OUT: frozenset({PunchKind.CLOCK_IN}),
    PunchKind.CLOCK_IN: frozenset({PunchKind.CLOCK_OUT, PunchKind.PAUSE_START}),
    PunchKind.PAUSE_END: frozenset({PunchKind.CLOCK_OUT, PunchKind.PAUSE_START}),
    PunchKind.PAUSE_START: frozenset({PunchKind.PAUSE_END}),
}


class PunchService:
    """Use case: clock in/out and pauses for the current day."""

    def __init__(
        self,
        punches: PunchRepository,
        employees: EmployeeRepository,
        *,
        cache: Optional[DailyRecordCache] = None,
    ):
        self._punches = punches
        self._employees = employees
        self._cache = cache

    def events_for_day(self, employee_id: int, on_date: date) -> list[PunchEvent]:
        return sort_events(self._punches.events_for_employee_on_date(employee_id, on_date))

    def available_actions(self, employee_id: int, on_date: date) -> frozenset[PunchKind]:
        """Punch kinds the employee may record next, from the day's last punch."""

        events = self.events_for_day(employee_id, on_date)
        last = events[-1].kind if events else None
        return _AVAILABLE_AFTER[last]

    def record_punch(
        self,
        employee_id: int,
        kind,
        *,
        now: Optional[datetime] = None,
        location_present: bool = False,
    ) -> PunchEvent:
        now = now or now_local()
        today = now.date()
        kind = require_enum(kind, PunchKind, "kind")

        if not self._employees.get_by_id(employee_id):
            raise NotFoundError(f"Employee {employee_id} does not exist")

        allowed = self.available_actions(employee_id, today)
        if kind not in allowed:
            expected = ", ".join(sorted(k.value for k in allowed))
            raise ValidationError(f"Cannot record {kind.value} now; expected one of: {expected}")

        event = self._punches.add(
            employee_id=employee_id,
            kind=kind,
            calendar_date=today,
            timestamp_ms=to_timestamp_ms(now),
            location_present=bool(location_present),
        )
        if self._cache is not None:
            self._cache.evict(employee_id, today)

        logger.info("Recorded %s for employee %s on %s (event %s)", kind.value, employee_id, today, event.event_id)
        return event
