"""Per-day punch reconciliation.

A day's punches run through a three-state machine (idle, working, paused).
Transitions that are not part of the machine are ignored, and spans still
open when the day's punches run out contribute nothing. A pause only counts
once the work span around it is closed by a clock-out, so net time never
goes negative. A day that pauses and resumes but never clocks out reports
zero paused time as well as zero worked time.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional

from ..core.enums import PunchKind, TrackerState
from ..core.exceptions import ValidationError
from ..punches.model import PunchEvent, sort_events
from .model import DailyWorkRecord

logger = logging.getLogger(__name__)

_TRANSITIONS = {
    (TrackerState.IDLE, PunchKind.CLOCK_IN): TrackerState.WORKING,
    (TrackerState.WORKING, PunchKind.CLOCK_OUT): TrackerState.IDLE,
    (TrackerState.WORKING, PunchKind.PAUSE_START): TrackerState.PAUSED,
    (TrackerState.PAUSED, PunchKind.PAUSE_END): TrackerState.WORKING,
}


def next_state(state: TrackerState, kind: PunchKind) -> Optional[TrackerState]:
    """Target state for `kind` in `state`, or None when the punch is ignored."""
    return _TRANSITIONS.get((state, kind))


def aggregate_day(
    events: Iterable[PunchEvent],
    *,
    employee_id: Optional[int] = None,
    calendar_date: Optional[date] = None,
) -> DailyWorkRecord:
    """Reduce one employee-day of punches into a DailyWorkRecord.

    Input order does not matter: punches are sorted by timestamp, then id.
    `employee_id`/`calendar_date` are only required for an empty day.
    """

    ordered = sort_events(events)
    employee_id, calendar_date = _resolve_day(ordered, employee_id, calendar_date)

    state = TrackerState.IDLE
    worked_ms = 0
    paused_ms = 0
    open_in: Optional[int] = None
    open_pause: Optional[int] = None
    span_paused_ms = 0

    for event in ordered:
        target = next_state(state, event.kind)
        if target is None:
            logger.debug(
                "Ignoring %s punch %s while %s (employee=%s, date=%s)",
                event.kind.value,
                event.event_id,
                state.value,
                employee_id,
                calendar_date,
            )
            continue

        if event.kind == PunchKind.CLOCK_IN:
            open_in = event.timestamp_ms
            span_paused_ms = 0
        elif event.kind == PunchKind.PAUSE_START:
            open_pause = event.timestamp_ms
        elif event.kind == PunchKind.PAUSE_END:
            span_paused_ms += event.timestamp_ms - open_pause
            open_pause = None
        else:
            worked_ms += event.timestamp_ms - open_in
            paused_ms += span_paused_ms
            open_in = None
            span_paused_ms = 0

        state = target

    return DailyWorkRecord(
        employee_id=employee_id,
        calendar_date=calendar_date,
        worked_ms=worked_ms,
        paused_ms=paused_ms,
        source_events=tuple(ordered),
    )


def _resolve_day(
    ordered: list[PunchEvent],
    employee_id: Optional[int],
    calendar_date: Optional[date],
) -> tuple[int, date]:
    if not ordered:
        if employee_id is None or calendar_date is None:
            raise ValidationError("employee_id and calendar_date are required for a day without punches")
        return employee_id, calendar_date

    first = ordered[0]
    employee_id = first.employee_id if employee_id is None else employee_id
    calendar_date = first.calendar_date if calendar_date is None else calendar_date
    for event in ordered:
        if event.employee_id != employee_id or event.calendar_date != calendar_date:
            raise ValidationError(
                f"Punch {event.event_id} does not belong to employee {employee_id} on {calendar_date}"
            )
    return employee_id, calendar_date
