from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import PunchKind
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_date
from .model import PunchEvent
from .repository import PunchRepository

_COLUMNS = "event_id, employee_id, kind, calendar_date, timestamp_ms, location_present"


def _to_event(r: dict) -> PunchEvent:
    return PunchEvent(
        event_id=int(r["event_id"]),
        employee_id=int(r["employee_id"]),
        kind=PunchKind(r["kind"]),
        calendar_date=normalize_mysql_date(r["calendar_date"]),
        timestamp_ms=int(r["timestamp_ms"]),
        location_present=bool(r.get("location_present") or 0),
    )


class MySQLPunchRepository(PunchRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def events_for_employee_on_date(self, employee_id: int, calendar_date: date) -> Sequence[PunchEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM punch_events
                WHERE employee_id=%s AND calendar_date=%s
                ORDER BY timestamp_ms, event_id
                """,
                (employee_id, calendar_date),
            )
            return [_to_event(r) for r in fetchall(cur)]

    def events_for_employee_in_range(self, employee_id: int, start: date, end: date) -> Sequence[PunchEvent]:
        return self.events_in_range(start=start, end=end, employee_id=employee_id)

    def events_in_range(
        self,
        *,
        start: date,
        end: date,
        employee_id: Optional[int] = None,
    ) -> Sequence[PunchEvent]:
        where = ["calendar_date BETWEEN %s AND %s"]
        params: list = [start, end]
        if employee_id is not None:
            where.append("employee_id=%s")
            params.append(employee_id)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM punch_events
                WHERE {' AND '.join(where)}
                ORDER BY employee_id, calendar_date, timestamp_ms, event_id
                """,
                tuple(params),
            )
            return [_to_event(r) for r in fetchall(cur)]

    def add(
        self,
        *,
        employee_id: int,
        kind: PunchKind,
        calendar_date: date,
        timestamp_ms: int,
        location_present: bool = False,
    ) -> PunchEvent:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO punch_events (employee_id, kind, calendar_date, timestamp_ms, location_present)
                VALUES (%s, %s, %s, %s, %s)
                """,
                (employee_id, kind.value, calendar_date, int(timestamp_ms), 1 if location_present else 0),
            )
            event_id = int(cur.lastrowid)

        return PunchEvent(
            event_id=event_id,
            employee_id=employee_id,
            kind=kind,
            calendar_date=calendar_date,
            timestamp_ms=int(timestamp_ms),
            location_present=bool(location_present),
        )
