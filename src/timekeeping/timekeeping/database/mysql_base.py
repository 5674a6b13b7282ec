from __future__ import annotations

from contextlib import contextmanager
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def normalize_mysql_date(value: Any) -> Optional[date]:
    """Normalize MySQL DATE values across connector implementations.

    mysql-connector can return DATE as:
    - datetime.date
    - datetime.datetime (DATETIME columns, some drivers)
    - string (e.g. '2026-01-31')
    """

    if value is None:
        return None

    if isinstance(value, datetime):
        return value.date()

    if isinstance(value, date):
        return value

    if isinstance(value, (bytes, bytearray)):
        value = value.decode("ascii")

    if isinstance(value, str):
        return datetime.strptime(value.strip()[:10], "%Y-%m-%d").date()

    raise TypeError(f"Unsupported MySQL DATE value type: {type(value)!r}")
