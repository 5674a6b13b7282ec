from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository


def _to_employee(r: dict) -> Employee:
    return Employee(
        employee_id=int(r["employee_id"]),
        name=r["name"],
        role=Role(r["role"]),
        is_active=bool(r.get("is_active", 1)),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, name, role, is_active
                FROM employees
                WHERE employee_id=%s
                """,
                (employee_id,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return _to_employee(r)

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, name, role, is_active
                FROM employees
                ORDER BY name, employee_id
                """
            )
            return [_to_employee(r) for r in fetchall(cur)]
