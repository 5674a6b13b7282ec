"""Seed demo staff and contracts.

Idempotent: employees are matched by name, contracts are upserted.
"""

from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.timekeeping.timekeeping.contracts.model import Contract
from src.timekeeping.timekeeping.contracts.mysql_contract_repository import MySQLContractRepository
from src.timekeeping.timekeeping.core.enums import PeriodKind, Role
from src.timekeeping.timekeeping.database.connection import DBConfig, DatabaseConnection
from src.timekeeping.timekeeping.database.mysql_base import db_cursor, fetchone

logger = logging.getLogger("seed_db")

DEMO_STAFF = [
    ("Guti", Role.ADMIN, None),
    ("María", Role.EMPLOYEE, Contract(hours_per_period=40, period_kind=PeriodKind.WEEKLY)),
    ("Juan", Role.EMPLOYEE, Contract(hours_per_period=160, period_kind=PeriodKind.MONTHLY)),
]


def ensure_employee(conn: DatabaseConnection, name: str, role: Role) -> int:
    with db_cursor(conn) as (_, cur):
        cur.execute("SELECT employee_id FROM employees WHERE name=%s", (name,))
        row = fetchone(cur)
        if row:
            return int(row["employee_id"])
        cur.execute("INSERT INTO employees (name, role) VALUES (%s, %s)", (name, role.value))
        return int(cur.lastrowid)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    settings = importlib.import_module(get_settings_module())
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(settings.DB_CONFIG))
    contracts = MySQLContractRepository(conn)

    for name, role, contract in DEMO_STAFF:
        employee_id = ensure_employee(conn, name, role)
        if contract is not None:
            contracts.save(employee_id, contract)
        logger.info("Seeded %s (id=%s, contract=%s)", name, employee_id, contract)


if __name__ == "__main__":
    main()
