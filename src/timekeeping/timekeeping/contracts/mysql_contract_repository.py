from __future__ import annotations

from typing import Mapping

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import NO_CONTRACT, Contract, ContractConfig, contract_from_fields
from .repository import ContractRepository


class MySQLContractRepository(ContractRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_employee(self, employee_id: int) -> ContractConfig:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, hours_per_period, period_kind
                FROM contracts
                WHERE employee_id=%s
                """,
                (employee_id,),
            )
            r = fetchone(cur)
            if not r:
                return NO_CONTRACT
            return contract_from_fields(r.get("hours_per_period"), r.get("period_kind"))

    def list_contracts(self) -> Mapping[int, Contract]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, hours_per_period, period_kind
                FROM contracts
                ORDER BY employee_id
                """
            )
            out: dict[int, Contract] = {}
            for r in fetchall(cur):
                contract = contract_from_fields(r.get("hours_per_period"), r.get("period_kind"))
                if isinstance(contract, Contract):
                    out[int(r["employee_id"])] = contract
            return out

    def save(self, employee_id: int, contract: ContractConfig) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            if isinstance(contract, Contract):
                cur.execute(
                    """
                    INSERT INTO contracts (employee_id, hours_per_period, period_kind)
                    VALUES (%s, %s, %s)
                    ON DUPLICATE KEY UPDATE
                        hours_per_period=VALUES(hours_per_period),
                        period_kind=VALUES(period_kind)
                    """,
                    (employee_id, contract.hours_per_period, contract.period_kind.value),
                )
            else:
                cur.execute("DELETE FROM contracts WHERE employee_id=%s", (employee_id,))
