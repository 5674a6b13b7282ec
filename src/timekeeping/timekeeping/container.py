from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .accounting.cache import DailyRecordCache
from .accounting.period import PeriodAggregator
from .balance.service import BalanceEngine
from .contracts.mysql_contract_repository import MySQLContractRepository
from .contracts.repository import ContractRepository
from .contracts.service import ContractService
from .core.constants import DEFAULT_DAILY_CACHE_SIZE
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .punches.mysql_punch_repository import MySQLPunchRepository
from .punches.repository import PunchRepository
from .punches.service import PunchService
from .reports.service import ReportService


@dataclass(frozen=True)
class Container:
    punches_repo: PunchRepository
    contracts_repo: ContractRepository
    employees_repo: EmployeeRepository

    cache: Optional[DailyRecordCache]
    period_aggregator: PeriodAggregator

    punch_service: PunchService
    contract_service: ContractService
    balance_engine: BalanceEngine
    report_service: ReportService

    conn: Optional[DatabaseConnection] = None


def build_services(
    *,
    punches_repo: PunchRepository,
    contracts_repo: ContractRepository,
    employees_repo: EmployeeRepository,
    cache_enabled: bool = True,
    cache_size: int = DEFAULT_DAILY_CACHE_SIZE,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    cache = DailyRecordCache(cache_size) if cache_enabled else None
    period_aggregator = PeriodAggregator(punches_repo, cache=cache)

    return Container(
        punches_repo=punches_repo,
        contracts_repo=contracts_repo,
        employees_repo=employees_repo,
        cache=cache,
        period_aggregator=period_aggregator,
        punch_service=PunchService(punches_repo, employees_repo, cache=cache),
        contract_service=ContractService(contracts_repo, employees_repo),
        balance_engine=BalanceEngine(period_aggregator, contracts_repo),
        report_service=ReportService(punches_repo, employees_repo),
        conn=conn,
    )


def build_container(
    *,
    db_config: dict,
    cache_enabled: bool = True,
    cache_size: int = DEFAULT_DAILY_CACHE_SIZE,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return build_services(
        punches_repo=MySQLPunchRepository(conn),
        contracts_repo=MySQLContractRepository(conn),
        employees_repo=MySQLEmployeeRepository(conn),
        cache_enabled=cache_enabled,
        cache_size=cache_size,
        conn=conn,
    )
