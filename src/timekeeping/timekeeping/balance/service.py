from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence, Union

from ..accounting.expected import ExpectedHoursCalculator
from ..accounting.period import PeriodAggregator
from ..common.datetime_utils import coerce_date
from ..contracts.factory import PeriodPolicyFactory
from ..contracts.model import Contract, ContractConfig
from ..contracts.repository import ContractRepository
from ..core.constants import MAX_PROGRESS_PERCENT
from ..employees.model import Employee
from .model import AnnualBalance, PeriodBalance


class BalanceEngine:
    """Current-period progress and year-to-date balance per employee.

    Every operation takes its reference instant as a parameter and returns
    None ("not applicable") for employees without a contract.
    """

    def __init__(
        self,
        periods: PeriodAggregator,
        contracts: ContractRepository,
        *,
        expected: Optional[ExpectedHoursCalculator] = None,
        policies: Optional[PeriodPolicyFactory] = None,
    ):
        self._periods = periods
        self._contracts = contracts
        self._policies = policies or PeriodPolicyFactory()
        self._expected = expected or ExpectedHoursCalculator(self._policies)

    def current_period_progress(self, employee_id: int, now: Union[date, datetime]) -> Optional[PeriodBalance]:
        contract = self._contracts.get_for_employee(employee_id)
        if not isinstance(contract, Contract):
            return None

        today = coerce_date(now)
        period_start = self._policies.for_kind(contract.period_kind).period_start(today)
        worked = self._periods.aggregate_range(employee_id, period_start, today)
        target = contract.hours_per_period

        return PeriodBalance(
            employee_id=employee_id,
            range_start=period_start,
            range_end=today,
            worked_hours=worked,
            target_hours=target,
            progress_percent=min(MAX_PROGRESS_PERCENT, worked / target * 100),
        )

    def annual_balance(self, employee_id: int, as_of: Union[date, datetime]) -> Optional[AnnualBalance]:
        contract = self._contracts.get_for_employee(employee_id)
        return self._annual_balance(employee_id, contract, coerce_date(as_of))

    def team_annual_summary(self, employees: Sequence[Employee], as_of: Union[date, datetime]) -> list[AnnualBalance]:
        """Annual balance of every contracted employee, best balance first."""

        as_of = coerce_date(as_of)
        contracts = self._contracts.list_contracts()
        out = []
        for employee in employees:
            contract = contracts.get(employee.employee_id)
            balance = self._annual_balance(employee.employee_id, contract, as_of, name=employee.name)
            if balance is not None:
                out.append(balance)

        out.sort(key=lambda b: (-b.balance_hours, b.employee_name or ""))
        return out

    def _annual_balance(
        self,
        employee_id: int,
        contract: Optional[ContractConfig],
        as_of: date,
        *,
        name: Optional[str] = None,
    ) -> Optional[AnnualBalance]:
        if not isinstance(contract, Contract):
            return None

        year_start = date(as_of.year, 1, 1)
        return AnnualBalance(
            employee_id=employee_id,
            year=as_of.year,
            worked_hours=self._periods.aggregate_range(employee_id, year_start, as_of),
            expected_hours=self._expected.compute_expected(contract, year_start, as_of),
            employee_name=name,
        )
