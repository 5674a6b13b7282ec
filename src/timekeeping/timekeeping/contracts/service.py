from __future__ import annotations

import logging
from typing import Optional

from ..common.validators import require_enum, require_positive_number
from ..core.enums import PeriodKind
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import NO_CONTRACT, Contract, ContractConfig
from .repository import ContractRepository

logger = logging.getLogger(__name__)


class ContractService:
    """Use case: read and maintain employee contracts (admin)."""

    def __init__(self, contracts: ContractRepository, employees: EmployeeRepository):
        self._contracts = contracts
        self._employees = employees

    def get_contract(self, employee_id: int) -> ContractConfig:
        self._require_employee(employee_id)
        return self._contracts.get_for_employee(employee_id)

    def set_contract(
        self,
        employee_id: int,
        *,
        hours_per_period: Optional[float],
        period_kind: Optional[str],
    ) -> ContractConfig:
        self._require_employee(employee_id)

        if hours_per_period is None and period_kind is None:
            contract: ContractConfig = NO_CONTRACT
        elif hours_per_period is None or period_kind is None:
            raise ValidationError("hours_per_period and period_kind must be set together")
        else:
            contract = Contract(
                hours_per_period=require_positive_number(hours_per_period, "hours_per_period"),
                period_kind=require_enum(period_kind, PeriodKind, "period_kind"),
            )

        self._contracts.save(employee_id, contract)
        logger.info("Contract for employee %s set to %s", employee_id, contract.to_dict())
        return contract

    def _require_employee(self, employee_id: int) -> None:
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError(f"Employee {employee_id} does not exist")
