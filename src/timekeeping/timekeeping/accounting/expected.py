from __future__ import annotations

from datetime import date
from typing import Optional

from ..common.datetime_utils import elapsed_days
from ..contracts.factory import PeriodPolicyFactory
from ..contracts.model import Contract, ContractConfig


class ExpectedHoursCalculator:
    """Prorates a contract's per-period target over a date range.

    Uses whole elapsed calendar days and average period lengths; NoContract
    yields 0.0, which callers must not mistake for a real target.
    """

    def __init__(self, policies: Optional[PeriodPolicyFactory] = None):
        self._policies = policies or PeriodPolicyFactory()

    def compute_expected(self, contract: ContractConfig, start: date, end: date) -> float:
        if not isinstance(contract, Contract):
            return 0.0
        policy = self._policies.for_kind(contract.period_kind)
        return policy.prorate(contract.hours_per_period, elapsed_days(start, end))
