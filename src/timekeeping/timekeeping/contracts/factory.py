from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import PeriodKind
from .periods.base import PeriodPolicy
from .periods.monthly_period import MonthlyPeriod
from .periods.weekly_period import WeeklyPeriod


@dataclass
class PeriodPolicyFactory:
    """Factory Pattern: choose the period policy for a contract kind."""

    def for_kind(self, period_kind: PeriodKind) -> PeriodPolicy:
        if period_kind == PeriodKind.WEEKLY:
            return WeeklyPeriod()
        if period_kind == PeriodKind.MONTHLY:
            return MonthlyPeriod()
        raise ValueError(f"Unsupported period kind: {period_kind!r}")
