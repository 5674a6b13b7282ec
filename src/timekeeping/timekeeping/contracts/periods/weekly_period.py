from __future__ import annotations

from datetime import date

from ...common.datetime_utils import start_of_week
from ...core.constants import DAYS_PER_WEEK
from .base import PeriodPolicy


class WeeklyPeriod(PeriodPolicy):
    """ISO weeks starting on Monday."""

    def period_start(self, day: date) -> date:
        return start_of_week(day)

    def prorate(self, hours_per_period: float, elapsed_days: int) -> float:
        return hours_per_period * elapsed_days / DAYS_PER_WEEK
