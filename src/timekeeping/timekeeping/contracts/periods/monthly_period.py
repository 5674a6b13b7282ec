from __future__ import annotations

from datetime import date

from ...common.datetime_utils import start_of_month
from ...core.constants import MEAN_DAYS_PER_MONTH
from .base import PeriodPolicy


class MonthlyPeriod(PeriodPolicy):
    """Calendar months, prorated over the mean Gregorian month length.

    This is an average-length approximation, not a calendar-exact
    entitlement: a 31-day month accrues slightly more than the nominal
    target and February slightly less.
    """

    def period_start(self, day: date) -> date:
        return start_of_month(day)

    def prorate(self, hours_per_period: float, elapsed_days: int) -> float:
        return hours_per_period * elapsed_days / MEAN_DAYS_PER_MONTH
