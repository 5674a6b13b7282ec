from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date


class PeriodPolicy(ABC):
    """Strategy Pattern: how a contractual period starts and is prorated."""

    @abstractmethod
    def period_start(self, day: date) -> date:
        raise NotImplementedError

    @abstractmethod
    def prorate(self, hours_per_period: float, elapsed_days: int) -> float:
        raise NotImplementedError
