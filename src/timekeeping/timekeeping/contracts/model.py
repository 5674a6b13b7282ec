from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from ..core.enums import PeriodKind
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NoContract:
    """Employee without a contractual target: balances are not computable."""

    def to_dict(self) -> dict:
        return {"hours_per_period": None, "period_kind": None}


@dataclass(frozen=True)
class Contract:
    """Contractual target: `hours_per_period` hours every week or month."""

    hours_per_period: float
    period_kind: PeriodKind

    def __post_init__(self):
        if not isinstance(self.period_kind, PeriodKind):
            raise ValidationError(f"period_kind must be a PeriodKind, got {self.period_kind!r}")
        if isinstance(self.hours_per_period, bool) or not isinstance(self.hours_per_period, (int, float)):
            raise ValidationError(f"hours_per_period must be a number, got {self.hours_per_period!r}")
        if self.hours_per_period <= 0:
            raise ValidationError("hours_per_period must be > 0")

    def to_dict(self) -> dict:
        return {"hours_per_period": self.hours_per_period, "period_kind": self.period_kind.value}


ContractConfig = Union[NoContract, Contract]

NO_CONTRACT = NoContract()


def contract_from_fields(hours_per_period: Optional[float], period_kind: Optional[str]) -> ContractConfig:
    """Build a contract from two independently stored optional fields.

    Rows with only one field set, an unknown period kind or a non-positive
    target carry no usable contract and are read as NoContract.
    """

    if hours_per_period is None and period_kind is None:
        return NO_CONTRACT

    try:
        return Contract(hours_per_period=float(hours_per_period), period_kind=PeriodKind(period_kind))
    except (TypeError, ValueError, ValidationError):
        pass

    logger.warning(
        "Unusable contract fields (hours=%r, kind=%r) treated as no contract",
        hours_per_period,
        period_kind,
    )
    return NO_CONTRACT
