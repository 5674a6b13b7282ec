from __future__ import annotations

from enum import Enum
from typing import Type, TypeVar

from ..core.exceptions import ValidationError

E = TypeVar("E", bound=Enum)


def require_enum(value, enum_cls: Type[E], field_name: str) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(f"{field_name} must be one of: {allowed}") from None


def require_positive_int(value, field_name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer") from None
    if number <= 0:
        raise ValidationError(f"{field_name} must be positive")
    return number


def require_positive_number(value, field_name: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number") from None
    if number <= 0:
        raise ValidationError(f"{field_name} must be positive")
    return number


def require_bool(value, field_name: str) -> bool:
    """JSON booleans only; strings like "false" are rejected, not coerced."""
    if not isinstance(value, bool):
        raise ValidationError(f"{field_name} must be true or false")
    return value
