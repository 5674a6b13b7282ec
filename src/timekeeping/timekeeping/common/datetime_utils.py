from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Union

from ..core.constants import MS_PER_HOUR, MS_PER_MINUTE, MS_PER_SECOND
from ..core.exceptions import ValidationError

DateLike = Union[date, str]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except (AttributeError, ValueError):
        raise ValidationError(f"Invalid date {value!r}, expected YYYY-MM-DD") from None


def parse_year_month(value: str) -> tuple[int, int]:
    """Parse YYYY-MM string into (year, month)."""
    try:
        parsed = datetime.strptime(value.strip(), "%Y-%m")
    except (AttributeError, ValueError):
        raise ValidationError(f"Invalid month {value!r}, expected YYYY-MM") from None
    return parsed.year, parsed.month


def coerce_date(value: DateLike) -> date:
    # datetime is a date subclass; keep only the calendar part.
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_iso_date(value)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def to_timestamp_ms(value: datetime) -> int:
    return int(round(value.timestamp() * MS_PER_SECOND))


def from_timestamp_ms(value: int) -> datetime:
    return datetime.fromtimestamp(value / MS_PER_SECOND)


def start_of_week(day: date) -> date:
    """Most recent Monday (ISO weekday 1) on or before `day`."""
    return day - timedelta(days=day.isoweekday() - 1)


def start_of_month(day: date) -> date:
    return day.replace(day=1)


def elapsed_days(start: date, end: date) -> int:
    return abs((end - start).days)


def format_duration_ms(ms: int) -> str:
    """Format milliseconds as "{H}h {M}m"; negative values clamp to zero."""
    ms = max(int(ms), 0)
    hours = ms // MS_PER_HOUR
    minutes = (ms % MS_PER_HOUR) // MS_PER_MINUTE
    return f"{hours}h {minutes}m"
