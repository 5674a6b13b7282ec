from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Role of a staff member."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class PunchKind(str, Enum):
    """Kind of clock action stored for each punch."""

    CLOCK_IN = "clock_in"
    CLOCK_OUT = "clock_out"
    PAUSE_START = "pause_start"
    PAUSE_END = "pause_end"


class PeriodKind(str, Enum):
    """Contractual accounting window."""

    WEEKLY = "weekly"
    MONTHLY = "monthly"


class TrackerState(str, Enum):
    """States of the per-day punch state machine."""

    IDLE = "idle"
    WORKING = "working"
    PAUSED = "paused"
