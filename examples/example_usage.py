"""Example: use the accounting engine without Flask or a database.

Controllers are a thin layer; the reconciliation logic lives in pure
functions and services that accept any repository implementation.
"""

from datetime import date, datetime

from src.timekeeping.timekeeping.accounting.aggregator import aggregate_day
from src.timekeeping.timekeeping.accounting.expected import ExpectedHoursCalculator
from src.timekeeping.timekeeping.common.datetime_utils import format_duration_ms, to_timestamp_ms
from src.timekeeping.timekeeping.contracts.model import Contract
from src.timekeeping.timekeeping.core.enums import PeriodKind, PunchKind
from src.timekeeping.timekeeping.punches.model import PunchEvent


def punch(event_id: int, kind: PunchKind, when: datetime) -> PunchEvent:
    return PunchEvent(
        event_id=event_id,
        employee_id=1,
        kind=kind,
        calendar_date=when.date(),
        timestamp_ms=to_timestamp_ms(when),
    )


def main():
    day = [
        punch(1, PunchKind.CLOCK_IN, datetime(2026, 3, 10, 9, 0)),
        punch(2, PunchKind.PAUSE_START, datetime(2026, 3, 10, 12, 0)),
        punch(3, PunchKind.PAUSE_END, datetime(2026, 3, 10, 12, 30)),
        punch(4, PunchKind.CLOCK_OUT, datetime(2026, 3, 10, 17, 0)),
    ]
    record = aggregate_day(day)
    print("net:", format_duration_ms(record.net_ms), "paused:", format_duration_ms(record.paused_ms))

    contract = Contract(hours_per_period=40, period_kind=PeriodKind.WEEKLY)
    expected = ExpectedHoursCalculator().compute_expected(contract, date(2026, 1, 1), date(2026, 3, 10))
    print(f"expected since Jan 1: {expected:.2f}h")


if __name__ == "__main__":
    main()
