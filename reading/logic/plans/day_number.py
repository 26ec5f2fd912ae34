"""Day-of-cycle arithmetic for reading plans."""
from datetime import date, datetime
from typing import NamedTuple, Optional


class DayNumber(NamedTuple):
    day: int
    # Set when no start date existed: the caller must persist it as the plan's day 1
    adopted_start: Optional[date] = None


def _as_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def compute_day_number(today, start_date, cycle_length: int) -> DayNumber:
    """Return the 1-based, wrapping day of the cycle that `today` falls on.

    Times of day are dropped before subtracting. Dates before the start wrap
    backwards, so the day before the start is the last day of the cycle.
    """
    if cycle_length <= 0:
        raise ValueError(f"cycle_length must be positive, got {cycle_length}")
    today = _as_date(today)
    if start_date is None:
        return DayNumber(1, today)
    elapsed = (today - _as_date(start_date)).days
    # Python's % is non-negative for a positive divisor
    return DayNumber(elapsed % cycle_length + 1)
