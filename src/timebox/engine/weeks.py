from __future__ import annotations

from datetime import date, timedelta
from typing import List, Tuple

SUNDAY = 0
DAYS_PER_WEEK = 7


def weekday_index(day: date) -> int:
    """Day of week with Sunday as 0 and Saturday as 6."""

    return (day.weekday() + 1) % DAYS_PER_WEEK


def week_start_for(day: date, week_start: int = SUNDAY) -> date:
    if not 0 <= week_start < DAYS_PER_WEEK:
        raise ValueError(f"week_start must be within 0-6, got {week_start}")
    return day - timedelta(days=(weekday_index(day) - week_start) % DAYS_PER_WEEK)


def week_window(day: date, week_start: int = SUNDAY) -> Tuple[date, date]:
    """Inclusive first and last date of the week containing ``day``."""

    start = week_start_for(day, week_start)
    return start, start + timedelta(days=DAYS_PER_WEEK - 1)


def week_days(day: date, week_start: int = SUNDAY) -> List[date]:
    start = week_start_for(day, week_start)
    return [start + timedelta(days=offset) for offset in range(DAYS_PER_WEEK)]


def shift_day(day: date, steps: int) -> date:
    return day + timedelta(days=steps)


def shift_week(day: date, steps: int) -> date:
    return day + timedelta(days=DAYS_PER_WEEK * steps)


__all__ = [
    "DAYS_PER_WEEK",
    "SUNDAY",
    "shift_day",
    "shift_week",
    "week_days",
    "week_start_for",
    "week_window",
    "weekday_index",
]
