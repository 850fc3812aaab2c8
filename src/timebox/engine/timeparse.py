from __future__ import annotations

import re

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR

_CLOCK_PATTERN = re.compile(r"([0-9]{1,2}):([0-9]{2})")


class InvalidTimeFormat(ValueError):
    """Raised when a time-of-day string is not ``HH:MM`` on a 24 hour clock."""


def to_minutes(value: str) -> int:
    """Convert ``HH:MM`` into minutes since midnight.

    ``24:00`` is accepted as the end of the day so an activity may run until
    midnight.
    """

    match = _CLOCK_PATTERN.fullmatch(value) if isinstance(value, str) else None
    if not match:
        raise InvalidTimeFormat(f"Invalid time of day: {value!r}")
    hours, minutes = int(match.group(1)), int(match.group(2))
    if minutes >= MINUTES_PER_HOUR or hours > 24 or (hours == 24 and minutes):
        raise InvalidTimeFormat(f"Invalid time of day: {value!r}")
    return hours * MINUTES_PER_HOUR + minutes


def from_minutes(minutes: int) -> str:
    if not 0 <= minutes <= MINUTES_PER_DAY:
        raise InvalidTimeFormat(f"Minutes out of range for a day: {minutes}")
    hours, remainder = divmod(minutes, MINUTES_PER_HOUR)
    return f"{hours:02d}:{remainder:02d}"


def default_end_time(start: str) -> str:
    """End time offered for a new activity starting at ``start``."""

    return from_minutes(min(to_minutes(start) + MINUTES_PER_HOUR, MINUTES_PER_DAY))


__all__ = [
    "InvalidTimeFormat",
    "MINUTES_PER_DAY",
    "MINUTES_PER_HOUR",
    "default_end_time",
    "from_minutes",
    "to_minutes",
]
