from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..domain import Activity


def overlaps(first: "Activity", second: "Activity") -> bool:
    """Half-open interval test for two activities on the same day.

    An activity ending exactly when the other starts does not overlap it. An
    activity whose end is not after its start never overlaps anything, itself
    included, even when it lies inside another activity's interval.
    """

    first_start, first_end = first.start_minutes, first.end_minutes
    second_start, second_end = second.start_minutes, second.end_minutes
    if first_end <= first_start or second_end <= second_start:
        return False
    return first_start < second_end and second_start < first_end
