from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List

from .timeparse import MINUTES_PER_HOUR, to_minutes

if TYPE_CHECKING:
    from ..domain import Activity


@dataclass(frozen=True)
class GridConfig:
    """Fixed hour range drawn by the day and week views."""

    start_hour: int = 6
    hour_span: int = 17
    row_height: float = 48.0
    gutter: int = 4

    def __post_init__(self) -> None:
        if not 0 <= self.start_hour <= 23:
            raise ValueError(f"start_hour must be within 0-23, got {self.start_hour}")
        if self.hour_span < 1 or self.start_hour + self.hour_span > 24:
            raise ValueError(f"hour_span {self.hour_span} does not fit in a day from {self.start_hour}:00")
        if self.row_height <= 0:
            raise ValueError("row_height must be positive")

    @property
    def hours(self) -> List[int]:
        return list(range(self.start_hour, self.start_hour + self.hour_span))

    @property
    def hour_labels(self) -> List[str]:
        return [f"{hour:02d}:00" for hour in self.hours]

    @property
    def total_height(self) -> float:
        return self.hour_span * self.row_height

    def offset_minutes(self, minutes: int) -> float:
        return ((minutes - self.start_hour * MINUTES_PER_HOUR) / MINUTES_PER_HOUR) * self.row_height

    def offset_for(self, clock: str) -> float:
        return self.offset_minutes(to_minutes(clock))


@dataclass(frozen=True, slots=True)
class GridPosition:
    top: float
    height: float

    @property
    def bottom(self) -> float:
        return self.top + self.height


def grid_position(activity: "Activity", grid: GridConfig) -> GridPosition:
    """Vertical offset and height of ``activity`` inside ``grid``.

    Values are not clamped: an activity starting before the first row gets a
    negative ``top`` and an inverted interval a negative ``height``. Clipping is
    left to the renderer.
    """

    start = activity.start_minutes
    end = activity.end_minutes
    return GridPosition(
        top=grid.offset_minutes(start),
        height=((end - start) / MINUTES_PER_HOUR) * grid.row_height,
    )


__all__ = ["GridConfig", "GridPosition", "grid_position"]
