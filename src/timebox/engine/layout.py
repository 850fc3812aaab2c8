from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING, Dict, Iterable, List

from .aggregate import activities_for_day
from .columns import ColumnScope, ColumnSlot, PackingOrder, assign_columns, packing_order
from .grid import GridConfig, grid_position
from .weeks import SUNDAY, week_days

if TYPE_CHECKING:
    from ..domain import Activity


@dataclass(frozen=True)
class LayoutBlock:
    activity: "Activity"
    column: int
    total_columns: int
    top: float
    height: float

    @property
    def left_fraction(self) -> float:
        return self.column / self.total_columns

    @property
    def width_fraction(self) -> float:
        return 1 / self.total_columns

    def css_box(self, gutter: int = 4) -> Dict[str, str]:
        """Absolute-position box with ``gutter`` pixels between columns."""

        width = f"calc((100% - {(self.total_columns + 1) * gutter}px) / {self.total_columns})"
        left = f"calc({self.left_fraction * 100:g}% + {gutter * (self.column + 1)}px)"
        return {
            "top": f"{self.top:g}px",
            "height": f"{self.height:g}px",
            "left": left,
            "width": width,
        }


@dataclass(frozen=True)
class DayLayout:
    day: date
    blocks: List[LayoutBlock] = field(default_factory=list)

    @property
    def total_columns(self) -> int:
        return max((block.total_columns for block in self.blocks), default=0)

    def __len__(self) -> int:
        return len(self.blocks)


def layout_day(
    activities: Iterable["Activity"],
    day: date,
    grid: GridConfig,
    *,
    order: PackingOrder = PackingOrder.START,
    scope: ColumnScope = ColumnScope.DAY,
) -> DayLayout:
    bucket = packing_order(activities_for_day(activities, day), order)
    slots = assign_columns(bucket, scope=scope)
    blocks: List[LayoutBlock] = []
    for activity in bucket:
        slot = slots.get(activity.id, ColumnSlot(column=0, total_columns=1))
        position = grid_position(activity, grid)
        blocks.append(
            LayoutBlock(
                activity=activity,
                column=slot.column,
                total_columns=slot.total_columns,
                top=position.top,
                height=position.height,
            )
        )
    return DayLayout(day=day, blocks=blocks)


def layout_week(
    activities: Iterable["Activity"],
    reference: date,
    grid: GridConfig,
    *,
    week_start: int = SUNDAY,
    order: PackingOrder = PackingOrder.START,
    scope: ColumnScope = ColumnScope.DAY,
) -> List[DayLayout]:
    snapshot = list(activities)
    return [
        layout_day(snapshot, day, grid, order=order, scope=scope)
        for day in week_days(reference, week_start)
    ]


__all__ = ["DayLayout", "LayoutBlock", "layout_day", "layout_week"]
