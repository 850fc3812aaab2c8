"""Pure layout and aggregation over activity snapshots."""

from __future__ import annotations

from .aggregate import (
    Dashboard,
    WeeklySummary,
    build_dashboard,
    todays_agenda,
    upcoming_events,
    urgent_items,
    weekly_summary,
)
from .columns import ColumnScope, ColumnSlot, PackingOrder, pack_columns, pack_columns_by_cluster, packing_order
from .grid import GridConfig, GridPosition, grid_position
from .layout import DayLayout, LayoutBlock, layout_day, layout_week
from .overlap import overlaps
from .timeparse import InvalidTimeFormat, default_end_time, from_minutes, to_minutes
from .weeks import shift_day, shift_week, week_days, week_start_for, week_window

__all__ = [
    "ColumnScope",
    "ColumnSlot",
    "Dashboard",
    "DayLayout",
    "GridConfig",
    "GridPosition",
    "InvalidTimeFormat",
    "LayoutBlock",
    "PackingOrder",
    "WeeklySummary",
    "build_dashboard",
    "default_end_time",
    "from_minutes",
    "grid_position",
    "layout_day",
    "layout_week",
    "overlaps",
    "pack_columns",
    "pack_columns_by_cluster",
    "packing_order",
    "shift_day",
    "shift_week",
    "to_minutes",
    "todays_agenda",
    "upcoming_events",
    "urgent_items",
    "week_days",
    "week_start_for",
    "week_window",
    "weekly_summary",
]
