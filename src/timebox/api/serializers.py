from __future__ import annotations

from typing import Any, Dict, List

from ..domain import Activity, Category, CategoryTable
from ..engine import Dashboard, DayLayout, WeeklySummary
from .models import (
    ActivityPayload,
    CategoryPayload,
    LayoutBlockPayload,
    WeeklySummaryPayload,
    day_layout_payload,
)


def serialize_category(category: Category) -> Dict[str, Any]:
    return CategoryPayload.from_domain(category).model_dump()


def serialize_activity(activity: Activity, categories: CategoryTable) -> Dict[str, Any]:
    return ActivityPayload.from_domain(activity, categories.resolve(activity.category)).model_dump()


def serialize_activities(activities: List[Activity], categories: CategoryTable) -> List[Dict[str, Any]]:
    return [serialize_activity(activity, categories) for activity in activities]


def serialize_summary(summary: WeeklySummary) -> Dict[str, Any]:
    return WeeklySummaryPayload.from_domain(summary).model_dump()


def serialize_day_layout(layout: DayLayout, categories: CategoryTable, *, gutter: int) -> Dict[str, Any]:
    blocks = [
        LayoutBlockPayload.from_domain(block, categories.resolve(block.activity.category), gutter)
        for block in layout.blocks
    ]
    return day_layout_payload(layout, blocks).model_dump()


def serialize_dashboard(dashboard: Dashboard, categories: CategoryTable) -> Dict[str, Any]:
    return {
        "today": dashboard.instant.today.isoformat(),
        "now_minutes": dashboard.instant.now_minutes,
        "agenda": serialize_activities(dashboard.today, categories),
        "upcoming": serialize_activities(dashboard.upcoming, categories),
        "urgent": serialize_activities(dashboard.urgent, categories),
        "summary": serialize_summary(dashboard.summary) if dashboard.summary else None,
    }
