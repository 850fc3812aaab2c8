from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING, Iterable, List

from .weeks import SUNDAY, week_window

if TYPE_CHECKING:
    from ..domain import Activity, ReferenceInstant

DEFAULT_UPCOMING_LIMIT = 5
DEFAULT_URGENT_LIMIT = 3
URGENT_CATEGORY = "urgent"


@dataclass(frozen=True, slots=True)
class WeeklySummary:
    start: date
    end: date
    total: int
    completed: int
    pending: int

    @property
    def completion_ratio(self) -> float:
        return self.completed / self.total if self.total else 0.0

    @property
    def completion_percent(self) -> int:
        # half-up, matching the progress label
        return int(math.floor(self.completion_ratio * 100 + 0.5))


@dataclass(frozen=True)
class Dashboard:
    """The sidebar views derived for one reference instant."""

    instant: "ReferenceInstant"
    today: List["Activity"] = field(default_factory=list)
    upcoming: List["Activity"] = field(default_factory=list)
    urgent: List["Activity"] = field(default_factory=list)
    summary: WeeklySummary | None = None


def todays_agenda(activities: Iterable["Activity"], today: date) -> List["Activity"]:
    return [activity for activity in activities if activity.date == today]


def activities_for_day(activities: Iterable["Activity"], day: date) -> List["Activity"]:
    return todays_agenda(activities, day)


def weekly_summary(
    activities: Iterable["Activity"],
    reference: date,
    *,
    week_start: int = SUNDAY,
) -> WeeklySummary:
    start, end = week_window(reference, week_start)
    in_week = [activity for activity in activities if start <= activity.date <= end]
    completed = sum(1 for activity in in_week if activity.completed)
    return WeeklySummary(
        start=start,
        end=end,
        total=len(in_week),
        completed=completed,
        pending=len(in_week) - completed,
    )


def _is_upcoming(activity: "Activity", instant: "ReferenceInstant") -> bool:
    if activity.completed or activity.date < instant.today:
        return False
    if activity.date == instant.today:
        return activity.start_minutes > instant.now_minutes
    return True


def upcoming_events(
    activities: Iterable["Activity"],
    instant: "ReferenceInstant",
    *,
    limit: int = DEFAULT_UPCOMING_LIMIT,
) -> List["Activity"]:
    """Incomplete activities strictly after ``instant``, soonest first."""

    pending = [activity for activity in activities if _is_upcoming(activity, instant)]
    pending.sort(key=lambda activity: (activity.date, activity.start_minutes))
    return pending[: max(limit, 0)]


def urgent_items(
    activities: Iterable["Activity"],
    *,
    limit: int = DEFAULT_URGENT_LIMIT,
    urgent_category: str = URGENT_CATEGORY,
) -> List["Activity"]:
    urgent = [
        activity
        for activity in activities
        if activity.category == urgent_category and not activity.completed
    ]
    return urgent[: max(limit, 0)]


def build_dashboard(
    activities: Iterable["Activity"],
    instant: "ReferenceInstant",
    *,
    week_start: int = SUNDAY,
    upcoming_limit: int = DEFAULT_UPCOMING_LIMIT,
    urgent_limit: int = DEFAULT_URGENT_LIMIT,
    urgent_category: str = URGENT_CATEGORY,
) -> Dashboard:
    snapshot = list(activities)
    return Dashboard(
        instant=instant,
        today=todays_agenda(snapshot, instant.today),
        upcoming=upcoming_events(snapshot, instant, limit=upcoming_limit),
        urgent=urgent_items(snapshot, limit=urgent_limit, urgent_category=urgent_category),
        summary=weekly_summary(snapshot, instant.today, week_start=week_start),
    )


__all__ = [
    "DEFAULT_UPCOMING_LIMIT",
    "DEFAULT_URGENT_LIMIT",
    "Dashboard",
    "URGENT_CATEGORY",
    "WeeklySummary",
    "activities_for_day",
    "build_dashboard",
    "todays_agenda",
    "upcoming_events",
    "urgent_items",
    "weekly_summary",
]
