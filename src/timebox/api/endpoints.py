from __future__ import annotations

from datetime import date as Date, datetime
from typing import Any, Dict, Optional

from ..domain import ReferenceInstant
from ..engine import build_dashboard, layout_day, layout_week, shift_day, shift_week, week_days
from .models import ActivityInput, ActivityPatch
from .registry import register_api
from .serializers import (
    serialize_activities,
    serialize_activity,
    serialize_category,
    serialize_dashboard,
    serialize_day_layout,
)
from .state import api_state


def _parse_date(value: str) -> Date:
    try:
        return Date.fromisoformat(value)
    except ValueError as exc:  # noqa: TRY003
        raise ValueError(f"Invalid ISO date: {value}") from exc


def _reference_instant(today: Optional[str], now: Optional[str]) -> ReferenceInstant:
    # The wall clock is only read here, when the caller supplies no instant.
    current = datetime.now()
    day = _parse_date(today) if today else current.date()
    if now:
        return ReferenceInstant.at(day, now)
    return ReferenceInstant(today=day, now_minutes=current.hour * 60 + current.minute)


def _categories():
    return api_state.context.settings.agenda.categories


@register_api(
    "refresh_activities",
    description="Reload activities from the Supabase store into the in-memory snapshot.",
    category="activities",
    tags=("cache", "supabase"),
)
def refresh_activities(owner: Optional[str] = None) -> Dict[str, Any]:
    activities = api_state.activities.refresh(owner=owner)
    return {"owner": owner, "activity_count": len(activities)}


@register_api(
    "list_activities",
    description="Return the cached activities, optionally only those on one day.",
    category="activities",
    tags=("read",),
)
def list_activities(day: Optional[str] = None) -> Dict[str, Any]:
    snapshot = api_state.activities.snapshot()
    if day:
        target = _parse_date(day)
        snapshot = [activity for activity in snapshot if activity.date == target]
    return {"day": day, "activities": serialize_activities(snapshot, _categories())}


@register_api(
    "create_activity",
    description="Create an activity; the owner defaults to the signed-in display name.",
    category="activities",
    tags=("write",),
)
def create_activity(
    *,
    title: str,
    date: str,
    start_time: str = "08:00",
    end_time: Optional[str] = None,
    category: Optional[str] = None,
    description: str = "",
    owner: Optional[str] = None,
    completed: bool = False,
) -> Dict[str, Any]:
    data = ActivityInput(
        owner=owner,
        title=title,
        description=description,
        date=date,
        start_time=start_time,
        end_time=end_time,
        category=category,
        completed=completed,
    )
    activity = api_state.activities.create(
        owner=data.owner or api_state.sessions.current_owner(),
        title=data.title,
        date=data.date,
        start_time=data.start_time,
        end_time=data.end_time,
        category=data.category,
        description=data.description,
        completed=data.completed,
    )
    return {"activity": serialize_activity(activity, _categories())}


@register_api(
    "update_activity",
    description="Change fields of an existing activity.",
    category="activities",
    tags=("write",),
)
def update_activity(
    activity_id: str,
    *,
    title: Optional[str] = None,
    date: Optional[str] = None,
    start_time: Optional[str] = None,
    end_time: Optional[str] = None,
    category: Optional[str] = None,
    description: Optional[str] = None,
    owner: Optional[str] = None,
    completed: Optional[bool] = None,
) -> Dict[str, Any]:
    patch = ActivityPatch(
        owner=owner,
        title=title,
        description=description,
        date=date,
        start_time=start_time,
        end_time=end_time,
        category=category,
        completed=completed,
    )
    activity = api_state.activities.update(activity_id, **patch.changes())
    return {"activity": serialize_activity(activity, _categories())}


@register_api(
    "toggle_activity",
    description="Flip the completed flag of an activity.",
    category="activities",
    tags=("write",),
)
def toggle_activity(activity_id: str) -> Dict[str, Any]:
    activity = api_state.activities.toggle_completed(activity_id)
    return {"activity": serialize_activity(activity, _categories())}


@register_api(
    "delete_activity",
    description="Remove an activity from the store and the snapshot.",
    category="activities",
    tags=("write",),
)
def delete_activity(activity_id: str) -> Dict[str, Any]:
    deleted = api_state.activities.delete(activity_id)
    if not deleted:
        raise ValueError(f"Activity '{activity_id}' could not be deleted.")
    return {"deleted": activity_id}


@register_api(
    "list_categories",
    description="List the fixed activity categories.",
    category="categories",
    tags=("read",),
)
def list_categories() -> Dict[str, Any]:
    table = _categories()
    return {
        "default": table.default_id,
        "categories": [serialize_category(category) for category in table],
    }


@register_api(
    "day_layout",
    description="Column and grid placement of the activities on one day.",
    category="calendar",
    tags=("read", "layout"),
)
def day_layout(day: str) -> Dict[str, Any]:
    settings = api_state.context.settings
    layout = layout_day(
        api_state.activities.snapshot(),
        _parse_date(day),
        settings.grid,
        order=settings.agenda.packing_order,
        scope=settings.agenda.column_scope,
    )
    return {
        "hours": settings.grid.hour_labels,
        "row_height": settings.grid.row_height,
        "layout": serialize_day_layout(layout, _categories(), gutter=settings.grid.gutter),
    }


@register_api(
    "week_layout",
    description="Column and grid placement for the seven days of the week containing a date.",
    category="calendar",
    tags=("read", "layout"),
)
def week_layout(day: str) -> Dict[str, Any]:
    settings = api_state.context.settings
    layouts = layout_week(
        api_state.activities.snapshot(),
        _parse_date(day),
        settings.grid,
        week_start=settings.agenda.week_start,
        order=settings.agenda.packing_order,
        scope=settings.agenda.column_scope,
    )
    return {
        "hours": settings.grid.hour_labels,
        "row_height": settings.grid.row_height,
        "days": [serialize_day_layout(layout, _categories(), gutter=settings.grid.gutter) for layout in layouts],
    }


@register_api(
    "navigate",
    description="Move the calendar anchor by whole days or weeks and return the visible dates.",
    category="calendar",
    tags=("read",),
)
def navigate(day: str, view: str = "week", steps: int = 1) -> Dict[str, Any]:
    anchor = _parse_date(day)
    if view == "day":
        target = shift_day(anchor, steps)
        visible = [target]
    elif view == "week":
        target = shift_week(anchor, steps)
        visible = week_days(target, api_state.context.settings.agenda.week_start)
    else:
        raise ValueError(f"Unknown view '{view}', expected 'day' or 'week'.")
    return {"view": view, "anchor": target.isoformat(), "days": [item.isoformat() for item in visible]}


@register_api(
    "dashboard",
    description="Today's agenda, upcoming events, urgent items and the weekly summary.",
    category="calendar",
    tags=("read", "summary"),
)
def dashboard(today: Optional[str] = None, now: Optional[str] = None) -> Dict[str, Any]:
    agenda = api_state.context.settings.agenda
    result = build_dashboard(
        api_state.activities.snapshot(),
        _reference_instant(today, now),
        week_start=agenda.week_start,
        upcoming_limit=agenda.upcoming_limit,
        urgent_limit=agenda.urgent_limit,
        urgent_category=agenda.urgent_category,
    )
    return serialize_dashboard(result, _categories())


@register_api(
    "sign_in",
    description="Remember the display name used as the owner of new activities.",
    category="accounts",
    tags=("write",),
)
def sign_in(name: str) -> Dict[str, Any]:
    session = api_state.sessions.sign_in(name)
    return {"owner": session.name, "logged_in_at": session.logged_in_at.isoformat()}


@register_api(
    "sign_out",
    description="Forget the signed-in display name and drop the cached snapshot.",
    category="accounts",
    tags=("write",),
)
def sign_out() -> Dict[str, Any]:
    api_state.sessions.sign_out()
    return {"signed_out": True}


@register_api(
    "current_owner",
    description="Return the signed-in display name, if any.",
    category="accounts",
    tags=("read",),
)
def current_owner() -> Dict[str, Any]:
    session = api_state.sessions.current()
    if session is None:
        return {"owner": None}
    return {"owner": session.name, "logged_in_at": session.logged_in_at.isoformat()}
