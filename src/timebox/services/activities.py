from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date
from typing import Any, Dict, List, Optional

from ..domain import Activity
from ..engine import to_minutes
from .context import ServiceContext

logger = logging.getLogger(__name__)

_UPDATABLE_FIELDS = (
    "owner",
    "title",
    "description",
    "date",
    "start_time",
    "end_time",
    "category",
    "completed",
)


class ActivityValidationError(ValueError):
    """Raised when an activity misses a required field or has a malformed time."""

    def __init__(self, missing: List[str], detail: str = "") -> None:
        self.missing = missing
        message = detail or f"Missing required fields: {', '.join(missing)}"
        super().__init__(message)


class ActivityNotFoundError(LookupError):
    """Raised when an activity id is not in the current snapshot."""


def _validate(owner: str, title: str, day: Optional[date], start_time: str, end_time: str) -> None:
    missing = [
        name
        for name, value in (("owner", owner.strip()), ("title", title.strip()), ("date", day))
        if not value
    ]
    if missing:
        raise ActivityValidationError(missing)
    for label, value in (("start_time", start_time), ("end_time", end_time)):
        try:
            to_minutes(value)
        except ValueError as exc:
            raise ActivityValidationError([], f"{label}: {exc}") from exc


@dataclass(slots=True)
class ActivityService:
    context: ServiceContext

    def refresh(self, *, owner: Optional[str] = None) -> List[Activity]:
        """Reload the cache from the store, optionally for one owner only."""

        repository = self.context.activities
        activities = repository.list_for_owner(owner) if owner else repository.list_all()
        self.context.cache.hydrate(activities)
        logger.info("Loaded %d activities", len(activities))
        return activities

    def snapshot(self) -> List[Activity]:
        return self.context.cache.snapshot()

    def get(self, activity_id: str) -> Activity:
        activity = self.context.cache.get(activity_id)
        if activity is None:
            raise ActivityNotFoundError(f"Activity '{activity_id}' not found.")
        return activity

    def create(
        self,
        *,
        owner: str,
        title: str,
        date: Optional[date],
        start_time: str = "08:00",
        end_time: str = "09:00",
        category: Optional[str] = None,
        description: str = "",
        completed: bool = False,
    ) -> Activity:
        _validate(owner, title, date, start_time, end_time)
        payload: Dict[str, Any] = {
            "title": title.strip(),
            "description": description,
            "date": date.isoformat(),
            "start_time": start_time,
            "end_time": end_time,
            "category": category or self.context.settings.agenda.default_category,
            "completed": completed,
        }
        saved = self.context.activities.create(payload, owner.strip())
        self.context.cache.upsert(saved)
        logger.info("Created activity %s on %s", saved.id, saved.date.isoformat())
        return saved

    def update(self, activity_id: str, **changes: Any) -> Activity:
        unknown = set(changes) - set(_UPDATABLE_FIELDS)
        if unknown:
            raise ValueError(f"Unknown activity fields: {', '.join(sorted(unknown))}")
        current = self.get(activity_id)
        updated = replace(current, **changes)
        _validate(updated.owner, updated.title, updated.date, updated.start_time, updated.end_time)
        saved = self.context.activities.update(updated)
        self.context.cache.upsert(saved)
        return saved

    def toggle_completed(self, activity_id: str) -> Activity:
        current = self.get(activity_id)
        return self.update(activity_id, completed=not current.completed)

    def delete(self, activity_id: str) -> bool:
        self.get(activity_id)
        deleted = self.context.activities.delete(activity_id)
        if deleted:
            self.context.cache.remove(activity_id)
            logger.info("Deleted activity %s", activity_id)
        return deleted
