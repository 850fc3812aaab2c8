from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Optional

from ..engine.timeparse import MINUTES_PER_HOUR, to_minutes
from .enums import CategoryId


def _parse_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    raise ValueError(f"Unsupported datetime value: {value!r}")


def _parse_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value[:10])
    raise ValueError(f"Unsupported date value: {value!r}")


@dataclass(slots=True)
class Activity:
    id: str
    owner: str
    title: str
    date: date
    start_time: str
    end_time: str
    category: str = CategoryId.WORK.value
    description: str = ""
    completed: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def start_minutes(self) -> int:
        return to_minutes(self.start_time)

    @property
    def end_minutes(self) -> int:
        return to_minutes(self.end_time)

    @property
    def duration_minutes(self) -> int:
        """Signed length of the interval; zero or negative for inverted records."""

        return self.end_minutes - self.start_minutes

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Activity":
        return cls(
            id=str(record["id"]),
            owner=str(record.get("owner") or ""),
            title=str(record.get("title") or ""),
            date=_parse_date(record["date"]),
            start_time=str(record["start_time"]),
            end_time=str(record["end_time"]),
            category=str(record.get("category") or CategoryId.WORK.value),
            description=record.get("description") or "",
            completed=bool(record.get("completed", False)),
            created_at=_parse_datetime(record["created_at"]) if record.get("created_at") else None,
            updated_at=_parse_datetime(record["updated_at"]) if record.get("updated_at") else None,
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "owner": self.owner,
            "title": self.title,
            "description": self.description,
            "date": self.date.isoformat(),
            "start_time": self.start_time,
            "end_time": self.end_time,
            "category": self.category,
            "completed": self.completed,
        }


@dataclass(frozen=True, slots=True)
class Category:
    id: str
    name: str
    color: str
    gradient: str


@dataclass(frozen=True, slots=True)
class ReferenceInstant:
    """The (date, time of day) treated as "now" by the aggregation views."""

    today: date
    now_minutes: int

    @classmethod
    def from_datetime(cls, moment: datetime) -> "ReferenceInstant":
        return cls(today=moment.date(), now_minutes=moment.hour * MINUTES_PER_HOUR + moment.minute)

    @classmethod
    def at(cls, today: date, clock: str) -> "ReferenceInstant":
        return cls(today=today, now_minutes=to_minutes(clock))
