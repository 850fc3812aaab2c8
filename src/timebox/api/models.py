from __future__ import annotations

import datetime as dt
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..domain import Activity, Category
from ..engine import DayLayout, LayoutBlock, WeeklySummary, default_end_time, to_minutes


def _check_clock(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    to_minutes(value)
    return value


class ActivityInput(BaseModel):
    """Fields accepted when a new activity is entered."""

    model_config = ConfigDict(str_strip_whitespace=True)

    owner: Optional[str] = Field(default=None)
    title: str = Field(min_length=1)
    description: str = Field(default="")
    date: dt.date
    start_time: str = Field(default="08:00")
    end_time: Optional[str] = Field(default=None)
    category: Optional[str] = Field(default=None)
    completed: bool = Field(default=False)

    @field_validator("start_time", "end_time")
    @classmethod
    def check_clock(cls, value: Optional[str]) -> Optional[str]:
        return _check_clock(value)

    @model_validator(mode="after")
    def fill_end_time(self) -> "ActivityInput":
        if self.end_time is None:
            self.end_time = default_end_time(self.start_time)
        return self


class ActivityPatch(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    owner: Optional[str] = Field(default=None, min_length=1)
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None)
    date: Optional[dt.date] = Field(default=None)
    start_time: Optional[str] = Field(default=None)
    end_time: Optional[str] = Field(default=None)
    category: Optional[str] = Field(default=None)
    completed: Optional[bool] = Field(default=None)

    @field_validator("start_time", "end_time")
    @classmethod
    def check_clock(cls, value: Optional[str]) -> Optional[str]:
        return _check_clock(value)

    def changes(self) -> Dict[str, object]:
        return self.model_dump(exclude_none=True)


class CategoryPayload(BaseModel):
    id: str
    name: str
    color: str
    gradient: str

    @classmethod
    def from_domain(cls, category: Category) -> "CategoryPayload":
        return cls(id=category.id, name=category.name, color=category.color, gradient=category.gradient)


class ActivityPayload(BaseModel):
    id: str
    owner: str
    title: str
    description: str = Field(default="")
    date: str
    start_time: str
    end_time: str
    category: CategoryPayload
    completed: bool = Field(default=False)
    created_at: Optional[str] = Field(default=None)
    updated_at: Optional[str] = Field(default=None)

    @classmethod
    def from_domain(cls, activity: Activity, category: Category) -> "ActivityPayload":
        return cls(
            id=activity.id,
            owner=activity.owner,
            title=activity.title,
            description=activity.description,
            date=activity.date.isoformat(),
            start_time=activity.start_time,
            end_time=activity.end_time,
            category=CategoryPayload.from_domain(category),
            completed=activity.completed,
            created_at=activity.created_at.isoformat() if activity.created_at else None,
            updated_at=activity.updated_at.isoformat() if activity.updated_at else None,
        )


class LayoutBlockPayload(BaseModel):
    activity: ActivityPayload
    column: int
    total_columns: int
    top: float
    height: float
    box: Dict[str, str]

    @classmethod
    def from_domain(cls, block: LayoutBlock, category: Category, gutter: int) -> "LayoutBlockPayload":
        return cls(
            activity=ActivityPayload.from_domain(block.activity, category),
            column=block.column,
            total_columns=block.total_columns,
            top=block.top,
            height=block.height,
            box=block.css_box(gutter),
        )


class DayLayoutPayload(BaseModel):
    day: str
    total_columns: int
    blocks: List[LayoutBlockPayload] = Field(default_factory=list)


class WeeklySummaryPayload(BaseModel):
    start: str
    end: str
    total: int
    completed: int
    pending: int
    completion_percent: int

    @classmethod
    def from_domain(cls, summary: WeeklySummary) -> "WeeklySummaryPayload":
        return cls(
            start=summary.start.isoformat(),
            end=summary.end.isoformat(),
            total=summary.total,
            completed=summary.completed,
            pending=summary.pending,
            completion_percent=summary.completion_percent,
        )


def day_layout_payload(layout: DayLayout, blocks: List[LayoutBlockPayload]) -> DayLayoutPayload:
    return DayLayoutPayload(day=layout.day.isoformat(), total_columns=layout.total_columns, blocks=blocks)
