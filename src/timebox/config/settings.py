from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

from ..domain import CategoryTable
from ..engine import ColumnScope, GridConfig, PackingOrder

load_dotenv()

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SupabaseSettings:
    url: Optional[str]
    anon_key: Optional[str]

    @property
    def is_configured(self) -> bool:
        return bool(self.url and self.anon_key)

    @property
    def missing_env_vars(self) -> list[str]:
        missing = []
        if not self.url:
            missing.append("SUPABASE_URL")
        if not self.anon_key:
            missing.append("SUPABASE_ANON_KEY")
        return missing


@dataclass(frozen=True)
class StorageSettings:
    activities_table: str


@dataclass(frozen=True)
class AgendaSettings:
    week_start: int = 0
    upcoming_limit: int = 5
    urgent_limit: int = 3
    urgent_category: str = "urgent"
    default_category: str = "work"
    packing_order: PackingOrder = PackingOrder.START
    column_scope: ColumnScope = ColumnScope.DAY
    categories: CategoryTable = field(default_factory=CategoryTable)


@dataclass(frozen=True)
class AppSettings:
    supabase: SupabaseSettings
    storage: StorageSettings
    grid: GridConfig
    agenda: AgendaSettings
    log_level: str = "INFO"


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _float_from_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _choice_from_env(name: str, enum_type, default):
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return enum_type(raw.strip().lower())
    except ValueError:
        return default


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    supabase = SupabaseSettings(
        url=os.getenv("SUPABASE_URL"),
        anon_key=os.getenv("SUPABASE_ANON_KEY"),
    )

    storage = StorageSettings(
        activities_table=os.getenv("TIMEBOX_ACTIVITIES_TABLE", "activities"),
    )

    try:
        grid = GridConfig(
            start_hour=_int_from_env("TIMEBOX_GRID_START_HOUR", 6),
            hour_span=_int_from_env("TIMEBOX_GRID_HOUR_SPAN", 17),
            row_height=_float_from_env("TIMEBOX_GRID_ROW_HEIGHT", 48.0),
            gutter=_int_from_env("TIMEBOX_GRID_GUTTER", 4),
        )
    except ValueError as exc:
        logger.warning("Ignoring grid settings from the environment: %s", exc)
        grid = GridConfig()

    default_category = os.getenv("TIMEBOX_DEFAULT_CATEGORY", "work")
    categories = CategoryTable()
    if default_category in categories:
        categories = CategoryTable(default_id=default_category)
    else:
        default_category = categories.default_id

    agenda = AgendaSettings(
        week_start=_int_from_env("TIMEBOX_WEEK_START", 0) % 7,
        upcoming_limit=_int_from_env("TIMEBOX_UPCOMING_LIMIT", 5),
        urgent_limit=_int_from_env("TIMEBOX_URGENT_LIMIT", 3),
        urgent_category=os.getenv("TIMEBOX_URGENT_CATEGORY", "urgent"),
        default_category=default_category,
        packing_order=_choice_from_env("TIMEBOX_PACKING_ORDER", PackingOrder, PackingOrder.START),
        column_scope=_choice_from_env("TIMEBOX_COLUMN_SCOPE", ColumnScope, ColumnScope.DAY),
        categories=categories,
    )

    return AppSettings(
        supabase=supabase,
        storage=storage,
        grid=grid,
        agenda=agenda,
        log_level=os.getenv("TIMEBOX_LOG_LEVEL", "INFO").upper(),
    )
