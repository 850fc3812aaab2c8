"""Configuration models and helpers."""

from __future__ import annotations

from .paths import APP_NAME, DATA_DIR, LOG_FILE, SESSION_FILE, ensure_data_dir
from .settings import AgendaSettings, AppSettings, StorageSettings, SupabaseSettings, get_settings

__all__ = [
    "APP_NAME",
    "AgendaSettings",
    "AppSettings",
    "DATA_DIR",
    "LOG_FILE",
    "SESSION_FILE",
    "StorageSettings",
    "SupabaseSettings",
    "ensure_data_dir",
    "get_settings",
]
