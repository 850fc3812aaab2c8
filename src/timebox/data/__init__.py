"""Data access layer."""

from __future__ import annotations

from .cache import ActivityCache
from .repositories import ActivityRepository
from .session_store import OwnerSession, SessionStore
from .supabase import SupabaseGateway, SupabaseNotInitializedError

__all__ = [
    "ActivityCache",
    "ActivityRepository",
    "OwnerSession",
    "SessionStore",
    "SupabaseGateway",
    "SupabaseNotInitializedError",
]
