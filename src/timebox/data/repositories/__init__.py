"""Supabase repositories for first-class domain objects."""

from __future__ import annotations

from .activities import ActivityRepository

__all__ = ["ActivityRepository"]
