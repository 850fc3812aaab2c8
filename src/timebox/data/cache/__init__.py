from __future__ import annotations

from .activity_cache import ActivityCache

__all__ = ["ActivityCache"]
