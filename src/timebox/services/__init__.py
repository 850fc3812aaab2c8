"""Application services orchestrating data access and domain logic."""

from __future__ import annotations

from .activities import ActivityNotFoundError, ActivityService, ActivityValidationError
from .context import ServiceContext
from .session import SessionMissingError, SessionService

__all__ = [
    "ActivityNotFoundError",
    "ActivityService",
    "ActivityValidationError",
    "ServiceContext",
    "SessionMissingError",
    "SessionService",
]
