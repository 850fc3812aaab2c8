from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..data import OwnerSession
from .context import ServiceContext

logger = logging.getLogger(__name__)


class SessionMissingError(RuntimeError):
    """Raised when an owner is needed and nobody is signed in."""


@dataclass(slots=True)
class SessionService:
    context: ServiceContext

    def sign_in(self, name: str) -> OwnerSession:
        cleaned = (name or "").strip()
        if not cleaned:
            raise ValueError("A display name is required to sign in.")
        session = self.context.sessions.save(cleaned)
        logger.info("Signed in as %s", cleaned)
        return session

    def current(self) -> Optional[OwnerSession]:
        return self.context.sessions.load()

    def current_owner(self) -> str:
        session = self.current()
        if session is None:
            raise SessionMissingError("No owner is signed in.")
        return session.name

    def sign_out(self) -> None:
        self.context.sessions.clear()
        self.context.cache.clear()
