from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import orjson

from ..config import SESSION_FILE

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class OwnerSession:
    name: str
    logged_in_at: datetime

    def to_record(self) -> dict:
        return {"name": self.name, "logged_in_at": self.logged_in_at.isoformat()}

    @classmethod
    def from_record(cls, record: dict) -> "OwnerSession":
        return cls(
            name=str(record["name"]),
            logged_in_at=datetime.fromisoformat(str(record["logged_in_at"]).replace("Z", "+00:00")),
        )


class SessionStore:
    """Remembers the signed-in display name between runs."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path or SESSION_FILE

    @property
    def path(self) -> Path:
        return self._path

    def save(self, name: str) -> OwnerSession:
        session = OwnerSession(name=name, logged_in_at=datetime.now(timezone.utc).replace(microsecond=0))
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_bytes(orjson.dumps(session.to_record(), option=orjson.OPT_INDENT_2) + b"\n")
        return session

    def load(self) -> Optional[OwnerSession]:
        if not self._path.exists():
            return None
        raw = self._path.read_bytes()
        if not raw.strip():
            return None
        try:
            return OwnerSession.from_record(orjson.loads(raw))
        except (orjson.JSONDecodeError, KeyError, ValueError):
            logger.warning("Ignoring unreadable session file %s", self._path)
            return None

    def clear(self) -> None:
        self._path.unlink(missing_ok=True)
