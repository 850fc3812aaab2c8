from __future__ import annotations

from enum import Enum


class CategoryId(str, Enum):
    WORK = "work"
    PERSONAL = "personal"
    HEALTH = "health"
    STUDY = "study"
    MEETINGS = "meetings"
    URGENT = "urgent"
    OTHER = "other"
