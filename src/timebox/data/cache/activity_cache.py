from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from ...domain import Activity


@dataclass
class ActivityCache:
    """In-memory copy of the store's activities, kept in store order."""

    activities_by_id: Dict[str, Activity] = field(default_factory=dict)

    def hydrate(self, activities: Iterable[Activity]) -> None:
        self.activities_by_id.clear()
        for activity in activities:
            self.activities_by_id[activity.id] = activity

    def upsert(self, activity: Activity) -> None:
        # existing keys keep their position
        self.activities_by_id[activity.id] = activity

    def remove(self, activity_id: str) -> bool:
        return self.activities_by_id.pop(activity_id, None) is not None

    def get(self, activity_id: str) -> Optional[Activity]:
        return self.activities_by_id.get(activity_id)

    def snapshot(self) -> List[Activity]:
        return list(self.activities_by_id.values())

    def clear(self) -> None:
        self.activities_by_id.clear()

    def __len__(self) -> int:
        return len(self.activities_by_id)
