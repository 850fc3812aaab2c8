from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from ...domain import Activity
from ..supabase import SupabaseGateway

logger = logging.getLogger(__name__)


def _timestamp() -> str:
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat()


@dataclass(slots=True)
class ActivityRepository:
    gateway: SupabaseGateway
    table_name: str

    def _table(self):
        return self.gateway.table(self.table_name)

    def list_all(self) -> List[Activity]:
        response = self._table().select("*").execute()
        records = response.data or []
        return [Activity.from_record(record) for record in records]

    def list_for_owner(self, owner: str) -> List[Activity]:
        response = self._table().select("*").eq("owner", owner).execute()
        records = response.data or []
        return [Activity.from_record(record) for record in records]

    def fetch(self, activity_id: str) -> Optional[Activity]:
        response = self._table().select("*").eq("id", activity_id).limit(1).execute()
        records = response.data or []
        if not records:
            return None
        return Activity.from_record(records[0])

    def create(self, payload: Dict[str, Any], owner: str) -> Activity:
        """Insert a new record; the store assigns the identifier."""

        record = {key: value for key, value in payload.items() if key != "id"}
        record["owner"] = owner
        record["created_at"] = _timestamp()
        response = self._table().insert(record).execute()
        saved = (response.data or [None])[0]
        if not saved or "id" not in saved:
            raise RuntimeError("Activity store did not return the created record.")
        logger.debug("Created activity %s for %s", saved["id"], owner)
        return Activity.from_record(saved)

    def update(self, activity: Activity) -> Activity:
        record = activity.to_record()
        record.pop("id")
        record["updated_at"] = _timestamp()
        response = self._table().update(record).eq("id", activity.id).execute()
        saved = (response.data or [None])[0]
        if not saved:
            return Activity.from_record({**record, "id": activity.id, "created_at": activity.created_at})
        return Activity.from_record(saved)

    def delete(self, activity_id: str) -> bool:
        response = self._table().delete().eq("id", activity_id).execute()
        deleted = response.data or []
        return bool(deleted)
