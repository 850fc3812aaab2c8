from __future__ import annotations

from dataclasses import dataclass, field

from ..config import AppSettings, get_settings
from ..data import ActivityCache, ActivityRepository, SessionStore, SupabaseGateway


@dataclass(slots=True)
class ServiceContext:
    """Aggregate root for services to share settings, gateway, and caches."""

    settings: AppSettings = field(default_factory=get_settings)
    sessions: SessionStore = field(default_factory=SessionStore)
    gateway: SupabaseGateway = field(init=False)
    activities: ActivityRepository = field(init=False)
    cache: ActivityCache = field(init=False)

    def __post_init__(self) -> None:
        self.gateway = SupabaseGateway(self.settings.supabase)
        self.cache = ActivityCache()
        self.activities = ActivityRepository(
            gateway=self.gateway,
            table_name=self.settings.storage.activities_table,
        )
