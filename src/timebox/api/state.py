from __future__ import annotations

from dataclasses import dataclass, field

from ..services import ActivityService, ServiceContext, SessionService


@dataclass(slots=True)
class ApiState:
    context: ServiceContext = field(default_factory=ServiceContext)
    activities: ActivityService = field(init=False)
    sessions: SessionService = field(init=False)

    def __post_init__(self) -> None:
        self.activities = ActivityService(self.context)
        self.sessions = SessionService(self.context)

    def reset(self, context: ServiceContext) -> None:
        """Swap the shared context, e.g. after settings change."""

        self.context = context
        self.__post_init__()


api_state = ApiState()
