from eventhub.domain.models import (
    DRAFT_FIELDS,
    Event,
    EventDraft,
    EventStoreState,
    HubState,
    SessionState,
    UserProfile,
)
from eventhub.domain.value_objects import EventId, Mode, Role, new_event_id

__all__ = [
    "DRAFT_FIELDS",
    "Event",
    "EventDraft",
    "EventStoreState",
    "HubState",
    "SessionState",
    "UserProfile",
    "EventId",
    "Mode",
    "Role",
    "new_event_id",
]
