"""Domain models representing hub state.

These are pure domain objects with no input rules. Drafts are checked by
the draft serializer before they become events.
"""

from dataclasses import dataclass, replace
from datetime import date, datetime

from eventhub.domain.value_objects import EventId, Mode, Role

DRAFT_FIELDS = ("title", "description", "date", "location")


@dataclass(frozen=True)
class UserProfile:
    """Identity of an authenticated session."""

    uid: str
    email: str
    display_name: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN


@dataclass(frozen=True)
class SessionState:
    """Snapshot of the session owned by the SessionManager."""

    user: UserProfile | None = None
    mode: Mode = Mode.MEMBER
    busy: bool = False
    error: str | None = None

    def __post_init__(self) -> None:
        if self.mode is Mode.ADMIN and (self.user is None or not self.user.is_admin):
            raise ValueError("Admin mode requires an admin user")

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    @property
    def is_admin(self) -> bool:
        return self.user is not None and self.user.is_admin

    @property
    def can_manage_events(self) -> bool:
        return self.is_admin and self.mode is Mode.ADMIN


@dataclass(frozen=True)
class Event:
    """Domain representation of a calendar Event."""

    id: EventId
    title: str
    description: str
    date: datetime
    location: str | None = None

    def __post_init__(self) -> None:
        if self.date.tzinfo is None or self.date.utcoffset() is None:
            raise ValueError("Event date must be timezone-aware")


@dataclass(frozen=True)
class EventDraft:
    """Unvalidated fields of a prospective Event.

    ``date`` is either an aware datetime or the raw text the user typed.
    """

    title: str = ""
    description: str = ""
    date: datetime | str = ""
    location: str = ""

    @classmethod
    def blank(cls, now: datetime) -> "EventDraft":
        return cls(date=now)

    def with_field(self, field: str, value) -> "EventDraft":
        return replace(self, **{field: value})

    def as_dict(self) -> dict:
        return {name: getattr(self, name) for name in DRAFT_FIELDS}


@dataclass(frozen=True)
class EventStoreState:
    """Snapshot of the event collection and its create workflow flags."""

    events: tuple[Event, ...] = ()
    busy: bool = False
    error: str | None = None


@dataclass(frozen=True)
class HubState:
    """Presentation state held by the hub: draft, composer and date filter."""

    draft: EventDraft
    composer_open: bool = False
    selected_date: date | None = None
    error: str | None = None
