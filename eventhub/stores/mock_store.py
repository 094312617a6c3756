"""In-memory mock collaborators.

These stand in for a real authentication and persistence backend: each
call sleeps for a fixed latency and then succeeds with canned data.
"""

import asyncio
import logging
from datetime import datetime, timedelta

from eventhub.domain import Event, EventId, Role, UserProfile
from eventhub.stores.interfaces import AuthenticationProvider, PersistenceProvider

logger = logging.getLogger("eventhub.mock")

MOCK_USER = UserProfile(
    uid="user123",
    email="user@example.com",
    display_name="Test User",
    role=Role.ADMIN,
)

# (id, title, description, days from now, location)
MOCK_EVENTS = [
    ("1", "Volunteer Day", "Help out at the local park.", 1, "Central Park"),
    ("2", "Fundraising Gala", "Formal event to raise funds.", 7, "Hilton Hotel"),
    ("3", "Board Meeting", "Monthly board meeting.", 30, "Office HQ"),
]


def seed_events(now: datetime) -> list[Event]:
    """Return the demo events, dated relative to ``now``."""
    return [
        Event(
            id=EventId(event_id),
            title=title,
            description=description,
            date=now + timedelta(days=days),
            location=location,
        )
        for event_id, title, description, days, location in MOCK_EVENTS
    ]


class MockAuthenticationProvider(AuthenticationProvider):
    """Authentication backend that always signs in the mock user."""

    def __init__(
        self,
        login_latency: float = 1.0,
        logout_latency: float = 0.5,
        role: Role = Role.ADMIN,
    ) -> None:
        self._login_latency = login_latency
        self._logout_latency = logout_latency
        self._user = UserProfile(
            uid=MOCK_USER.uid,
            email=MOCK_USER.email,
            display_name=MOCK_USER.display_name,
            role=role,
        )

    async def authenticate(self) -> UserProfile:
        await asyncio.sleep(self._login_latency)
        logger.debug("Mock sign-in issued profile %s", self._user.uid)
        return self._user

    async def sign_out(self, user: UserProfile) -> None:
        await asyncio.sleep(self._logout_latency)
        logger.debug("Mock sign-out of %s", user.uid)


class MockPersistenceProvider(PersistenceProvider):
    """Persistence backend that accepts every event after a delay."""

    def __init__(self, latency: float = 0.5) -> None:
        self._latency = latency

    async def create_event(self, event: Event) -> Event:
        await asyncio.sleep(self._latency)
        return event
