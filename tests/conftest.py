"""Pytest configuration and shared fixtures."""

import asyncio
from datetime import datetime, timezone

import pytest

from eventhub.domain import Event, EventId, Role, UserProfile
from eventhub.domain.errors import AuthError, PersistError
from eventhub.services import EventHub, SessionManager
from eventhub.stores import AuthenticationProvider, EventStore, PersistenceProvider

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


def make_user(role: Role = Role.ADMIN) -> UserProfile:
    return UserProfile(
        uid="user123",
        email="user@example.com",
        display_name="Test User",
        role=role,
    )


def make_event(event_id: str, when: datetime, title: str = "Event") -> Event:
    return Event(
        id=EventId(event_id),
        title=title,
        description=f"{title} description",
        date=when,
        location=None,
    )


class FakeAuthProvider(AuthenticationProvider):
    """Zero-latency provider; set ``gate`` to hold calls until released."""

    def __init__(self, role: Role = Role.ADMIN) -> None:
        self.user = make_user(role)
        self.fail_login = False
        self.fail_logout = False
        self.gate: asyncio.Event | None = None
        self.calls: list[str] = []

    async def _wait(self) -> None:
        if self.gate is not None:
            await self.gate.wait()

    async def authenticate(self) -> UserProfile:
        self.calls.append("authenticate")
        await self._wait()
        if self.fail_login:
            raise AuthError("Sign-in service unavailable")
        return self.user

    async def sign_out(self, user: UserProfile) -> None:
        self.calls.append("sign_out")
        await self._wait()
        if self.fail_logout:
            raise AuthError("Sign-out service unavailable")


class FakePersistenceProvider(PersistenceProvider):
    """Zero-latency provider recording the events it was asked to store."""

    def __init__(self) -> None:
        self.created: list[Event] = []
        self.fail = False
        self.gate: asyncio.Event | None = None

    async def create_event(self, event: Event) -> Event:
        if self.gate is not None:
            await self.gate.wait()
        if self.fail:
            raise PersistError("Database unavailable")
        self.created.append(event)
        return event


class SequentialIds:
    """Id generator yielding evt-1, evt-2, ..."""

    def __init__(self) -> None:
        self.count = 0

    def __call__(self) -> str:
        self.count += 1
        return f"evt-{self.count}"


def run(coro):
    return asyncio.run(coro)


@pytest.fixture
def auth_provider() -> FakeAuthProvider:
    return FakeAuthProvider()


@pytest.fixture
def persistence_provider() -> FakePersistenceProvider:
    return FakePersistenceProvider()


@pytest.fixture
def session_manager(auth_provider: FakeAuthProvider) -> SessionManager:
    return SessionManager(auth_provider)


@pytest.fixture
def event_store(persistence_provider: FakePersistenceProvider) -> EventStore:
    return EventStore(
        persistence_provider,
        id_generator=SequentialIds(),
        time_zone=timezone.utc,
    )


@pytest.fixture
def hub(session_manager: SessionManager, event_store: EventStore) -> EventHub:
    return EventHub(session_manager, event_store, clock=lambda: NOW)


@pytest.fixture
def admin_hub(hub: EventHub) -> EventHub:
    """Hub signed in as an admin in admin mode."""
    run(hub.login())
    hub.toggle_mode()
    return hub
