"""Collaborator interfaces (repository pattern).

Providers must be swappable and return domain models. Failures are
reported by raising AuthError or PersistError.
"""

from abc import ABC, abstractmethod

from eventhub.domain import Event, UserProfile


class AuthenticationProvider(ABC):
    """Interface for the authentication backend."""

    @abstractmethod
    async def authenticate(self) -> UserProfile:
        """Sign in and return the issued profile.

        Raises:
            AuthError: If the backend refuses or fails.
        """
        ...

    @abstractmethod
    async def sign_out(self, user: UserProfile) -> None:
        """End the backend session of ``user``.

        Raises:
            AuthError: If the backend fails.
        """
        ...


class PersistenceProvider(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    async def create_event(self, event: Event) -> Event:
        """Store a new event and return it as persisted.

        Raises:
            PersistError: If the event cannot be stored.
        """
        ...
