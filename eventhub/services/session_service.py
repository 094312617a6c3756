"""Session service - owns authentication, role and mode state.

Services:
- Depend only on interfaces (providers)
- Keep the session invariants: admin mode needs an admin user, and an
  anonymous session is always in member mode
- Convert provider failures into the user-visible error field
- Refuse a second login/logout while one is in flight
"""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import replace

from eventhub.domain import Mode, SessionState
from eventhub.domain.errors import (
    AuthError,
    AuthorizationError,
    ComponentClosedError,
    InvalidSessionStateError,
    OperationInFlightError,
)
from eventhub.stores.interfaces import AuthenticationProvider

logger = logging.getLogger("eventhub.session")

Listener = Callable[[SessionState], None]


class SessionManager:
    """State machine for the anonymous/authenticated session."""

    def __init__(self, provider: AuthenticationProvider) -> None:
        self._provider = provider
        self._lock = asyncio.Lock()
        self._listeners: list[Listener] = []
        self._closed = False
        self._state = SessionState()

    @property
    def state(self) -> SessionState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called with every new snapshot."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set_state(self, state: SessionState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)

    def _begin(self, operation: str) -> None:
        if self._closed:
            raise ComponentClosedError("SessionManager")
        if self._lock.locked():
            logger.warning("Rejected %s: authentication operation in flight", operation)
            raise OperationInFlightError(operation)

    async def login(self) -> SessionState:
        """Sign in through the provider.

        The new user always starts in member mode. A provider failure is
        recorded in ``state.error`` and leaves the session anonymous.

        Raises:
            OperationInFlightError: If a login or logout is running.
            InvalidSessionStateError: If a user is already signed in.
        """
        self._begin("log in")
        if self._state.is_authenticated:
            raise InvalidSessionStateError("Already logged in")

        async with self._lock:
            self._set_state(replace(self._state, busy=True, error=None))
            try:
                user = await self._provider.authenticate()
            except AuthError as exc:
                logger.error("Login failed: %s", exc.message, exc_info=True)
                if not self._closed:
                    self._set_state(SessionState(error=exc.message))
                return self._state
            except BaseException:
                if not self._closed:
                    self._set_state(SessionState())
                raise

            if self._closed:
                logger.info("Dropping login of %s after close", user.uid)
                return self._state
            self._set_state(SessionState(user=user, mode=Mode.MEMBER))
            logger.info("Logged in %s as %s", user.uid, user.role.value)
            return self._state

    async def logout(self) -> SessionState:
        """Sign out through the provider and return to anonymous.

        A provider failure is recorded in ``state.error`` and keeps the
        current user signed in.

        Raises:
            OperationInFlightError: If a login or logout is running.
            InvalidSessionStateError: If nobody is signed in.
        """
        self._begin("log out")
        user = self._state.user
        if user is None:
            raise InvalidSessionStateError("Not logged in")

        async with self._lock:
            self._set_state(replace(self._state, busy=True, error=None))
            try:
                await self._provider.sign_out(user)
            except AuthError as exc:
                logger.error("Logout failed: %s", exc.message, exc_info=True)
                if not self._closed:
                    self._set_state(replace(self._state, busy=False, error=exc.message))
                return self._state
            except BaseException:
                if not self._closed:
                    self._set_state(replace(self._state, busy=False))
                raise

            if self._closed:
                logger.info("Dropping logout of %s after close", user.uid)
                return self._state
            self._set_state(SessionState())
            logger.info("Logged out %s", user.uid)
            return self._state

    def toggle_mode(self) -> Mode:
        """Flip an admin between member and admin mode.

        Raises:
            AuthorizationError: If the session has no admin user. The
                state is left untouched.
            OperationInFlightError: If a login or logout is running.
        """
        self._begin("switch mode")
        if not self._state.is_admin:
            logger.warning("Rejected mode toggle for non-admin session")
            raise AuthorizationError("switch to admin mode")
        mode = self._state.mode.flipped()
        self._set_state(replace(self._state, mode=mode))
        logger.info("Switched %s to %s mode", self._state.user.uid, mode.value)
        return mode

    def clear_error(self) -> None:
        if self._state.error is not None:
            self._set_state(replace(self._state, error=None))

    def close(self) -> None:
        """Detach listeners; pending operations complete without writing."""
        self._closed = True
        self._listeners.clear()
