"""Hub service - the command surface used by the presentation layer.

Services:
- Wire the session and the event store together
- Own the draft, the composer flag and the selected date
- Map draft failures to a dismissible error message
- Never render anything; view decisions go through build_view_model
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import date, datetime

from django.utils import timezone

from eventhub.conf import hub_settings
from eventhub.domain import (
    DRAFT_FIELDS,
    Event,
    EventDraft,
    HubState,
    Mode,
    Role,
    SessionState,
)
from eventhub.domain.calendar import calendar_day
from eventhub.domain.errors import (
    AuthorizationError,
    DomainError,
    InvalidDraftFieldError,
    PersistError,
    ValidationError,
)
from eventhub.services.session_service import SessionManager
from eventhub.services.view_model import ViewModel, build_view_model
from eventhub.stores.event_store import EventSequence, EventStore
from eventhub.stores.mock_store import (
    MockAuthenticationProvider,
    MockPersistenceProvider,
    seed_events,
)

logger = logging.getLogger("eventhub.hub")

Clock = Callable[[], datetime]
Listener = Callable[[HubState], None]


@dataclass(frozen=True)
class SubmitResult:
    """Outcome of submitting the draft: the new event or the error."""

    event: Event | None = None
    error: DomainError | None = None

    @property
    def ok(self) -> bool:
        return self.event is not None


class EventHub:
    """Commands and read accessors for the events page."""

    def __init__(
        self,
        session: SessionManager,
        store: EventStore,
        clock: Clock = timezone.now,
    ) -> None:
        self.session = session
        self.store = store
        self._clock = clock
        self._listeners: list[Listener] = []
        self._state = HubState(draft=EventDraft.blank(clock()))

    @property
    def state(self) -> HubState:
        return self._state

    @property
    def draft(self) -> EventDraft:
        return self._state.draft

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called with every new hub snapshot."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set_state(self, **changes) -> None:
        self._state = replace(self._state, **changes)
        for listener in list(self._listeners):
            listener(self._state)

    def _reset_composer(self) -> None:
        self._set_state(
            draft=EventDraft.blank(self._clock()),
            composer_open=False,
            error=None,
        )

    # ---------- Session ----------

    async def login(self) -> SessionState:
        return await self.session.login()

    async def logout(self) -> SessionState:
        state = await self.session.logout()
        if not state.is_authenticated:
            self._reset_composer()
        return state

    def toggle_mode(self) -> Mode:
        mode = self.session.toggle_mode()
        if mode is Mode.MEMBER and self._state.composer_open:
            self._set_state(composer_open=False)
        return mode

    # ---------- Draft ----------

    def open_composer(self) -> None:
        if not self.session.state.can_manage_events:
            raise AuthorizationError("add events")
        self._set_state(composer_open=True, error=None)

    def update_draft_field(self, field: str, value) -> EventDraft:
        if field not in DRAFT_FIELDS:
            raise InvalidDraftFieldError(field)
        self._set_state(draft=self._state.draft.with_field(field, value))
        return self._state.draft

    async def submit_draft(self) -> SubmitResult:
        """Validate the draft and add it as an event.

        Validation and authorization failures are shown as the hub error
        and leave everything else as it was. On success the draft is reset
        and the composer closed. A create dropped by close yields an empty
        result.

        Raises:
            OperationInFlightError: If an add is already running.
        """
        try:
            event = await self.store.add_event(self._state.draft, self.session.state)
        except (ValidationError, AuthorizationError) as exc:
            logger.info("Draft not submitted: %s", exc)
            self._set_state(error=exc.message)
            return SubmitResult(error=exc)

        if event is None:
            if self.store.closed:
                return SubmitResult()
            message = self.store.state.error
            return SubmitResult(error=PersistError(message) if message else PersistError())
        self._reset_composer()
        return SubmitResult(event=event)

    def cancel_draft(self) -> None:
        self._reset_composer()

    # ---------- Browsing ----------

    def select_date(self, value: date | datetime | None) -> date | None:
        day = None if value is None else calendar_day(value, self.store.time_zone)
        self._set_state(selected_date=day)
        return day

    def visible_events(self) -> EventSequence:
        if self._state.selected_date is None:
            return self.store.list_upcoming()
        return self.store.list_on_date(self._state.selected_date)

    def dismiss_error(self) -> None:
        if self._state.error is not None:
            self._set_state(error=None)
        self.session.clear_error()
        self.store.clear_error()

    def view_model(self) -> ViewModel:
        return build_view_model(
            self.session.state,
            self.store.state,
            self._state,
            self.visible_events(),
        )

    def close(self) -> None:
        self._listeners.clear()
        self.session.close()
        self.store.close()


def create_hub(clock: Clock = timezone.now) -> EventHub:
    """Build a hub backed by the mock collaborators configured in settings."""
    config = hub_settings()
    session = SessionManager(
        MockAuthenticationProvider(
            login_latency=config["LOGIN_LATENCY"],
            logout_latency=config["LOGOUT_LATENCY"],
            role=Role(config["MOCK_USER_ROLE"]),
        )
    )
    store = EventStore(
        MockPersistenceProvider(latency=config["CREATE_EVENT_LATENCY"]),
        events=seed_events(clock()) if config["SEED_MOCK_EVENTS"] else (),
    )
    return EventHub(session, store, clock=clock)
