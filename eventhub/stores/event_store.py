"""In-memory event store.

Holds the event collection, answers the upcoming and by-date queries and
runs the validated create workflow against a persistence provider.
"""

import asyncio
import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import replace
from datetime import date, datetime, tzinfo

from eventhub.domain import (
    Event,
    EventDraft,
    EventId,
    EventStoreState,
    SessionState,
    new_event_id,
)
from eventhub.domain.calendar import calendar_day, canonical_timezone
from eventhub.domain.errors import (
    AuthorizationError,
    ComponentClosedError,
    OperationInFlightError,
    PersistError,
    ValidationError,
)
from eventhub.handlers.serializers import EventDraftSerializer
from eventhub.stores.interfaces import PersistenceProvider

logger = logging.getLogger("eventhub.events")

Listener = Callable[[EventStoreState], None]


class EventSequence(Iterable[Event]):
    """Lazy, restartable view over a snapshot of events.

    Every iteration walks the snapshot taken when the view was made, so
    later inserts never show up in an existing view.
    """

    __slots__ = ["_events", "_predicate"]

    def __init__(
        self,
        events: tuple[Event, ...],
        predicate: Callable[[Event], bool] | None = None,
    ) -> None:
        self._events = events
        self._predicate = predicate

    def __iter__(self) -> Iterator[Event]:
        for event in self._events:
            if self._predicate is None or self._predicate(event):
                yield event

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return any(True for _ in self)

    def __repr__(self) -> str:
        return f"EventSequence({[str(event.id) for event in self]})"


class EventStore:
    """Event collection with date queries and an authorized create."""

    def __init__(
        self,
        provider: PersistenceProvider,
        events: Iterable[Event] = (),
        id_generator: Callable[[], str] = new_event_id,
        time_zone: tzinfo | None = None,
    ) -> None:
        self._provider = provider
        self._id_generator = id_generator
        self._time_zone = time_zone or canonical_timezone()
        self._lock = asyncio.Lock()
        self._listeners: list[Listener] = []
        self._closed = False
        self._state = EventStoreState(events=tuple(events))
        self._ids = {str(event.id) for event in self._state.events}
        if len(self._ids) != len(self._state.events):
            raise ValueError("Seed events must have unique ids")

    @property
    def state(self) -> EventStoreState:
        return self._state

    @property
    def time_zone(self) -> tzinfo:
        return self._time_zone

    @property
    def closed(self) -> bool:
        return self._closed

    def __len__(self) -> int:
        return len(self._state.events)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called with every new snapshot."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set_state(self, **changes) -> None:
        self._state = replace(self._state, **changes)
        for listener in list(self._listeners):
            listener(self._state)

    # ---------- Queries ----------

    def list_upcoming(self) -> EventSequence:
        """Return every event in insertion order."""
        return EventSequence(self._state.events)

    def list_on_date(self, target: date | datetime) -> EventSequence:
        """Return events falling on the calendar day of ``target``."""
        day = calendar_day(target, self._time_zone)
        return EventSequence(
            self._state.events,
            lambda event: calendar_day(event.date, self._time_zone) == day,
        )

    def get_event(self, event_id: str) -> Event | None:
        for event in self._state.events:
            if str(event.id) == event_id:
                return event
        return None

    # ---------- Validation ----------

    def clean_draft(self, draft: EventDraft) -> dict:
        """Return validated event fields for ``draft``.

        Raises:
            ValidationError: If a required field is blank or the date
                does not parse.
        """
        serializer = EventDraftSerializer(
            data=draft.as_dict(), time_zone=self._time_zone
        )
        if not serializer.is_valid():
            raise ValidationError(
                fields=tuple(
                    (name, tuple(str(detail) for detail in details))
                    for name, details in serializer.errors.items()
                )
            )
        return dict(serializer.validated_data)

    def validate_draft(self, draft: EventDraft) -> ValidationError | None:
        """Return the draft's ValidationError, or None if it is valid."""
        try:
            self.clean_draft(draft)
        except ValidationError as exc:
            return exc
        return None

    # ---------- Create ----------

    async def add_event(self, draft: EventDraft, session: SessionState) -> Event | None:
        """Validate ``draft`` and store it as a new event.

        Authorization and validation failures are raised before any
        latency. A persistence failure is recorded in ``state.error`` and
        yields None.

        Raises:
            AuthorizationError: If the session is not in admin mode.
            ValidationError: If the draft is invalid.
            OperationInFlightError: If another create is running.
            ComponentClosedError: If the store was closed.
        """
        if self._closed:
            raise ComponentClosedError("EventStore")
        if not session.can_manage_events:
            logger.warning("Rejected add_event for unauthorized session")
            raise AuthorizationError("add events")
        if self._lock.locked():
            raise OperationInFlightError("add an event")
        fields = self.clean_draft(draft)

        async with self._lock:
            self._set_state(busy=True, error=None)
            try:
                event = Event(id=EventId(self._next_id()), **fields)
                stored = await self._provider.create_event(event)
            except PersistError as exc:
                logger.error("Failed to persist event: %s", exc.message, exc_info=True)
                if not self._closed:
                    self._set_state(busy=False, error=exc.message)
                return None
            except BaseException:
                if not self._closed:
                    self._set_state(busy=False)
                raise

            if self._closed:
                logger.info("Dropping created event %s after close", stored.id)
                return None
            self._ids.add(str(stored.id))
            self._set_state(events=self._state.events + (stored,), busy=False)
            logger.info("Added event %s (%s)", stored.id, stored.title)
            return stored

    def _next_id(self) -> str:
        event_id = self._id_generator()
        if event_id in self._ids:
            raise PersistError(f"Duplicate event id {event_id}")
        return event_id

    def clear_error(self) -> None:
        if self._state.error is not None:
            self._set_state(error=None)

    def close(self) -> None:
        """Detach listeners; a pending create completes without writing."""
        self._closed = True
        self._listeners.clear()
