"""Pure mapping from hub snapshots to what the page shows."""

from collections.abc import Iterable
from dataclasses import dataclass

from eventhub.domain import Event, EventStoreState, HubState, Mode, SessionState
from eventhub.domain.calendar import format_long_date

UPCOMING_HEADING = "Upcoming Events"
NO_EVENTS_MESSAGE = "No events found for this date."


@dataclass(frozen=True)
class ViewModel:
    """Everything the presentation layer needs to render the page."""

    user_label: str | None
    can_toggle_mode: bool
    mode_button_label: str | None
    auth_button_label: str
    controls_disabled: bool
    can_add_event: bool
    composer_open: bool
    submit_button_label: str
    heading: str
    events: tuple[Event, ...]
    empty_message: str | None
    error: str | None


def _auth_button_label(session: SessionState) -> str:
    if session.is_authenticated:
        return "Logging Out..." if session.busy else "Logout"
    return "Logging In..." if session.busy else "Login"


def build_view_model(
    session: SessionState,
    store: EventStoreState,
    hub: HubState,
    events: Iterable[Event],
) -> ViewModel:
    """Decide who may do what and how to present the listed events.

    ``events`` is the list chosen by the store for the hub's date filter.
    """
    user = session.user
    events = tuple(events)

    mode_button_label = None
    if session.is_admin:
        mode_button_label = "Admin Mode" if session.mode is Mode.MEMBER else "Member Mode"

    if hub.selected_date is None:
        heading = UPCOMING_HEADING
        empty_message = None
    else:
        heading = f"Events on {format_long_date(hub.selected_date)}"
        empty_message = None if events else NO_EVENTS_MESSAGE

    can_add_event = session.can_manage_events
    return ViewModel(
        user_label=f"{user.display_name} ({user.role.value})" if user else None,
        can_toggle_mode=session.is_admin,
        mode_button_label=mode_button_label,
        auth_button_label=_auth_button_label(session),
        controls_disabled=session.busy or store.busy,
        can_add_event=can_add_event,
        composer_open=hub.composer_open and can_add_event,
        submit_button_label="Adding..." if store.busy else "Add Event",
        heading=heading,
        events=events,
        empty_message=empty_message,
        error=hub.error or store.error or session.error,
    )
