"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from datetime import datetime

import pytest

from conftest import NOW, make_user
from eventhub.domain import Event, EventDraft, EventId, Mode, Role, SessionState
from eventhub.domain.errors import (
    AuthError,
    AuthorizationError,
    ErrorCode,
    ValidationError,
)


class TestEventId:
    """Tests for EventId value object."""

    def test_from_string_strips_whitespace(self):
        """EventId.from_string trims surrounding whitespace."""
        assert EventId.from_string("  abc-1 ").value == "abc-1"

    def test_rejects_blank_value(self):
        """EventId raises ValueError for a blank id."""
        with pytest.raises(ValueError):
            EventId("   ")

    def test_str_is_raw_value(self):
        """EventId renders as its raw value."""
        assert str(EventId("abc-1")) == "abc-1"


class TestMode:
    """Tests for Mode enum."""

    def test_flipped_swaps_modes(self):
        """flipped alternates between member and admin."""
        assert Mode.MEMBER.flipped() is Mode.ADMIN
        assert Mode.ADMIN.flipped() is Mode.MEMBER


class TestSessionState:
    """Tests for SessionState invariants."""

    def test_default_is_anonymous_member(self):
        """A fresh session is anonymous, idle and in member mode."""
        state = SessionState()
        assert state.user is None
        assert state.mode is Mode.MEMBER
        assert not state.busy
        assert not state.can_manage_events

    def test_admin_mode_requires_user(self):
        """Admin mode without a user is rejected."""
        with pytest.raises(ValueError):
            SessionState(mode=Mode.ADMIN)

    def test_admin_mode_requires_admin_role(self):
        """Admin mode for a member is rejected."""
        with pytest.raises(ValueError):
            SessionState(user=make_user(Role.MEMBER), mode=Mode.ADMIN)

    def test_can_manage_events_needs_role_and_mode(self):
        """Only an admin in admin mode may manage events."""
        admin = make_user(Role.ADMIN)
        assert not SessionState(user=admin).can_manage_events
        assert SessionState(user=admin, mode=Mode.ADMIN).can_manage_events


class TestEvent:
    """Tests for Event domain model."""

    def test_rejects_naive_date(self):
        """Event dates must be timezone-aware."""
        with pytest.raises(ValueError):
            Event(
                id=EventId("1"),
                title="Volunteer Day",
                description="desc",
                date=datetime(2026, 10, 20, 9, 0),
            )


class TestEventDraft:
    """Tests for EventDraft staging record."""

    def test_blank_draft_defaults_date_to_now(self):
        """A blank draft has empty text fields and the given date."""
        draft = EventDraft.blank(NOW)
        assert draft.title == ""
        assert draft.description == ""
        assert draft.location == ""
        assert draft.date == NOW

    def test_with_field_returns_updated_copy(self):
        """with_field leaves the original draft untouched."""
        draft = EventDraft.blank(NOW)
        updated = draft.with_field("title", "Board Meeting")
        assert updated.title == "Board Meeting"
        assert draft.title == ""


class TestDomainErrors:
    """Tests for domain error codes and messages."""

    def test_validation_error_defaults(self):
        """ValidationError carries the fill-in-all-fields message."""
        exc = ValidationError(fields=(("title", ("This field may not be blank.",)),))
        assert exc.code is ErrorCode.VALIDATION_FAILED
        assert exc.message == "Please fill in all fields."
        assert exc.field_names == ("title",)

    def test_str_includes_code(self):
        """Errors render as CODE: message."""
        assert str(AuthError("nope")) == "AUTH_FAILED: nope"

    def test_authorization_error_names_action(self):
        """AuthorizationError mentions the refused action."""
        exc = AuthorizationError("add events")
        assert exc.code is ErrorCode.NOT_AUTHORIZED
        assert "add events" in exc.message
