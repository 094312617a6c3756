"""Unit tests for calendar-day normalization.

Run with: pytest tests/test_calendar.py -v
"""

from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

from eventhub.domain.calendar import (
    calendar_day,
    canonical_timezone,
    day_key,
    format_long_date,
)

NEW_YORK = ZoneInfo("America/New_York")


class TestCalendarDay:
    """Tests for calendar_day."""

    def test_plain_date_is_unchanged(self):
        """A date is already a calendar day."""
        assert calendar_day(date(2026, 10, 20), NEW_YORK) == date(2026, 10, 20)

    def test_aware_instant_uses_given_zone(self):
        """The same instant falls on different days in different zones."""
        instant = datetime(2026, 10, 20, 3, 0, tzinfo=timezone.utc)
        assert calendar_day(instant, timezone.utc) == date(2026, 10, 20)
        assert calendar_day(instant, NEW_YORK) == date(2026, 10, 19)

    def test_naive_datetime_is_wall_clock_in_zone(self):
        """A naive datetime is read as local time of the canonical zone."""
        assert calendar_day(datetime(2026, 10, 19, 23, 30), NEW_YORK) == date(2026, 10, 19)

    def test_day_key_is_iso(self):
        """day_key renders YYYY-MM-DD."""
        instant = datetime(2026, 1, 5, 12, 0, tzinfo=timezone.utc)
        assert day_key(instant, timezone.utc) == "2026-01-05"


class TestCanonicalTimezone:
    """Tests for canonical_timezone."""

    def test_defaults_to_project_time_zone(self, settings):
        """Without an override the project TIME_ZONE is used."""
        settings.TIME_ZONE = "UTC"
        settings.EVENTHUB = {}
        assert canonical_timezone() == ZoneInfo("UTC")

    def test_hub_override_wins(self, settings):
        """CALENDAR_TIME_ZONE overrides TIME_ZONE."""
        settings.EVENTHUB = {"CALENDAR_TIME_ZONE": "Asia/Shanghai"}
        assert canonical_timezone() == ZoneInfo("Asia/Shanghai")


class TestFormatLongDate:
    """Tests for format_long_date."""

    def test_ordinal_suffixes(self):
        """Days get st, nd, rd and th suffixes."""
        assert format_long_date(date(2026, 10, 1)) == "October 1st, 2026"
        assert format_long_date(date(2026, 10, 2)) == "October 2nd, 2026"
        assert format_long_date(date(2026, 10, 3)) == "October 3rd, 2026"
        assert format_long_date(date(2026, 10, 20)) == "October 20th, 2026"

    def test_teens_use_th(self):
        """11th, 12th and 13th are irregular."""
        assert format_long_date(date(2026, 10, 11)) == "October 11th, 2026"
        assert format_long_date(date(2026, 10, 13)) == "October 13th, 2026"
