"""Calendar-day normalization.

Event dates and query dates are compared as calendar days in one canonical
zone, never as instants and never in the ambient local zone.
"""

from datetime import date, datetime, tzinfo
from zoneinfo import ZoneInfo

from django.conf import settings
from django.utils import dateformat, timezone

from eventhub.conf import hub_settings


def canonical_timezone() -> tzinfo:
    """Return the zone used for every calendar-day comparison."""
    name = hub_settings()["CALENDAR_TIME_ZONE"] or settings.TIME_ZONE
    return ZoneInfo(name)


def calendar_day(value: date | datetime, tz: tzinfo | None = None) -> date:
    """
    Normalize a date or instant to its calendar day in the canonical zone.

    A plain ``date`` is already a calendar day. A naive datetime is read as
    wall-clock time in the canonical zone.
    """
    if tz is None:
        tz = canonical_timezone()
    if not isinstance(value, datetime):
        return value
    if timezone.is_naive(value):
        value = timezone.make_aware(value, tz)
    return timezone.localdate(value, timezone=tz)


def day_key(value: date | datetime, tz: tzinfo | None = None) -> str:
    """ISO ``YYYY-MM-DD`` key of the calendar day."""
    return calendar_day(value, tz).isoformat()


def format_long_date(day: date) -> str:
    """Format a day like ``October 20th, 2026``."""
    return dateformat.format(day, "F jS, Y")
