"""Hub settings.

Values come from the ``EVENTHUB`` dict of the Django settings module and
fall back to the defaults below. Latencies are in seconds and reproduce
the timers of the mock backend.
"""

from django.conf import settings

DEFAULTS = {
    "LOGIN_LATENCY": 1.0,
    "LOGOUT_LATENCY": 0.5,
    "CREATE_EVENT_LATENCY": 0.5,
    # None means settings.TIME_ZONE
    "CALENDAR_TIME_ZONE": None,
    "SEED_MOCK_EVENTS": True,
    "MOCK_USER_ROLE": "admin",
}


def hub_settings() -> dict:
    """Return the effective hub settings."""
    overrides = getattr(settings, "EVENTHUB", {}) or {}
    unknown = set(overrides) - set(DEFAULTS)
    if unknown:
        raise KeyError(f"Unknown EVENTHUB settings: {', '.join(sorted(unknown))}")
    return {**DEFAULTS, **overrides}

