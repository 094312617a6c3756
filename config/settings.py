"""
Events Hub - Django Settings (Infrastructure Only)
===================================================
Django is the framework container for the hub core: settings, time zone
handling and the REST framework serializers. The hub owns no database
tables and serves no URLs.
"""

import os

# ── Security ──────────────────────────────────────────────────
SECRET_KEY = os.environ.get("EVENTHUB_SECRET_KEY", "eventhub-dev-key")

DEBUG = os.environ.get("EVENTHUB_DEBUG", "false").lower() == "true"

ALLOWED_HOSTS = []

# ── Installed Apps ────────────────────────────────────────────
INSTALLED_APPS = [
    "rest_framework",
    "eventhub",
]

TIME_ZONE = os.environ.get("EVENTHUB_TIME_ZONE", "UTC")
USE_I18N = False
USE_TZ = True

# ── Events Hub ────────────────────────────────────────────────
EVENTHUB = {
    "LOGIN_LATENCY": float(os.environ.get("EVENTHUB_LOGIN_LATENCY", "1.0")),
    "LOGOUT_LATENCY": float(os.environ.get("EVENTHUB_LOGOUT_LATENCY", "0.5")),
    "CREATE_EVENT_LATENCY": float(
        os.environ.get("EVENTHUB_CREATE_EVENT_LATENCY", "0.5")
    ),
    "CALENDAR_TIME_ZONE": os.environ.get("EVENTHUB_CALENDAR_TIME_ZONE") or None,
    "SEED_MOCK_EVENTS": True,
    "MOCK_USER_ROLE": "admin",
}

# ── Logging ───────────────────────────────────────────────────
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "loggers": {
        "eventhub": {
            "handlers": ["console"],
            "level": os.environ.get("EVENTHUB_LOG_LEVEL", "INFO"),
            "propagate": True,
        },
    },
}
