"""Django settings for the guestlist client library.

Values come from the environment; a local .env file is loaded first.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

DATA_DIR = Path(os.getenv("GUESTLIST_DATA_DIR", Path.home() / ".guestlist"))

SECRET_KEY = os.getenv("GUESTLIST_SECRET_KEY", "guestlist-local-only")

DEBUG = os.getenv("GUESTLIST_DEBUG", "false").lower() in ("1", "true", "yes")

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "guestlist.apps.GuestlistConfig",
]

# No local database: events live on the backend, preferences in the cache.
DATABASES = {}

USE_TZ = True
TIME_ZONE = os.getenv("GUESTLIST_TIME_ZONE", "UTC")

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
    },
    "preferences": {
        "BACKEND": "django.core.cache.backends.filebased.FileBasedCache",
        "LOCATION": str(DATA_DIR / "preferences"),
        "TIMEOUT": None,
        "KEY_PREFIX": "guestlist",
    },
}

_timeout = os.getenv("GUESTLIST_REQUEST_TIMEOUT")

GUESTLIST = {
    "SUPABASE_URL": os.getenv("GUESTLIST_SUPABASE_URL", ""),
    "SUPABASE_KEY": os.getenv("GUESTLIST_SUPABASE_KEY", ""),
    "EVENTS_TABLE": os.getenv("GUESTLIST_EVENTS_TABLE", "events"),
    "GUESTS_TABLE": os.getenv("GUESTLIST_GUESTS_TABLE", "guests"),
    "REQUEST_TIMEOUT": float(_timeout) if _timeout else None,
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "console": {
            "format": "[%(asctime)s] %(levelname)-8s %(name)s: %(message)s",
            "datefmt": "%d.%m.%Y %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "console",
        },
    },
    "loggers": {
        "guestlist": {
            "handlers": ["console"],
            "level": os.getenv("GUESTLIST_LOG_LEVEL", "INFO").upper(),
            "propagate": False,
        },
    },
}
