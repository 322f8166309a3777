"""
EventLog – Django Settings (Infrastructure Only)
=================================================
Django serves as the HTTP container for the event log.
The store is the authority. Django does not dictate structure.

The store is in-memory and process-local; no database is configured.
"""

import os
from pathlib import Path

# ── Paths ─────────────────────────────────────────────────────
BASE_DIR = Path(__file__).resolve().parent.parent

# ── Security ──────────────────────────────────────────────────
SECRET_KEY = os.environ.get(
    "EVENTLOG_SECRET_KEY", "eventlog-dev-key-replace-before-deployment"
)

DEBUG = os.environ.get("EVENTLOG_DEBUG", "1") == "1"

ALLOWED_HOSTS = ["localhost", "127.0.0.1"]

# ── Installed Apps ────────────────────────────────────────────
INSTALLED_APPS = []

# ── Middleware ────────────────────────────────────────────────
MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

# ── URL & WSGI ────────────────────────────────────────────────
ROOT_URLCONF = "config.urls"
WSGI_APPLICATION = "config.wsgi.application"

# ── Database ──────────────────────────────────────────────────
# The event store keeps its state in process memory.
DATABASES = {}

# ── Internationalization ──────────────────────────────────────
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = False
USE_TZ = True

# ── Event Log ─────────────────────────────────────────────────
# OWNER:    identity that owns the process store at startup
# API_KEYS: X-API-KEY value → caller identity
EVENTLOG = {
    "OWNER": os.environ.get("EVENTLOG_OWNER", "dev-owner"),
    "API_KEYS": {
        "dev-owner-key": "dev-owner",
        "dev-user-key": "dev-user",
    },
    "max_message_length": 500,
    "length_semantics": "bytes",
    "encoding": "utf-8",
}

# ── Logging ───────────────────────────────────────────────────
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "plain"},
    },
    "loggers": {
        "eventlog": {
            "handlers": ["console"],
            "level": os.environ.get("EVENTLOG_LOG_LEVEL", "INFO"),
        },
    },
}
