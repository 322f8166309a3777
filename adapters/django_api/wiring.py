"""
EventLog Django Adapter Wiring
==============================
Constructs HttpApiDependencies for the Django runtime.

This module is adapter-only glue:
- one store per process, created lazily from settings.EVENTLOG
- a NotificationJournal attached to the store's notifications
- no store logic lives here
"""

from __future__ import annotations

import logging
import threading
from typing import Any

from django.conf import settings

from eventlog.config import load_store_config
from eventlog.events.bus import NotificationBus
from eventlog.http_api.auth import AuthPrincipal, InMemoryAuthProvider
from eventlog.identity import normalize_identity
from eventlog.http_api.dependencies import HttpApiDependencies
from eventlog.replay.journal import NotificationJournal
from eventlog.store.store import EventStore
from eventlog.time.clock import SystemClock

logger = logging.getLogger("eventlog.http")

DEV_OWNER_API_KEY = "dev-owner-key"
DEV_USER_API_KEY = "dev-user-key"

DEV_OWNER_IDENTITY = "dev-owner"
DEV_USER_IDENTITY = "dev-user"

_DEFAULT_API_KEYS = {
    DEV_OWNER_API_KEY: DEV_OWNER_IDENTITY,
    DEV_USER_API_KEY: DEV_USER_IDENTITY,
}

_DEPENDENCIES_LOCK = threading.Lock()
_DEPENDENCIES: HttpApiDependencies | None = None
_JOURNAL: NotificationJournal | None = None


def _eventlog_settings() -> dict[str, Any]:
    return dict(getattr(settings, "EVENTLOG", {}) or {})


def _build_auth_provider(api_keys: dict[str, str]) -> InMemoryAuthProvider:
    return InMemoryAuthProvider(
        {
            api_key: AuthPrincipal(identity=normalize_identity(identity), label=identity)
            for api_key, identity in api_keys.items()
        }
    )


def _create_dependencies() -> tuple[HttpApiDependencies, NotificationJournal]:
    values = _eventlog_settings()
    owner = normalize_identity(values.get("OWNER", DEV_OWNER_IDENTITY))
    api_keys = values.get("API_KEYS") or _DEFAULT_API_KEYS

    bus = NotificationBus()
    journal = NotificationJournal()
    journal.attach(bus)

    store = EventStore(
        owner,
        config=load_store_config(values),
        bus=bus,
    )
    logger.info(f"Event store wired (owner: {owner}, api keys: {len(api_keys)})")

    dependencies = HttpApiDependencies(
        store=store,
        clock=SystemClock(),
        auth_provider=_build_auth_provider(api_keys),
    )
    return dependencies, journal


def build_dependencies() -> HttpApiDependencies:
    """
    Lazy singleton wiring for adapter runtime.
    """
    global _DEPENDENCIES, _JOURNAL
    with _DEPENDENCIES_LOCK:
        if _DEPENDENCIES is None:
            _DEPENDENCIES, _JOURNAL = _create_dependencies()
        return _DEPENDENCIES


def get_journal() -> NotificationJournal:
    build_dependencies()
    return _JOURNAL


def reset_dependencies() -> None:
    """Drop the process store so the next request builds a fresh one."""
    global _DEPENDENCIES, _JOURNAL
    with _DEPENDENCIES_LOCK:
        _DEPENDENCIES = None
        _JOURNAL = None
