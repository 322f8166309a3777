"""
EventLog Store — Public API
=============================
"""

from eventlog.store.errors import (
    ErrorCode,
    EventStoreError,
    InvalidInput,
    NotFound,
    Unauthorized,
)
from eventlog.store.models import LoggedEvent, StoreStats
from eventlog.events.notifications import (
    ALL_NOTIFICATION_TYPES,
    EVENT_LOGGED,
    EVENT_UPDATED,
    OWNERSHIP_TRANSFERRED,
    EventLogged,
    EventStatusUpdated,
    OwnershipTransferred,
)
from eventlog.store.store import EventStore

__all__ = [
    "EventStore",
    "LoggedEvent",
    "StoreStats",
    "ErrorCode",
    "EventStoreError",
    "InvalidInput",
    "NotFound",
    "Unauthorized",
    "ALL_NOTIFICATION_TYPES",
    "EVENT_LOGGED",
    "EVENT_UPDATED",
    "OWNERSHIP_TRANSFERRED",
    "EventLogged",
    "EventStatusUpdated",
    "OwnershipTransferred",
]
