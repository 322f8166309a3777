"""
EventLog Notification Bus — Public API
========================================
The store records truth. The bus announces it.
Truth must exist before it is heard.
"""

from eventlog.events.bus import DeliveryFailure, DeliveryReport, NotificationBus
from eventlog.events.errors import (
    DuplicateSubscription,
    NotificationBusError,
    UnknownNotificationType,
)
from eventlog.events.notifications import (
    ALL_NOTIFICATION_TYPES,
    EVENT_LOGGED,
    EVENT_UPDATED,
    NOTIFICATION_CLASSES,
    OWNERSHIP_TRANSFERRED,
    EventLogged,
    EventStatusUpdated,
    Notification,
    OwnershipTransferred,
)

__all__ = [
    "NotificationBus",
    "DeliveryReport",
    "DeliveryFailure",
    "NotificationBusError",
    "UnknownNotificationType",
    "DuplicateSubscription",
    "Notification",
    "NOTIFICATION_CLASSES",
    "ALL_NOTIFICATION_TYPES",
    "EVENT_LOGGED",
    "EVENT_UPDATED",
    "OWNERSHIP_TRANSFERRED",
    "EventLogged",
    "EventStatusUpdated",
    "OwnershipTransferred",
]
