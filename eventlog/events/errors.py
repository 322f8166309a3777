"""
EventLog Notification Bus — Errors
====================================
Subscription-time errors. Publishing never raises.
"""


class NotificationBusError(Exception):
    """Base error for subscription problems."""
    pass


class UnknownNotificationType(NotificationBusError):
    """Subscription names something the store never publishes."""

    def __init__(self, notification_type):
        self.notification_type = notification_type
        name = getattr(notification_type, "__name__", repr(notification_type))
        super().__init__(f"'{name}' is not a store notification type.")


class DuplicateSubscription(NotificationBusError):
    """Handler already subscribed to this notification type."""

    def __init__(self, notification_type: type, handler_name: str):
        self.notification_type = notification_type
        self.handler_name = handler_name
        super().__init__(
            f"'{handler_name}' already receives {notification_type.__name__}."
        )
