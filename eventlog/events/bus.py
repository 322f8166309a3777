"""
EventLog Notification Bus — Bus
=================================
Fans each committed store notification out to its subscribers.

The bus knows exactly three notification classes (EventLogged,
EventStatusUpdated, OwnershipTransferred). Subscriptions are keyed
on the class, so there are no strings to mistype.

Publishing:
- handlers run in subscription order
- a failing handler is logged and skipped, the rest still run
- publish() never raises and never undoes the store mutation
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from threading import Lock
from typing import Callable

from eventlog.events.errors import (
    DuplicateSubscription,
    NotificationBusError,
    UnknownNotificationType,
)
from eventlog.events.notifications import NOTIFICATION_CLASSES, Notification

logger = logging.getLogger("eventlog.events")

Handler = Callable[[Notification], None]


@dataclass(frozen=True)
class DeliveryFailure:
    handler: str
    error_type: str
    error: str


@dataclass(frozen=True)
class DeliveryReport:
    event_type: str
    delivered: int
    failures: tuple[DeliveryFailure, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.failures


def _name_of(handler: Handler) -> str:
    return getattr(handler, "__qualname__", type(handler).__name__)


class NotificationBus:
    """Thread-safe subscription table plus best-effort fan-out."""

    def __init__(self):
        self._handlers: dict[type, list[Handler]] = {
            cls: [] for cls in NOTIFICATION_CLASSES
        }
        self._lock = Lock()

    def subscribe(self, handler: Handler, *notification_types: type) -> None:
        """
        Subscribe handler to the given notification classes,
        or to all of them when none are named.

        Raises:
            NotificationBusError:    handler is not callable
            UnknownNotificationType: a class the store never publishes
            DuplicateSubscription:   handler already receives that class
        """
        if not callable(handler):
            raise NotificationBusError(
                f"Handler must be callable, got {type(handler).__name__}."
            )
        types = notification_types or NOTIFICATION_CLASSES
        for cls in types:
            if cls not in self._handlers:
                raise UnknownNotificationType(cls)

        with self._lock:
            # all-or-nothing: check every class before adding to any
            for cls in types:
                if handler in self._handlers[cls]:
                    raise DuplicateSubscription(cls, _name_of(handler))
            for cls in types:
                self._handlers[cls].append(handler)

        logger.info(
            f"{_name_of(handler)} subscribed to "
            f"{', '.join(cls.__name__ for cls in types)}"
        )

    def unsubscribe(self, handler: Handler) -> int:
        """Remove handler everywhere. Returns how many subscriptions went."""
        removed = 0
        with self._lock:
            for handlers in self._handlers.values():
                if handler in handlers:
                    handlers.remove(handler)
                    removed += 1
        return removed

    def handlers_for(self, notification_type: type) -> tuple[Handler, ...]:
        with self._lock:
            return tuple(self._handlers.get(notification_type, ()))

    def publish(self, notification: Notification) -> DeliveryReport:
        handlers = self.handlers_for(type(notification))
        failures = []

        for handler in handlers:
            try:
                handler(notification)
            except Exception as exc:
                failures.append(
                    DeliveryFailure(
                        handler=_name_of(handler),
                        error_type=type(exc).__name__,
                        error=str(exc),
                    )
                )
                logger.error(
                    f"Handler {_name_of(handler)} failed on "
                    f"{notification.event_type}: {exc}",
                    exc_info=True,
                )

        report = DeliveryReport(
            event_type=notification.event_type,
            delivered=len(handlers) - len(failures),
            failures=tuple(failures),
        )
        logger.debug(
            f"{report.event_type}: {report.delivered} delivered, "
            f"{len(report.failures)} failed"
        )
        return report
