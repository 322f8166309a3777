"""
EventLog Replay — Notification Journal
========================================
A subscriber that keeps every notification it hears, in order.

The journal is the replayable history of a store: feed it to
rebuild_store() and the same state comes back.
"""

from __future__ import annotations

import logging
from threading import Lock

from eventlog.events.bus import NotificationBus
from eventlog.events.notifications import NOTIFICATION_CLASSES, Notification

logger = logging.getLogger("eventlog.replay")


class NotificationJournal:
    """In-memory, thread-safe, append-only notification record."""

    def __init__(self):
        self._entries: list[Notification] = []
        self._lock = Lock()

    def record(self, notification: Notification) -> None:
        with self._lock:
            self._entries.append(notification)

    def attach(self, bus: NotificationBus) -> None:
        """Subscribe to every store notification class."""
        bus.subscribe(self.record)
        logger.info(
            f"Journal attached to {len(NOTIFICATION_CLASSES)} notification types"
        )

    def entries(self) -> tuple:
        with self._lock:
            return tuple(self._entries)

    def to_dicts(self) -> list[dict]:
        return [entry.to_dict() for entry in self.entries()]

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
