"""
EventLog Store — EventStore
=============================
Append-only log of LoggedEvent records with two derived indexes:

    by_user:     submitter → ids in creation order
    by_category: category  → ids in creation order (non-empty only)

RULES (NON-NEGOTIABLE):
- ids are dense, sequential, start at 0, never reused
- records are never removed; is_active is the only mutable attribute
- every mutation validates first, then applies all of its changes
- owner is never the zero identity

Writes and reads share one re-entrant lock per instance, so a query
never observes a half-applied mutation. Each mutation queues its
notification; the outermost mutation drains the queue, still inside
the lock. A subscriber that writes to the store therefore has its
notification delivered after the one it is reacting to, and every
subscriber sees notifications in commit order.
"""

from __future__ import annotations

import logging
from collections import deque
from threading import RLock
from typing import Any, Optional

from eventlog.config.settings import StoreConfig
from eventlog.events.bus import NotificationBus
from eventlog.events.notifications import (
    EventLogged,
    EventStatusUpdated,
    Notification,
    OwnershipTransferred,
)
from eventlog.identity import is_zero_identity
from eventlog.store.errors import InvalidInput, NotFound, Unauthorized
from eventlog.store.models import LoggedEvent, StoreStats
from eventlog.store.validators import (
    validate_caller,
    validate_category,
    validate_latest_count,
    validate_message,
    validate_new_owner,
    validate_time_range,
    validate_timestamp,
)

logger = logging.getLogger("eventlog.store")


class EventStore:
    """
    One explicitly constructed log. No process-wide state:
    independent instances never share records or indexes.
    """

    def __init__(
        self,
        owner: str,
        *,
        config: Optional[StoreConfig] = None,
        bus: Optional[NotificationBus] = None,
    ):
        if not isinstance(owner, str) or is_zero_identity(owner):
            raise InvalidInput("owner must be a non-zero identity.")

        self._owner = owner
        self._config = config or StoreConfig()
        self._bus = bus
        self._pending: deque[Notification] = deque()
        self._draining = False
        self._log: list[LoggedEvent] = []
        self._by_user: dict[str, list[int]] = {}
        self._by_category: dict[str, list[int]] = {}
        self._lock = RLock()

    # ── Properties ────────────────────────────────────────────

    @property
    def count(self) -> int:
        with self._lock:
            return len(self._log)

    @property
    def owner(self) -> str:
        with self._lock:
            return self._owner

    @property
    def config(self) -> StoreConfig:
        return self._config

    def __len__(self) -> int:
        return self.count

    # ── Internals ─────────────────────────────────────────────

    def _emit(self, notification: Notification) -> None:
        """Queue, then deliver unless an outer call is already delivering."""
        if self._bus is None:
            return
        self._pending.append(notification)
        if self._draining:
            return
        self._draining = True
        try:
            while self._pending:
                self._bus.publish(self._pending.popleft())
        finally:
            self._draining = False

    def _in_range(self, event_id: Any) -> bool:
        return (
            isinstance(event_id, int)
            and not isinstance(event_id, bool)
            and 0 <= event_id < len(self._log)
        )

    def _require(self, event_id: Any) -> LoggedEvent:
        if not self._in_range(event_id):
            raise NotFound(event_id)
        return self._log[event_id]

    # ══════════════════════════════════════════════════════════
    # MUTATIONS
    # ══════════════════════════════════════════════════════════

    def append(
        self,
        caller: str,
        message: str,
        category: str,
        timestamp: int,
    ) -> int:
        """
        Append a new record and index it. Returns the assigned id.

        Raises:
            Unauthorized: caller is the zero identity
            InvalidInput: empty or oversized message, bad category/timestamp
        """
        caller = validate_caller(caller)
        message = validate_message(message, self._config)
        category = validate_category(category)
        timestamp = validate_timestamp(timestamp)

        with self._lock:
            event_id = len(self._log)
            self._log.append(
                LoggedEvent(
                    id=event_id,
                    submitter=caller,
                    message=message,
                    category=category,
                    timestamp=timestamp,
                )
            )
            self._by_user.setdefault(caller, []).append(event_id)
            if category:
                self._by_category.setdefault(category, []).append(event_id)

            logger.info(
                f"Event {event_id} logged by {caller} "
                f"(category: {category or '-'}, timestamp: {timestamp})"
            )
            self._emit(
                EventLogged(
                    event_id=event_id,
                    submitter=caller,
                    message=message,
                    category=category,
                    timestamp=timestamp,
                )
            )
            return event_id

    def toggle_status(self, caller: str, event_id: int) -> bool:
        """
        Flip is_active on a record. Only its submitter may do so.
        Returns the new value.
        """
        with self._lock:
            record = self._require(event_id)
            if caller != record.submitter:
                logger.warning(
                    f"Status toggle on event {event_id} rejected: "
                    f"{caller!r} is not the submitter"
                )
                raise Unauthorized(
                    f"Only the submitter of event {event_id} may toggle its status."
                )

            updated = record.with_status(not record.is_active)
            self._log[event_id] = updated

            logger.info(
                f"Event {event_id} is_active → {updated.is_active} (by {caller})"
            )
            self._emit(
                EventStatusUpdated(
                    event_id=event_id,
                    caller=caller,
                    is_active=updated.is_active,
                )
            )
            return updated.is_active

    def transfer_ownership(self, caller: str, new_owner: str) -> None:
        with self._lock:
            if caller != self._owner:
                logger.warning(
                    f"Ownership transfer rejected: {caller!r} is not the owner"
                )
                raise Unauthorized("Only the owner may transfer ownership.")
            new_owner = validate_new_owner(new_owner, self._owner)

            previous = self._owner
            self._owner = new_owner

            logger.info(f"Ownership transferred: {previous} → {new_owner}")
            self._emit(
                OwnershipTransferred(previous_owner=previous, new_owner=new_owner)
            )

    # ══════════════════════════════════════════════════════════
    # POINT LOOKUPS
    # ══════════════════════════════════════════════════════════

    def get(self, event_id: int) -> LoggedEvent:
        with self._lock:
            return self._require(event_id)

    def is_active(self, event_id: int) -> bool:
        """Out-of-range ids report inactive rather than raising."""
        with self._lock:
            if not self._in_range(event_id):
                return False
            return self._log[event_id].is_active

    # ══════════════════════════════════════════════════════════
    # INDEX QUERIES
    # ══════════════════════════════════════════════════════════

    def events_by_user(self, user: str) -> tuple[int, ...]:
        with self._lock:
            return tuple(self._by_user.get(user, ()))

    def events_by_category(self, category: str) -> tuple[int, ...]:
        with self._lock:
            return tuple(self._by_category.get(category, ()))

    def count_by_user(self, user: str) -> int:
        with self._lock:
            return len(self._by_user.get(user, ()))

    def count_by_category(self, category: str) -> int:
        with self._lock:
            return len(self._by_category.get(category, ()))

    # ══════════════════════════════════════════════════════════
    # SCANS
    # ══════════════════════════════════════════════════════════

    def latest(self, n: int) -> tuple[int, ...]:
        """Up to n most recent ids, newest first."""
        n = validate_latest_count(n)
        with self._lock:
            count = len(self._log)
            k = min(n, count)
            return tuple(range(count - 1, count - 1 - k, -1))

    def by_time_range(self, start: int, end: int) -> tuple[int, ...]:
        """
        Ids whose timestamp lies in [start, end], ascending.

        Linear scan: timestamps are host-supplied and not guaranteed
        monotonic, so no sorted time index can exist.
        """
        start, end = validate_time_range(start, end)
        with self._lock:
            return tuple(
                record.id
                for record in self._log
                if start <= record.timestamp <= end
            )

    def stats(self) -> StoreStats:
        with self._lock:
            active = sum(1 for record in self._log if record.is_active)
            return StoreStats(
                total=len(self._log),
                active=active,
                owner=self._owner,
            )
