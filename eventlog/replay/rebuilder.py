"""
EventLog Replay — Store Rebuilder
===================================
Rebuilds an EventStore from a notification journal.

Replay doctrine:
- Replay through the store's public operations (same path as live calls)
- No bus on the rebuilt store: replay never re-announces history
- Deterministic: journal order is the only order
- Any inconsistency aborts the rebuild with ReplayError
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from eventlog.config.settings import StoreConfig
from eventlog.store.errors import EventStoreError
from eventlog.events.notifications import (
    EventLogged,
    EventStatusUpdated,
    OwnershipTransferred,
)
from eventlog.store.store import EventStore
from eventlog.replay.errors import ReplayError, ReplayJournalInconsistentError

logger = logging.getLogger("eventlog.replay")


def _apply(store: EventStore, notification, position: int) -> None:
    if isinstance(notification, EventLogged):
        assigned = store.append(
            notification.submitter,
            notification.message,
            notification.category,
            notification.timestamp,
        )
        if assigned != notification.event_id:
            raise ReplayJournalInconsistentError(
                f"Journal entry {position} logged event "
                f"{notification.event_id}, replay assigned {assigned}.",
                position=position,
            )

    elif isinstance(notification, EventStatusUpdated):
        is_active = store.toggle_status(notification.caller, notification.event_id)
        if is_active != notification.is_active:
            raise ReplayJournalInconsistentError(
                f"Journal entry {position} set event {notification.event_id} "
                f"is_active={notification.is_active}, replay produced {is_active}.",
                position=position,
            )

    elif isinstance(notification, OwnershipTransferred):
        store.transfer_ownership(notification.previous_owner, notification.new_owner)

    else:
        raise ReplayError(
            f"Journal entry {position} is not a store notification: "
            f"{type(notification).__name__}.",
            position=position,
        )


def rebuild_store(
    notifications: Iterable,
    initial_owner: str,
    *,
    config: Optional[StoreConfig] = None,
) -> EventStore:
    """
    Replay notifications, in order, into a fresh store.

    Args:
        notifications: Journal entries (EventLogged, EventStatusUpdated,
                       OwnershipTransferred).
        initial_owner: Owner the original store was constructed with.
        config:        Must match the original store's config.

    Raises:
        ReplayError: unknown entry, or a store error during replay.
        ReplayJournalInconsistentError: entry disagrees with replayed state.
    """
    store = EventStore(initial_owner, config=config)

    position = -1
    for position, notification in enumerate(notifications):
        try:
            _apply(store, notification, position)
        except EventStoreError as exc:
            raise ReplayError(
                f"Journal entry {position} rejected by store: "
                f"[{exc.code}] {exc.message}",
                position=position,
            ) from exc

    logger.info(
        f"Replay complete: {position + 1} entries → "
        f"{store.count} events, owner {store.owner}"
    )
    return store
