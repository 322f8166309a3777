"""
EventLog Notification Bus — Notifications
=========================================
Side-channel announcements emitted after a mutation commits.
Delivery is best-effort. Nothing in the store depends on it.

Event types follow engine.domain.action.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

EVENT_LOGGED = "eventlog.event.logged"
EVENT_UPDATED = "eventlog.event.updated"
OWNERSHIP_TRANSFERRED = "eventlog.owner.transferred"

ALL_NOTIFICATION_TYPES = (
    EVENT_LOGGED,
    EVENT_UPDATED,
    OWNERSHIP_TRANSFERRED,
)


@dataclass(frozen=True)
class EventLogged:
    event_type: ClassVar[str] = EVENT_LOGGED

    event_id: int
    submitter: str
    message: str
    category: str
    timestamp: int

    def to_dict(self) -> dict:
        return {
            "event_type": self.event_type,
            "event_id": self.event_id,
            "submitter": self.submitter,
            "message": self.message,
            "category": self.category,
            "timestamp": self.timestamp,
        }


@dataclass(frozen=True)
class EventStatusUpdated:
    event_type: ClassVar[str] = EVENT_UPDATED

    event_id: int
    caller: str
    is_active: bool

    def to_dict(self) -> dict:
        return {
            "event_type": self.event_type,
            "event_id": self.event_id,
            "caller": self.caller,
            "is_active": self.is_active,
        }


@dataclass(frozen=True)
class OwnershipTransferred:
    event_type: ClassVar[str] = OWNERSHIP_TRANSFERRED

    previous_owner: str
    new_owner: str

    def to_dict(self) -> dict:
        return {
            "event_type": self.event_type,
            "previous_owner": self.previous_owner,
            "new_owner": self.new_owner,
        }


Notification = EventLogged | EventStatusUpdated | OwnershipTransferred

NOTIFICATION_CLASSES = (EventLogged, EventStatusUpdated, OwnershipTransferred)
