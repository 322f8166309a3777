"""
EventLog Store — Record Model
===============================
A LoggedEvent is immutable except for its is_active flag.

The store holds one frozen snapshot per id. Toggling replaces the
snapshot with a copy whose flag differs, so callers only ever hold
read-only records.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class LoggedEvent:
    """
    One logged message.

    Fields:
        id:        Sequential position in the log, starting at 0.
        submitter: Identity of the caller who appended it.
        message:   Non-empty text within the configured length limit.
        category:  Free-text tag; empty string means uncategorized.
        timestamp: Logical time supplied by the host at append.
        is_active: Soft-deactivation flag, toggled by the submitter only.
    """

    id: int
    submitter: str
    message: str
    category: str
    timestamp: int
    is_active: bool = True

    def with_status(self, is_active: bool) -> LoggedEvent:
        return replace(self, is_active=is_active)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "submitter": self.submitter,
            "message": self.message,
            "category": self.category,
            "timestamp": self.timestamp,
            "is_active": self.is_active,
        }


@dataclass(frozen=True)
class StoreStats:
    """Aggregate view over the whole log."""

    total: int
    active: int
    owner: str

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "active": self.active,
            "owner": self.owner,
        }
