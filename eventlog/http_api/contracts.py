"""
EventLog HTTP API - Contracts
=============================
Framework-agnostic request/response DTOs, one per operation.

Contracts check shape only. Domain rules (message length, range
order, ownership) belong to the store and surface as store errors.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


def _require_int(value: Any, field_name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{field_name} must be an integer.")


@dataclass(frozen=True)
class AppendEventRequest:
    message: str
    category: str = ""

    def __post_init__(self):
        if not isinstance(self.message, str):
            raise ValueError("message must be a string.")
        if not isinstance(self.category, str):
            raise ValueError("category must be a string.")


@dataclass(frozen=True)
class EventIdRequest:
    event_id: int

    def __post_init__(self):
        _require_int(self.event_id, "event_id")


@dataclass(frozen=True)
class UserQueryRequest:
    user: str

    def __post_init__(self):
        if not isinstance(self.user, str):
            raise ValueError("user must be a string.")


@dataclass(frozen=True)
class CategoryQueryRequest:
    category: str

    def __post_init__(self):
        if not isinstance(self.category, str):
            raise ValueError("category must be a string.")


@dataclass(frozen=True)
class LatestRequest:
    n: int

    def __post_init__(self):
        _require_int(self.n, "n")


@dataclass(frozen=True)
class TimeRangeRequest:
    start: int
    end: int

    def __post_init__(self):
        _require_int(self.start, "start")
        _require_int(self.end, "end")


@dataclass(frozen=True)
class TransferOwnershipRequest:
    new_owner: str

    def __post_init__(self):
        if not isinstance(self.new_owner, str):
            raise ValueError("new_owner must be a string.")


@dataclass(frozen=True)
class HttpApiErrorBody:
    code: str
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": dict(self.details),
        }


@dataclass(frozen=True)
class HttpApiResponse:
    """Success carries data, failure carries error; ok follows from which."""

    data: Any = None
    error: Optional[HttpApiErrorBody] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        if self.ok:
            return {"ok": True, "data": self.data}
        return {"ok": False, "error": self.error.to_dict()}
