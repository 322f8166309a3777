"""
EventLog Store — Errors
=========================
Every failure is typed, synchronous, and raised before any state
is touched. None are retryable: the caller must correct its input.
"""


class ErrorCode:
    """Machine-readable codes carried by every store error."""

    INVALID_INPUT = "INVALID_INPUT"
    NOT_FOUND = "NOT_FOUND"
    UNAUTHORIZED = "UNAUTHORIZED"


class EventStoreError(Exception):
    """Base error for all store operations."""

    code = "EVENT_STORE_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.retryable = False


class InvalidInput(EventStoreError):
    """Empty/oversized message, zero count, inverted range, bad new owner."""

    code = ErrorCode.INVALID_INPUT


class NotFound(EventStoreError):
    """Referenced event id is outside the log."""

    code = ErrorCode.NOT_FOUND

    def __init__(self, event_id):
        self.event_id = event_id
        super().__init__(f"Event {event_id} does not exist.")


class Unauthorized(EventStoreError):
    """Caller is not the required submitter or owner."""

    code = ErrorCode.UNAUTHORIZED
