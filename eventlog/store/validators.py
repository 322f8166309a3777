"""
EventLog Store — Input Validation
===================================
Boundary checks for every store operation.

Pure functions: value in → value out, or a typed error raised.
No side effects. Nothing here reads or writes store state.
"""

from __future__ import annotations

from typing import Any

from eventlog.config.settings import StoreConfig
from eventlog.identity import is_zero_identity
from eventlog.store.errors import InvalidInput, Unauthorized


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_caller(caller: Any) -> str:
    """An authenticated, non-zero identity is required for every mutation."""
    if not isinstance(caller, str) or is_zero_identity(caller):
        raise Unauthorized("An authenticated caller identity is required.")
    return caller


def message_length(message: str, config: StoreConfig) -> int:
    return config.measure(message)


def validate_message(message: Any, config: StoreConfig) -> str:
    if not isinstance(message, str):
        raise InvalidInput("message must be a string.")
    if not message:
        raise InvalidInput("message must not be empty.")
    try:
        length = message_length(message, config)
    except UnicodeEncodeError as exc:
        raise InvalidInput(
            f"message cannot be encoded as {config.encoding}."
        ) from exc
    if length > config.max_message_length:
        raise InvalidInput(
            f"message is {length} {config.length_semantics} long; "
            f"limit is {config.max_message_length}."
        )
    return message


def validate_category(category: Any) -> str:
    """None is accepted as uncategorized."""
    if category is None:
        return ""
    if not isinstance(category, str):
        raise InvalidInput("category must be a string.")
    return category


def validate_timestamp(timestamp: Any) -> int:
    """Any integer is accepted. Ordering across calls is not enforced."""
    if not _is_int(timestamp):
        raise InvalidInput("timestamp must be an integer.")
    return timestamp


def validate_latest_count(n: Any) -> int:
    if not _is_int(n):
        raise InvalidInput("n must be an integer.")
    if n < 1:
        raise InvalidInput("n must be greater than zero.")
    return n


def validate_time_range(start: Any, end: Any) -> tuple[int, int]:
    if not _is_int(start) or not _is_int(end):
        raise InvalidInput("start and end must be integers.")
    if start > end:
        raise InvalidInput(f"start ({start}) is after end ({end}).")
    return start, end


def validate_new_owner(new_owner: Any, current_owner: str) -> str:
    if not isinstance(new_owner, str) or is_zero_identity(new_owner):
        raise InvalidInput("new owner must be a non-zero identity.")
    if new_owner == current_owner:
        raise InvalidInput("new owner is already the owner.")
    return new_owner
