"""
EventLog Identity — Opaque Caller Identities
==============================================
An identity is an opaque string supplied by the host after it has
authenticated the caller. The store only ever compares identities
for equality; it never parses, verifies, or issues them.

The zero identity stands for "nobody". It may never submit events
and may never own the store.
"""

from __future__ import annotations

import re
from typing import Any, Optional

ZERO_IDENTITY = ""

_ZERO_ADDRESS = re.compile(r"^0x0+$", re.IGNORECASE)


def normalize_identity(value: Any) -> str:
    """Strip surrounding whitespace. None becomes the zero identity."""
    if value is None:
        return ZERO_IDENTITY
    if not isinstance(value, str):
        raise ValueError(f"identity must be a string, got {type(value).__name__}.")
    return value.strip()


def is_zero_identity(value: Optional[str]) -> bool:
    """
    True for None, empty/whitespace strings, and all-zero hex addresses
    such as '0x0000000000000000000000000000000000000000'.
    """
    if value is None:
        return True
    if not isinstance(value, str):
        return False
    stripped = value.strip()
    if not stripped:
        return True
    return bool(_ZERO_ADDRESS.match(stripped))
