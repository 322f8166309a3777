"""
EventLog Identity — Public API
================================
"""

from eventlog.identity.identity import (
    ZERO_IDENTITY,
    is_zero_identity,
    normalize_identity,
)

__all__ = [
    "ZERO_IDENTITY",
    "is_zero_identity",
    "normalize_identity",
]
