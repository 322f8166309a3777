"""
EventLog Time — Logical Clock Protocol
========================================
Doctrine: the store never reads a clock.
Every mutating call carries its timestamp as an argument.

This module provides the clock the HOST uses to stamp calls
before handing them to the store (HTTP handlers, adapters).
Logical timestamps are plain integers and are not required
to be monotonic across calls.
"""

from __future__ import annotations

import time
from typing import Protocol


# ══════════════════════════════════════════════════════════════
# CLOCK PROTOCOL
# ══════════════════════════════════════════════════════════════

class LogicalClock(Protocol):
    """Injectable source of logical timestamps."""

    def now(self) -> int:
        """Return the current logical time."""
        ...  # pragma: no cover


# ══════════════════════════════════════════════════════════════
# IMPLEMENTATIONS
# ══════════════════════════════════════════════════════════════

class SystemClock:
    """Production clock: whole UNIX seconds from the wall clock."""

    def now(self) -> int:
        return int(time.time())


class FixedClock:
    """
    Test clock. Returns a fixed logical time.

    Usage:
        clock = FixedClock(100)
        assert clock.now() == 100
        clock.advance(50)
        assert clock.now() == 150
    """

    def __init__(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError("FixedClock requires an integer value.")
        self._value = value

    def now(self) -> int:
        return self._value

    def advance(self, delta: int) -> None:
        """Move the clock by delta (negative values rewind it)."""
        self._value += delta

    def set(self, value: int) -> None:
        self._value = value
