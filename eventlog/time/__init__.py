"""
EventLog Time — Public API
============================
"""

from eventlog.time.clock import FixedClock, LogicalClock, SystemClock

__all__ = [
    "LogicalClock",
    "SystemClock",
    "FixedClock",
]
