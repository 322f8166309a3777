"""
EventLog Replay — Errors
==========================
"""


class ReplayError(Exception):
    """Base error for replay operations."""

    def __init__(self, message: str, position: int = -1):
        super().__init__(message)
        self.position = position


class ReplayJournalInconsistentError(ReplayError):
    """Journal does not describe a history the store could have produced."""
    pass
