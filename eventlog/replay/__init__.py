"""
EventLog Replay — Public API
==============================
The journal remembers. Replay reconstructs.
"""

from eventlog.replay.errors import ReplayError, ReplayJournalInconsistentError
from eventlog.replay.journal import NotificationJournal
from eventlog.replay.rebuilder import rebuild_store

__all__ = [
    "NotificationJournal",
    "ReplayError",
    "ReplayJournalInconsistentError",
    "rebuild_store",
]
