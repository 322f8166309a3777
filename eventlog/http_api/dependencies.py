"""
EventLog HTTP API - Dependencies
================================
Injected collaborators for handler wiring.
"""

from __future__ import annotations

from dataclasses import dataclass

from eventlog.http_api.auth.provider import AuthProvider
from eventlog.store.store import EventStore
from eventlog.time.clock import LogicalClock


@dataclass(frozen=True)
class HttpApiDependencies:
    store: EventStore
    clock: LogicalClock
    auth_provider: AuthProvider
