"""
EventLog HTTP API - Framework-Agnostic Handlers
===============================================
Pure handler functions over contracts and injected dependencies.

Every handler returns a JSON-ready envelope and never raises a
store error. Mutating handlers resolve the caller from X-API-KEY
and stamp the call with the injected clock; reads are anonymous.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from eventlog.http_api.auth.resolver import AuthRejection, resolve_caller
from eventlog.http_api.contracts import (
    AppendEventRequest,
    CategoryQueryRequest,
    EventIdRequest,
    LatestRequest,
    TimeRangeRequest,
    TransferOwnershipRequest,
    UserQueryRequest,
)
from eventlog.http_api.dependencies import HttpApiDependencies
from eventlog.http_api.errors import (
    error_response,
    store_error_response,
    success_response,
)
from eventlog.store.errors import EventStoreError

logger = logging.getLogger("eventlog.http")


def _run(operation: Callable[[], Any]) -> dict[str, Any]:
    try:
        return success_response(operation())
    except EventStoreError as exc:
        logger.debug(f"Store rejected request: [{exc.code}] {exc.message}")
        return store_error_response(exc)


def _rejection_response(rejection: AuthRejection) -> dict[str, Any]:
    return error_response(code=rejection.code, message=rejection.message)


# ══════════════════════════════════════════════════════════════
# MUTATIONS
# ══════════════════════════════════════════════════════════════

def post_append_event(
    request: AppendEventRequest,
    dependencies: HttpApiDependencies,
    *,
    headers: dict[str, Any] | None = None,
) -> dict[str, Any]:
    caller = resolve_caller(headers, dependencies.auth_provider)
    if isinstance(caller, AuthRejection):
        return _rejection_response(caller)

    timestamp = dependencies.clock.now()

    def _append():
        event_id = dependencies.store.append(
            caller, request.message, request.category, timestamp
        )
        return {"event_id": event_id, "timestamp": timestamp}

    return _run(_append)


def post_toggle_status(
    request: EventIdRequest,
    dependencies: HttpApiDependencies,
    *,
    headers: dict[str, Any] | None = None,
) -> dict[str, Any]:
    caller = resolve_caller(headers, dependencies.auth_provider)
    if isinstance(caller, AuthRejection):
        return _rejection_response(caller)

    def _toggle():
        is_active = dependencies.store.toggle_status(caller, request.event_id)
        return {"event_id": request.event_id, "is_active": is_active}

    return _run(_toggle)


def post_transfer_ownership(
    request: TransferOwnershipRequest,
    dependencies: HttpApiDependencies,
    *,
    headers: dict[str, Any] | None = None,
) -> dict[str, Any]:
    caller = resolve_caller(headers, dependencies.auth_provider)
    if isinstance(caller, AuthRejection):
        return _rejection_response(caller)

    def _transfer():
        dependencies.store.transfer_ownership(caller, request.new_owner)
        return {"previous_owner": caller, "owner": request.new_owner}

    return _run(_transfer)


# ══════════════════════════════════════════════════════════════
# READS
# ══════════════════════════════════════════════════════════════

def get_event(request: EventIdRequest, dependencies: HttpApiDependencies) -> dict[str, Any]:
    return _run(lambda: dependencies.store.get(request.event_id).to_dict())


def get_event_active(
    request: EventIdRequest, dependencies: HttpApiDependencies
) -> dict[str, Any]:
    return _run(
        lambda: {
            "event_id": request.event_id,
            "is_active": dependencies.store.is_active(request.event_id),
        }
    )


def list_events_by_user(
    request: UserQueryRequest, dependencies: HttpApiDependencies
) -> dict[str, Any]:
    return _run(
        lambda: {"event_ids": list(dependencies.store.events_by_user(request.user))}
    )


def list_events_by_category(
    request: CategoryQueryRequest, dependencies: HttpApiDependencies
) -> dict[str, Any]:
    return _run(
        lambda: {
            "event_ids": list(dependencies.store.events_by_category(request.category))
        }
    )


def list_latest_events(
    request: LatestRequest, dependencies: HttpApiDependencies
) -> dict[str, Any]:
    return _run(lambda: {"event_ids": list(dependencies.store.latest(request.n))})


def list_events_by_time_range(
    request: TimeRangeRequest, dependencies: HttpApiDependencies
) -> dict[str, Any]:
    return _run(
        lambda: {
            "event_ids": list(
                dependencies.store.by_time_range(request.start, request.end)
            )
        }
    )


def get_stats(dependencies: HttpApiDependencies) -> dict[str, Any]:
    return _run(lambda: dependencies.store.stats().to_dict())


def get_count_by_user(
    request: UserQueryRequest, dependencies: HttpApiDependencies
) -> dict[str, Any]:
    return _run(lambda: {"count": dependencies.store.count_by_user(request.user)})


def get_count_by_category(
    request: CategoryQueryRequest, dependencies: HttpApiDependencies
) -> dict[str, Any]:
    return _run(
        lambda: {"count": dependencies.store.count_by_category(request.category)}
    )
