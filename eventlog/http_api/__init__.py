"""
EventLog HTTP API - Public API
==============================
"""

from eventlog.http_api.contracts import (
    AppendEventRequest,
    CategoryQueryRequest,
    EventIdRequest,
    HttpApiErrorBody,
    HttpApiResponse,
    LatestRequest,
    TimeRangeRequest,
    TransferOwnershipRequest,
    UserQueryRequest,
)
from eventlog.http_api.dependencies import HttpApiDependencies
from eventlog.http_api.errors import (
    error_response,
    http_status_for,
    map_store_error,
    store_error_response,
    success_response,
)
from eventlog.http_api.handlers import (
    get_count_by_category,
    get_count_by_user,
    get_event,
    get_event_active,
    get_stats,
    list_events_by_category,
    list_events_by_time_range,
    list_events_by_user,
    list_latest_events,
    post_append_event,
    post_toggle_status,
    post_transfer_ownership,
)

__all__ = [
    "AppendEventRequest",
    "CategoryQueryRequest",
    "EventIdRequest",
    "LatestRequest",
    "TimeRangeRequest",
    "TransferOwnershipRequest",
    "UserQueryRequest",
    "HttpApiErrorBody",
    "HttpApiResponse",
    "HttpApiDependencies",
    "error_response",
    "success_response",
    "map_store_error",
    "store_error_response",
    "http_status_for",
    "post_append_event",
    "post_toggle_status",
    "post_transfer_ownership",
    "get_event",
    "get_event_active",
    "list_events_by_user",
    "list_events_by_category",
    "list_latest_events",
    "list_events_by_time_range",
    "get_stats",
    "get_count_by_user",
    "get_count_by_category",
]
