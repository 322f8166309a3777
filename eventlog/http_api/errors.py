"""
EventLog HTTP API - Error Mapping
=================================
Stable transport mapping for store errors and auth rejections.
"""

from __future__ import annotations

from typing import Any, Optional

from eventlog.http_api.contracts import HttpApiErrorBody, HttpApiResponse
from eventlog.store.errors import ErrorCode, EventStoreError

INVALID_REQUEST = "INVALID_REQUEST"
AUTH_REQUIRED = "AUTH_REQUIRED"
AUTH_INVALID = "AUTH_INVALID"
METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"

HTTP_STATUS_BY_CODE = {
    INVALID_REQUEST: 400,
    ErrorCode.INVALID_INPUT: 400,
    AUTH_REQUIRED: 401,
    AUTH_INVALID: 403,
    ErrorCode.UNAUTHORIZED: 403,
    ErrorCode.NOT_FOUND: 404,
    METHOD_NOT_ALLOWED: 405,
}


def error_response(
    *,
    code: str,
    message: str,
    details: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    return HttpApiResponse(
        error=HttpApiErrorBody(
            code=code,
            message=message,
            details=details or {},
        ),
    ).to_dict()


def success_response(data: Any) -> dict[str, Any]:
    return HttpApiResponse(data=data).to_dict()


def map_store_error(exc: EventStoreError) -> HttpApiErrorBody:
    details: dict[str, Any] = {"retryable": exc.retryable}
    event_id = getattr(exc, "event_id", None)
    if event_id is not None:
        details["event_id"] = event_id
    return HttpApiErrorBody(code=exc.code, message=exc.message, details=details)


def store_error_response(exc: EventStoreError) -> dict[str, Any]:
    mapped = map_store_error(exc)
    return error_response(
        code=mapped.code,
        message=mapped.message,
        details=mapped.details,
    )


def http_status_for(payload: dict[str, Any]) -> int:
    """200 for success envelopes, mapped status (default 400) otherwise."""
    if payload.get("ok"):
        return 200
    code = payload.get("error", {}).get("code")
    return HTTP_STATUS_BY_CODE.get(code, 400)
