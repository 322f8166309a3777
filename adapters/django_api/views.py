"""
EventLog Django Adapter Views
=============================
Pass-through HTTP views over eventlog/http_api handlers.
"""

from __future__ import annotations

import json
from typing import Any

from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt

from adapters.django_api.wiring import build_dependencies
from eventlog.http_api.contracts import (
    AppendEventRequest,
    CategoryQueryRequest,
    EventIdRequest,
    LatestRequest,
    TimeRangeRequest,
    TransferOwnershipRequest,
    UserQueryRequest,
)
from eventlog.http_api.errors import (
    INVALID_REQUEST,
    METHOD_NOT_ALLOWED,
    error_response,
    http_status_for,
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


def _headers_from_request(request: HttpRequest) -> dict[str, str]:
    return {str(key): str(value) for key, value in request.headers.items()}


def _json(payload: dict[str, Any]) -> JsonResponse:
    return JsonResponse(payload, status=http_status_for(payload))


def _json_error(code: str, message: str) -> JsonResponse:
    return _json(error_response(code=code, message=message, details={}))


def _method_not_allowed() -> JsonResponse:
    return _json_error(
        METHOD_NOT_ALLOWED,
        "Method not allowed for this endpoint.",
    )


def _parse_json_body(request: HttpRequest) -> dict[str, Any]:
    if not request.body:
        return {}
    try:
        parsed = json.loads(request.body.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as exc:
        raise ValueError("Request body must be valid JSON.") from exc
    if not isinstance(parsed, dict):
        raise ValueError("Request body must be a JSON object.")
    return parsed


def _query_param(request: HttpRequest, name: str, *, required: bool = True) -> str:
    value = request.GET.get(name)
    if value is None:
        if required:
            raise ValueError(f"{name} is required.")
        return ""
    return value


def _query_int(request: HttpRequest, name: str) -> int:
    raw = _query_param(request, name)
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer.") from exc


def _dispatch_read(read_handler, contract_factory, request: HttpRequest) -> JsonResponse:
    if request.method != "GET":
        return _method_not_allowed()
    try:
        contract = contract_factory(request)
    except (ValueError, KeyError) as exc:
        return _json_error(INVALID_REQUEST, str(exc))
    return _json(read_handler(contract, build_dependencies()))


def _dispatch_write(write_handler, contract_factory, request: HttpRequest) -> JsonResponse:
    if request.method != "POST":
        return _method_not_allowed()
    try:
        body = _parse_json_body(request)
        contract = contract_factory(body)
    except (ValueError, KeyError) as exc:
        return _json_error(INVALID_REQUEST, str(exc))
    return _json(
        write_handler(
            contract,
            build_dependencies(),
            headers=_headers_from_request(request),
        )
    )


# ══════════════════════════════════════════════════════════════
# WRITES
# ══════════════════════════════════════════════════════════════

@csrf_exempt
def events_append_view(request: HttpRequest) -> JsonResponse:
    def _factory(body):
        return AppendEventRequest(
            message=body["message"],
            category=body.get("category") or "",
        )

    return _dispatch_write(post_append_event, _factory, request)


@csrf_exempt
def event_toggle_view(request: HttpRequest, event_id: int) -> JsonResponse:
    return _dispatch_write(
        post_toggle_status,
        lambda body: EventIdRequest(event_id=event_id),
        request,
    )


@csrf_exempt
def owner_transfer_view(request: HttpRequest) -> JsonResponse:
    return _dispatch_write(
        post_transfer_ownership,
        lambda body: TransferOwnershipRequest(new_owner=body["new_owner"]),
        request,
    )


# ══════════════════════════════════════════════════════════════
# READS
# ══════════════════════════════════════════════════════════════

@csrf_exempt
def event_detail_view(request: HttpRequest, event_id: int) -> JsonResponse:
    return _dispatch_read(
        get_event, lambda req: EventIdRequest(event_id=event_id), request
    )


@csrf_exempt
def event_active_view(request: HttpRequest, event_id: int) -> JsonResponse:
    return _dispatch_read(
        get_event_active, lambda req: EventIdRequest(event_id=event_id), request
    )


@csrf_exempt
def events_by_user_view(request: HttpRequest) -> JsonResponse:
    return _dispatch_read(
        list_events_by_user,
        lambda req: UserQueryRequest(user=_query_param(req, "user")),
        request,
    )


@csrf_exempt
def events_by_category_view(request: HttpRequest) -> JsonResponse:
    return _dispatch_read(
        list_events_by_category,
        lambda req: CategoryQueryRequest(
            category=_query_param(req, "category", required=False)
        ),
        request,
    )


@csrf_exempt
def events_latest_view(request: HttpRequest) -> JsonResponse:
    return _dispatch_read(
        list_latest_events,
        lambda req: LatestRequest(n=_query_int(req, "n")),
        request,
    )


@csrf_exempt
def events_time_range_view(request: HttpRequest) -> JsonResponse:
    return _dispatch_read(
        list_events_by_time_range,
        lambda req: TimeRangeRequest(
            start=_query_int(req, "start"),
            end=_query_int(req, "end"),
        ),
        request,
    )


@csrf_exempt
def stats_view(request: HttpRequest) -> JsonResponse:
    if request.method != "GET":
        return _method_not_allowed()
    return _json(get_stats(build_dependencies()))


@csrf_exempt
def count_by_user_view(request: HttpRequest) -> JsonResponse:
    return _dispatch_read(
        get_count_by_user,
        lambda req: UserQueryRequest(user=_query_param(req, "user")),
        request,
    )


@csrf_exempt
def count_by_category_view(request: HttpRequest) -> JsonResponse:
    return _dispatch_read(
        get_count_by_category,
        lambda req: CategoryQueryRequest(
            category=_query_param(req, "category", required=False)
        ),
        request,
    )
