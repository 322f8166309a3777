"""
Manual smoke runner for the EventLog Django adapter endpoints.

Usage:
    python manage.py runserver
    python scripts/smoke_http_api.py
    python scripts/smoke_http_api.py --base-url http://127.0.0.1:8000
"""

from __future__ import annotations

import argparse
import json
from urllib import error, request


DEV_OWNER_API_KEY = "dev-owner-key"
DEV_USER_API_KEY = "dev-user-key"


def _call(
    *,
    method: str,
    url: str,
    headers: dict[str, str] | None = None,
    body: dict | None = None,
) -> tuple[int, dict]:
    encoded = None
    req_headers = dict(headers or {})
    if body is not None:
        encoded = json.dumps(body).encode("utf-8")
        req_headers["Content-Type"] = "application/json"

    req = request.Request(url=url, method=method, headers=req_headers, data=encoded)
    try:
        with request.urlopen(req) as response:
            return response.status, json.loads(response.read().decode("utf-8"))
    except error.HTTPError as exc:
        return exc.code, json.loads(exc.read().decode("utf-8"))


def _print_case(label: str, status: int, payload: dict) -> None:
    print(f"\n[{label}] status={status}")
    print(json.dumps(payload, indent=2, sort_keys=True))


def run(base_url: str) -> None:
    api = base_url.rstrip("/") + "/v1"
    user = {"X-API-KEY": DEV_USER_API_KEY}
    owner = {"X-API-KEY": DEV_OWNER_API_KEY}

    status, payload = _call(
        method="POST", url=f"{api}/events", body={"message": "hello"}
    )
    _print_case("append-missing-key", status, payload)

    status, payload = _call(
        method="POST", url=f"{api}/events", headers=user, body={"message": ""}
    )
    _print_case("append-empty-message", status, payload)

    status, payload = _call(
        method="POST",
        url=f"{api}/events",
        headers=user,
        body={"message": "hello", "category": "greet"},
    )
    _print_case("append-success", status, payload)
    event_id = payload.get("data", {}).get("event_id", 0)

    status, payload = _call(method="GET", url=f"{api}/events/{event_id}")
    _print_case("get-event", status, payload)

    status, payload = _call(
        method="POST", url=f"{api}/events/{event_id}/toggle", headers=owner
    )
    _print_case("toggle-not-submitter", status, payload)

    status, payload = _call(
        method="POST", url=f"{api}/events/{event_id}/toggle", headers=user
    )
    _print_case("toggle-success", status, payload)

    status, payload = _call(method="GET", url=f"{api}/events/latest?n=5")
    _print_case("latest", status, payload)

    status, payload = _call(method="GET", url=f"{api}/events/by-category?category=greet")
    _print_case("by-category", status, payload)

    status, payload = _call(method="GET", url=f"{api}/stats")
    _print_case("stats", status, payload)


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--base-url",
        default="http://127.0.0.1:8000",
        help="Server base URL.",
    )
    args = parser.parse_args()
    run(args.base_url)


if __name__ == "__main__":
    main()
