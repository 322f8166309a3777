"""
EventLog HTTP API Auth - Caller Resolution
==========================================
Resolve the caller identity for a request from its headers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from eventlog.http_api.auth.provider import AuthPrincipal
from eventlog.http_api.errors import AUTH_INVALID, AUTH_REQUIRED

HEADER_API_KEY = "x-api-key"


@dataclass(frozen=True)
class AuthRejection:
    code: str
    message: str


def _normalize_headers(headers: dict[str, Any] | None) -> dict[str, str]:
    normalized: dict[str, str] = {}
    for key, value in (headers or {}).items():
        normalized[str(key).strip().lower()] = str(value).strip()
    return normalized


def resolve_auth_principal(
    headers: dict[str, Any] | None,
    provider,
) -> AuthPrincipal | AuthRejection:
    api_key = _normalize_headers(headers).get(HEADER_API_KEY)
    if not api_key:
        return AuthRejection(
            code=AUTH_REQUIRED,
            message="Missing required header X-API-KEY.",
        )

    principal = provider.resolve_api_key(api_key)
    if principal is None:
        return AuthRejection(code=AUTH_INVALID, message="Invalid API key.")
    return principal


def resolve_caller(
    headers: dict[str, Any] | None,
    provider,
) -> str | AuthRejection:
    principal = resolve_auth_principal(headers, provider)
    if isinstance(principal, AuthRejection):
        return principal
    return principal.identity
