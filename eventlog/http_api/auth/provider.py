"""
EventLog HTTP API Auth - Provider and Principal Models
======================================================
Deterministic API-key → identity resolution.
The store trusts whatever identity this layer hands it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Protocol

from eventlog.identity import is_zero_identity


@dataclass(frozen=True)
class AuthPrincipal:
    identity: str
    label: str = ""

    def __post_init__(self):
        if not isinstance(self.identity, str) or is_zero_identity(self.identity):
            raise ValueError("identity must be a non-zero identity string.")
        if not isinstance(self.label, str):
            raise ValueError("label must be a string.")


class AuthProvider(Protocol):
    def resolve_api_key(self, api_key: str) -> AuthPrincipal | None:
        ...


class InMemoryAuthProvider:
    """
    Deterministic in-memory auth provider for tests/bootstrap.
    """

    def __init__(self, api_key_to_principal: Mapping[str, AuthPrincipal] | None = None):
        normalized: dict[str, AuthPrincipal] = {}
        for api_key, principal in sorted(
            dict(api_key_to_principal or {}).items(),
            key=lambda item: item[0],
        ):
            if not isinstance(api_key, str) or not api_key.strip():
                raise ValueError("API key must be a non-empty string.")
            if not isinstance(principal, AuthPrincipal):
                raise ValueError("Principal must be AuthPrincipal.")
            normalized[api_key] = principal
        self._api_key_to_principal = normalized

    def resolve_api_key(self, api_key: str) -> AuthPrincipal | None:
        if not isinstance(api_key, str):
            return None
        return self._api_key_to_principal.get(api_key)
