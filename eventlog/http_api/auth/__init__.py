"""
EventLog HTTP API Auth - Public API
===================================
"""

from eventlog.http_api.auth.provider import (
    AuthPrincipal,
    AuthProvider,
    InMemoryAuthProvider,
)
from eventlog.http_api.auth.resolver import (
    HEADER_API_KEY,
    AuthRejection,
    resolve_auth_principal,
    resolve_caller,
)

__all__ = [
    "AuthPrincipal",
    "AuthProvider",
    "InMemoryAuthProvider",
    "AuthRejection",
    "HEADER_API_KEY",
    "resolve_auth_principal",
    "resolve_caller",
]
