"""
EventLog Django HTTP adapter.
Thin framework glue over eventlog/http_api handlers.
"""

from adapters.django_api.wiring import (
    DEV_OWNER_API_KEY,
    DEV_OWNER_IDENTITY,
    DEV_USER_API_KEY,
    DEV_USER_IDENTITY,
    build_dependencies,
    get_journal,
    reset_dependencies,
)

__all__ = [
    "DEV_OWNER_API_KEY",
    "DEV_OWNER_IDENTITY",
    "DEV_USER_API_KEY",
    "DEV_USER_IDENTITY",
    "build_dependencies",
    "get_journal",
    "reset_dependencies",
]
