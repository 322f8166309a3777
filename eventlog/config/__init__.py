"""
EventLog Config — Public API
==============================
"""

from eventlog.config.settings import (
    DEFAULT_MAX_MESSAGE_LENGTH,
    LENGTH_SEMANTICS_BYTES,
    LENGTH_SEMANTICS_CHARS,
    StoreConfig,
    load_store_config,
)

__all__ = [
    "DEFAULT_MAX_MESSAGE_LENGTH",
    "LENGTH_SEMANTICS_BYTES",
    "LENGTH_SEMANTICS_CHARS",
    "StoreConfig",
    "load_store_config",
]
