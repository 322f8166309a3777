"""
EventLog Config — Store Settings
==================================
Message limits come from configuration, not from engine logic.

Default: 500 bytes of UTF-8. Byte length is the canonical measure;
character length is available for hosts that need it.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass
from typing import Any, Mapping, Optional

DEFAULT_MAX_MESSAGE_LENGTH = 500

LENGTH_SEMANTICS_BYTES = "bytes"
LENGTH_SEMANTICS_CHARS = "chars"

VALID_LENGTH_SEMANTICS = frozenset({
    LENGTH_SEMANTICS_BYTES, LENGTH_SEMANTICS_CHARS,
})


@dataclass(frozen=True)
class StoreConfig:
    """
    Tunables for a single EventStore instance.

    Fields:
        max_message_length: Upper bound on message length (inclusive).
        length_semantics:   'bytes' (encoded length) or 'chars' (code points).
        encoding:           Encoding used when length_semantics is 'bytes'.
    """

    max_message_length: int = DEFAULT_MAX_MESSAGE_LENGTH
    length_semantics: str = LENGTH_SEMANTICS_BYTES
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if (
            isinstance(self.max_message_length, bool)
            or not isinstance(self.max_message_length, int)
            or self.max_message_length < 1
        ):
            raise ValueError("max_message_length must be an int >= 1.")
        if self.length_semantics not in VALID_LENGTH_SEMANTICS:
            raise ValueError(
                f"length_semantics must be one of "
                f"{sorted(VALID_LENGTH_SEMANTICS)}, got '{self.length_semantics}'."
            )
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding '{self.encoding}'.") from exc

    def measure(self, text: str) -> int:
        """Length of text under the configured semantics."""
        if self.length_semantics == LENGTH_SEMANTICS_CHARS:
            return len(text)
        return len(text.encode(self.encoding))


def load_store_config(values: Optional[Mapping[str, Any]] = None) -> StoreConfig:
    """
    Build a StoreConfig from a plain mapping (e.g. settings.EVENTLOG).
    Keys other than the StoreConfig fields are ignored.
    """
    values = dict(values or {})
    kwargs = {}
    for key in ("max_message_length", "length_semantics", "encoding"):
        if key in values and values[key] is not None:
            kwargs[key] = values[key]
    return StoreConfig(**kwargs)
