"""The ``Icy-MetaData`` header.

Sent by a client to ask a streaming server to interleave icy metadata
blocks with the audio bytes. The wire value is an unsigned integer:
``0`` declines, anything greater accepts. Only ``0`` and ``1`` are ever
emitted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from icyhttp._internal.coerce import U32_MAX, RawHeaderValue, from_one_raw_str
from icyhttp.errors import InvalidHeaderValue


@dataclass(frozen=True, slots=True)
class IcyMetaData:
    """Whether icy metadata should be sent in the stream."""

    header_name: ClassVar[str] = "Icy-MetaData"

    enabled: bool

    def __post_init__(self) -> None:
        if not isinstance(self.enabled, bool):
            raise InvalidHeaderValue(self.header_name, self.enabled, "is not a bool")

    @classmethod
    def decode(cls, raw: RawHeaderValue) -> IcyMetaData | None:
        """Build from raw occurrences; ``None`` if absent or malformed."""
        number = from_one_raw_str(raw, max_value=U32_MAX)
        if number is None:
            return None
        return cls(number > 0)

    def encode(self) -> str:
        return "1" if self.enabled else "0"

    def __str__(self) -> str:
        return self.encode()

    def __bool__(self) -> bool:
        return self.enabled
