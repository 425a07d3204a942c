"""The ``icy-metaint`` header.

Sent by a streaming server to announce the interval at which icy
metadata is inserted: a metadata block follows every ``interval`` bytes
of audio.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from icyhttp._internal.coerce import USIZE_MAX, RawHeaderValue, from_one_raw_str
from icyhttp.errors import InvalidHeaderValue


@dataclass(frozen=True, slots=True)
class IcyMetaInt:
    """Byte interval between in-stream metadata blocks."""

    header_name: ClassVar[str] = "icy-metaint"

    interval: int

    def __post_init__(self) -> None:
        if isinstance(self.interval, bool) or not isinstance(self.interval, int):
            raise InvalidHeaderValue(self.header_name, self.interval, "is not an int")
        if not 0 <= self.interval <= USIZE_MAX:
            raise InvalidHeaderValue(
                self.header_name, self.interval, f"is outside 0..{USIZE_MAX}"
            )

    @classmethod
    def decode(cls, raw: RawHeaderValue) -> IcyMetaInt | None:
        """Build from raw occurrences; ``None`` if absent or malformed."""
        number = from_one_raw_str(raw, max_value=USIZE_MAX)
        if number is None:
            return None
        return cls(number)

    def encode(self) -> str:
        return str(self.interval)

    def __str__(self) -> str:
        return self.encode()

    def __int__(self) -> int:
        return self.interval
