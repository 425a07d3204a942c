"""Raw header occurrences as received from a host HTTP layer.

Implements the ``RawHeaderSource`` protocol over raw ``(name, value)``
byte pairs (the ASGI shape). Typed ICY headers read their occurrences
through ``get_raw_list``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol


class _Decodable[T](Protocol):
    header_name: str
    decode: Callable[[list[bytes]], T | None]


class Headers:
    """Raw header pairs with case-insensitive lookup by name."""

    __slots__ = ("_raw",)

    def __init__(self, raw: tuple[tuple[bytes, bytes], ...] = ()) -> None:
        self._raw = raw

    @classmethod
    def from_pairs(cls, pairs: tuple[tuple[str, str], ...]) -> Headers:
        """Build from ``(name, value)`` string pairs, e.g. a ``Response``'s headers."""
        return cls(tuple((k.encode("latin-1"), v.encode("latin-1")) for k, v in pairs))

    def get_raw_list(self, key: str) -> list[bytes]:
        """Return all undecoded values for *key*, one per occurrence."""
        key_lower = key.lower().encode("latin-1")
        return [value for name, value in self._raw if name.lower() == key_lower]

    def typed[T](self, header: _Decodable[T]) -> T | None:
        """Decode a typed header, e.g. ``headers.typed(IcyMetaInt)``.

        Returns ``None`` when the header is absent, repeated or malformed.
        """
        return header.decode(self.get_raw_list(header.header_name))
