"""Outgoing response headers with a chainable .with_*() API.

Each transformation returns a new Response; the original is never
modified.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Protocol


class _Encodable(Protocol):
    header_name: str

    def encode(self) -> str: ...


@dataclass(frozen=True, slots=True)
class Response:
    """The header list a host HTTP layer emits, built through transformations."""

    headers: tuple[tuple[str, str], ...] = ()

    def with_header(self, name: str, value: str) -> Response:
        """Return a new Response with an additional header."""
        return replace(self, headers=(*self.headers, (name, value)))

    def with_typed_header(self, header: _Encodable) -> Response:
        """Return a new Response carrying *header* in its canonical form.

        Typed headers are single-valued, so any earlier header with the
        same name (in any casing) is dropped.
        """
        name = header.header_name
        kept = tuple(pair for pair in self.headers if pair[0].lower() != name.lower())
        return replace(self, headers=(*kept, (name, header.encode())))
