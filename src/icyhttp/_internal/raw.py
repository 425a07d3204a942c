"""RawHeaderSource protocol: what icyhttp needs from a host HTTP layer.

A structural protocol so typed headers can be read from any header
collection that exposes per-occurrence raw values, without coupling to
a concrete type.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class RawHeaderSource(Protocol):
    """A header collection that can hand back raw occurrences by name.

    ``get_raw_list`` returns one ``bytes`` entry per occurrence of the
    header, in wire order, matching the name case-insensitively. An
    absent header yields an empty list.
    """

    def get_raw_list(self, key: str) -> list[bytes]: ...
