"""Header registry: an explicit name -> (decode, encode) table.

Header types are plain value classes. A host HTTP layer that wants to
dispatch by name registers a ``HeaderCodec`` per header here instead of
relying on the value classes to share a base type.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Protocol

from icyhttp._internal.coerce import RawHeaderValue
from icyhttp.errors import ConfigurationError, InvalidHeaderValue, UnknownHeaderError


class TypedHeader(Protocol):
    """What ``HeaderCodec.for_header`` needs from a header class."""

    header_name: str

    @classmethod
    def decode(cls, raw: RawHeaderValue) -> Any: ...

    def encode(self) -> str: ...


@dataclass(frozen=True, slots=True)
class HeaderCodec:
    """The decode/encode pair for one header name.

    ``header_cls``, when set, is the value type ``encode`` accepts.
    """

    name: str
    decode: Callable[[RawHeaderValue], Any]
    encode: Callable[[Any], str]
    header_cls: type | None = None

    @classmethod
    def for_header(cls, header: type[TypedHeader]) -> HeaderCodec:
        return cls(
            name=header.header_name,
            decode=header.decode,
            encode=header.encode,
            header_cls=header,
        )


class HeaderRegistry:
    """Case-insensitive lookup of header codecs.

    Names keep the casing they were registered with for emission;
    lookups ignore case, as HTTP header names do.
    """

    __slots__ = ("_codecs",)

    def __init__(self, codecs: tuple[HeaderCodec, ...] = ()) -> None:
        self._codecs: dict[str, HeaderCodec] = {}
        for codec in codecs:
            self.register(codec)

    def register(self, codec: HeaderCodec) -> HeaderCodec:
        key = codec.name.lower()
        if key in self._codecs:
            msg = f"Header {codec.name!r} is already registered as {self._codecs[key].name!r}"
            raise ConfigurationError(msg)
        self._codecs[key] = codec
        return codec

    def lookup(self, name: str) -> HeaderCodec:
        """Return the codec for *name*. Raises ``UnknownHeaderError`` if missing."""
        try:
            return self._codecs[name.lower()]
        except KeyError:
            raise UnknownHeaderError(name) from None

    def decode(self, name: str, raw: RawHeaderValue) -> Any:
        """Decode *raw* with the codec for *name*; ``None`` if unusable."""
        return self.lookup(name).decode(raw)

    def encode(self, name: str, value: Any) -> str:
        """Encode *value* with the codec for *name*.

        Raises ``InvalidHeaderValue`` if *value* is not the codec's header type.
        """
        codec = self.lookup(name)
        if codec.header_cls is not None and not isinstance(value, codec.header_cls):
            raise InvalidHeaderValue(
                codec.name, value, f"is not an instance of {codec.header_cls.__name__}"
            )
        return codec.encode(value)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._codecs

    def __iter__(self) -> Iterator[str]:
        return (codec.name for codec in self._codecs.values())

    def __len__(self) -> int:
        return len(self._codecs)

    def __repr__(self) -> str:
        return f"HeaderRegistry({list(self)!r})"


def default_registry() -> HeaderRegistry:
    """A fresh registry holding ``Icy-MetaData`` and ``icy-metaint``."""
    from icyhttp.headers.icy_metadata import IcyMetaData
    from icyhttp.headers.icy_metaint import IcyMetaInt

    return HeaderRegistry(
        (HeaderCodec.for_header(IcyMetaData), HeaderCodec.for_header(IcyMetaInt))
    )
