"""icyhttp — typed ICY (SHOUTcast-style) HTTP headers.

Parses and formats the two headers streaming-audio clients and servers
use to negotiate in-stream metadata: ``Icy-MetaData`` and
``icy-metaint``. Decoding never raises; an absent, repeated or malformed
header decodes to ``None``.

Basic usage::

    from icyhttp import IcyMetaData, IcyMetaInt

    IcyMetaData.decode([b"1"])        # IcyMetaData(enabled=True)
    IcyMetaInt.decode([b"-33"])       # None
    str(IcyMetaInt(16000))            # "16000"

With a host header collection::

    from icyhttp import Headers, Response

    headers = Headers(((b"Icy-MetaData", b"1"),))
    if headers.typed(IcyMetaData):
        response = Response().with_typed_header(IcyMetaInt(16000))
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "HeaderCodec",
    "HeaderRegistry",
    "Headers",
    "IcyConfig",
    "IcyError",
    "IcyMetaData",
    "IcyMetaInt",
    "InvalidHeaderValue",
    "RawHeaderSource",
    "Response",
    "UnknownHeaderError",
    "default_registry",
    "metadata_interval",
    "request_headers",
    "response_headers",
    "wants_metadata",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import icyhttp`` fast while providing a clean top-level API.
    """
    if name == "IcyMetaData":
        from icyhttp.headers.icy_metadata import IcyMetaData

        return IcyMetaData

    if name == "IcyMetaInt":
        from icyhttp.headers.icy_metaint import IcyMetaInt

        return IcyMetaInt

    if name in ("HeaderCodec", "HeaderRegistry", "default_registry"):
        from icyhttp.headers import registry as _registry

        return getattr(_registry, name)

    if name == "Headers":
        from icyhttp.http.headers import Headers

        return Headers

    if name == "Response":
        from icyhttp.http.response import Response

        return Response

    if name == "RawHeaderSource":
        from icyhttp._internal.raw import RawHeaderSource

        return RawHeaderSource

    if name == "IcyConfig":
        from icyhttp.config import IcyConfig

        return IcyConfig

    if name in ("metadata_interval", "request_headers", "response_headers", "wants_metadata"):
        from icyhttp import negotiation as _negotiation

        return getattr(_negotiation, name)

    if name in ("ConfigurationError", "IcyError", "InvalidHeaderValue", "UnknownHeaderError"):
        from icyhttp import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
