"""ICY metadata negotiation between a streaming client and server.

A client asks for in-stream metadata with ``Icy-MetaData: 1``. A server
that honours the request announces the block interval with
``icy-metaint: <bytes>``; a server that does not simply omits it.
"""

import logging

from icyhttp._internal.raw import RawHeaderSource
from icyhttp.config import IcyConfig
from icyhttp.headers.icy_metadata import IcyMetaData
from icyhttp.headers.icy_metaint import IcyMetaInt

logger = logging.getLogger("icyhttp.negotiation")


def wants_metadata(headers: RawHeaderSource) -> bool:
    """True if the request carries a usable, nonzero ``Icy-MetaData``."""
    header = IcyMetaData.decode(headers.get_raw_list(IcyMetaData.header_name))
    return header is not None and header.enabled


def metadata_interval(headers: RawHeaderSource) -> int | None:
    """The ``icy-metaint`` a server announced, or ``None``."""
    header = IcyMetaInt.decode(headers.get_raw_list(IcyMetaInt.header_name))
    return None if header is None else header.interval


def request_headers(config: IcyConfig | None = None) -> tuple[tuple[str, str], ...]:
    """Headers a client sends to opt in to (or out of) metadata."""
    config = config or IcyConfig()
    header = IcyMetaData(config.request_metadata)
    return ((header.header_name, header.encode()),)


def response_headers(
    request: RawHeaderSource,
    config: IcyConfig | None = None,
) -> tuple[tuple[str, str], ...]:
    """Headers a server replies with, given the client's request headers."""
    config = config or IcyConfig()
    if not wants_metadata(request):
        logger.debug("Client did not request icy metadata; omitting icy-metaint")
        return ()
    header = IcyMetaInt(config.metaint)
    logger.debug("Announcing icy-metaint %d", header.interval)
    return ((header.header_name, header.encode()),)
