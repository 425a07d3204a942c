"""Typed ICY headers: ``Icy-MetaData`` and ``icy-metaint``.

Usage::

    from icyhttp.headers import IcyMetaData, IcyMetaInt

    IcyMetaData.decode([b"1"])   # IcyMetaData(enabled=True)
    IcyMetaInt(8192).encode()    # "8192"
"""

from icyhttp.headers.icy_metadata import IcyMetaData
from icyhttp.headers.icy_metaint import IcyMetaInt
from icyhttp.headers.registry import HeaderCodec, HeaderRegistry, default_registry

__all__ = [
    "HeaderCodec",
    "HeaderRegistry",
    "IcyMetaData",
    "IcyMetaInt",
    "default_registry",
]
