"""ICY negotiation configuration.

IcyConfig is a frozen dataclass: immutable after creation, validated once.
"""

from dataclasses import dataclass

from icyhttp._internal.coerce import USIZE_MAX
from icyhttp.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class IcyConfig:
    """Settings for both sides of an ICY metadata negotiation.

    All fields have sensible defaults. Override what you need::

        config = IcyConfig(metaint=8192)
    """

    # Server: bytes of audio between metadata blocks
    metaint: int = 16000

    # Client: ask the server to interleave metadata
    request_metadata: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.metaint, bool) or not isinstance(self.metaint, int):
            msg = f"metaint must be an int, got {type(self.metaint).__name__}"
            raise ConfigurationError(msg)
        if not 1 <= self.metaint <= USIZE_MAX:
            msg = f"metaint must be between 1 and {USIZE_MAX}, got {self.metaint}"
            raise ConfigurationError(msg)
        if not isinstance(self.request_metadata, bool):
            msg = f"request_metadata must be a bool, got {type(self.request_metadata).__name__}"
            raise ConfigurationError(msg)
