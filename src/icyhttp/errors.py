"""icyhttp exception hierarchy.

Decoding never raises: absent and malformed headers both come back as
``None``. These types cover programming errors: building a header value
that breaks its invariant, a bad config, or an unknown registry name.
"""


class IcyError(Exception):
    """Base for all icyhttp-specific errors."""


class ConfigurationError(IcyError):
    """Raised when an ``IcyConfig`` or a ``HeaderRegistry`` is set up wrong."""


class InvalidHeaderValue(IcyError, ValueError):
    """A typed header was constructed with a value it cannot represent."""

    def __init__(self, header: str, value: object, reason: str) -> None:
        super().__init__(f"{header}: {value!r} {reason}")
        self.header = header
        self.value = value


class UnknownHeaderError(IcyError, KeyError):  # noqa: N818
    """No codec is registered under the requested header name."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"No codec registered for header {self.name!r}"
