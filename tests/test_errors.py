"""Tests for icyhttp.errors — exception hierarchy and error messages."""

from icyhttp.errors import (
    ConfigurationError,
    IcyError,
    InvalidHeaderValue,
    UnknownHeaderError,
)


class TestHierarchy:
    def test_configuration_error_is_icy_error(self) -> None:
        assert issubclass(ConfigurationError, IcyError)

    def test_invalid_header_value_is_value_error(self) -> None:
        assert issubclass(InvalidHeaderValue, IcyError)
        assert issubclass(InvalidHeaderValue, ValueError)

    def test_unknown_header_is_key_error(self) -> None:
        assert issubclass(UnknownHeaderError, IcyError)
        assert issubclass(UnknownHeaderError, KeyError)


class TestMessages:
    def test_invalid_header_value(self) -> None:
        err = InvalidHeaderValue("icy-metaint", -1, "is negative")
        assert str(err) == "icy-metaint: -1 is negative"
        assert err.header == "icy-metaint"
        assert err.value == -1

    def test_unknown_header(self) -> None:
        err = UnknownHeaderError("icy-name")
        assert str(err) == "No codec registered for header 'icy-name'"
        assert err.name == "icy-name"
