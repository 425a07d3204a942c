"""Tests for icyhttp.config — IcyConfig frozen dataclass."""

import pytest

from icyhttp._internal.coerce import USIZE_MAX
from icyhttp.config import IcyConfig
from icyhttp.errors import ConfigurationError


class TestIcyConfig:
    def test_defaults(self) -> None:
        cfg = IcyConfig()
        assert cfg.metaint == 16000
        assert cfg.request_metadata is True

    def test_override(self) -> None:
        cfg = IcyConfig(metaint=8192, request_metadata=False)
        assert cfg.metaint == 8192
        assert cfg.request_metadata is False

    def test_frozen(self) -> None:
        cfg = IcyConfig()
        with pytest.raises(AttributeError):
            cfg.metaint = 1  # type: ignore[misc]

    def test_max_metaint(self) -> None:
        assert IcyConfig(metaint=USIZE_MAX).metaint == USIZE_MAX

    @pytest.mark.parametrize("metaint", [0, -1, USIZE_MAX + 1])
    def test_metaint_out_of_range(self, metaint: int) -> None:
        with pytest.raises(ConfigurationError, match="between 1 and"):
            IcyConfig(metaint=metaint)

    @pytest.mark.parametrize("metaint", [True, 8192.0, "8192"])
    def test_metaint_wrong_type(self, metaint: object) -> None:
        with pytest.raises(ConfigurationError, match="must be an int"):
            IcyConfig(metaint=metaint)  # type: ignore[arg-type]

    def test_request_metadata_wrong_type(self) -> None:
        with pytest.raises(ConfigurationError, match="must be a bool"):
            IcyConfig(request_metadata=1)  # type: ignore[arg-type]
