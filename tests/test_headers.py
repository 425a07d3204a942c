"""Tests for icyhttp.http.headers — raw header occurrences and typed decoding."""

from icyhttp._internal.raw import RawHeaderSource
from icyhttp.headers import IcyMetaData, IcyMetaInt
from icyhttp.http.headers import Headers


def _h(*pairs: tuple[str, str]) -> Headers:
    """Shorthand: build Headers from string pairs."""
    return Headers.from_pairs(pairs)


class TestRawList:
    def test_single_occurrence(self) -> None:
        h = Headers(((b"Icy-MetaData", b"1"), (b"Accept", b"*/*")))
        assert h.get_raw_list("Icy-MetaData") == [b"1"]

    def test_case_insensitive(self) -> None:
        h = _h(("Icy-MetaData", "1"))
        assert h.get_raw_list("icy-metadata") == [b"1"]
        assert h.get_raw_list("ICY-METADATA") == [b"1"]

    def test_occurrences_in_wire_order(self) -> None:
        h = _h(("icy-metaint", "1"), ("Accept", "*/*"), ("Icy-MetaInt", "2"))
        assert h.get_raw_list("icy-metaint") == [b"1", b"2"]

    def test_absent_is_empty(self) -> None:
        assert _h(("Accept", "*/*")).get_raw_list("icy-metaint") == []
        assert Headers().get_raw_list("icy-metaint") == []

    def test_from_pairs_encodes_latin_1(self) -> None:
        assert _h(("icy-name", "Café")).get_raw_list("icy-name") == ["Café".encode("latin-1")]

    def test_satisfies_raw_header_source(self) -> None:
        assert isinstance(_h(("A", "1")), RawHeaderSource)


class TestTyped:
    def test_metadata_enabled(self) -> None:
        assert _h(("icy-metadata", "1")).typed(IcyMetaData) == IcyMetaData(True)

    def test_metadata_disabled(self) -> None:
        assert _h(("Icy-MetaData", "0")).typed(IcyMetaData) == IcyMetaData(False)

    def test_metaint(self) -> None:
        assert _h(("ICY-METAINT", "8192")).typed(IcyMetaInt) == IcyMetaInt(8192)

    def test_absent(self) -> None:
        assert _h(("Accept", "*/*")).typed(IcyMetaInt) is None

    def test_repeated_is_none(self) -> None:
        h = _h(("icy-metaint", "8192"), ("icy-metaint", "8192"))
        assert h.typed(IcyMetaInt) is None

    def test_malformed_is_none(self) -> None:
        assert _h(("Icy-MetaData", "yes")).typed(IcyMetaData) is None
