"""Tests for codepage transcoding."""

import pytest

from custom_components.escpos_receipt.text_utils import (
    LOOKALIKE_MAP,
    encode_text,
    get_code_table,
    get_codec_name,
    transcode_to_codepage,
)


class TestCodepageMapping:
    @pytest.mark.parametrize(
        ("codepage", "codec"),
        [("CP437", "cp437"), ("cp-850", "cp850"), ("CP 1252", "cp1252"), ("CP936", "cp936")],
    )
    def test_codec_names(self, codepage: str, codec: str) -> None:
        assert get_codec_name(codepage) == codec

    def test_code_tables(self) -> None:
        assert get_code_table("CP437") == 0
        assert get_code_table("cp850") == 2
        assert get_code_table("CP858") == 19
        assert get_code_table("CP999") is None


class TestTranscoding:
    def test_ascii_unchanged(self) -> None:
        assert transcode_to_codepage("Widget x2", "CP437") == "Widget x2"

    def test_native_characters_kept(self) -> None:
        assert transcode_to_codepage("Crème brûlée", "CP850") == "Crème brûlée"

    def test_lookalikes_used_when_missing(self) -> None:
        assert transcode_to_codepage("“Deluxe” – 10€", "CP437") == '"Deluxe" - 10EUR'

    def test_unmappable_replaced(self) -> None:
        assert transcode_to_codepage("茶", "CP437") == "?"
        assert transcode_to_codepage("茶", "CP437", replace_char="*") == "*"

    def test_lookalikes_are_ascii(self) -> None:
        for replacement in LOOKALIKE_MAP.values():
            assert replacement.isascii()

    def test_empty(self) -> None:
        assert transcode_to_codepage("", "CP437") == ""


class TestEncodeText:
    def test_encodes_to_codepage(self) -> None:
        assert encode_text("é", "CP437") == b"\x82"

    def test_unknown_codepage_falls_back_to_utf8(self) -> None:
        assert encode_text("é", "NOPE") == "é".encode()
