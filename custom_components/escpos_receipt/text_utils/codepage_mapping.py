"""Codepage names, Python codecs and ESC/POS code table numbers."""

from __future__ import annotations

# Codepage name -> (Python codec, ESC t table number)
_CODEPAGES: dict[str, tuple[str, int]] = {
    "CP437": ("cp437", 0),
    "CP850": ("cp850", 2),
    "CP860": ("cp860", 3),
    "CP863": ("cp863", 4),
    "CP865": ("cp865", 5),
    "CP1252": ("cp1252", 16),
    "CP866": ("cp866", 17),
    "CP852": ("cp852", 18),
    "CP858": ("cp858", 19),
}

CODEPAGE_TO_CODEC: dict[str, str] = {name: codec for name, (codec, _) in _CODEPAGES.items()}
CODEPAGE_TO_TABLE: dict[str, int] = {name: table for name, (_, table) in _CODEPAGES.items()}


def _normalize(codepage: str) -> str:
    return codepage.upper().replace("-", "").replace("_", "").replace(" ", "")


def get_codec_name(codepage: str) -> str:
    """Return the Python codec for a codepage name such as ``CP437`` or ``cp-850``."""
    key = _normalize(codepage)
    if key in CODEPAGE_TO_CODEC:
        return CODEPAGE_TO_CODEC[key]
    if key.startswith("CP") and key[2:].isdigit():
        return f"cp{key[2:]}"
    return codepage.lower()


def get_code_table(codepage: str) -> int | None:
    """Return the ESC t table number for a codepage, or None if unknown."""
    return CODEPAGE_TO_TABLE.get(_normalize(codepage))
