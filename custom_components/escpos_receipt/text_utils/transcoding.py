"""Transcoding of receipt text to printer codepages.

Each character is tried in this order:

1. direct encoding to the target codepage (keeps native characters such as
   accented letters in CP850 or box drawing in CP437)
2. the look-alike map, when the replacement itself encodes
3. the replacement character
"""

from __future__ import annotations

import logging
import unicodedata

from .codepage_mapping import get_codec_name
from .lookalike_map import LOOKALIKE_MAP

_LOGGER = logging.getLogger(__name__)


def _encodes(text: str, codec: str) -> bool:
    try:
        text.encode(codec)
    except UnicodeEncodeError:
        return False
    return True


def transcode_to_codepage(text: str, codepage: str, replace_char: str = "?") -> str:
    """Return ``text`` rewritten so that every character encodes in ``codepage``."""
    if not text:
        return text

    normalized = unicodedata.normalize("NFKC", text)
    codec = get_codec_name(codepage)
    try:
        "".encode(codec)
    except LookupError:
        _LOGGER.warning("Unknown codepage '%s', sending text as UTF-8", codepage)
        return normalized

    result: list[str] = []
    for char in normalized:
        if _encodes(char, codec):
            result.append(char)
            continue
        replacement = LOOKALIKE_MAP.get(char)
        if replacement is not None and _encodes(replacement, codec):
            result.append(replacement)
        else:
            result.append(replace_char)
    return "".join(result)


def encode_text(text: str, codepage: str) -> bytes:
    """Transcode and encode text for the printer."""
    transcoded = transcode_to_codepage(text, codepage)
    codec = get_codec_name(codepage)
    try:
        return transcoded.encode(codec, errors="replace")
    except LookupError:
        return transcoded.encode("utf-8")
