"""Text utilities for turning receipt text into printer codepage bytes."""

from __future__ import annotations

from .codepage_mapping import (
    CODEPAGE_TO_CODEC,
    CODEPAGE_TO_TABLE,
    get_code_table,
    get_codec_name,
)
from .lookalike_map import LOOKALIKE_MAP
from .transcoding import encode_text, transcode_to_codepage

__all__ = [
    "CODEPAGE_TO_CODEC",
    "CODEPAGE_TO_TABLE",
    "LOOKALIKE_MAP",
    "encode_text",
    "get_code_table",
    "get_codec_name",
    "transcode_to_codepage",
]
