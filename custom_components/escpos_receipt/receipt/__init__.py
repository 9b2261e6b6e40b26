"""Receipt command encoding and fixed-width layout."""

from __future__ import annotations

from .commands import COMMANDS, ControlCommands
from .formatter import ReceiptFormatter
from .layout import (
    center_text,
    create_line,
    divider,
    format_currency,
    format_text,
    right_align,
)
from .models import LineItem, ReceiptData, ReceiptDocument, ReceiptLine, StoreInfo

__all__ = [
    "COMMANDS",
    "ControlCommands",
    "LineItem",
    "ReceiptData",
    "ReceiptDocument",
    "ReceiptFormatter",
    "ReceiptLine",
    "StoreInfo",
    "center_text",
    "create_line",
    "divider",
    "format_currency",
    "format_text",
    "right_align",
]
