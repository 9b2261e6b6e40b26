"""Receipt data and assembled receipt documents."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..const import DEFAULT_CODEPAGE, DEFAULT_LINE_WIDTH
from ..text_utils import encode_text
from .commands import LF
from .layout import create_line


@dataclass(frozen=True)
class ReceiptLine:
    """A printable row with an optional right-hand segment."""

    left: str
    right: str | None = None
    width: int = DEFAULT_LINE_WIDTH

    def render(self) -> str:
        """Return the row as text, justified to ``width`` when two-sided."""
        if self.right is None:
            return self.left
        return create_line(self.left, self.right, self.width)


@dataclass(frozen=True)
class StoreInfo:
    """Store identity printed in the receipt header."""

    name: str
    address: str = ""
    phone: str = ""


@dataclass(frozen=True)
class LineItem:
    """One sold item. ``total`` is taken as given, not recomputed."""

    name: str
    quantity: int
    unit_price: float
    total: float


@dataclass(frozen=True)
class ReceiptData:
    """Everything needed to print one transaction."""

    store: StoreInfo
    items: tuple[LineItem, ...]
    transaction_id: str
    timestamp: datetime
    cashier: str
    subtotal: float
    tax: float
    total: float
    payment_method: str | None = None
    open_drawer: bool = False


@dataclass(frozen=True)
class ReceiptDocument:
    """An assembled receipt: encoded directives interleaved with text.

    ``bytes`` parts are control commands and go to the printer untouched;
    ``str`` parts are encoded to ``codepage`` when the payload is built.
    """

    parts: tuple[bytes | str, ...] = ()
    codepage: str = DEFAULT_CODEPAGE

    def __add__(self, other: ReceiptDocument) -> ReceiptDocument:
        if not isinstance(other, ReceiptDocument):
            return NotImplemented
        return ReceiptDocument(self.parts + other.parts, self.codepage)

    @property
    def payload(self) -> bytes:
        """Return the byte stream sent to a printer."""
        return b"".join(
            part if isinstance(part, bytes) else encode_text(part, self.codepage)
            for part in self.parts
        )

    @property
    def text(self) -> str:
        """Return a plain-text rendering: line feeds kept, other directives dropped."""
        chunks: list[str] = []
        for part in self.parts:
            if isinstance(part, str):
                chunks.append(part)
            elif part == LF:
                chunks.append("\n")
        return "".join(chunks)
