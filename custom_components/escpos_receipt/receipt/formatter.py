"""Receipt templates built from layout helpers and control commands."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime
from decimal import Decimal
import logging

from ..const import (
    DEFAULT_CODEPAGE,
    DEFAULT_CURRENCY_SYMBOL,
    DEFAULT_CUT_MODE,
    DEFAULT_FOOTER_LINES,
    DEFAULT_LINE_WIDTH,
    FOOTER_DECORATION,
)
from ..text_utils import get_code_table, transcode_to_codepage
from .commands import COMMANDS, ControlCommands
from .layout import divider, format_currency, format_text, right_align
from .models import LineItem, ReceiptData, ReceiptDocument, ReceiptLine, StoreInfo

_LOGGER = logging.getLogger(__name__)

RECEIPT_DATE_FORMAT = "%m-%d-%Y, %H:%M:%S"


class ReceiptFormatter:
    """Render receipt sections for a fixed paper width."""

    def __init__(
        self,
        *,
        width: int = DEFAULT_LINE_WIDTH,
        currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
        codepage: str | None = None,
        cut_mode: str = DEFAULT_CUT_MODE,
        footer_lines: Sequence[str] = DEFAULT_FOOTER_LINES,
        commands: ControlCommands = COMMANDS,
    ) -> None:
        self._width = width
        self._codepage = codepage or DEFAULT_CODEPAGE
        self._currency_symbol = self._fit(currency_symbol)
        self._code_table = get_code_table(codepage) if codepage else None
        if codepage and self._code_table is None:
            _LOGGER.warning("No ESC/POS code table known for codepage '%s'; printer default kept", codepage)
        self._cut_mode = cut_mode
        self._footer_lines = tuple(self._fit(line) for line in footer_lines)
        self._commands = commands

    @property
    def width(self) -> int:
        """Return the line width in characters."""
        return self._width

    @property
    def codepage(self) -> str:
        """Return the codepage text is encoded to."""
        return self._codepage

    def _document(self, parts: Iterable[bytes | str]) -> ReceiptDocument:
        return ReceiptDocument(tuple(parts), self._codepage)

    def _fit(self, text: str) -> str:
        # Column widths are measured on transcoded text
        return transcode_to_codepage(text, self._codepage)

    def _currency(self, amount: float | int | Decimal) -> str:
        return format_currency(amount, self._currency_symbol)

    def header(self, store: StoreInfo) -> ReceiptDocument:
        """Store name, address and phone, centred, ending left-aligned."""
        cmd = self._commands
        parts: list[bytes | str] = [cmd.init]
        if self._code_table is not None:
            parts.append(cmd.select_code_table(self._code_table))
        parts += [
            cmd.align_center,
            cmd.bold,
            cmd.double_height,
            self._fit(store.name.upper()), cmd.line_feed,
            cmd.normal,
            cmd.bold_off,
            self._fit(store.address), cmd.line_feed,
            self._fit(f"Tel: {store.phone}"), cmd.line_feed,
            cmd.line_feed,
            cmd.align_left,
        ]
        return self._document(parts)

    def transaction_info(self, transaction_id: str, timestamp: datetime, cashier: str) -> ReceiptDocument:
        """Date, receipt number and cashier between two ``=`` rules."""
        lf = self._commands.line_feed
        rule = divider("=", self._width)
        return self._document(
            [
                rule, lf,
                f"Date: {timestamp.strftime(RECEIPT_DATE_FORMAT)}", lf,
                self._fit(f"Receipt #: {transaction_id}"), lf,
                self._fit(f"Cashier: {cashier}"), lf,
                rule, lf,
            ]
        )

    def item_line(self, item: LineItem) -> ReceiptDocument:
        """Two rows: name and line total, then quantity and unit price."""
        lf = self._commands.line_feed
        name_width = self._width // 2
        name = format_text(self._fit(item.name), name_width).ljust(name_width)
        amount = right_align(self._currency(item.total), self._width - name_width)
        qty_price = f"  {item.quantity}x @ {self._currency(item.unit_price)}"
        return self._document([name + amount, lf, qty_price, lf])

    def totals(
        self,
        subtotal: float | int | Decimal,
        tax: float | int | Decimal,
        total: float | int | Decimal,
    ) -> ReceiptDocument:
        """Subtotal and tax, then a bold grand total between ``=`` rules."""
        cmd = self._commands
        lf = cmd.line_feed
        rule = divider("=", self._width)
        return self._document(
            [
                divider("-", self._width), lf,
                ReceiptLine("Subtotal:", self._currency(subtotal), self._width).render(), lf,
                ReceiptLine("Tax:", self._currency(tax), self._width).render(), lf,
                rule, lf,
                cmd.bold,
                ReceiptLine("TOTAL:", self._currency(total), self._width).render(), lf,
                cmd.bold_off,
                rule, lf,
            ]
        )

    def payment(self, method: str) -> ReceiptDocument:
        """Payment method row printed under the totals."""
        return self._document(
            [ReceiptLine("Payment:", self._fit(method), self._width).render(), self._commands.line_feed]
        )

    def footer(self) -> ReceiptDocument:
        """Thank-you lines and decoration, then the paper cut."""
        cmd = self._commands
        lf = cmd.line_feed
        parts: list[bytes | str] = [cmd.align_center, lf]
        for line in self._footer_lines:
            parts += [line, lf]
        parts += [lf, FOOTER_DECORATION, lf, lf, lf, cmd.cut(self._cut_mode)]
        return self._document(parts)

    def build(self, receipt: ReceiptData) -> ReceiptDocument:
        """Assemble the full receipt for one transaction."""
        document = self.header(receipt.store)
        document += self.transaction_info(receipt.transaction_id, receipt.timestamp, receipt.cashier)
        for item in receipt.items:
            document += self.item_line(item)
        document += self.totals(receipt.subtotal, receipt.tax, receipt.total)
        if receipt.payment_method:
            document += self.payment(receipt.payment_method)
        document += self.footer()
        if receipt.open_drawer:
            document += self._document([self._commands.open_drawer])
        _LOGGER.debug(
            "Built receipt %s: %d items, %d parts",
            receipt.transaction_id,
            len(receipt.items),
            len(document.parts),
        )
        return document
