"""ESC/POS control commands.

Every directive is a fixed byte sequence that receipt printers of the
ESC/POS family understand. The sequences are emitted byte-for-byte; the
parameterized ones append their argument as a single raw byte.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..exceptions import ProtocolParameterError

ESC = b"\x1b"
GS = b"\x1d"
LF = b"\x0a"
FF = b"\x0c"
CR = b"\x0d"


def _byte_param(name: str, n: int) -> bytes:
    """Return ``n`` as one raw byte or raise if it does not fit."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise ProtocolParameterError(f"{name} expects an integer, got {type(n).__name__}")
    if not 0 <= n <= 255:
        raise ProtocolParameterError(f"{name} parameter must be within 0..255, got {n}")
    return bytes((n,))


@dataclass(frozen=True)
class ControlCommands:
    """Immutable table of printer directives."""

    # Printer initialization
    init: bytes = ESC + b"\x40"

    # Text formatting
    bold: bytes = ESC + b"\x45\x01"
    bold_off: bytes = ESC + b"\x45\x00"
    underline: bytes = ESC + b"\x2d\x01"
    underline_off: bytes = ESC + b"\x2d\x00"
    double_height: bytes = ESC + b"\x21\x10"
    double_width: bytes = ESC + b"\x21\x20"
    double_size: bytes = ESC + b"\x21\x30"
    normal: bytes = ESC + b"\x21\x00"

    # Alignment
    align_left: bytes = ESC + b"\x61\x00"
    align_center: bytes = ESC + b"\x61\x01"
    align_right: bytes = ESC + b"\x61\x02"

    default_line_spacing: bytes = ESC + b"\x32"

    # Paper handling
    line_feed: bytes = LF
    form_feed: bytes = FF
    carriage_return: bytes = CR
    cut_paper_full: bytes = GS + b"\x56\x00"
    cut_paper_partial: bytes = GS + b"\x56\x01"

    # Cash drawer kick, pin 2, 25ms on / 250ms off
    open_drawer: bytes = ESC + b"\x70\x00\x19\xfa"

    def set_line_spacing(self, n: int) -> bytes:
        """Set line spacing to ``n`` motion units (ESC 3 n)."""
        return ESC + b"\x33" + _byte_param("set_line_spacing", n)

    def select_character_set(self, n: int) -> bytes:
        """Select international character set ``n`` (ESC R n)."""
        return ESC + b"\x52" + _byte_param("select_character_set", n)

    def select_code_table(self, n: int) -> bytes:
        """Select character code table ``n`` (ESC t n)."""
        return ESC + b"\x74" + _byte_param("select_code_table", n)

    def cut(self, mode: str | None) -> bytes:
        """Return the cut directive for a cut mode name, full by default."""
        if mode and mode.lower() == "partial":
            return self.cut_paper_partial
        return self.cut_paper_full


COMMANDS = ControlCommands()
