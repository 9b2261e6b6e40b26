"""Exceptions raised by the ESC/POS receipt integration."""

from __future__ import annotations


class EscposReceiptError(Exception):
    """Base class for receipt printing errors."""


class ProtocolParameterError(EscposReceiptError, ValueError):
    """A parameterized printer command received a value that does not fit one byte."""


class TransportUnavailable(EscposReceiptError):
    """The library or backend for a transport is not present on this host."""


class TransportOperationFailed(EscposReceiptError):
    """A device was reachable in principle but open, configure or write failed."""


class FallbackUnavailable(EscposReceiptError):
    """The print page could not be created, so the receipt has nowhere to go."""
