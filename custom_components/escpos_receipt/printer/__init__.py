"""Printer transport package for ESC/POS receipt printers.

Receipts are delivered over a USB-serial bridge or raw USB, falling back to
a self-printing page opened from a Home Assistant notification.
"""

from __future__ import annotations

from .base_adapter import DeviceAdapter
from .config import SerialTransportConfig, TransportConfig, UsbTransportConfig
from .dispatcher import DispatchOutcome, DispatchState, PrintDispatcher
from .factory import create_print_dispatcher
from .fallback import BrowserDialogFallback, async_register_print_pages, render_print_page
from .serial_adapter import SerialDeviceAdapter
from .transport import DeviceTransport, Transport, TransportAttempt, TransportResult
from .usb_adapter import UsbDeviceAdapter

__all__ = [
    "BrowserDialogFallback",
    "DeviceAdapter",
    "DeviceTransport",
    "DispatchOutcome",
    "DispatchState",
    "PrintDispatcher",
    "SerialDeviceAdapter",
    "SerialTransportConfig",
    "Transport",
    "TransportAttempt",
    "TransportConfig",
    "TransportResult",
    "UsbDeviceAdapter",
    "UsbTransportConfig",
    "async_register_print_pages",
    "create_print_dispatcher",
    "render_print_page",
]
