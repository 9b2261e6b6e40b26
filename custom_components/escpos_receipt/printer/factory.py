"""Factory function for the receipt print dispatcher."""

from __future__ import annotations

from functools import partial

from ..const import DEFAULT_TIMEOUT
from .config import SerialTransportConfig, UsbTransportConfig
from .dispatcher import PrintDispatcher
from .fallback import BrowserDialogFallback
from .serial_adapter import SerialDeviceAdapter
from .transport import DeviceTransport, TransportAttempt
from .usb_adapter import UsbDeviceAdapter


def create_print_dispatcher(timeout: float = DEFAULT_TIMEOUT) -> PrintDispatcher:
    """Build the fixed chain: serial, then USB, then the browser print page."""
    serial_config = SerialTransportConfig(timeout=timeout)
    usb_config = UsbTransportConfig(timeout=timeout)
    return PrintDispatcher(
        [
            DeviceTransport(TransportAttempt.SERIAL, partial(SerialDeviceAdapter, serial_config)),
            DeviceTransport(TransportAttempt.USB, partial(UsbDeviceAdapter, usb_config)),
        ],
        BrowserDialogFallback(),
    )
