"""Configuration dataclasses for device transports."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from ..const import (
    DEFAULT_TIMEOUT,
    EPSON_VENDOR_ID,
    SERIAL_BAUDRATE,
    SERIAL_BYTESIZE,
    SERIAL_PARITY,
    SERIAL_STOPBITS,
    USB_CONFIGURATION,
    USB_INTERFACE,
    USB_OUT_EP,
)


@dataclass
class TransportConfig:
    """Settings shared by all device transports."""

    vendor_id: int = EPSON_VENDOR_ID
    timeout: float = DEFAULT_TIMEOUT


@dataclass
class SerialTransportConfig(TransportConfig):
    """Serial line settings: 9600 baud, 8N1, no flow control."""

    connection_type: Literal["serial"] = field(default="serial", repr=False)
    baudrate: int = SERIAL_BAUDRATE
    bytesize: int = SERIAL_BYTESIZE
    parity: str = SERIAL_PARITY
    stopbits: int = SERIAL_STOPBITS


@dataclass
class UsbTransportConfig(TransportConfig):
    """USB configuration, interface and bulk OUT endpoint."""

    connection_type: Literal["usb"] = field(default="usb", repr=False)
    configuration: int = USB_CONFIGURATION
    interface: int = USB_INTERFACE
    out_ep: int = USB_OUT_EP
