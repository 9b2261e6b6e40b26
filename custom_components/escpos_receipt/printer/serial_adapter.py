"""Serial printer adapter implementation."""

from __future__ import annotations

import logging
from typing import Any

from ..exceptions import TransportOperationFailed, TransportUnavailable
from .base_adapter import DeviceAdapter
from .config import SerialTransportConfig

_LOGGER = logging.getLogger(__name__)


# Late import of python-escpos so a missing dependency only disables this transport
def _get_serial_printer() -> type[Any]:
    from escpos.printer import Serial  # noqa: PLC0415

    return Serial  # type: ignore[no-any-return]


def _list_serial_ports() -> list[Any]:
    from serial.tools import list_ports  # noqa: PLC0415

    return list(list_ports.comports())


class SerialDeviceAdapter(DeviceAdapter):
    """Adapter for printers attached through a USB-serial bridge."""

    def __init__(self, config: SerialTransportConfig) -> None:
        super().__init__(config)
        self._serial_config = config
        self._devfile: str | None = None
        self._printer: Any = None

    @property
    def config(self) -> SerialTransportConfig:
        """Return the serial transport configuration."""
        return self._serial_config

    def open(self) -> None:
        """Pick the first serial port owned by the configured vendor."""
        try:
            ports = _list_serial_ports()
            serial_class = _get_serial_printer()
        except ImportError as err:
            raise TransportUnavailable(f"Serial printing unavailable: {err}") from err

        vendor_id = self._serial_config.vendor_id
        for port in ports:
            if getattr(port, "vid", None) == vendor_id:
                self._devfile = port.device
                break
        else:
            raise TransportOperationFailed(f"No serial port with vendor id {vendor_id:04X}")

        _LOGGER.debug("Using serial port %s for vendor %04X", self._devfile, vendor_id)
        self._printer = serial_class(
            devfile=self._devfile,
            baudrate=self._serial_config.baudrate,
            bytesize=self._serial_config.bytesize,
            parity=self._serial_config.parity,
            stopbits=self._serial_config.stopbits,
            timeout=self._serial_config.timeout,
            xonxoff=False,
            dsrdtr=False,
        )

    def configure(self) -> None:
        """Open the line with the fixed baud rate and framing."""
        self._printer.open()

    def write(self, data: bytes) -> None:
        """Write raw bytes to the serial line."""
        self._printer._raw(data)

    def close(self) -> None:
        """Flush and close the serial line if it was opened."""
        if self._printer is None:
            return
        try:
            self._printer.close()
        except Exception as err:
            _LOGGER.debug("Closing serial port %s failed: %s", self._devfile, err)
        finally:
            self._printer = None

    def get_connection_info(self) -> str:
        """Return a human-readable connection info string."""
        if self._devfile:
            return f"serial {self._devfile}"
        return f"serial {self._serial_config.vendor_id:04X}"

