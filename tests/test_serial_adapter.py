"""Tests for the serial device adapter."""

from unittest.mock import MagicMock, patch

import pytest

from custom_components.escpos_receipt.exceptions import (
    TransportOperationFailed,
    TransportUnavailable,
)
from custom_components.escpos_receipt.printer import SerialDeviceAdapter, SerialTransportConfig


def _port(device: str, vid: int | None) -> MagicMock:
    port = MagicMock()
    port.device = device
    port.vid = vid
    return port


class TestSerialTransportConfig:
    def test_defaults(self) -> None:
        config = SerialTransportConfig()
        assert config.connection_type == "serial"
        assert config.vendor_id == 0x04B8
        assert config.baudrate == 9600
        assert config.bytesize == 8
        assert config.parity == "N"
        assert config.stopbits == 1
        assert config.timeout == 4.0


class TestSerialDeviceAdapter:
    """Port selection and the open, configure, write, close sequence."""

    def test_picks_first_vendor_port(self) -> None:
        ports = [_port("/dev/ttyS0", None), _port("/dev/ttyUSB0", 0x04B8), _port("/dev/ttyUSB1", 0x04B8)]
        fake = MagicMock()
        adapter = SerialDeviceAdapter(SerialTransportConfig(timeout=2.5))
        with (
            patch("serial.tools.list_ports.comports", return_value=ports),
            patch("escpos.printer.Serial", return_value=fake) as serial_cls,
        ):
            adapter.open()

        serial_cls.assert_called_once_with(
            devfile="/dev/ttyUSB0",
            baudrate=9600,
            bytesize=8,
            parity="N",
            stopbits=1,
            timeout=2.5,
            xonxoff=False,
            dsrdtr=False,
        )
        assert adapter.get_connection_info() == "serial /dev/ttyUSB0"

    def test_configure_write_close(self) -> None:
        fake = MagicMock()
        adapter = SerialDeviceAdapter(SerialTransportConfig())
        with (
            patch("serial.tools.list_ports.comports", return_value=[_port("COM3", 0x04B8)]),
            patch("escpos.printer.Serial", return_value=fake),
        ):
            adapter.open()
        adapter.configure()
        adapter.write(b"\x1b@hello")
        adapter.close()

        fake.open.assert_called_once()
        fake._raw.assert_called_once_with(b"\x1b@hello")
        fake.close.assert_called_once()

    def test_no_matching_port(self, no_serial_ports: MagicMock) -> None:
        adapter = SerialDeviceAdapter(SerialTransportConfig())
        with pytest.raises(TransportOperationFailed, match="04B8"):
            adapter.open()
        assert adapter.get_connection_info() == "serial 04B8"

    def test_other_vendor_ignored(self) -> None:
        adapter = SerialDeviceAdapter(SerialTransportConfig())
        with (
            patch("serial.tools.list_ports.comports", return_value=[_port("/dev/ttyUSB0", 0x0403)]),
            pytest.raises(TransportOperationFailed),
        ):
            adapter.open()

    def test_missing_library(self) -> None:
        adapter = SerialDeviceAdapter(SerialTransportConfig())
        with (
            patch(
                "custom_components.escpos_receipt.printer.serial_adapter._list_serial_ports",
                side_effect=ImportError("No module named 'serial'"),
            ),
            pytest.raises(TransportUnavailable),
        ):
            adapter.open()

    def test_close_without_open(self) -> None:
        SerialDeviceAdapter(SerialTransportConfig()).close()

    def test_close_errors_are_not_raised(self) -> None:
        fake = MagicMock()
        fake.close.side_effect = OSError("gone")
        adapter = SerialDeviceAdapter(SerialTransportConfig())
        with (
            patch("serial.tools.list_ports.comports", return_value=[_port("COM3", 0x04B8)]),
            patch("escpos.printer.Serial", return_value=fake),
        ):
            adapter.open()
        adapter.close()
        adapter.close()
        fake.close.assert_called_once()
