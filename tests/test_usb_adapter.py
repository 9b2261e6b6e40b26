"""Tests for USB device adapter."""

from unittest.mock import MagicMock, patch

import pytest
import usb.core

from custom_components.escpos_receipt.exceptions import (
    TransportOperationFailed,
    TransportUnavailable,
)
from custom_components.escpos_receipt.printer import UsbDeviceAdapter, UsbTransportConfig


@pytest.fixture
def usb_config():
    """Create a USB transport configuration for testing."""
    return UsbTransportConfig(timeout=4.0)


@pytest.fixture
def usb_adapter(usb_config):
    """Create a USB device adapter for testing."""
    return UsbDeviceAdapter(usb_config)


@pytest.fixture
def mock_device():
    """A USB device that accepts every write in full."""
    device = MagicMock()
    device.is_kernel_driver_active.return_value = False
    device.write.side_effect = lambda ep, data, timeout: len(data)
    return device


class TestUsbTransportConfig:
    """Tests for UsbTransportConfig dataclass."""

    def test_default_values(self):
        """Test default values are set correctly."""
        config = UsbTransportConfig()
        assert config.connection_type == "usb"
        assert config.vendor_id == 0x04B8
        assert config.configuration == 1
        assert config.interface == 0
        assert config.out_ep == 0x01
        assert config.timeout == 4.0


class TestUsbDeviceAdapter:
    """Tests for UsbDeviceAdapter class."""

    def test_config_property(self, usb_adapter, usb_config):
        """Test config property returns USB config."""
        assert usb_adapter.config == usb_config

    def test_get_connection_info(self, usb_adapter):
        """Test get_connection_info returns the vendor id."""
        assert usb_adapter.get_connection_info() == "USB 04B8"

    def test_open_finds_by_vendor(self, usb_adapter, mock_device):
        """Test open looks the device up by vendor id."""
        with patch("usb.core.find", return_value=mock_device) as find:
            usb_adapter.open()
        find.assert_called_once_with(idVendor=0x04B8)

    def test_open_device_not_found(self, usb_adapter, no_usb_device):
        """Test open fails when no device of the vendor is attached."""
        with pytest.raises(TransportOperationFailed, match="04B8"):
            usb_adapter.open()

    def test_open_without_backend(self, usb_adapter):
        """Test a missing libusb backend makes the transport unavailable."""
        with (
            patch("usb.core.find", side_effect=usb.core.NoBackendError("No backend available")),
            pytest.raises(TransportUnavailable),
        ):
            usb_adapter.open()


class TestUsbAdapterSession:
    """Tests for the configure, write and close sequence."""

    def test_full_session(self, usb_adapter, mock_device):
        """Test configuration 1 and interface 0 are used and released."""
        with (
            patch("usb.core.find", return_value=mock_device),
            patch("usb.util.claim_interface") as claim,
            patch("usb.util.release_interface") as release,
            patch("usb.util.dispose_resources") as dispose,
        ):
            usb_adapter.open()
            usb_adapter.configure()
            usb_adapter.write(b"\x1b@receipt")
            usb_adapter.close()

        mock_device.set_configuration.assert_called_once_with(1)
        claim.assert_called_once_with(mock_device, 0)
        mock_device.write.assert_called_once_with(0x01, b"\x1b@receipt", timeout=4000)
        release.assert_called_once_with(mock_device, 0)
        dispose.assert_called_once_with(mock_device)
        mock_device.detach_kernel_driver.assert_not_called()

    def test_detaches_active_kernel_driver(self, usb_adapter, mock_device):
        """Test an attached kernel driver is detached before claiming."""
        mock_device.is_kernel_driver_active.return_value = True
        with (
            patch("usb.core.find", return_value=mock_device),
            patch("usb.util.claim_interface"),
        ):
            usb_adapter.open()
            usb_adapter.configure()
        mock_device.detach_kernel_driver.assert_called_once_with(0)

    def test_kernel_driver_check_not_supported(self, usb_adapter, mock_device):
        """Test platforms without kernel driver queries still configure."""
        mock_device.is_kernel_driver_active.side_effect = NotImplementedError
        with (
            patch("usb.core.find", return_value=mock_device),
            patch("usb.util.claim_interface") as claim,
        ):
            usb_adapter.open()
            usb_adapter.configure()
        claim.assert_called_once()

    def test_short_write(self, usb_adapter, mock_device):
        """Test a partial write is reported as a failure."""
        mock_device.write.side_effect = None
        mock_device.write.return_value = 2
        with patch("usb.core.find", return_value=mock_device):
            usb_adapter.open()
        with pytest.raises(TransportOperationFailed, match="Short USB write"):
            usb_adapter.write(b"\x1b@receipt")

    def test_close_not_claimed(self, usb_adapter, mock_device):
        """Test close only disposes when the interface was never claimed."""
        with (
            patch("usb.core.find", return_value=mock_device),
            patch("usb.util.release_interface") as release,
            patch("usb.util.dispose_resources") as dispose,
        ):
            usb_adapter.open()
            usb_adapter.close()
        release.assert_not_called()
        dispose.assert_called_once_with(mock_device)

    def test_close_without_open(self, usb_adapter):
        """Test close is a no-op before open."""
        usb_adapter.close()

    def test_close_reattaches_detached_kernel_driver(self, usb_adapter, mock_device):
        """Test the kernel driver detached on configure is given back on close."""
        mock_device.is_kernel_driver_active.return_value = True
        with (
            patch("usb.core.find", return_value=mock_device),
            patch("usb.util.claim_interface"),
            patch("usb.util.release_interface") as release,
            patch("usb.util.dispose_resources"),
        ):
            usb_adapter.open()
            usb_adapter.configure()
            usb_adapter.close()
        release.assert_called_once_with(mock_device, 0)
        mock_device.attach_kernel_driver.assert_called_once_with(0)

    def test_close_leaves_kernel_driver_alone(self, usb_adapter, mock_device):
        """Test no kernel driver is attached when none was detached."""
        with (
            patch("usb.core.find", return_value=mock_device),
            patch("usb.util.claim_interface"),
            patch("usb.util.release_interface"),
            patch("usb.util.dispose_resources"),
        ):
            usb_adapter.open()
            usb_adapter.configure()
            usb_adapter.close()
        mock_device.attach_kernel_driver.assert_not_called()

    def test_reattach_failure_still_disposes(self, usb_adapter, mock_device):
        """Test a failing reattach does not stop cleanup."""
        mock_device.is_kernel_driver_active.return_value = True
        mock_device.attach_kernel_driver.side_effect = usb.core.USBError("busy")
        with (
            patch("usb.core.find", return_value=mock_device),
            patch("usb.util.claim_interface"),
            patch("usb.util.release_interface"),
            patch("usb.util.dispose_resources") as dispose,
        ):
            usb_adapter.open()
            usb_adapter.configure()
            usb_adapter.close()
        dispose.assert_called_once_with(mock_device)
