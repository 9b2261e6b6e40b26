"""USB printer adapter implementation."""

from __future__ import annotations

import contextlib
import logging
from typing import Any

from ..exceptions import TransportOperationFailed, TransportUnavailable
from .base_adapter import DeviceAdapter
from .config import UsbTransportConfig

_LOGGER = logging.getLogger(__name__)


class UsbDeviceAdapter(DeviceAdapter):
    """Adapter for printers with a raw USB bulk endpoint."""

    def __init__(self, config: UsbTransportConfig) -> None:
        super().__init__(config)
        self._usb_config = config
        self._device: Any = None
        self._claimed = False
        self._detached = False

    @property
    def config(self) -> UsbTransportConfig:
        """Return the USB transport configuration."""
        return self._usb_config

    def open(self) -> None:
        """Find the first USB device of the configured vendor."""
        try:
            import usb.core  # noqa: PLC0415
        except ImportError as err:
            raise TransportUnavailable(f"USB printing unavailable: {err}") from err

        vendor_id = self._usb_config.vendor_id
        try:
            device = usb.core.find(idVendor=vendor_id)
        except usb.core.NoBackendError as err:
            raise TransportUnavailable("No libusb backend available") from err
        if device is None:
            raise TransportOperationFailed(f"No USB device with vendor id {vendor_id:04X}")
        self._device = device

    def configure(self) -> None:
        """Select the configuration and claim the printer interface."""
        import usb.util  # noqa: PLC0415

        device = self._device
        interface = self._usb_config.interface
        kernel_driver_active: bool | None = None
        try:
            kernel_driver_active = bool(device.is_kernel_driver_active(interface))
        except NotImplementedError:
            # Not supported by the libusb backend on this platform
            pass
        if kernel_driver_active:
            _LOGGER.debug("Detaching kernel driver from interface %s", interface)
            device.detach_kernel_driver(interface)
            self._detached = True

        device.set_configuration(self._usb_config.configuration)
        usb.util.claim_interface(device, interface)
        self._claimed = True

    def write(self, data: bytes) -> None:
        """Send the payload to the bulk OUT endpoint."""
        written = self._device.write(
            self._usb_config.out_ep,
            data,
            timeout=int(self._usb_config.timeout * 1000),  # USB timeout in milliseconds
        )
        if written != len(data):
            raise TransportOperationFailed(f"Short USB write: {written} of {len(data)} bytes")

    def close(self) -> None:
        """Release the interface and reattach any kernel driver detached on configure."""
        if self._device is None:
            return
        import usb.util  # noqa: PLC0415

        device = self._device
        if self._claimed:
            with contextlib.suppress(Exception):
                usb.util.release_interface(device, self._usb_config.interface)
        if self._detached:
            with contextlib.suppress(Exception):
                device.attach_kernel_driver(self._usb_config.interface)
        with contextlib.suppress(Exception):
            usb.util.dispose_resources(device)
        self._device = None
        self._claimed = False
        self._detached = False

    def get_connection_info(self) -> str:
        """Return a human-readable connection info string."""
        return f"USB {self._usb_config.vendor_id:04X}"
