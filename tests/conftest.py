from collections.abc import Generator
from datetime import datetime
from typing import Any
from unittest.mock import MagicMock, patch

import pytest

from custom_components.escpos_receipt.receipt import LineItem, ReceiptData, StoreInfo


@pytest.fixture(autouse=True)
def auto_enable_custom_integrations(enable_custom_integrations: Any) -> None:
    return


@pytest.fixture
def config_dir(hass: Any, tmp_path: Any) -> Any:
    """Point the Home Assistant config directory at a temporary path."""
    hass.config.config_dir = str(tmp_path)
    return tmp_path


@pytest.fixture
def acme_receipt() -> ReceiptData:
    """One-item receipt used across formatter and service tests."""
    return ReceiptData(
        store=StoreInfo("Acme Store", "123 Main St", "555-1234"),
        items=(LineItem("Widget", 2, 5.00, 10.00),),
        transaction_id="TX-1001",
        timestamp=datetime(2024, 3, 5, 14, 7, 9),
        cashier="Jane",
        subtotal=10.00,
        tax=0.80,
        total=10.80,
    )


@pytest.fixture
def no_serial_ports() -> Generator[MagicMock, None, None]:
    """No serial ports present on the host."""
    with patch("serial.tools.list_ports.comports", return_value=[]) as comports:
        yield comports


@pytest.fixture
def no_usb_device() -> Generator[MagicMock, None, None]:
    """No USB device of the printer vendor attached."""
    with patch("usb.core.find", return_value=None) as find:
        yield find
