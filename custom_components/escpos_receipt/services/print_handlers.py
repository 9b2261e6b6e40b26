"""Receipt print service handler."""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any

from homeassistant.core import ServiceCall, ServiceResponse
from homeassistant.exceptions import HomeAssistantError
from homeassistant.util import dt as dt_util

from ..const import (
    ATTR_ADDRESS,
    ATTR_CASHIER,
    ATTR_ITEMS,
    ATTR_NAME,
    ATTR_OPEN_DRAWER,
    ATTR_PAYMENT_METHOD,
    ATTR_PHONE,
    ATTR_QUANTITY,
    ATTR_STORE,
    ATTR_SUBTOTAL,
    ATTR_TAX,
    ATTR_TIMESTAMP,
    ATTR_TOTAL,
    ATTR_TRANSACTION_ID,
    ATTR_UNIT_PRICE,
    DOMAIN,
)
from ..exceptions import FallbackUnavailable
from ..printer import PrintDispatcher
from ..receipt import LineItem, ReceiptData, ReceiptFormatter, StoreInfo

_LOGGER = logging.getLogger(__name__)


def _line_item(data: Mapping[str, Any]) -> LineItem:
    quantity = data[ATTR_QUANTITY]
    unit_price = data[ATTR_UNIT_PRICE]
    return LineItem(
        name=data[ATTR_NAME],
        quantity=quantity,
        unit_price=unit_price,
        total=data.get(ATTR_TOTAL, quantity * unit_price),
    )


def receipt_from_service_data(data: Mapping[str, Any]) -> ReceiptData:
    """Build receipt data from validated service call data."""
    store = data[ATTR_STORE]
    timestamp = data.get(ATTR_TIMESTAMP) or dt_util.now()
    if timestamp.tzinfo is not None:
        timestamp = dt_util.as_local(timestamp)
    return ReceiptData(
        store=StoreInfo(store[ATTR_NAME], store.get(ATTR_ADDRESS, ""), store.get(ATTR_PHONE, "")),
        items=tuple(_line_item(item) for item in data.get(ATTR_ITEMS, [])),
        transaction_id=data[ATTR_TRANSACTION_ID],
        timestamp=timestamp,
        cashier=data[ATTR_CASHIER],
        subtotal=data[ATTR_SUBTOTAL],
        tax=data[ATTR_TAX],
        total=data[ATTR_TOTAL],
        payment_method=data.get(ATTR_PAYMENT_METHOD),
        open_drawer=bool(data.get(ATTR_OPEN_DRAWER, False)),
    )


async def handle_print_receipt(call: ServiceCall) -> ServiceResponse:
    """Handle print_receipt service call."""
    runtime = call.hass.data.get(DOMAIN)
    if not runtime:
        raise HomeAssistantError("ESC/POS receipt printing is not set up")
    formatter: ReceiptFormatter = runtime["formatter"]
    dispatcher: PrintDispatcher = runtime["dispatcher"]

    receipt = receipt_from_service_data(call.data)
    _LOGGER.debug(
        "Service call: print_receipt for transaction %s (%d items)",
        receipt.transaction_id,
        len(receipt.items),
    )
    document = formatter.build(receipt)
    try:
        outcome = await dispatcher.dispatch(call.hass, document)
    except FallbackUnavailable as err:
        _LOGGER.exception("Service print_receipt failed for transaction %s", receipt.transaction_id)
        raise HomeAssistantError(str(err)) from err
    return outcome.as_dict()
