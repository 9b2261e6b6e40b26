"""Voluptuous schemas for receipt service calls."""

from __future__ import annotations

from homeassistant.helpers import config_validation as cv
import voluptuous as vol

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
)

# Amounts are rejected when negative; the layout layer itself does not check.
AMOUNT = vol.All(vol.Coerce(float), vol.Range(min=0))

STORE_SCHEMA = vol.Schema(
    {
        vol.Required(ATTR_NAME): cv.string,
        vol.Optional(ATTR_ADDRESS, default=""): cv.string,
        vol.Optional(ATTR_PHONE, default=""): cv.string,
    }
)

LINE_ITEM_SCHEMA = vol.Schema(
    {
        vol.Required(ATTR_NAME): cv.string,
        vol.Required(ATTR_QUANTITY): vol.All(vol.Coerce(int), vol.Range(min=1)),
        vol.Required(ATTR_UNIT_PRICE): AMOUNT,
        vol.Optional(ATTR_TOTAL): AMOUNT,
    }
)

PRINT_RECEIPT_SCHEMA = vol.Schema(
    {
        vol.Required(ATTR_STORE): STORE_SCHEMA,
        vol.Optional(ATTR_ITEMS, default=list): vol.All(cv.ensure_list, [LINE_ITEM_SCHEMA]),
        vol.Required(ATTR_TRANSACTION_ID): cv.string,
        vol.Optional(ATTR_TIMESTAMP): cv.datetime,
        vol.Required(ATTR_CASHIER): cv.string,
        vol.Required(ATTR_SUBTOTAL): AMOUNT,
        vol.Required(ATTR_TAX): AMOUNT,
        vol.Required(ATTR_TOTAL): AMOUNT,
        vol.Optional(ATTR_PAYMENT_METHOD): cv.string,
        vol.Optional(ATTR_OPEN_DRAWER, default=False): cv.boolean,
    }
)
