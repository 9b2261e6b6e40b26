"""ESC/POS receipt printing for Home Assistant."""

from __future__ import annotations

import logging

from homeassistant.core import HomeAssistant
from homeassistant.helpers import config_validation as cv
from homeassistant.helpers.typing import ConfigType
import voluptuous as vol

from .const import (
    CONF_CODEPAGE,
    CONF_CURRENCY_SYMBOL,
    CONF_CUT_MODE,
    CONF_FOOTER_LINES,
    CONF_LINE_WIDTH,
    CONF_TIMEOUT,
    CUT_MODES,
    DEFAULT_CURRENCY_SYMBOL,
    DEFAULT_CUT_MODE,
    DEFAULT_FOOTER_LINES,
    DEFAULT_LINE_WIDTH,
    DEFAULT_TIMEOUT,
    DOMAIN,
    MAX_LINE_WIDTH,
    MIN_LINE_WIDTH,
)
from .printer import async_register_print_pages, create_print_dispatcher
from .receipt import ReceiptFormatter
from .services import async_setup_services

_LOGGER = logging.getLogger(__name__)

DOMAIN_SCHEMA = vol.Schema(
    {
        vol.Optional(CONF_LINE_WIDTH, default=DEFAULT_LINE_WIDTH): vol.All(
            vol.Coerce(int), vol.Range(min=MIN_LINE_WIDTH, max=MAX_LINE_WIDTH)
        ),
        vol.Optional(CONF_CURRENCY_SYMBOL, default=DEFAULT_CURRENCY_SYMBOL): cv.string,
        vol.Optional(CONF_CODEPAGE): cv.string,
        vol.Optional(CONF_CUT_MODE, default=DEFAULT_CUT_MODE): vol.In(CUT_MODES),
        vol.Optional(CONF_FOOTER_LINES, default=list(DEFAULT_FOOTER_LINES)): vol.All(
            cv.ensure_list, [cv.string]
        ),
        vol.Optional(CONF_TIMEOUT, default=DEFAULT_TIMEOUT): vol.All(
            vol.Coerce(float), vol.Range(min=0.5, max=60.0)
        ),
    }
)

CONFIG_SCHEMA = vol.Schema({DOMAIN: DOMAIN_SCHEMA}, extra=vol.ALLOW_EXTRA)


async def async_setup(hass: HomeAssistant, config: ConfigType) -> bool:
    """Set up the receipt formatter, the print dispatcher and services."""
    conf = config.get(DOMAIN) or DOMAIN_SCHEMA({})

    formatter = ReceiptFormatter(
        width=conf[CONF_LINE_WIDTH],
        currency_symbol=conf[CONF_CURRENCY_SYMBOL],
        codepage=conf.get(CONF_CODEPAGE),
        cut_mode=conf[CONF_CUT_MODE],
        footer_lines=conf[CONF_FOOTER_LINES],
    )
    dispatcher = create_print_dispatcher(conf[CONF_TIMEOUT])
    hass.data[DOMAIN] = {"formatter": formatter, "dispatcher": dispatcher}

    await async_register_print_pages(hass)
    await async_setup_services(hass)
    _LOGGER.debug(
        "ESC/POS receipt printing set up (width=%s, cut=%s, timeout=%ss)",
        conf[CONF_LINE_WIDTH],
        conf[CONF_CUT_MODE],
        conf[CONF_TIMEOUT],
    )
    return True
