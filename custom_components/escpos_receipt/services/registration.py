"""Service registration."""

from __future__ import annotations

import logging

from homeassistant.core import HomeAssistant, SupportsResponse

from ..const import DOMAIN, SERVICE_PRINT_RECEIPT
from .print_handlers import handle_print_receipt
from .schemas import PRINT_RECEIPT_SCHEMA

_LOGGER = logging.getLogger(__name__)


async def async_setup_services(hass: HomeAssistant) -> None:
    """Set up services for the ESC/POS receipt integration."""
    hass.services.async_register(
        DOMAIN,
        SERVICE_PRINT_RECEIPT,
        handle_print_receipt,
        schema=PRINT_RECEIPT_SCHEMA,
        supports_response=SupportsResponse.OPTIONAL,
    )
    _LOGGER.debug("Registered service %s.%s", DOMAIN, SERVICE_PRINT_RECEIPT)
