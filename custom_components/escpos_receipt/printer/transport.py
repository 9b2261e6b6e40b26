"""Transport strategies and their attempt results."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
import logging
import time
from typing import TYPE_CHECKING, Any

from ..exceptions import TransportOperationFailed, TransportUnavailable
from .base_adapter import DeviceAdapter

if TYPE_CHECKING:
    from homeassistant.core import HomeAssistant

    from ..receipt.models import ReceiptDocument

_LOGGER = logging.getLogger(__name__)


class TransportAttempt(Enum):
    """Ways of getting a receipt out, in the order they are tried."""

    SERIAL = "serial"
    USB = "usb"
    BROWSER_DIALOG = "browser_dialog"


@dataclass(frozen=True)
class TransportResult:
    """Outcome of a single transport attempt."""

    transport: TransportAttempt
    ok: bool
    error: Exception | None = None
    latency_ms: int | None = None

    @classmethod
    def success(cls, transport: TransportAttempt, latency_ms: int | None = None) -> TransportResult:
        return cls(transport, True, None, latency_ms)

    @classmethod
    def failure(
        cls, transport: TransportAttempt, error: Exception, latency_ms: int | None = None
    ) -> TransportResult:
        return cls(transport, False, error, latency_ms)

    def as_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly view of the result."""
        return {
            "transport": self.transport.value,
            "ok": self.ok,
            "error": str(self.error) if self.error is not None else None,
            "latency_ms": self.latency_ms,
        }


def elapsed_ms(start: float) -> int:
    """Return milliseconds since a ``time.perf_counter()`` start."""
    return int((time.perf_counter() - start) * 1000)


class Transport(ABC):
    """A strategy that tries to deliver a receipt and reports how it went."""

    kind: TransportAttempt

    @abstractmethod
    async def attempt(self, hass: HomeAssistant, document: ReceiptDocument) -> TransportResult:
        """Try to deliver ``document``; never raises for delivery failures."""


class DeviceTransport(Transport):
    """Deliver the raw payload through a blocking device adapter."""

    def __init__(self, kind: TransportAttempt, adapter_factory: Callable[[], DeviceAdapter]) -> None:
        self.kind = kind
        self._adapter_factory = adapter_factory

    async def attempt(self, hass: HomeAssistant, document: ReceiptDocument) -> TransportResult:
        payload = document.payload
        adapter = self._adapter_factory()

        def _send() -> None:
            adapter.open()
            try:
                adapter.configure()
                adapter.write(payload)
            finally:
                adapter.close()

        start = time.perf_counter()
        try:
            await hass.async_add_executor_job(_send)
        except TransportUnavailable as err:
            _LOGGER.debug("%s transport unavailable: %s", self.kind.value, err)
            return TransportResult.failure(self.kind, err, elapsed_ms(start))
        except Exception as err:
            failure = err
            if not isinstance(err, TransportOperationFailed):
                failure = TransportOperationFailed(f"{type(err).__name__}: {err}")
                failure.__cause__ = err
            _LOGGER.warning(
                "Printing via %s failed: %s",
                adapter.get_connection_info(),
                failure,
            )
            return TransportResult.failure(self.kind, failure, elapsed_ms(start))

        latency_ms = elapsed_ms(start)
        _LOGGER.debug("Sent %d bytes via %s in %sms", len(payload), adapter.get_connection_info(), latency_ms)
        return TransportResult.success(self.kind, latency_ms)
