"""Deliver receipts through an ordered chain of transports."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
import logging
from typing import TYPE_CHECKING, Any

from ..exceptions import FallbackUnavailable
from .transport import Transport, TransportAttempt, TransportResult

if TYPE_CHECKING:
    from homeassistant.core import HomeAssistant

    from ..receipt.models import ReceiptDocument

_LOGGER = logging.getLogger(__name__)


class DispatchState(Enum):
    """Where a dispatch currently is."""

    IDLE = "idle"
    ATTEMPTING_SERIAL = "attempting_serial"
    ATTEMPTING_USB = "attempting_usb"
    RENDERING_FALLBACK = "rendering_fallback"
    DONE = "done"


_ATTEMPT_STATES: dict[TransportAttempt, DispatchState] = {
    TransportAttempt.SERIAL: DispatchState.ATTEMPTING_SERIAL,
    TransportAttempt.USB: DispatchState.ATTEMPTING_USB,
    TransportAttempt.BROWSER_DIALOG: DispatchState.RENDERING_FALLBACK,
}


@dataclass(frozen=True)
class DispatchOutcome:
    """Which transport delivered a receipt and every attempt on the way."""

    transport: TransportAttempt
    attempts: tuple[TransportResult, ...]

    @property
    def used_fallback(self) -> bool:
        """Return True when the browser print page delivered the receipt."""
        return self.transport is TransportAttempt.BROWSER_DIALOG

    def as_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly view of the outcome."""
        return {
            "transport": self.transport.value,
            "attempts": [result.as_dict() for result in self.attempts],
        }


class PrintDispatcher:
    """Try each device transport once, in order, then the fallback.

    Dispatches are serialized: a second receipt waits until the first has
    either reached a device or been handed to the fallback.
    """

    def __init__(self, transports: Sequence[Transport], fallback: Transport) -> None:
        self._transports: tuple[Transport, ...] = tuple(transports)
        self._fallback = fallback
        self._state = DispatchState.IDLE
        self._lock = asyncio.Lock()
        self._last_outcome: DispatchOutcome | None = None

    @property
    def state(self) -> DispatchState:
        """Return the current dispatch state."""
        return self._state

    @property
    def chain(self) -> tuple[TransportAttempt, ...]:
        """Return the transports in the order they are tried."""
        return (*(t.kind for t in self._transports), self._fallback.kind)

    @property
    def last_outcome(self) -> DispatchOutcome | None:
        """Return the outcome of the most recent successful dispatch."""
        return self._last_outcome

    def _enter(self, transport: Transport) -> None:
        self._state = _ATTEMPT_STATES.get(transport.kind, self._state)
        _LOGGER.debug("Dispatch state -> %s", self._state.value)

    async def dispatch(self, hass: HomeAssistant, document: ReceiptDocument) -> DispatchOutcome:
        """Deliver ``document``; raises FallbackUnavailable only if nothing worked."""
        async with self._lock:
            self._state = DispatchState.IDLE
            attempts: list[TransportResult] = []
            try:
                for transport in self._transports:
                    self._enter(transport)
                    result = await transport.attempt(hass, document)
                    attempts.append(result)
                    if result.ok:
                        return self._finish(transport.kind, attempts)

                _LOGGER.warning("Direct printer access failed, using browser print dialog")
                self._enter(self._fallback)
                result = await self._fallback.attempt(hass, document)
                attempts.append(result)
                if not result.ok:
                    if isinstance(result.error, FallbackUnavailable):
                        raise result.error
                    raise FallbackUnavailable(str(result.error)) from result.error
                return self._finish(self._fallback.kind, attempts)
            finally:
                self._state = DispatchState.DONE

    def _finish(self, transport: TransportAttempt, attempts: list[TransportResult]) -> DispatchOutcome:
        outcome = DispatchOutcome(transport, tuple(attempts))
        self._last_outcome = outcome
        _LOGGER.debug("Receipt delivered via %s after %d attempt(s)", transport.value, len(attempts))
        return outcome
