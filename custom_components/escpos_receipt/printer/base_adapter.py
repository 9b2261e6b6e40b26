"""Base class for blocking device adapters."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .config import TransportConfig


class DeviceAdapter(ABC):
    """Capability interface for one physical connection to a printer.

    A transport drives an adapter through ``open`` -> ``configure`` ->
    ``write`` and always calls ``close`` once ``open`` has returned. All
    methods block and run on the executor.
    """

    def __init__(self, config: TransportConfig) -> None:
        self._config = config

    @property
    def config(self) -> TransportConfig:
        """Return the transport configuration."""
        return self._config

    @abstractmethod
    def open(self) -> None:
        """Locate the device and acquire a handle to it."""

    @abstractmethod
    def configure(self) -> None:
        """Apply the fixed communication parameters."""

    @abstractmethod
    def write(self, data: bytes) -> None:
        """Send the whole payload to the device."""

    @abstractmethod
    def close(self) -> None:
        """Release the handle. Safe to call after a partial open."""

    @abstractmethod
    def get_connection_info(self) -> str:
        """Return a human-readable connection info string."""
