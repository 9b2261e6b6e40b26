"""Service handlers for the ESC/POS receipt integration."""

from __future__ import annotations

from .registration import async_setup_services

__all__ = ["async_setup_services"]
