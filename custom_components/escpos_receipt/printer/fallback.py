"""Last-resort delivery: a print page opened from a notification."""

from __future__ import annotations

import hashlib
import html
import logging
from pathlib import Path
from string import Template
import time
from typing import TYPE_CHECKING

from homeassistant.components import persistent_notification
from homeassistant.components.http import StaticPathConfig

from ..const import (
    DOMAIN,
    FALLBACK_CLOSE_DELAY_MS,
    FALLBACK_KEEP_PAGES,
    FALLBACK_PAGE_DIR,
    FALLBACK_PRINT_DELAY_MS,
    FALLBACK_URL_PATH,
)
from ..exceptions import FallbackUnavailable
from .transport import Transport, TransportAttempt, TransportResult, elapsed_ms

if TYPE_CHECKING:
    from homeassistant.core import HomeAssistant

    from ..receipt.models import ReceiptDocument

_LOGGER = logging.getLogger(__name__)

NOTIFICATION_ID = f"{DOMAIN}_fallback"

PRINT_PAGE_TEMPLATE = Template(
    """<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8">
    <title>Receipt</title>
    <style>
      body {
        font-family: 'Courier New', monospace;
        font-size: 12px;
        line-height: 1.2;
        margin: 0;
        padding: 5mm;
        width: 80mm;
        background: white;
        color: black;
      }
      pre {
        white-space: pre-wrap;
        margin: 0;
        font-family: inherit;
        font-size: inherit;
      }
      @media print {
        body {
          width: 80mm;
          margin: 0;
          padding: 2mm;
        }
        @page {
          size: 80mm auto;
          margin: 0;
        }
      }
    </style>
  </head>
  <body>
    <pre>$content</pre>
    <script>
      window.onload = function() {
        setTimeout(function() {
          window.print();
          setTimeout(function() { window.close(); }, $close_delay);
        }, $print_delay);
      };
    </script>
  </body>
</html>
"""
)


def render_print_page(text: str) -> str:
    """Return the HTML page that prints ``text`` in a monospace 80mm column."""
    return PRINT_PAGE_TEMPLATE.substitute(
        content=html.escape(text),
        print_delay=FALLBACK_PRINT_DELAY_MS,
        close_delay=FALLBACK_CLOSE_DELAY_MS,
    )


def _page_dir(hass: HomeAssistant) -> Path:
    return Path(hass.config.path(FALLBACK_PAGE_DIR))


def _make_page_dir(directory: Path) -> None:
    directory.mkdir(parents=True, exist_ok=True)


def _write_page(directory: Path, filename: str, page: str) -> Path:
    """Write a page and drop all but the newest FALLBACK_KEEP_PAGES."""
    _make_page_dir(directory)
    path = directory / filename
    path.write_text(page, encoding="utf-8")
    older = sorted(
        (p for p in directory.glob("receipt-*.html") if p != path),
        key=lambda p: p.stat().st_mtime,
        reverse=True,
    )
    for stale in older[FALLBACK_KEEP_PAGES - 1 :]:
        stale.unlink(missing_ok=True)
    return path


async def async_register_print_pages(hass: HomeAssistant) -> None:
    """Serve the print page directory at FALLBACK_URL_PATH."""
    directory = _page_dir(hass)
    await hass.async_add_executor_job(_make_page_dir, directory)
    await hass.http.async_register_static_paths(
        [StaticPathConfig(FALLBACK_URL_PATH, str(directory), cache_headers=False)]
    )
    _LOGGER.debug("Serving print pages from %s at %s", directory, FALLBACK_URL_PATH)


class BrowserDialogFallback(Transport):
    """Publish the receipt as a self-printing page under ``/escpos_receipt``.

    The page lands in ``<config>/escpos_receipt/`` and a persistent
    notification links to it and shows the receipt text, so whoever is at
    the dashboard can print it from the browser dialog.
    """

    kind = TransportAttempt.BROWSER_DIALOG

    async def attempt(self, hass: HomeAssistant, document: ReceiptDocument) -> TransportResult:
        text = document.text
        filename = f"receipt-{hashlib.sha1(document.payload).hexdigest()[:12]}.html"
        directory = _page_dir(hass)
        url = f"{FALLBACK_URL_PATH}/{filename}"

        start = time.perf_counter()
        try:
            await hass.async_add_executor_job(_write_page, directory, filename, render_print_page(text))
            persistent_notification.async_create(
                hass,
                f"No receipt printer answered. [Open the receipt]({url}) to print it from the browser.\n\n"
                f"```\n{text}\n```",
                title="Receipt ready to print",
                notification_id=NOTIFICATION_ID,
            )
        except Exception as err:
            _LOGGER.error("Could not create print page %s: %s", directory / filename, err)
            failure = FallbackUnavailable(f"Could not create print page: {err}")
            failure.__cause__ = err
            return TransportResult.failure(self.kind, failure, elapsed_ms(start))

        _LOGGER.info("Receipt published for browser printing at %s", url)
        return TransportResult.success(self.kind, elapsed_ms(start))
