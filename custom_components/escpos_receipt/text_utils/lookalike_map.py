"""ASCII stand-ins for characters legacy printer codepages usually lack.

Only consulted after direct encoding to the target codepage has failed.
"""

from __future__ import annotations

LOOKALIKE_MAP: dict[str, str] = {
    # Typographic quotes
    "\u2018": "'", "\u2019": "'", "\u201a": ",",
    "\u201c": '"', "\u201d": '"', "\u201e": '"',
    "\u00ab": "<<", "\u00bb": ">>",
    # Hyphens, dashes, minus
    "\u2010": "-", "\u2011": "-", "\u2012": "-", "\u2013": "-", "\u2212": "-",
    "\u2014": "--",
    # Spaces printers render as blanks
    "\u00a0": " ", "\u202f": " ",
    # Item name punctuation
    "\u2026": "...", "\u2022": "*", "\u00b7": ".", "\u00d7": "x",
    "\u2122": "TM", "\u00ae": "(R)", "\u00a9": "(C)",
    # Currency signs used as amount prefixes
    "\u20ac": "EUR", "\u00a3": "GBP", "\u00a5": "JPY",
    "\u20b9": "INR", "\u20bd": "RUB", "\u20a9": "KRW",
}
