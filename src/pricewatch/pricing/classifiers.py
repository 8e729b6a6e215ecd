"""Single-string classifiers applied to price text.

Each function looks at one price fragment in isolation: which currency it is
quoted in, whether it carries promotional wording, and which qualifier
("each", "per kg", "from") accompanies the amount.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from pricewatch.pricing.lexicons import (
    CONTEXT_PATTERN,
    FOREIGN_CURRENCY_SYMBOLS,
    HOME_CURRENCY_SYMBOLS,
    SALE_KEYWORDS,
)


def detect_currency(text: str, home_currency: str = "CAD") -> str | None:
    """Return the currency code indicated by ``text``, or None when undetermined.

    The home currency wins over foreign symbols; nothing is guessed.
    """
    if not text:
        return None
    if any(symbol in text for symbol in HOME_CURRENCY_SYMBOLS):
        return home_currency
    if re.search(rf"\b{re.escape(home_currency)}\b", text, re.IGNORECASE):
        return home_currency
    for code, symbol in FOREIGN_CURRENCY_SYMBOLS:
        if symbol in text:
            return code
    return None


def is_sale_text(text: str, keywords: Iterable[str] = SALE_KEYWORDS) -> bool:
    """Check if text carries promotional cues (case-insensitive substring match)."""
    if not text:
        return False
    lowered = text.lower()
    return any(keyword in lowered for keyword in keywords)


def extract_context(text: str) -> str | None:
    """Return the lower-cased price qualifier, e.g. ``"per kg"``."""
    if not text:
        return None
    match = CONTEXT_PATTERN.search(text)
    if not match:
        return None
    return " ".join(match.group(1).lower().split())


__all__ = ["detect_currency", "extract_context", "is_sale_text"]
