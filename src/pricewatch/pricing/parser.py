"""Free-text price parsing with a tiered numeric cascade."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from decimal import Decimal

from pricewatch.core.config import Settings, get_settings
from pricewatch.pricing.classifiers import detect_currency, extract_context, is_sale_text
from pricewatch.pricing.lexicons import SALE_KEYWORDS
from pricewatch.pricing.models import ParsedPrice
from pricewatch.pricing.numbers import to_decimal

logger = logging.getLogger(__name__)

# "$-5.99", "$ -5" and friends are placeholder content, never an offer.
_NEGATIVE_AMOUNT_RE = re.compile(r"[$€£]\s*-")

# Tried in order; the first tier yielding a plausible amount wins.
NUMERIC_TIERS: tuple[re.Pattern[str], ...] = (
    # 1. Currency-prefixed, optionally comma-grouped: $1,299.99 / $45 / €12.50
    re.compile(r"[$€£]\s*(\d{1,3}(?:,\d{3})+(?:\.\d+)?|\d+(?:\.\d+)?)", re.ASCII),
    # 2. Bare amount with exactly two fraction digits: 34.99
    re.compile(r"\b(\d{1,3}(?:,\d{3})*\.\d{2})\b", re.ASCII),
    # 3. Anything numeric
    re.compile(r"\b(\d+(?:\.\d+)?)\b", re.ASCII),
)

_AMOUNT = r"(\d{1,3}(?:,\d{3})*\.?\d{0,2})"

# Retailer phrasings, for callers that know which kind of fragment they hold.
PRICE_PATTERNS: dict[str, re.Pattern[str]] = {
    "STANDARD": re.compile(rf"\$?{_AMOUNT}", re.ASCII),
    "SALE_NOW": re.compile(rf"(?:now|sale)[:\s]*\$?{_AMOUNT}", re.IGNORECASE | re.ASCII),
    "SAVE_AMOUNT": re.compile(rf"save[:\s]*\$?{_AMOUNT}", re.IGNORECASE | re.ASCII),
    "FROM_PRICE": re.compile(rf"from[:\s]*\$?{_AMOUNT}", re.IGNORECASE | re.ASCII),
    "UP_TO_PRICE": re.compile(rf"up\s+to[:\s]*\$?{_AMOUNT}", re.IGNORECASE | re.ASCII),
    "MEMBER_PRICE": re.compile(rf"member[:\s]*\$?{_AMOUNT}", re.IGNORECASE | re.ASCII),
    "SPECIAL_PRICE": re.compile(rf"special[:\s]*\$?{_AMOUNT}", re.IGNORECASE | re.ASCII),
}


class PriceTextParser:
    """Convert one free-text price fragment into a :class:`ParsedPrice`.

    Never raises on input data: anything without a usable positive amount
    yields ``None``.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        sale_keywords: Iterable[str] = SALE_KEYWORDS,
        numeric_tiers: tuple[re.Pattern[str], ...] = NUMERIC_TIERS,
    ) -> None:
        self._settings = settings or get_settings()
        self._sale_keywords = tuple(sale_keywords)
        self._numeric_tiers = numeric_tiers

    def parse(self, text: object) -> ParsedPrice | None:
        """Parse ``text``; returns None for empty, non-string or non-positive input."""
        if not isinstance(text, str):
            return None

        trimmed = text.strip()
        if not trimmed:
            return None

        value = self.extract_amount(trimmed)
        if value is None or value <= 0:
            return None

        return ParsedPrice(
            value=value,
            original_text=trimmed,
            currency=detect_currency(trimmed, self._settings.home_currency),
            is_sale_price=is_sale_text(trimmed, self._sale_keywords),
            context=extract_context(trimmed),
        )

    def extract_amount(self, text: str) -> Decimal | None:
        """Return the first plausible positive amount in ``text``."""
        if _NEGATIVE_AMOUNT_RE.search(text):
            return None

        for pattern in self._numeric_tiers:
            for match in pattern.finditer(text):
                raw = match.group(1)
                value = to_decimal(raw)
                if value is None or value <= 0:
                    continue
                if self._is_savings_callout(text, raw, value):
                    continue
                return value
        return None

    def _is_savings_callout(self, text: str, raw: str, value: Decimal) -> bool:
        """True for small amounts announced as savings ("Save $5 - Now $19.99")."""
        if "save" not in text.lower():
            return False
        if value >= self._settings.save_amount_threshold:
            return False
        pattern = rf"save\s*[$€£]?\s*{re.escape(raw)}\b"
        return re.search(pattern, text, re.IGNORECASE) is not None


def parse_price(text: object, *, settings: Settings | None = None) -> ParsedPrice | None:
    """Parse a single price string with the default lexicons."""
    return PriceTextParser(settings).parse(text)


def extract_price_with_pattern(
    text: str, pattern: re.Pattern[str], *, settings: Settings | None = None
) -> Decimal | None:
    """Run ``pattern`` and parse the amount captured by its first group."""
    if not isinstance(text, str):
        return None
    match = pattern.search(text)
    if not match or not match.group(1):
        return None
    return PriceTextParser(settings).extract_amount(match.group(1))


def format_price(price: ParsedPrice) -> str:
    """Render ``{currency}{value:.2f}[ context]`` for display."""
    formatted = f"{price.currency or '$'}{price.value:.2f}"
    if price.context:
        return f"{formatted} {price.context}"
    return formatted


def parse_price_with_logging(
    text: object,
    *,
    retailer: str | None = None,
    product_url: str | None = None,
    settings: Settings | None = None,
) -> ParsedPrice | None:
    """Parse a price and log the outcome with the caller's context."""
    result = parse_price(text, settings=settings)
    context = {"retailer": retailer, "product_url": product_url}

    if result:
        logger.debug(
            "Price parsed successfully",
            extra={
                "original_text": text,
                "parsed_value": str(result.value),
                "currency": result.currency,
                "is_sale_price": result.is_sale_price,
                "price_context": result.context,
                **context,
            },
        )
    else:
        logger.warning("Price parsing failed", extra={"original_text": text, **context})

    return result


__all__ = [
    "NUMERIC_TIERS",
    "PRICE_PATTERNS",
    "PriceTextParser",
    "extract_price_with_pattern",
    "format_price",
    "parse_price",
    "parse_price_with_logging",
]
