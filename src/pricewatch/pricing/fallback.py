"""Price candidates mined from free page text.

Used only when no structured price element yielded usable text. The locator
prefers silence over guessing: an ambiguous page produces no regular price,
because a wrong "was" price turns into a false discount alert downstream.
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from pricewatch.core.config import Settings, get_settings
from pricewatch.pricing.lexicons import REGULAR_PRICE_LEADING_CUES, REGULAR_PRICE_TRAILING_CUES
from pricewatch.pricing.models import LocatedPriceText
from pricewatch.pricing.numbers import to_decimal

logger = logging.getLogger(__name__)

_PAGE_AMOUNT = r"(\d{1,4}(?:\.\d{2})?)"

# Every "$X" / "$X.XX" token on a page
_DOLLAR_TOKEN_RE = re.compile(rf"\${_PAGE_AMOUNT}", re.ASCII)

# Text of a struck-through element: first amount, symbol optional
_STRUCK_AMOUNT_RE = re.compile(rf"\$?{_PAGE_AMOUNT}", re.ASCII)

# Current-price scan; the second form is only tried when the first finds nothing.
_CURRENT_TOKEN_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\$\d{1,4}(?:\.\d{2})?", re.ASCII),
    re.compile(r"CAD?\s*\$?\d{1,4}(?:\.\d{2})?", re.ASCII),
)
_NOT_PRICE_CHARS_RE = re.compile(r"[^$\d.]")


@dataclass(frozen=True)
class PriceCandidate:
    """A distinct page price and how often it was rendered."""

    price: Decimal
    occurrence_count: int


def _as_price_text(value: Decimal) -> str:
    return f"${value:.2f}"


class FallbackPriceLocator:
    """Synthesize current/regular candidate text from a page's visible text."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        leading_cues: Iterable[str] = REGULAR_PRICE_LEADING_CUES,
        trailing_cues: Iterable[str] = REGULAR_PRICE_TRAILING_CUES,
    ) -> None:
        self._settings = settings or get_settings()
        leading = "|".join(re.escape(cue) for cue in leading_cues)
        trailing = "|".join(re.escape(cue) for cue in trailing_cues)
        self._cue_patterns = (
            # "Was: $34.99", "MSRP 34.99"
            re.compile(rf"\b(?:{leading})\b\s*:?\s*\$?{_PAGE_AMOUNT}", re.IGNORECASE | re.ASCII),
            # "$34.99 was"
            re.compile(rf"\${_PAGE_AMOUNT}\s*(?:{trailing})\b", re.IGNORECASE | re.ASCII),
        )

    def locate(
        self, page_text: str | None, strikethrough_texts: Iterable[str] = ()
    ) -> LocatedPriceText:
        """Propose candidate strings to feed back into the dual-price resolver."""
        text = self._bounded(page_text)
        if not text:
            return LocatedPriceText()

        regular_text = self._regular_from_cues(text)
        if regular_text is None:
            pair = self._infer_price_pair(text)
            if pair is not None:
                current, regular = pair
                return LocatedPriceText(
                    current_price_text=_as_price_text(current),
                    regular_price_text=_as_price_text(regular),
                )
            regular_text = self._regular_from_strikethrough(strikethrough_texts)

        return LocatedPriceText(
            current_price_text=self._current_from_text(text),
            regular_price_text=regular_text,
        )

    def find_regular_price_text(
        self, page_text: str | None, strikethrough_texts: Iterable[str] = ()
    ) -> str | None:
        """Explicit cues, then frequency pairing, then struck-through elements."""
        text = self._bounded(page_text)
        if text:
            cue_text = self._regular_from_cues(text)
            if cue_text is not None:
                return cue_text
            pair = self._infer_price_pair(text)
            if pair is not None:
                return _as_price_text(pair[1])
        return self._regular_from_strikethrough(strikethrough_texts)

    def find_current_price_text(self, page_text: str | None) -> str | None:
        """Best-effort: the lowest sane ``$`` amount on the page."""
        text = self._bounded(page_text)
        if not text:
            return None
        return self._current_from_text(text)

    # -- strategies ---------------------------------------------------------

    def _regular_from_cues(self, text: str) -> str | None:
        for pattern in self._cue_patterns:
            for match in pattern.finditer(text):
                raw = match.group(1)
                value = to_decimal(raw)
                if value is not None and self._is_sane(value):
                    logger.debug(
                        "Extracted regular price from page text",
                        extra={"original_match": match.group(0), "price": raw},
                    )
                    return f"${raw}"
        return None

    def _infer_price_pair(self, text: str) -> tuple[Decimal, Decimal] | None:
        """Return ``(current, regular)`` when exactly two repeated prices form a plausible discount."""
        settings = self._settings
        values = [
            value
            for value in (to_decimal(raw) for raw in _DOLLAR_TOKEN_RE.findall(text))
            if value is not None and self._is_sane(value)
        ]
        if len(values) < 2:
            return None

        frequency = Counter(values)
        candidates = sorted(
            (
                PriceCandidate(price=price, occurrence_count=count)
                for price, count in frequency.items()
                if count >= settings.min_price_occurrences
                and settings.paired_price_min < price < settings.paired_price_max
            ),
            key=lambda candidate: candidate.price,
            reverse=True,
        )

        if len(candidates) != 2:
            logger.debug(
                "No unambiguous price pair on page",
                extra={"candidates": [(str(c.price), c.occurrence_count) for c in candidates]},
            )
            return None

        higher, lower = candidates
        discount = (higher.price - lower.price) / higher.price * 100
        if not settings.pair_discount_min_percent <= discount <= settings.pair_discount_max_percent:
            logger.debug(
                "Price pair rejected: implied discount out of band",
                extra={
                    "higher": str(higher.price),
                    "lower": str(lower.price),
                    "discount": f"{discount:.1f}",
                },
            )
            return None

        logger.debug(
            "Inferred price pair from repeated page prices",
            extra={
                "higher": str(higher.price),
                "lower": str(lower.price),
                "discount": f"{discount:.1f}",
                "higher_count": higher.occurrence_count,
                "lower_count": lower.occurrence_count,
            },
        )
        return lower.price, higher.price

    def _regular_from_strikethrough(self, strikethrough_texts: Iterable[str]) -> str | None:
        for text in strikethrough_texts:
            if not isinstance(text, str):
                continue
            match = _STRUCK_AMOUNT_RE.search(text)
            if not match:
                continue
            value = to_decimal(match.group(1))
            if value is not None and self._is_sane(value):
                logger.debug("Found strikethrough price", extra={"text": text, "price": str(value)})
                return _as_price_text(value)
        return None

    def _current_from_text(self, text: str) -> str | None:
        for pattern in _CURRENT_TOKEN_PATTERNS:
            matches = pattern.findall(text)
            if not matches:
                continue
            valid: list[tuple[Decimal, str]] = []
            for match in matches:
                cleaned = _NOT_PRICE_CHARS_RE.sub("", match)
                value = to_decimal(cleaned.replace("$", ""))
                if value is not None and self._is_sane(value):
                    valid.append((value, cleaned))
            if valid:
                value, cleaned = min(valid, key=lambda item: item[0])
                logger.debug(
                    "Extracted current price from page text",
                    extra={"all_prices": [item[1] for item in valid], "selected_price": cleaned},
                )
                return cleaned
        return None

    # -- helpers ------------------------------------------------------------

    def _is_sane(self, value: Decimal) -> bool:
        return self._settings.sane_price_min < value < self._settings.sane_price_max

    def _bounded(self, page_text: str | None) -> str:
        if not isinstance(page_text, str):
            return ""
        limit = self._settings.max_page_text_chars
        if len(page_text) > limit:
            logger.debug(
                "Page text truncated before price scan",
                extra={"length": len(page_text), "limit": limit},
            )
            return page_text[:limit]
        return page_text


def locate_prices(
    page_text: str | None,
    strikethrough_texts: Iterable[str] = (),
    *,
    settings: Settings | None = None,
) -> LocatedPriceText:
    """Run the page-text fallback with default cue lists."""
    return FallbackPriceLocator(settings).locate(page_text, strikethrough_texts)


__all__ = ["FallbackPriceLocator", "PriceCandidate", "locate_prices"]
