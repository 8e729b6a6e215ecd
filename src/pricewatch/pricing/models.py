"""Value objects produced by price extraction."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class ParsedPrice:
    """A single price recognized in free text."""

    value: Decimal  # always > 0
    original_text: str
    currency: str | None = None  # e.g. "CAD", None when no marker was present
    is_sale_price: bool = False
    context: str | None = None  # "each", "per kg", "from", ...


@dataclass(frozen=True)
class PriceParsingResult:
    """Current/regular price pair resolved for one product.

    May hold an inconsistent pair; use ``pricing.validation.is_valid`` before
    trusting it.
    """

    current_price: ParsedPrice | None = None
    regular_price: ParsedPrice | None = None
    discount_percent: int | None = None
    promo_text: str | None = None
    errors: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class LocatedPriceText:
    """Candidate price strings synthesized from free page text."""

    current_price_text: str | None = None
    regular_price_text: str | None = None


__all__ = ["LocatedPriceText", "ParsedPrice", "PriceParsingResult"]
