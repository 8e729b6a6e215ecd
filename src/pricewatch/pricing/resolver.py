"""Pair a current and regular price and derive the discount."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from pricewatch.core.config import Settings
from pricewatch.pricing.models import ParsedPrice, PriceParsingResult
from pricewatch.pricing.parser import PriceTextParser


def calculate_discount_percent(current_price: Decimal | float, regular_price: Decimal | float) -> int:
    """Whole-number percentage ``current_price`` sits below ``regular_price``.

    Returns 0 when there is no meaningful discount (non-positive regular
    price, negative current price, or current above regular).
    """
    current = Decimal(str(current_price))
    regular = Decimal(str(regular_price))
    if regular <= 0 or current < 0 or current > regular:
        return 0
    return _rounded_percent(current, regular)


def _rounded_percent(current: Decimal, regular: Decimal) -> int:
    percent = (regular - current) / regular * 100
    return int(percent.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class DualPriceResolver:
    """Resolve current/regular candidate text into a :class:`PriceParsingResult`."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        parser: PriceTextParser | None = None,
    ) -> None:
        self._parser = parser or PriceTextParser(settings)

    def resolve(
        self,
        current_price_text: str | None = None,
        regular_price_text: str | None = None,
        promo_text: str | None = None,
    ) -> PriceParsingResult:
        errors: list[str] = []

        current_price = self._parse_field("current", current_price_text, errors)
        regular_price = self._parse_field("regular", regular_price_text, errors)

        # Only a strictly higher regular price is a discount; anything else means "not on sale".
        discount_percent: int | None = None
        if current_price and regular_price and regular_price.value > current_price.value:
            discount_percent = _rounded_percent(current_price.value, regular_price.value)

        return PriceParsingResult(
            current_price=current_price,
            regular_price=regular_price,
            discount_percent=discount_percent,
            promo_text=_normalize_promo(promo_text),
            errors=tuple(errors),
        )

    def _parse_field(self, label: str, text: str | None, errors: list[str]) -> ParsedPrice | None:
        if not text:
            return None
        parsed = self._parser.parse(text)
        if parsed is None:
            errors.append(f'Failed to parse {label} price: "{text}"')
        return parsed


def _normalize_promo(promo_text: str | None) -> str | None:
    if not isinstance(promo_text, str):
        return None
    return promo_text.strip() or None


def resolve_prices(
    current_price_text: str | None = None,
    regular_price_text: str | None = None,
    promo_text: str | None = None,
    *,
    settings: Settings | None = None,
) -> PriceParsingResult:
    """Parse both candidate strings and compute the discount, if any."""
    return DualPriceResolver(settings).resolve(current_price_text, regular_price_text, promo_text)


__all__ = ["DualPriceResolver", "calculate_discount_percent", "resolve_prices"]
