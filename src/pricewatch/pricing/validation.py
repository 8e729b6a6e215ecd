"""Consistency checks applied before a resolved price pair is trusted."""

from __future__ import annotations

from pricewatch.pricing.models import PriceParsingResult


def validation_problems(result: PriceParsingResult) -> list[str]:
    """Return every rule ``result`` violates; empty when it is consistent."""
    problems: list[str] = []
    current = result.current_price
    regular = result.regular_price

    if current is None:
        problems.append("missing current price")
    elif current.value <= 0:
        problems.append(f"current price {current.value} is not positive")

    if current is not None and regular is not None and regular.value < current.value:
        problems.append(
            f"regular price {regular.value} is below current price {current.value}"
        )

    if result.discount_percent is not None and not 0 <= result.discount_percent <= 100:
        problems.append(f"discount {result.discount_percent}% outside 0-100")

    return problems


def is_valid(result: PriceParsingResult) -> bool:
    """Advisory gate: callers decide whether to discard or retry an invalid result."""
    return not validation_problems(result)


__all__ = ["is_valid", "validation_problems"]
