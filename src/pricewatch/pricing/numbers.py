"""Decimal conversion shared by the parser and the page-text locator."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation


def to_decimal(raw: str) -> Decimal | None:
    """``Decimal`` for a matched amount, thousands separators dropped; None if unusable."""
    try:
        value = Decimal(raw.replace(",", ""))
    except InvalidOperation:
        return None
    return value if value.is_finite() else None


__all__ = ["to_decimal"]
