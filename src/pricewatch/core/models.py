"""Pydantic schemas for structured engine events."""

from __future__ import annotations

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field


class ExtractionEvent(BaseModel):
    """Outcome of one product pricing extraction, emitted for log pipelines."""

    tier: Literal["structured", "page_text", "none"]
    valid: bool
    current_price: Decimal | None = None
    regular_price: Decimal | None = None
    discount_percent: int | None = None
    error_count: int = 0
    problems: list[str] = Field(default_factory=list)
    brand: str | None = None
    size_text: str | None = None


__all__ = ["ExtractionEvent"]
