"""Configuration management for the pricewatch engine."""

from __future__ import annotations

import os
from decimal import Decimal
from functools import lru_cache
from typing import Any, ClassVar, Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

# Ensure .env values are loaded before settings initialisation.
load_dotenv()


class Settings(BaseModel):
    """Engine settings loaded from environment variables."""

    ENV_PREFIX: ClassVar[str] = "PRICEWATCH_"

    model_config = ConfigDict(extra="ignore", frozen=True)

    environment: Literal["development", "production", "test"] = Field(
        default="development",
        description="Runtime environment used for logging and diagnostics.",
    )
    log_level: str = Field(default="INFO", description="Python logging level for the engine.")

    home_currency: str = Field(
        default="CAD",
        description="Currency code assigned to '$' amounts and the literal home-currency token.",
    )
    save_amount_threshold: Decimal = Field(
        default=Decimal("50"),
        description="Amounts below this that follow the word 'save' are savings callouts.",
    )

    sane_price_min: Decimal = Field(
        default=Decimal("0.50"),
        description="Exclusive lower bound for prices mined from free page text.",
    )
    sane_price_max: Decimal = Field(
        default=Decimal("1000"),
        description="Exclusive upper bound for prices mined from free page text.",
    )
    paired_price_min: Decimal = Field(
        default=Decimal("1"),
        description="Exclusive lower bound for frequency-paired product prices.",
    )
    paired_price_max: Decimal = Field(
        default=Decimal("200"),
        description="Exclusive upper bound for frequency-paired product prices.",
    )
    min_price_occurrences: int = Field(
        default=2,
        description="Times a value must repeat on a page to count as a product price.",
    )
    pair_discount_min_percent: Decimal = Field(
        default=Decimal("5"),
        description="Smallest implied discount accepted for an inferred price pair.",
    )
    pair_discount_max_percent: Decimal = Field(
        default=Decimal("60"),
        description="Largest implied discount accepted for an inferred price pair.",
    )
    max_page_text_chars: int = Field(
        default=200_000,
        description="Page text beyond this many characters is ignored by the fallback scan.",
    )

    title_profile: Literal["pharmacy", "pet"] = Field(
        default="pharmacy",
        description="Retailer profile used for brand and size extraction from titles.",
    )

    def __init__(self, **data: Any) -> None:  # noqa: D401 - inherited docstring
        env_values = type(self)._load_environment_values()
        env_values.update(data)
        super().__init__(**env_values)

    @classmethod
    def _load_environment_values(cls) -> dict[str, Any]:
        """Return field values sourced from the current environment."""

        values: dict[str, Any] = {}
        for field_name in cls.model_fields:
            env_key = f"{cls.ENV_PREFIX}{field_name.upper()}"
            if env_key in os.environ:
                values[field_name] = os.environ[env_key]
        return values


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a singleton instance of :class:`Settings`."""

    return Settings()


__all__ = ["Settings", "get_settings"]
