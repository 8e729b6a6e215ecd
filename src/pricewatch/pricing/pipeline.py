"""End-to-end pricing for one product: structured text first, page text as fallback."""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable
from dataclasses import dataclass

from pricewatch.core.config import Settings, get_settings
from pricewatch.core.models import ExtractionEvent
from pricewatch.observability.logging import log_event
from pricewatch.pricing.fallback import FallbackPriceLocator
from pricewatch.pricing.models import PriceParsingResult
from pricewatch.pricing.resolver import DualPriceResolver
from pricewatch.pricing.title import TitleAttributeExtractor
from pricewatch.pricing.validation import validation_problems

logger = logging.getLogger(__name__)


class ExtractionTier(enum.Enum):
    """Where the trusted price text came from."""

    STRUCTURED = "structured"
    PAGE_TEXT = "page_text"
    NONE = "none"


@dataclass(frozen=True)
class ProductPricing:
    """Final pricing fact for a product, plus optional title metadata."""

    pricing: PriceParsingResult
    tier: ExtractionTier
    valid: bool
    problems: tuple[str, ...] = ()
    brand: str | None = None
    size_text: str | None = None


def extract_product_pricing(
    current_price_text: str | None = None,
    regular_price_text: str | None = None,
    promo_text: str | None = None,
    *,
    page_text: str | None = None,
    title: str | None = None,
    strikethrough_texts: Iterable[str] = (),
    settings: Settings | None = None,
) -> ProductPricing:
    """Resolve a product's price pair, falling back to page text when needed.

    The structured candidates are tried first. When they give no usable
    current price and ``page_text`` is available, the page-text locator
    synthesizes new candidates and a fresh result is resolved from them.
    """
    settings = settings or get_settings()
    resolver = DualPriceResolver(settings)

    tier = ExtractionTier.STRUCTURED
    result = resolver.resolve(current_price_text, regular_price_text, promo_text)

    if result.current_price is None and page_text:
        located = FallbackPriceLocator(settings).locate(page_text, strikethrough_texts)
        logger.debug(
            "Structured price unusable, using page text",
            extra={
                "current_candidate": located.current_price_text,
                "regular_candidate": located.regular_price_text,
            },
        )
        tier = ExtractionTier.PAGE_TEXT
        result = resolver.resolve(
            located.current_price_text,
            regular_price_text if result.regular_price else located.regular_price_text,
            promo_text,
        )

    if result.current_price is None:
        tier = ExtractionTier.NONE

    problems = validation_problems(result)

    brand = size_text = None
    if title:
        extractor = TitleAttributeExtractor.for_profile(settings.title_profile)
        brand = extractor.extract_brand(title)
        size_text = extractor.extract_size(title)

    pricing = ProductPricing(
        pricing=result,
        tier=tier,
        valid=not problems,
        problems=tuple(problems),
        brand=brand,
        size_text=size_text,
    )

    log_event(
        ExtractionEvent(
            tier=tier.value,
            valid=pricing.valid,
            current_price=result.current_price.value if result.current_price else None,
            regular_price=result.regular_price.value if result.regular_price else None,
            discount_percent=result.discount_percent,
            error_count=len(result.errors),
            problems=list(problems),
            brand=brand,
            size_text=size_text,
        ),
        level=logging.INFO if pricing.valid else logging.WARNING,
    )
    return pricing


__all__ = ["ExtractionTier", "ProductPricing", "extract_product_pricing"]
