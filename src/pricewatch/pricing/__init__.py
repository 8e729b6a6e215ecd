"""Price & discount extraction engine.

Raw candidate strings go through the price parser and dual-price resolver;
when no structured text exists the fallback locator mines the page text and
feeds the same resolver. The validation gate decides whether a result can be
trusted.
"""

from pricewatch.pricing.fallback import FallbackPriceLocator, locate_prices
from pricewatch.pricing.models import LocatedPriceText, ParsedPrice, PriceParsingResult
from pricewatch.pricing.parser import (
    PRICE_PATTERNS,
    PriceTextParser,
    extract_price_with_pattern,
    format_price,
    parse_price,
    parse_price_with_logging,
)
from pricewatch.pricing.pipeline import ExtractionTier, ProductPricing, extract_product_pricing
from pricewatch.pricing.resolver import DualPriceResolver, calculate_discount_percent, resolve_prices
from pricewatch.pricing.title import TitleAttributeExtractor, extract_brand, extract_size
from pricewatch.pricing.validation import is_valid, validation_problems

__all__ = [
    "PRICE_PATTERNS",
    "DualPriceResolver",
    "ExtractionTier",
    "FallbackPriceLocator",
    "LocatedPriceText",
    "ParsedPrice",
    "PriceParsingResult",
    "PriceTextParser",
    "ProductPricing",
    "TitleAttributeExtractor",
    "calculate_discount_percent",
    "extract_brand",
    "extract_price_with_pattern",
    "extract_product_pricing",
    "extract_size",
    "format_price",
    "is_valid",
    "locate_prices",
    "parse_price",
    "parse_price_with_logging",
    "resolve_prices",
    "validation_problems",
]
