"""Word lists and pattern tables used by the price and title extractors.

Kept as plain immutable data so retailers can be added without touching the
matching logic. Every ordered table is evaluated first-match-wins.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# Promotional cues; any of these anywhere in a price string marks it as a sale price.
SALE_KEYWORDS: tuple[str, ...] = (
    "sale",
    "save",
    "was",
    "now",
    "special",
    "promo",
    "discount",
    "clearance",
    "reduced",
    "off",
    "%",
    "deal",
    "member",
    "optimum",
)

# '$' belongs to the configured home currency; these are recognized separately.
HOME_CURRENCY_SYMBOLS: tuple[str, ...] = ("$",)
FOREIGN_CURRENCY_SYMBOLS: tuple[tuple[str, str], ...] = (
    ("EUR", "€"),
    ("GBP", "£"),
)

# At most one qualifier is kept per price string.
CONTEXT_PATTERN = re.compile(r"\b(each|per\s+\w+|from|starting\s+at|up\s+to)\b", re.IGNORECASE)

# Qualifier words that introduce (or trail) a pre-discount price in page copy.
REGULAR_PRICE_LEADING_CUES: tuple[str, ...] = ("was", "originally", "regular", "msrp", "list")
REGULAR_PRICE_TRAILING_CUES: tuple[str, ...] = ("was", "originally", "regular", "list")


# ---------------------------------------------------------------------------
# Title attribute tables
# ---------------------------------------------------------------------------

TRADEMARK_GLYPHS = re.compile(r"[®™©]")

# Fragments glued onto the first title word that are never part of a brand.
BRAND_NOISE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"Item", re.IGNORECASE),
    re.compile(r"#.*"),
)

PHARMACY_BRANDS: tuple[str, ...] = (
    "Enfamil",
    "Similac",
    "Gerber",
    "Nestle",
    "Huggies",
    "Pampers",
    "Johnson's",
    "Aveeno",
    "Cetaphil",
    "Neutrogena",
    "L'Oreal",
    "Maybelline",
    "CoverGirl",
    "Tylenol",
    "Advil",
    "Reactine",
    "Claritin",
    "Benadryl",
    "Pepto-Bismol",
    "Olay",
    "Dove",
    "Head & Shoulders",
    "Pantene",
    "Herbal Essences",
)

PET_BRANDS: tuple[str, ...] = (
    "Authority",
    "Hill's",
    "Hills",
    "Royal Canin",
    "Purina",
    "Blue Buffalo",
    "Iams",
    "Pedigree",
    "Whiskas",
    "Friskies",
    "Wellness",
    "Orijen",
    "Acana",
    "Science Diet",
    "Pro Plan",
    "ONE",
    "Fancy Feast",
    "Sheba",
    "Nutro",
    "Eukanuba",
    "Cesar",
    "Greenies",
    "Dentastix",
)

PHARMACY_SIZE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"(\d+(?:\.\d+)?\s*x\s*\d+(?:\.\d+)?\s*(?:ml|oz))\b", re.IGNORECASE),  # 6x240ml
    re.compile(r"(\d+(?:\.\d+)?\s*(?:ml|l))\b", re.IGNORECASE),
    re.compile(r"(\d+(?:\.\d+)?\s*(?:g|kg|oz|lb|lbs))\b", re.IGNORECASE),
    re.compile(r"(\d+\s*(?:count|ct|pack))\b", re.IGNORECASE),
    re.compile(r"(Size\s+\d+(?:-\d+)?)\b", re.IGNORECASE),  # diapers: Size 1, Size 2-3
    re.compile(r"(\d+(?:\.\d+)?\s*(?:fl\s*oz|fluid\s*ounce)s?)\b", re.IGNORECASE),
    re.compile(r"(Ready\s+to\s+Feed)", re.IGNORECASE),
    re.compile(r"(Powder)", re.IGNORECASE),
)

PET_SIZE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"(\d+\s*x\s*\d+(?:\.\d+)?\s*(?:oz|g))\b", re.IGNORECASE),  # 24 x 85 g
    re.compile(r"(\d+(?:\.\d+)?\s*oz)\b", re.IGNORECASE),
    re.compile(r"(\d+(?:\.\d+)?\s*(?:kg|lb|g|lbs))\b", re.IGNORECASE),
    re.compile(r"(\d+(?:\.\d+)?\s*(?:pound|ounce)s?)\b", re.IGNORECASE),
    re.compile(r"(\d+\s*(?:count|ct|pack))\b", re.IGNORECASE),
    re.compile(r"(\d+(?:\.\d+)?[-\s]*(?:kg|lb|g|oz))\b", re.IGNORECASE),  # 30-lb
    re.compile(r"(Size\s+\d+)", re.IGNORECASE),
    re.compile(r"(\d+(?:\.\d+)?\s*(?:fl\s*oz|ml|l))\b", re.IGNORECASE),
)


def _unit(symbol: str) -> re.Pattern[str]:
    return re.compile(rf"(?<![A-Za-z]){symbol}\b", re.IGNORECASE)


PHARMACY_UNIT_NORMALIZATIONS: tuple[tuple[re.Pattern[str], str], ...] = (
    (_unit("ml"), "mL"),
    (_unit("l"), "L"),
    (_unit("kg"), "kg"),
    (_unit("g"), "g"),
)

PET_UNIT_NORMALIZATIONS: tuple[tuple[re.Pattern[str], str], ...] = (
    (_unit("oz"), "Oz"),
    (_unit("kg"), "kg"),
    (_unit("g"), "g"),
    (_unit("lbs"), "lbs"),
    (_unit("lb"), "lb"),
)


@dataclass(frozen=True)
class TitleProfile:
    """Brand list and size tables for one kind of retailer."""

    name: str
    brands: tuple[str, ...]
    size_patterns: tuple[re.Pattern[str], ...]
    unit_normalizations: tuple[tuple[re.Pattern[str], str], ...] = ()


TITLE_PROFILES: dict[str, TitleProfile] = {
    "pharmacy": TitleProfile(
        name="pharmacy",
        brands=PHARMACY_BRANDS,
        size_patterns=PHARMACY_SIZE_PATTERNS,
        unit_normalizations=PHARMACY_UNIT_NORMALIZATIONS,
    ),
    "pet": TitleProfile(
        name="pet",
        brands=PET_BRANDS,
        size_patterns=PET_SIZE_PATTERNS,
        unit_normalizations=PET_UNIT_NORMALIZATIONS,
    ),
}


__all__ = [
    "BRAND_NOISE_PATTERNS",
    "CONTEXT_PATTERN",
    "FOREIGN_CURRENCY_SYMBOLS",
    "HOME_CURRENCY_SYMBOLS",
    "PET_BRANDS",
    "PET_SIZE_PATTERNS",
    "PHARMACY_BRANDS",
    "PHARMACY_SIZE_PATTERNS",
    "REGULAR_PRICE_LEADING_CUES",
    "REGULAR_PRICE_TRAILING_CUES",
    "SALE_KEYWORDS",
    "TITLE_PROFILES",
    "TRADEMARK_GLYPHS",
    "TitleProfile",
]
