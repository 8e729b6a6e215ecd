"""Brand and size attributes pulled from product titles."""

from __future__ import annotations

import re

from pricewatch.pricing.lexicons import (
    BRAND_NOISE_PATTERNS,
    TITLE_PROFILES,
    TRADEMARK_GLYPHS,
    TitleProfile,
)

_LEADING_UPPERCASE_RE = re.compile(r"^[A-Z]")


class TitleAttributeExtractor:
    """Best-effort brand/size matcher over a product title.

    Both lookups are ordered cascades returning the first hit, and None when
    nothing matches.
    """

    def __init__(
        self,
        brands: tuple[str, ...],
        size_patterns: tuple[re.Pattern[str], ...],
        unit_normalizations: tuple[tuple[re.Pattern[str], str], ...] = (),
    ) -> None:
        # Whole-word matches only, so "ONE" does not hit "Milk-Bone"
        self._brand_patterns = tuple(
            (brand, re.compile(rf"(?<!\w){re.escape(brand)}(?!\w)", re.IGNORECASE))
            for brand in brands
        )
        self._size_patterns = size_patterns
        self._unit_normalizations = unit_normalizations

    @classmethod
    def for_profile(cls, name: str) -> TitleAttributeExtractor:
        profile: TitleProfile = TITLE_PROFILES[name]
        return cls(profile.brands, profile.size_patterns, profile.unit_normalizations)

    def extract_brand(self, title: str | None) -> str | None:
        if not isinstance(title, str) or not title.strip():
            return None

        for brand, pattern in self._brand_patterns:
            if pattern.search(title):
                return brand

        return self._brand_from_first_word(title)

    def extract_size(self, title: str | None) -> str | None:
        if not isinstance(title, str) or not title.strip():
            return None

        for pattern in self._size_patterns:
            match = pattern.search(title)
            if match:
                return self._normalize_units(match.group(1).strip())
        return None

    def _brand_from_first_word(self, title: str) -> str | None:
        first_word = TRADEMARK_GLYPHS.sub("", title.strip().split(" ")[0])
        for noise in BRAND_NOISE_PATTERNS:
            first_word = noise.sub("", first_word)
        first_word = first_word.strip()

        if len(first_word) > 2 and _LEADING_UPPERCASE_RE.match(first_word):
            return first_word
        return None

    def _normalize_units(self, size: str) -> str:
        for pattern, replacement in self._unit_normalizations:
            size = pattern.sub(replacement, size, count=1)
        return size


def extract_brand(title: str | None, profile: str = "pharmacy") -> str | None:
    """Brand from ``title`` using the named retailer profile."""
    return TitleAttributeExtractor.for_profile(profile).extract_brand(title)


def extract_size(title: str | None, profile: str = "pharmacy") -> str | None:
    """Size text from ``title`` using the named retailer profile."""
    return TitleAttributeExtractor.for_profile(profile).extract_size(title)


__all__ = ["TitleAttributeExtractor", "extract_brand", "extract_size"]
