"""Tests for the free-text price parser."""

from __future__ import annotations

import logging
from decimal import Decimal

import pytest

from pricewatch.core.config import Settings
from pricewatch.pricing.models import ParsedPrice
from pricewatch.pricing.parser import (
    PRICE_PATTERNS,
    PriceTextParser,
    extract_price_with_pattern,
    format_price,
    parse_price,
    parse_price_with_logging,
)


class TestStandardFormats:
    """Plain currency amounts."""

    def test_simple_dollar_amount(self) -> None:
        assert parse_price("$29.99") == ParsedPrice(
            value=Decimal("29.99"),
            original_text="$29.99",
            currency="CAD",
            is_sale_price=False,
            context=None,
        )

    def test_price_without_symbol_has_no_currency(self) -> None:
        result = parse_price("34.99")

        assert result is not None
        assert result.value == Decimal("34.99")
        assert result.currency is None
        assert result.is_sale_price is False

    def test_thousands_separators_removed(self) -> None:
        result = parse_price("$1,299.99")

        assert result is not None
        assert result.value == Decimal("1299.99")

    def test_whole_dollar_amount(self) -> None:
        result = parse_price("$45")

        assert result is not None
        assert result.value == Decimal("45")

    def test_ungrouped_large_amount(self) -> None:
        result = parse_price("$1234.56")

        assert result is not None
        assert result.value == Decimal("1234.56")

    def test_very_large_amount(self) -> None:
        result = parse_price("$999,999.99")

        assert result is not None
        assert result.value == Decimal("999999.99")

    def test_many_decimal_places_kept(self) -> None:
        result = parse_price("$29.9999")

        assert result is not None
        assert result.value == Decimal("29.9999")

    def test_original_text_is_trimmed(self) -> None:
        result = parse_price("  $  29.99  ")

        assert result is not None
        assert result.value == Decimal("29.99")
        assert result.original_text == "$  29.99"

    def test_repeated_currency_symbols(self) -> None:
        result = parse_price("$$29.99")

        assert result is not None
        assert result.value == Decimal("29.99")
        assert result.currency == "CAD"

    @pytest.mark.parametrize("text", ["$29.99*", "$34.99+", "$19.99†", "$24.99 CAD", "C$89.99"])
    def test_trailing_noise_tolerated(self, text: str) -> None:
        result = parse_price(text)

        assert result is not None
        assert result.value > 0


class TestSaleDetection:
    """Promotional cues and savings callouts."""

    def test_sale_prefix(self) -> None:
        result = parse_price("Sale: $24.99")

        assert result is not None
        assert result.value == Decimal("24.99")
        assert result.is_sale_price is True

    def test_save_amount_is_skipped(self) -> None:
        result = parse_price("Save $5 - Now $19.99")

        assert result is not None
        assert result.value == Decimal("19.99")
        assert result.is_sale_price is True

    def test_large_save_amount_is_not_skipped(self) -> None:
        result = parse_price("Save $75 today")

        assert result is not None
        assert result.value == Decimal("75")

    def test_save_percent_then_price(self) -> None:
        result = parse_price("Save 20% - $59.99")

        assert result is not None
        assert result.value == Decimal("59.99")

    def test_member_price(self) -> None:
        result = parse_price("Member Price: $27.99")

        assert result is not None
        assert result.value == Decimal("27.99")
        assert result.is_sale_price is True

    def test_first_price_wins_in_was_now_text(self) -> None:
        result = parse_price("Was $49.99, Now $34.99")

        assert result is not None
        assert result.value == Decimal("49.99")
        assert result.is_sale_price is True

    def test_range_resolves_to_first_bound(self) -> None:
        result = parse_price("$19.99 - $29.99")

        assert result is not None
        assert result.value == Decimal("19.99")


class TestContext:
    def test_each(self) -> None:
        result = parse_price("$12.99 each")

        assert result is not None
        assert result.context == "each"
        assert result.value == Decimal("12.99")

    def test_from(self) -> None:
        result = parse_price("From $29.99")

        assert result is not None
        assert result.context == "from"

    def test_per_unit(self) -> None:
        result = parse_price("$8.99 per kg")

        assert result is not None
        assert result.context == "per kg"
        assert result.value == Decimal("8.99")


class TestRejectedInput:
    """Inputs that carry no usable price."""

    @pytest.mark.parametrize("text", ["", "   ", None, 123, {}])
    def test_empty_and_non_string(self, text: object) -> None:
        assert parse_price(text) is None

    @pytest.mark.parametrize("text", ["Free shipping", "Call for price", "Out of stock"])
    def test_no_number(self, text: str) -> None:
        assert parse_price(text) is None

    @pytest.mark.parametrize("text", ["$0.00", "$-5.99", "$ -5.99"])
    def test_zero_and_negative_sentinels(self, text: str) -> None:
        assert parse_price(text) is None

    def test_save_percent_alone_is_not_a_price(self) -> None:
        assert parse_price("Save 30%!") is None

    @pytest.mark.parametrize("text", ["C$ 89.99", "$1 299.99", "89,99 $", "\x00\x07", "价格 ٣٤"])
    def test_unusual_formats_never_raise(self, text: str) -> None:
        result = parse_price(text)

        assert result is None or result.value > 0

    def test_malformed_decimal_takes_leading_number(self) -> None:
        result = parse_price("$1..99")

        assert result is not None
        assert result.value == Decimal("1")


class TestCurrencyMarkers:
    def test_euro(self) -> None:
        result = parse_price("€12.50")

        assert result is not None
        assert result.currency == "EUR"
        assert result.value == Decimal("12.50")

    def test_pound(self) -> None:
        result = parse_price("£7.25")

        assert result is not None
        assert result.currency == "GBP"

    def test_home_currency_follows_settings(self) -> None:
        result = PriceTextParser(Settings(home_currency="USD")).parse("$3.50")

        assert result is not None
        assert result.currency == "USD"


class TestParserDeterminism:
    def test_repeated_parse_is_equal(self) -> None:
        first = parse_price("PC Optimum Price $28.99")
        second = parse_price("PC Optimum Price $28.99")

        assert first == second
        assert first is not second

    def test_save_threshold_from_settings(self) -> None:
        parser = PriceTextParser(Settings(save_amount_threshold=Decimal("100")))

        result = parser.parse("Save $75 - Now $150.00")

        assert result is not None
        assert result.value == Decimal("150.00")


class TestPricePatterns:
    def test_standard(self) -> None:
        price = extract_price_with_pattern("Product costs $29.99", PRICE_PATTERNS["STANDARD"])

        assert price == Decimal("29.99")

    def test_sale_now(self) -> None:
        price = extract_price_with_pattern("Sale: $19.99", PRICE_PATTERNS["SALE_NOW"])

        assert price == Decimal("19.99")

    def test_save_amount(self) -> None:
        price = extract_price_with_pattern("Save $5.00", PRICE_PATTERNS["SAVE_AMOUNT"])

        assert price == Decimal("5.00")

    def test_from_price(self) -> None:
        price = extract_price_with_pattern("From $15.99", PRICE_PATTERNS["FROM_PRICE"])

        assert price == Decimal("15.99")

    def test_no_match(self) -> None:
        assert extract_price_with_pattern("No price here", PRICE_PATTERNS["STANDARD"]) is None


class TestFormatPrice:
    def test_currency_code_prefix(self) -> None:
        price = ParsedPrice(value=Decimal("29.99"), original_text="$29.99", currency="CAD")

        assert format_price(price) == "CAD29.99"

    def test_context_suffix(self) -> None:
        price = ParsedPrice(value=Decimal("12.99"), original_text="$12.99 each", context="each")

        assert format_price(price) == "$12.99 each"

    def test_two_fraction_digits(self) -> None:
        price = ParsedPrice(value=Decimal("15.5"), original_text="15.5")

        assert format_price(price) == "$15.50"


class TestParseWithLogging:
    def test_failure_is_logged_as_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="pricewatch.pricing.parser"):
            result = parse_price_with_logging("Call for price", retailer="shoppers")

        assert result is None
        record = next(r for r in caplog.records if r.message == "Price parsing failed")
        assert record.levelno == logging.WARNING
        assert record.retailer == "shoppers"

    def test_success_is_logged_as_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="pricewatch.pricing.parser"):
            result = parse_price_with_logging("$31.99", product_url="https://example.test/p/1")

        assert result is not None
        record = next(r for r in caplog.records if r.message == "Price parsed successfully")
        assert record.levelno == logging.DEBUG
        assert record.parsed_value == "31.99"
