"""Tests for single-string price classifiers."""

from __future__ import annotations

import pytest

from pricewatch.pricing.classifiers import detect_currency, extract_context, is_sale_text


class TestDetectCurrency:
    def test_dollar_sign_is_home_currency(self) -> None:
        assert detect_currency("$12.99") == "CAD"

    def test_home_currency_token(self) -> None:
        assert detect_currency("24.99 cad") == "CAD"

    def test_home_currency_is_configurable(self) -> None:
        assert detect_currency("$12.99", home_currency="USD") == "USD"

    def test_foreign_symbols(self) -> None:
        assert detect_currency("€10") == "EUR"
        assert detect_currency("£10") == "GBP"

    def test_undetermined(self) -> None:
        assert detect_currency("12.99") is None
        assert detect_currency("") is None

    def test_token_inside_word_is_ignored(self) -> None:
        assert detect_currency("Arcade 12.99") is None


class TestIsSaleText:
    @pytest.mark.parametrize(
        "text",
        ["SALE $5", "Was $10", "20% off", "Clearance", "PC Optimum Price", "Hot deal"],
    )
    def test_promotional_cues(self, text: str) -> None:
        assert is_sale_text(text)

    def test_plain_price(self) -> None:
        assert not is_sale_text("$31.99")

    def test_custom_keywords(self) -> None:
        assert is_sale_text("Rollback $3.97", keywords=("rollback",))
        assert not is_sale_text("Rollback $3.97", keywords=("clearance",))

    def test_empty_string(self) -> None:
        assert not is_sale_text("")


class TestExtractContext:
    def test_each(self) -> None:
        assert extract_context("$1.99 EACH") == "each"

    def test_per_unit_whitespace_collapsed(self) -> None:
        assert extract_context("$3.49 per   100g") == "per 100g"

    def test_starting_at(self) -> None:
        assert extract_context("Starting at $9.99") == "starting at"

    def test_up_to(self) -> None:
        assert extract_context("Up to $40 off") == "up to"

    def test_only_first_qualifier_kept(self) -> None:
        assert extract_context("From $2.99 each") == "from"

    def test_no_qualifier(self) -> None:
        assert extract_context("$4.99") is None
