"""Tests for bidsort.bids.currency."""

from decimal import Decimal

import pytest

from bidsort.bids.currency import parse_amount
from bidsort.core.exceptions import AmountParseError, DataProcessingError


class TestParseAmount:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("$12.50", Decimal("12.50")),
            ("12.50", Decimal("12.50")),
            ("$1,250.00", Decimal("1250.00")),
            ("  $7 ", Decimal("7")),
            ("$0", Decimal("0")),
        ],
    )
    def test_parses(self, text, expected):
        assert parse_amount(text) == expected

    def test_blank_is_zero(self):
        assert parse_amount("") == Decimal("0")
        assert parse_amount(" $ ") == Decimal("0")

    def test_custom_strip_char(self):
        assert parse_amount("€15", strip_char="€") == Decimal("15")

    def test_dollar_kept_when_stripping_other_char(self):
        with pytest.raises(AmountParseError):
            parse_amount("$15", strip_char="€")

    def test_no_thousands_separator(self):
        with pytest.raises(AmountParseError):
            parse_amount("1,5", thousands_sep="")

    @pytest.mark.parametrize("text", ["abc", "$12.5.0", "NaN", "Infinity"])
    def test_invalid_raises(self, text):
        with pytest.raises(AmountParseError, match="Not a valid amount"):
            parse_amount(text)

    def test_error_is_data_processing_error(self):
        with pytest.raises(DataProcessingError):
            parse_amount("twelve")
