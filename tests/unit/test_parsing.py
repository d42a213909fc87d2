"""Tests for rendered-text parsing helpers."""

import pytest

from saucesuite.utils.parsing import parse_count, parse_currencies, parse_currency


class TestParseCurrency:
    """Tests for parse_currency()."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("$29.99", 29.99),
            ("$7.99", 7.99),
            ("Item total: $39.98", 39.98),
            ("Tax: $3.20", 3.2),
            ("Total: $43.18", 43.18),
            ("$15", 15.0),
        ],
    )
    def test_amounts(self, text, expected):
        assert parse_currency(text) == pytest.approx(expected)

    @pytest.mark.parametrize("text", ["", "Total:", "29.99", "free", None])
    def test_no_amount_reads_zero(self, text):
        assert parse_currency(text) == 0.0

    def test_malformed_amount_reads_zero(self):
        assert parse_currency("$1.2.3") == 0.0

    def test_first_amount_wins(self):
        assert parse_currency("$5.00 was $9.99") == 5.0

    def test_parse_currencies(self):
        assert parse_currencies(["$29.99", "$9.99", "n/a"]) == [29.99, 9.99, 0.0]


class TestParseCount:
    """Tests for parse_count()."""

    def test_badge(self):
        assert parse_count("3") == 3
        assert parse_count(" 12\n") == 12

    def test_not_a_number(self):
        with pytest.raises(ValueError):
            parse_count("many")
