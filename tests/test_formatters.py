from __future__ import annotations

from decimal import Decimal

from impresor.utils.formatters import break_every_n, format_currency, or_default, to_decimal


class TestFormatCurrency:
    def test_grouping(self):
        assert format_currency(1234567.5) == "1,234,567.50"

    def test_string_input(self):
        assert format_currency("19684.93") == "19,684.93"

    def test_decimal_input(self):
        assert format_currency(Decimal("5.5")) == "5.50"

    def test_zero(self):
        assert format_currency(0) == "0.00"

    def test_none_is_zero(self):
        assert format_currency(None) == "0.00"

    def test_empty_is_zero(self):
        assert format_currency("") == "0.00"

    def test_garbage_is_zero(self):
        assert format_currency("abc") == "0.00"

    def test_negative(self):
        assert format_currency("-1234.5") == "-1,234.50"

    def test_large(self):
        assert format_currency("123456789012.3456") == "123,456,789,012.35"


class TestBreakEveryN:
    def test_short_unchanged(self):
        s = "x" * 86
        assert break_every_n(s, 86) == s

    def test_exact_double_width(self):
        s = "a" * 86 + "b" * 86
        result = break_every_n(s, 86)
        assert result.count("\n") == 1
        assert result.index("\n") == 86
        assert result == "a" * 86 + "\n" + "b" * 86

    def test_remainder_chunk(self):
        assert break_every_n("abcdefg", 3) == "abc\ndef\ng"

    def test_empty(self):
        assert break_every_n("", 86) == ""

    def test_none(self):
        assert break_every_n(None, 86) == ""


class TestOrDefault:
    def test_value_passes_through(self):
        assert or_default("A") == "A"

    def test_none_uses_empty(self):
        assert or_default(None) == ""

    def test_empty_string_uses_fallback(self):
        assert or_default("", "N/A") == "N/A"

    def test_custom_fallback(self):
        assert or_default(None, "0") == "0"

    def test_zero_is_kept(self):
        assert or_default(0, "x") == 0


class TestToDecimal:
    def test_numeric_string(self):
        assert to_decimal("1160.00") == Decimal("1160.00")

    def test_none_empty_and_garbage_are_zero(self):
        assert to_decimal(None) == 0
        assert to_decimal("") == 0
        assert to_decimal("n/a") == 0

    def test_non_finite_is_zero(self):
        assert to_decimal("NaN") == 0
