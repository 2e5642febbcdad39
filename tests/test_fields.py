"""Tests for formatted numeric fields."""

import pytest

from src.config import CURRENCY_FIELD, RATE_FIELD
from src.fields import (
    DECIMAL_MARKER,
    FieldConfig,
    NumericField,
    apply_edit,
    format_amount,
    group_digits,
    number_to_text,
    set_from_percentage_of,
)


PREVIOUS = NumericField(value=42.5, display_value="42.5")


class TestGroupDigits:
    """Tests for thousands grouping."""

    @pytest.mark.parametrize("text, expected", [
        ("1", "1"),
        ("123", "123"),
        ("1234", "1,234"),
        ("1234567", "1,234,567"),
        ("1234567.89", "1,234,567.89"),
        ("1234.", "1,234."),
        (".5", ".5"),
        ("0012345", "0,012,345"),
        ("-1234.5", "-1,234.5"),
    ])
    def test_grouping(self, text, expected):
        """Test integer part grouped, fraction kept as typed."""
        assert group_digits(text) == expected

    @pytest.mark.parametrize("text", ["0100", "007", "999.99", "-999", "0.05", "1."])
    def test_below_one_thousand_unchanged(self, text):
        """Test numerals under 1000 are echoed exactly, leading zeros kept."""
        assert group_digits(text) == text

    def test_not_a_number_unchanged(self):
        assert group_digits("") == ""


class TestNumberToText:
    """Tests for browser-style number text."""

    @pytest.mark.parametrize("value, expected", [
        (20000.0, "20000"),
        (0.0, "0"),
        (3.5, "3.5"),
        (-0.5, "-0.5"),
        (0.1 + 0.2, "0.30000000000000004"),
        (1e-5, "0.00001"),
        (1.5e-6, "0.0000015"),
        (1e-7, "1e-7"),
        (1e21, "1e+21"),
        (1e20, "100000000000000000000"),
    ])
    def test_number_to_text(self, value, expected):
        """Test fixed and exponent notation boundaries."""
        assert number_to_text(value) == expected

    def test_int_input(self):
        """Test plain ints render like the equivalent float."""
        assert number_to_text(20000) == "20000"
        assert number_to_text(-7) == "-7"
        assert format_amount(1234) == "1,234"

    def test_non_finite(self):
        """Test non-finite values."""
        assert number_to_text(float("inf")) == "Infinity"
        assert number_to_text(float("nan")) == "NaN"


class TestFormatAmount:
    """Tests for output formatting."""

    def test_cents(self):
        assert format_amount(1077.71) == "1,077.71"

    def test_whole_dollars(self):
        """Test integral amounts print without decimals."""
        assert format_amount(240000.0) == "240,000"

    def test_custom_formatter(self):
        assert format_amount(1234.5, format_fn=lambda text: f"<{text}>") == "<1234.5>"


class TestNumericField:
    """Tests for field initial state."""

    def test_zero_starts_empty(self):
        field = NumericField.from_initial(0)
        assert field == NumericField(0.0, "")

    def test_initial_rate(self):
        """Test initial values are shown ungrouped."""
        assert NumericField.from_initial(3.5).display_value == "3.5"
        assert NumericField.from_initial(2.0).display_value == "2"
        assert NumericField.from_initial(250000.0).display_value == "250000"

    def test_int_initial_value(self):
        field = NumericField.from_initial(5)
        assert field.display_value == "5"
        assert field.value == 5


class TestApplyEdit:
    """Tests for the field edit rules."""

    def test_plain_number(self):
        field = apply_edit(PREVIOUS, CURRENCY_FIELD, "1234")
        assert field.value == 1234
        assert field.display_value == "1,234"

    def test_strips_formatting(self):
        """Test currency signs, separators and letters are ignored."""
        field = apply_edit(PREVIOUS, CURRENCY_FIELD, "$1,234.5x")
        assert field.value == 1234.5
        assert field.display_value == "1,234.5"

    def test_regroups_after_edit(self):
        """Test typing into an already grouped value regroups it."""
        field = apply_edit(PREVIOUS, CURRENCY_FIELD, "1,2345")
        assert field.value == 12345
        assert field.display_value == "12,345"

    def test_trailing_decimal_point_kept(self):
        field = apply_edit(PREVIOUS, CURRENCY_FIELD, "1234.")
        assert field.value == 1234
        assert field.display_value == "1,234."

    def test_leading_zeros_under_one_thousand(self):
        """Test short numerals are echoed without separators."""
        field = apply_edit(PREVIOUS, CURRENCY_FIELD, "0100")
        assert field.value == 100
        assert field.display_value == "0100"

    def test_leading_decimal_point(self):
        field = apply_edit(PREVIOUS, CURRENCY_FIELD, ".5")
        assert field.value == 0.5
        assert field.display_value == ".5"

    @pytest.mark.parametrize("raw", ["", "abc", "$", ",,,"])
    def test_cleared_input_resets(self, raw):
        """Test empty input resets to zero regardless of previous state."""
        assert apply_edit(PREVIOUS, CURRENCY_FIELD, raw) == NumericField(0.0, "")

    def test_lone_decimal_point(self):
        """Test a lone decimal point shows the transitional marker."""
        field = apply_edit(PREVIOUS, CURRENCY_FIELD, ".")
        assert field == NumericField(0.0, DECIMAL_MARKER)
        assert field.display_value == "$0."

    def test_marker_then_digit(self):
        """Test typing after the marker continues the decimal."""
        marker = apply_edit(PREVIOUS, CURRENCY_FIELD, ".")
        field = apply_edit(marker, CURRENCY_FIELD, marker.display_value + "5")
        assert field.value == 0.5
        assert field.display_value == "0.5"

    @pytest.mark.parametrize("raw", ["1.2.3", "..", "1..", "1,234.5.6"])
    def test_multiple_decimal_points_rejected(self, raw):
        assert apply_edit(PREVIOUS, CURRENCY_FIELD, raw) is PREVIOUS

    def test_too_many_decimals_rejected(self):
        assert apply_edit(PREVIOUS, CURRENCY_FIELD, "1.234") is PREVIOUS

    def test_rate_field_allows_three_decimals(self):
        field = apply_edit(PREVIOUS, RATE_FIELD, "6.875")
        assert field.value == 6.875
        assert field.display_value == "6.875"
        assert apply_edit(PREVIOUS, RATE_FIELD, "6.8751") is PREVIOUS

    def test_overflow_rejected(self):
        """Test a number too large for a float leaves the field unchanged."""
        assert apply_edit(PREVIOUS, CURRENCY_FIELD, "9" * 400) is PREVIOUS

    def test_custom_formatter(self):
        """Test the display formatter is injectable."""
        config = FieldConfig(max_decimals=2, format_fn=lambda text: text)
        field = apply_edit(PREVIOUS, config, "1234567.8")
        assert field.display_value == "1234567.8"

    def test_deterministic(self):
        first = apply_edit(PREVIOUS, CURRENCY_FIELD, "98765.43")
        second = apply_edit(PREVIOUS, CURRENCY_FIELD, "98765.43")
        assert first == second

    def test_value_matches_display(self):
        """Test the value can be rebuilt from the display text."""
        for raw in ["1", "12345", "1234567.8", "0.05", "1000."]:
            field = apply_edit(PREVIOUS, CURRENCY_FIELD, raw)
            assert float(field.display_value.replace(",", "")) == field.value


class TestSetFromPercentageOf:
    """Tests for quick down payment options."""

    def test_ten_percent(self):
        field = set_from_percentage_of(PREVIOUS, CURRENCY_FIELD, 200000, 10)
        assert field.value == 20000
        assert field.display_value == "20,000"

    def test_fractional_result(self):
        field = set_from_percentage_of(PREVIOUS, CURRENCY_FIELD, 333333, 5)
        assert field.value == pytest.approx(16666.65)
        assert field.display_value == "16,666.65"

    def test_zero_base(self):
        field = set_from_percentage_of(PREVIOUS, CURRENCY_FIELD, 0, 20)
        assert field == NumericField(0.0, "0")

    def test_long_expansion_rejected(self):
        """Test a result with more than two decimal places keeps the old value."""
        field = set_from_percentage_of(PREVIOUS, CURRENCY_FIELD, 1234.57, 5)
        assert field is PREVIOUS
