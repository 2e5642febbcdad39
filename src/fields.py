"""Formatted numeric text fields.

A field is a (value, display_value) pair. Each keystroke produces the full text
of the input control, which is run through ``apply_edit`` to get the next state.
Edits with an invalid shape are rejected by returning the previous state.
"""

import logging
import math
import re
from dataclasses import dataclass
from typing import Callable

logger = logging.getLogger(__name__)

_NON_NUMERIC = re.compile(r"[^0-9.]")

# Shown while the user has typed only a decimal point
DECIMAL_MARKER = "$0."


def group_digits(text: str) -> str:
    """Insert thousands separators into the integer portion of a numeral.

    The fractional portion, including a trailing decimal point, is kept exactly
    as typed: ``"1234." -> "1,234."``, ``"1234567.5" -> "1,234,567.5"``.
    Numerals between -1000 and 1000 come back unchanged, leading zeros
    included (``"0100" -> "0100"``).
    """
    try:
        number = float(text)
    except ValueError:
        return text
    if -1000 < number < 1000 or not math.isfinite(number):
        return text

    sign = ""
    if text.startswith("-"):
        sign, text = "-", text[1:]

    whole, dot, fraction = text.partition(".")

    groups = []
    while len(whole) > 3:
        groups.insert(0, whole[-3:])
        whole = whole[:-3]
    if whole:
        groups.insert(0, whole)

    return sign + ",".join(groups) + dot + fraction


def number_to_text(value: float) -> str:
    """Render a number the way a browser's Number#toString does.

    Integral values have no fractional part (``20000.0 -> "20000"``), fixed
    notation is used from 1e-6 up to 1e21, and exponents carry no padding.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    magnitude = abs(value)
    if value.is_integer() and magnitude < 1e21:
        return str(int(value))

    text = repr(float(value))
    if "e" not in text:
        return text

    mantissa, exponent = text.split("e")
    exponent = int(exponent)

    if 1e-6 <= magnitude < 1e21:
        sign = "-" if value < 0 else ""
        digits = mantissa.lstrip("-").replace(".", "")
        return sign + "0." + "0" * (-exponent - 1) + digits

    if mantissa.endswith(".0"):
        mantissa = mantissa[:-2]
    return f"{mantissa}e{'+' if exponent > 0 else '-'}{abs(exponent)}"


def format_amount(value: float, format_fn: Callable[[str], str] = group_digits) -> str:
    """Format a computed figure with the same grouping used for field echo."""
    return format_fn(number_to_text(value))


@dataclass(frozen=True)
class FieldConfig:
    """Per-field constraints."""

    max_decimals: int = 2
    format_fn: Callable[[str], str] = group_digits


@dataclass(frozen=True)
class NumericField:
    """State of a formatted numeric input."""

    value: float = 0.0
    display_value: str = ""

    @classmethod
    def from_initial(cls, value: float) -> "NumericField":
        """Initial state: an empty box for zero, otherwise the plain number."""
        if value == 0:
            return cls()
        return cls(value=value, display_value=number_to_text(value))


def apply_edit(previous: NumericField, config: FieldConfig, raw_input: str) -> NumericField:
    """Compute the next field state from the raw text of the input.

    Args:
        previous: Current field state
        config: Field constraints and formatter
        raw_input: Full current text of the input control

    Returns:
        The next field state. Rejected edits return ``previous`` itself.
    """
    numeric = _NON_NUMERIC.sub("", raw_input or "")

    if numeric == "":
        return NumericField(0.0, "")

    parts = numeric.split(".")
    if len(parts) > 2:
        logger.debug("Rejected edit %r: more than one decimal point", raw_input)
        return previous
    if len(parts) == 2 and len(parts[1]) > config.max_decimals:
        logger.debug(
            "Rejected edit %r: more than %d decimal places",
            raw_input, config.max_decimals,
        )
        return previous

    if numeric == ".":
        return NumericField(0.0, DECIMAL_MARKER)

    try:
        number = float(numeric)
    except ValueError:
        logger.debug("Rejected edit %r: not a number", raw_input)
        return previous

    if not math.isfinite(number):
        logger.debug("Rejected edit %r: out of range", raw_input)
        return previous

    return NumericField(number, config.format_fn(numeric))


def set_from_percentage_of(
    previous: NumericField,
    config: FieldConfig,
    base: float,
    percentage: float,
) -> NumericField:
    """Set a field to a percentage of another amount, as if it had been typed.

    Used by the quick down payment options (5%, 10%, 20% of the house price).
    A result with more decimal places than the field allows is rejected like
    any other edit, leaving the field at ``previous``.
    """
    amount = base * percentage / 100
    return apply_edit(previous, config, number_to_text(amount))
