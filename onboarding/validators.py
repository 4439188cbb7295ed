"""Answer validators. Pure predicates over the raw line typed by the operator."""

import math
import re
from decimal import Decimal

# Plain decimal literal: sign, digits with optional fraction, optional exponent.
# Python's float() is too lenient here ("inf", "nan", "1_000").
_NUMBER_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


def parse_number(value: object) -> float | None:
    """Return the finite float a string spells, or None."""
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not _NUMBER_RE.match(text):
        return None
    number = float(text)
    if not math.isfinite(number):
        return None
    return number


def is_non_empty_text(value: object) -> bool:
    """Non-blank string that is not a pure number ("Alice" yes, "42" no)."""
    return isinstance(value, str) and bool(value.strip()) and parse_number(value) is None


def is_positive_integer(value: object) -> bool:
    """Strictly positive whole number; "5" and "5.0" pass, "5.5", "0", "-3" don't."""
    number = parse_number(value)
    return number is not None and number.is_integer() and number > 0


def is_positive_volume(value: object) -> bool:
    """Strictly positive finite number, integral or fractional."""
    number = parse_number(value)
    return number is not None and number > 0


def to_positive_integer(value: str) -> int:
    """Convert a string accepted by is_positive_integer. Raises ValueError otherwise."""
    if not is_positive_integer(value):
        raise ValueError(f"Not a positive integer: {value!r}")
    return int(float(value.strip()))


def format_volume(value: str) -> str:
    """Plain decimal display form of a volume, never in exponent notation.

    "10.0" -> "10", "20.50" -> "20.5", "0.00001" -> "0.00001", "1e3" -> "1000".
    """
    if parse_number(value) is None:
        raise ValueError(f"Not a number: {value!r}")
    return format(Decimal(value.strip()).normalize(), "f")
