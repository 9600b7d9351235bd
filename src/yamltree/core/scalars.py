"""
Number literal recognition and formatting shared by the parser, the
serializer, and the edit coercion rules.

A single notion of "numeric text" is used everywhere so that a value the
serializer writes unquoted is read back as the same number, and a string the
serializer quotes would otherwise have been read as a number.
"""

import math
import re

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_PREFIXED_INTEGER_PATTERN = re.compile(r"0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+")
_DECIMAL_PATTERN = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)
_INFINITY_PATTERN = re.compile(r"[+-]?Infinity")

# Integral floats at or above this magnitude are written in exponent form.
_EXPONENT_THRESHOLD = 1e21


def parse_number(text: str) -> int | float | None:
    """
    Interpret text as a number literal.

    Surrounding whitespace is ignored. Plain integer literals become `int`;
    fractions, exponents and infinities become `float`.

    Params:
        text: Candidate literal

    Returns:
        The numeric value, or None when the text is not entirely a number

    Examples:
        "30" -> 30
        "-1.5e3" -> -1500.0
        "0x1F" -> 31
        "1_000" -> None
    """
    candidate = text.strip()
    if not candidate:
        return None

    if _INTEGER_PATTERN.fullmatch(candidate):
        try:
            return int(candidate)
        except ValueError:
            # Beyond the interpreter's int conversion digit limit
            return float(candidate)

    if _PREFIXED_INTEGER_PATTERN.fullmatch(candidate):
        return int(candidate, 0)

    if _DECIMAL_PATTERN.fullmatch(candidate) or _INFINITY_PATTERN.fullmatch(
        candidate
    ):
        return float(candidate)

    return None


def is_numeric(text: str) -> bool:
    """Check whether text would be read back as a number."""
    return parse_number(text) is not None


def format_number(value: int | float) -> str:
    """
    Render a number in its decimal textual form.

    Params:
        value: Integer or float to render

    Returns:
        Text that `parse_number` maps back to an equal value (except NaN)
    """
    if isinstance(value, int):
        return str(value)

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < _EXPONENT_THRESHOLD:
        return str(int(value))
    return repr(value)
