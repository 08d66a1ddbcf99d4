"""Conversion between JSON real-number text and floats."""

from __future__ import annotations

import math
import re

_REAL_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_EXPONENT_PATTERN = re.compile(r"e(?:\+|(-))0*(?=\d)")

DEFAULT_PRECISION = 17


def parse_real(text: str) -> float:
    """Parse decimal number text into a float.

    Raises ValueError if the text is not a decimal number and
    OverflowError if the value is too large to represent.
    """
    if not _REAL_PATTERN.fullmatch(text):
        raise ValueError(f"not a real number: {text!r}")
    value = float(text)
    if math.isinf(value):
        raise OverflowError(f"real number overflow: {text!r}")
    return value


def format_real(value: float, precision: int = 0) -> str:
    """Format a float as JSON text with the given significant digits (0 means 17).

    The result always contains a '.' or an exponent so it reads back as a
    real, and its exponent has no '+' sign or leading zeros.
    """
    if math.isnan(value) or math.isinf(value):
        raise ValueError(f"cannot format non-finite real: {value!r}")
    if precision < 0:
        raise ValueError(f"negative precision: {precision}")
    if precision == 0:
        precision = DEFAULT_PRECISION

    text = "%.*g" % (precision, value)

    if "." not in text and "e" not in text:
        text += ".0"

    return _EXPONENT_PATTERN.sub(lambda m: "e" + (m.group(1) or ""), text)