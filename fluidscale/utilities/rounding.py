"""
Rounding and number formatting for CSS output.

Numbers in clamp() expressions are rounded to a fixed number of decimals
with an EPSILON nudge before scaling, so values such as 0.78125 that sit on
a rounding boundary after binary representation error still round up.
Halves round away from zero.
"""

from __future__ import annotations

import math
import sys
from decimal import Decimal

EPSILON: float = sys.float_info.epsilon

DEFAULT_PRECISION: int = 4

# Integral floats beyond this print in exponent form in CSS-hostile ways.
_INTEGRAL_FORMAT_LIMIT: float = 1e16


def round_half_up(value: float) -> int | float:
    """
    Round to the nearest integer, halves away from zero (4.5 → 5, -4.5 → -5).

    NaN and ±inf are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def round_to_precision(value: float, precision: int = DEFAULT_PRECISION) -> float:
    """
    Round value to `precision` decimal places.

    Args:
        value: Number to round. NaN and ±inf are returned unchanged.
        precision: Number of decimal places (>= 0).

    Returns:
        The rounded value as a float.

    Raises:
        ValueError: If precision is negative.
    """
    if precision < 0:
        raise ValueError(f"precision must be >= 0, got {precision}")
    if not math.isfinite(value):
        return value
    factor = 10**precision
    scaled = (value + EPSILON) * factor
    return math.copysign(math.floor(abs(scaled) + 0.5), scaled) / factor


def format_number(value: float, precision: int | None = None) -> str:
    """
    Render a number the way it should appear in CSS.

    Integral values drop the decimal point (16.0 → "16"), negative zero
    prints as "0", non-finite values print as NaN / Infinity / -Infinity.
    Output is always plain decimal, never exponent form: with a precision
    the value is written to that many places and trailing zeros are
    stripped, without one the shortest round-trip digits are used.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == int(value) and abs(value) < _INTEGRAL_FORMAT_LIMIT:
        return str(int(value))
    if precision is None:
        text = format(Decimal(repr(float(value))), "f")
    else:
        text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text
