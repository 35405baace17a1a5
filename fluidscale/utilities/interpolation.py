"""
Linear interpolation primitives.

All functions are pure: no side effects, no state. None of them validate
their inputs: a zero-width domain (x == y) produces inf/NaN rather than
raising, and callers decide what to do with non-finite results.
"""

from __future__ import annotations

import math


def divide(numerator: float, denominator: float) -> float:
    """
    IEEE-754 division that never raises.

    x / 0 is ±inf (sign from both operands), 0 / 0 and NaN / 0 are NaN.
    """
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def lerp(x: float, y: float, a: float) -> float:
    """Blend from x (a=0) to y (a=1)."""
    return x * (1 - a) + y * a


def clamp_scalar(a: float, lower: float = 0.0, upper: float = 1.0) -> float:
    """Limit a to [lower, upper]. NaN passes through unchanged."""
    if math.isnan(a):
        return a
    return min(upper, max(lower, a))


def inverse_lerp(x: float, y: float, a: float) -> float:
    """Position of a within [x, y] as a fraction in [0, 1], saturating outside."""
    return clamp_scalar(divide(a - x, y - x))


def map_range(x1: float, y1: float, x2: float, y2: float, a: float) -> float:
    """
    Map a from the domain [x1, y1] onto the codomain [x2, y2].

    Values outside the domain saturate at the codomain bounds.
    """
    return lerp(x2, y2, inverse_lerp(x1, y1, a))
