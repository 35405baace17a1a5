"""
Shared numeric utilities for fluidscale.

Provides the deterministic building blocks used by every generator:
linear interpolation, precision rounding, and CSS number formatting.
"""

from .interpolation import clamp_scalar, divide, inverse_lerp, lerp, map_range
from .rounding import (
    DEFAULT_PRECISION,
    EPSILON,
    format_number,
    round_half_up,
    round_to_precision,
)

__all__ = [
    # interpolation
    "lerp",
    "clamp_scalar",
    "inverse_lerp",
    "map_range",
    "divide",
    # rounding
    "EPSILON",
    "DEFAULT_PRECISION",
    "round_to_precision",
    "round_half_up",
    "format_number",
]
