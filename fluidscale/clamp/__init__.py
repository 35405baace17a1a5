"""
Clamp expressions: single and batched clamp() rendering plus the WCAG
resize-text check applied to fluid type.
"""

from .clamps import calculate_clamps
from .formatter import ROOT_FONT_SIZE_PX, calculate_clamp, calculate_clamp_variants
from .wcag import MAX_ZOOM, check_wcag

__all__ = [
    "ROOT_FONT_SIZE_PX",
    "MAX_ZOOM",
    "calculate_clamp",
    "calculate_clamp_variants",
    "calculate_clamps",
    "check_wcag",
]
