"""
Clamp formatter: turn a linear size ramp into a CSS clamp() expression.

Given sizes at two viewport widths, the fluid term is the line through
(min_width, min_size) and (max_width, max_size):

    size(v) = intercept + slope * v

which CSS writes as ``<intercept>rem + <slope * 100>vi`` because 1vi is 1%
of the viewport's inline size. The outer bounds are always printed in
numeric order, while the slope keeps its sign so a shrinking ramp reads
``+ -1.5789vi``.

rem output divides every px value by 16 (the browser default root font
size); px output leaves them unchanged.
"""

from __future__ import annotations

import warnings

from fluidscale.schemas.config import ClampConfig, RelativeTo
from fluidscale.utilities.interpolation import divide
from fluidscale.utilities.rounding import format_number, round_to_precision

ROOT_FONT_SIZE_PX: float = 16.0


def calculate_clamp(config: ClampConfig) -> str:
    """
    Render a clamp() expression for one fluid size.

    Args:
        config: Sizes, widths and output options.

    Returns:
        A string of the form
        ``clamp(<min>U, <intercept>U + <slope>R, <max>U)``.

    Equal widths (outside strict mode) cannot define a slope; the result
    contains NaN / Infinity and a RuntimeWarning is issued.
    """
    low = min(config.min_size, config.max_size)
    high = max(config.min_size, config.max_size)

    divisor = 1.0 if config.use_px else ROOT_FONT_SIZE_PX
    unit = "px" if config.use_px else "rem"
    fluid_unit = config.relative_to.value

    if config.min_width == config.max_width:
        warnings.warn(
            f"min_width equals max_width ({config.min_width}); "
            "the clamp() slope is undefined",
            RuntimeWarning,
            stacklevel=2,
        )

    min_size = config.min_size / divisor
    max_size = config.max_size / divisor
    min_width = config.min_width / divisor
    max_width = config.max_width / divisor

    slope = divide(max_size - min_size, max_width - min_width)
    intercept = -min_width * slope + min_size

    def fmt(value: float) -> str:
        return format_number(round_to_precision(value, config.precision), config.precision)

    return (
        f"clamp({fmt(low / divisor)}{unit}, "
        f"{fmt(intercept)}{unit} + {fmt(slope * 100)}{fluid_unit}, "
        f"{fmt(high / divisor)}{unit})"
    )


def calculate_clamp_variants(
    min_size: float,
    max_size: float,
    min_width: float,
    max_width: float,
    relative_to: RelativeTo,
    precision: int,
) -> tuple[str, str]:
    """Return the (rem, px) clamp() pair for one fluid size."""
    rem, px = (
        calculate_clamp(
            ClampConfig(
                min_size=min_size,
                max_size=max_size,
                min_width=min_width,
                max_width=max_width,
                use_px=use_px,
                relative_to=relative_to,
                precision=precision,
            )
        )
        for use_px in (False, True)
    )
    return rem, px
