"""
Type scale generator: a geometric scale of fluid font sizes.

Step n at viewport width v is

    font(v) * ratio(v) ** n

where font and ratio are each interpolated between their min and max values
across [min_width, max_width]. Because the ratio also grows with the
viewport, large steps grow faster than the base: the scale spreads out on
wide screens instead of merely shifting.

Each step is evaluated at min_width and max_width. Reported sizes are
rounded; the clamp() expressions use the unrounded sizes so rounding error
never leaks into the slope.
"""

from __future__ import annotations

import math

from fluidscale.clamp.formatter import calculate_clamp_variants
from fluidscale.clamp.wcag import check_wcag
from fluidscale.scales.labels import type_step_label
from fluidscale.schemas.config import TypeScaleConfig
from fluidscale.schemas.results import TypeStep
from fluidscale.utilities.interpolation import map_range
from fluidscale.utilities.rounding import round_to_precision


def calculate_type_size(config: TypeScaleConfig, viewport: float, step: int) -> float:
    """Unrounded font size (px) of a step at the given viewport width."""
    ratio = map_range(
        config.min_width, config.max_width, config.min_type_scale, config.max_type_scale, viewport
    )
    font_size = map_range(
        config.min_width, config.max_width, config.min_font_size, config.max_font_size, viewport
    )
    if ratio == 0 and step < 0:
        # 0 ** -n is +inf, not an error
        return font_size * math.inf
    return font_size * ratio**step


def calculate_type_step(config: TypeScaleConfig, step: int) -> TypeStep:
    """Build one TypeStep, evaluated at both ends of the viewport range."""
    min_font_size = calculate_type_size(config, config.min_width, step)
    max_font_size = calculate_type_size(config, config.max_width, step)
    clamp, clamp_px = calculate_clamp_variants(
        min_font_size,
        max_font_size,
        config.min_width,
        config.max_width,
        config.relative_to,
        config.precision,
    )
    return TypeStep(
        step=step,
        label=type_step_label(step, config.label_style),
        min_font_size=round_to_precision(min_font_size, config.precision),
        max_font_size=round_to_precision(max_font_size, config.precision),
        clamp=clamp,
        clamp_px=clamp_px,
        wcag_violation=check_wcag(
            min_font_size,
            max_font_size,
            config.min_width,
            config.max_width,
            precision=config.precision,
        ),
    )


def calculate_type_scale(config: TypeScaleConfig) -> list[TypeStep]:
    """
    Generate every step of a type scale, largest first.

    Order: +positive_steps … +1, 0, -1 … -negative_steps.
    """
    positive = [
        calculate_type_step(config, step) for step in range(config.positive_steps, 0, -1)
    ]
    negative = [
        calculate_type_step(config, -step) for step in range(1, config.negative_steps + 1)
    ]
    return [*positive, calculate_type_step(config, 0), *negative]
