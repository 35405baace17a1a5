"""
WCAG 1.4.4 (Resize Text) check for fluid sizes.

Browser zoom scales CSS pixels, so a window ``w`` device pixels wide shows a
``w / z`` CSS-pixel viewport at zoom ``z``, and a fluid size ``f`` renders
at ``z * f(w / z)`` device pixels. Because the fluid term shrinks as the
CSS viewport narrows, zooming in grows fluid text by less than the zoom
factor. The criterion requires text to reach 200% of its unzoomed size, so
a ramp fails at window width ``w`` when

    zoom * f(w / zoom) < 2 * f(w)

with zoom at the browser maximum (500%).

f saturates outside [min_width, max_width], which makes the difference
piecewise linear with corners at min_width, max_width, zoom * min_width
and zoom * max_width. Checking each linear piece finds the first failing
width exactly.
"""

from __future__ import annotations

from fluidscale.utilities.interpolation import map_range
from fluidscale.utilities.rounding import DEFAULT_PRECISION, round_to_precision

MAX_ZOOM: float = 5.0
REQUIRED_SCALE: float = 2.0


def check_wcag(
    min_size: float,
    max_size: float,
    min_width: float,
    max_width: float,
    zoom: float = MAX_ZOOM,
    precision: int = DEFAULT_PRECISION,
) -> float | None:
    """
    Find where a fluid size stops being resizable to 200%.

    Args:
        min_size: Size (px) at min_width.
        max_size: Size (px) at max_width.
        min_width: Viewport width (px) where the ramp starts.
        max_width: Viewport width (px) where the ramp ends.
        zoom: Maximum browser zoom factor to test.
        precision: Decimal places kept in the returned width.

    Returns:
        The smallest window width (device px) where the zoomed size falls
        short of twice the unzoomed size, or None when every width passes.
        Degenerate ramps (equal widths, NaN inputs) return None.

    Raises:
        ValueError: If zoom is below the 200% the criterion asks for.
    """
    if zoom < REQUIRED_SCALE:
        raise ValueError(f"zoom must be >= {REQUIRED_SCALE}, got {zoom}")

    def size_at(viewport: float) -> float:
        return map_range(min_width, max_width, min_size, max_size, viewport)

    def margin(window: float) -> float:
        return zoom * size_at(window / zoom) - REQUIRED_SCALE * size_at(window)

    corners = sorted({min_width, max_width, zoom * min_width, zoom * max_width})
    for start, end in zip(corners, corners[1:]):
        at_start = margin(start)
        at_end = margin(end)
        if at_start < 0:
            return round_to_precision(start, precision)
        if at_end < 0:
            crossing = start + (end - start) * at_start / (at_start - at_end)
            return round_to_precision(crossing, precision)
    return None
