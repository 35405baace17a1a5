"""
Clamp-list generator: render a batch of (min, max) size pairs.

Output order matches input order. Labels keep the caller's order even when
the pair shrinks (40 → 28 is labelled "40-28" while its clamp() reads
28px … 40px).
"""

from __future__ import annotations

from fluidscale.clamp.formatter import calculate_clamp_variants
from fluidscale.schemas.config import ClampsConfig
from fluidscale.schemas.results import ClampPair
from fluidscale.utilities.rounding import format_number


def calculate_clamps(config: ClampsConfig) -> list[ClampPair]:
    """Render every pair in config.pairs as rem and px clamp() expressions."""
    results: list[ClampPair] = []
    for min_size, max_size in config.pairs:
        clamp, clamp_px = calculate_clamp_variants(
            min_size,
            max_size,
            config.min_width,
            config.max_width,
            config.relative_to,
            config.precision,
        )
        results.append(
            ClampPair(
                label=f"{format_number(min_size)}-{format_number(max_size)}",
                clamp=clamp,
                clamp_px=clamp_px,
            )
        )
    return results
