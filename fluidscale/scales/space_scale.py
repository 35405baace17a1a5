"""
Space scale generator: named spacing steps derived from multipliers.

Each multiplier scales both base sizes and is rounded to a whole pixel,
since spacing tokens are conventionally integers. Positive multipliers
become steps 1, 2, … in ascending order; negative multipliers (values
below 1) become steps -1, -2, … from the largest down, so the multiplier
closest to 1 sits next to the base.

Beyond the individual sizes the scale offers two kinds of pairs, each a
fluid range from one step's min size to another step's max size:
  - one-up pairs: every step paired with the next step up
  - custom pairs: caller-named "<label>-<label>" combinations
"""

from __future__ import annotations

from fluidscale.clamp.formatter import calculate_clamp_variants
from fluidscale.scales.labels import space_step_label
from fluidscale.schemas.config import SpaceScaleConfig
from fluidscale.schemas.results import SpacePair, SpaceScale, SpaceSize
from fluidscale.utilities.rounding import round_half_up

BASE_MULTIPLIER: float = 1.0


def calculate_space_size(config: SpaceScaleConfig, multiplier: float, step: int) -> SpaceSize:
    """Scale the base sizes by multiplier and render the step's clamps."""
    min_size = round_half_up(config.min_size * multiplier)
    max_size = round_half_up(config.max_size * multiplier)
    clamp, clamp_px = calculate_clamp_variants(
        min_size, max_size, config.min_width, config.max_width, config.relative_to, config.precision
    )
    return SpaceSize(
        step=step,
        label=space_step_label(step),
        multiplier=multiplier,
        min_size=min_size,
        max_size=max_size,
        clamp=clamp,
        clamp_px=clamp_px,
    )


def _make_pair(config: SpaceScaleConfig, lower: SpaceSize, upper: SpaceSize) -> SpacePair:
    clamp, clamp_px = calculate_clamp_variants(
        lower.min_size,
        upper.max_size,
        config.min_width,
        config.max_width,
        config.relative_to,
        config.precision,
    )
    return SpacePair(
        label=f"{lower.label}-{upper.label}",
        min_size=lower.min_size,
        max_size=upper.max_size,
        clamp=clamp,
        clamp_px=clamp_px,
    )


def calculate_one_up_pairs(
    config: SpaceScaleConfig, sizes: tuple[SpaceSize, ...]
) -> list[SpacePair]:
    """
    Pair each size with its neighbour by position.

    sizes must be ordered smallest first. Produces len(sizes) - 1 pairs.
    """
    return [_make_pair(config, lower, upper) for lower, upper in zip(sizes, sizes[1:])]


def calculate_custom_pairs(
    config: SpaceScaleConfig, sizes: tuple[SpaceSize, ...]
) -> list[SpacePair]:
    """
    Resolve config.custom_sizes against the generated labels.

    Entries with a missing half ("s-", "s") or an unknown label are skipped.
    Only the first two "-"-separated parts are read.
    """
    by_label: dict[str, SpaceSize] = {}
    for size in sizes:
        by_label.setdefault(size.label, size)

    pairs: list[SpacePair] = []
    for custom in config.custom_sizes:
        key_a, _, rest = custom.partition("-")
        key_b = rest.split("-", 1)[0]
        if not key_a or not key_b:
            continue
        lower = by_label.get(key_a)
        upper = by_label.get(key_b)
        if lower is None or upper is None:
            continue
        pairs.append(_make_pair(config, lower, upper))
    return pairs


def calculate_space_scale(config: SpaceScaleConfig) -> SpaceScale:
    """
    Generate a complete space scale.

    Returns:
        SpaceScale with sizes ordered smallest first (…, xs, s, m, …),
        the one-up pairs between neighbours, and the resolved custom pairs.
    """
    positive = [
        calculate_space_size(config, multiplier, step)
        for step, multiplier in enumerate(sorted(config.positive_steps), start=1)
    ]
    negative = [
        calculate_space_size(config, multiplier, -step)
        for step, multiplier in enumerate(sorted(config.negative_steps, reverse=True), start=1)
    ]
    base = calculate_space_size(config, BASE_MULTIPLIER, 0)
    sizes = (*reversed(negative), base, *positive)

    return SpaceScale(
        sizes=sizes,
        one_up_pairs=tuple(calculate_one_up_pairs(config, sizes)),
        custom_pairs=tuple(calculate_custom_pairs(config, sizes)),
    )
