"""
Config schemas: caller-supplied inputs to every generator.

All configs are frozen dataclasses with fail-fast validation in
__post_init__. Sequence fields are frozen into tuples so a config can be
shared between calls without aliasing the caller's lists.

Validation comes in two tiers:
  - always: structural checks (enum types, precision, step counts,
    multiplier signs). These raise TypeError / ValueError.
  - strict=True: numeric domain checks (widths and sizes strictly positive
    and finite, min_width != max_width). Off by default so degenerate inputs
    still produce degenerate output instead of failing.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from fluidscale.utilities.rounding import DEFAULT_PRECISION


class RelativeTo(str, Enum):
    """CSS length unit used for the fluid (slope) term of a clamp()."""

    VIEWPORT = "vi"
    CONTAINER = "cqi"
    VIEWPORT_WIDTH = "vw"


class LabelStyle(str, Enum):
    """Naming convention for type scale steps."""

    NUMERIC = "numeric"
    TSHIRT = "tshirt"
    TAILWIND = "tailwind"


def _check_common(relative_to: RelativeTo, precision: int) -> None:
    if not isinstance(relative_to, RelativeTo):
        raise TypeError(
            f"relative_to must be a RelativeTo, got {type(relative_to).__name__}"
        )
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise TypeError(f"precision must be an int, got {type(precision).__name__}")
    if precision < 0:
        raise ValueError(f"precision must be >= 0, got {precision}")


def _check_strict(min_width: float, max_width: float, **sizes: float) -> None:
    """Numeric domain checks applied only when strict=True."""
    values = {"min_width": min_width, "max_width": max_width, **sizes}
    for name, value in values.items():
        if not math.isfinite(value):
            raise ValueError(f"{name} must be finite, got {value}")
        if value <= 0:
            raise ValueError(f"{name} must be positive, got {value}")
    if min_width == max_width:
        raise ValueError(f"min_width and max_width must differ, both are {min_width}")


def _check_step_count(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")


@dataclass(frozen=True)
class ClampConfig:
    """
    One fluid size: interpolate from min_size at min_width to max_size at
    max_width.

    Sizes and widths are in px. min_size may exceed max_size for a ramp that
    shrinks as the viewport grows.

    Attributes:
        use_px: Emit px instead of rem (rem assumes a 16px root font size).
        relative_to: Unit for the fluid term (vi, cqi or vw).
        precision: Decimal places kept in the output.
        strict: Reject non-positive, non-finite or zero-width inputs.
    """

    min_size: float
    max_size: float
    min_width: float
    max_width: float
    use_px: bool = False
    relative_to: RelativeTo = RelativeTo.VIEWPORT
    precision: int = DEFAULT_PRECISION
    strict: bool = False

    def __post_init__(self) -> None:
        _check_common(self.relative_to, self.precision)
        if self.strict:
            _check_strict(
                self.min_width,
                self.max_width,
                min_size=self.min_size,
                max_size=self.max_size,
            )


@dataclass(frozen=True)
class ClampsConfig:
    """A batch of (min_size, max_size) pairs sharing one viewport range."""

    min_width: float
    max_width: float
    pairs: tuple[tuple[float, float], ...] = ()
    relative_to: RelativeTo = RelativeTo.VIEWPORT
    precision: int = DEFAULT_PRECISION
    strict: bool = False

    def __post_init__(self) -> None:
        _check_common(self.relative_to, self.precision)
        pairs = tuple(tuple(pair) for pair in self.pairs)
        for pair in pairs:
            if len(pair) != 2:
                raise ValueError(f"each pair must be (min_size, max_size), got {pair!r}")
        object.__setattr__(self, "pairs", pairs)
        if self.strict:
            _check_strict(self.min_width, self.max_width)
            for min_size, max_size in pairs:
                _check_strict(
                    self.min_width, self.max_width, min_size=min_size, max_size=max_size
                )


@dataclass(frozen=True)
class TypeScaleConfig:
    """
    Geometric type scale around a base font size.

    Both the base font size and the scale ratio are interpolated across the
    viewport range, so step n at width v is font(v) * ratio(v) ** n.

    Attributes:
        positive_steps: Number of steps above the base (step 0).
        negative_steps: Number of steps below the base.
        label_style: Naming convention for step labels; None means numeric.
    """

    min_width: float
    max_width: float
    min_font_size: float
    max_font_size: float
    min_type_scale: float
    max_type_scale: float
    positive_steps: int = 0
    negative_steps: int = 0
    label_style: LabelStyle | None = None
    relative_to: RelativeTo = RelativeTo.VIEWPORT
    precision: int = DEFAULT_PRECISION
    strict: bool = False

    def __post_init__(self) -> None:
        _check_common(self.relative_to, self.precision)
        _check_step_count("positive_steps", self.positive_steps)
        _check_step_count("negative_steps", self.negative_steps)
        if self.label_style is not None and not isinstance(self.label_style, LabelStyle):
            raise TypeError(
                f"label_style must be a LabelStyle or None, got {type(self.label_style).__name__}"
            )
        if self.strict:
            _check_strict(
                self.min_width,
                self.max_width,
                min_font_size=self.min_font_size,
                max_font_size=self.max_font_size,
                min_type_scale=self.min_type_scale,
                max_type_scale=self.max_type_scale,
            )


@dataclass(frozen=True)
class SpaceScaleConfig:
    """
    Multiplier-based space scale around a base size.

    Attributes:
        positive_steps: Multipliers for steps above the base, any order.
        negative_steps: Multipliers for steps below the base, any order.
        custom_sizes: Extra pairs as "<label>-<label>", e.g. "s-l".
    """

    min_width: float
    max_width: float
    min_size: float
    max_size: float
    positive_steps: tuple[float, ...] = ()
    negative_steps: tuple[float, ...] = ()
    custom_sizes: tuple[str, ...] = ()
    relative_to: RelativeTo = RelativeTo.VIEWPORT
    precision: int = DEFAULT_PRECISION
    strict: bool = False

    def __post_init__(self) -> None:
        _check_common(self.relative_to, self.precision)
        object.__setattr__(self, "positive_steps", tuple(self.positive_steps))
        object.__setattr__(self, "negative_steps", tuple(self.negative_steps))
        object.__setattr__(self, "custom_sizes", tuple(self.custom_sizes))
        for multiplier in self.positive_steps + self.negative_steps:
            if multiplier <= 0:
                raise ValueError(f"multipliers must be positive, got {multiplier}")
        for label in self.custom_sizes:
            if not isinstance(label, str):
                raise TypeError(f"custom_sizes entries must be str, got {type(label).__name__}")
        if self.strict:
            _check_strict(
                self.min_width,
                self.max_width,
                min_size=self.min_size,
                max_size=self.max_size,
            )
