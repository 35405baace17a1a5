"""
Result schemas produced by the generators.

Every result is a frozen dataclass built fresh per call. Sizes are in px;
clamp strings are ready to paste into a stylesheet.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ClampPair:
    """One entry of calculate_clamps(): the same pair rendered in rem and px."""

    label: str  # "<min_size>-<max_size>" in the caller's original order
    clamp: str
    clamp_px: str


@dataclass(frozen=True)
class TypeStep:
    """
    One step of a type scale.

    Attributes:
        step: Signed step index; 0 is the base font size.
        label: Display label from the configured LabelStyle.
        min_font_size: Size at min_width, rounded.
        max_font_size: Size at max_width, rounded.
        clamp: rem clamp() built from the unrounded sizes.
        clamp_px: px clamp() built from the unrounded sizes.
        wcag_violation: Window width at which WCAG 1.4.4 resizing fails,
            or None.
    """

    step: int
    label: str
    min_font_size: float
    max_font_size: float
    clamp: str
    clamp_px: str
    wcag_violation: float | None = None


@dataclass(frozen=True)
class SpaceSize:
    """One named step of a space scale."""

    step: int
    label: str
    multiplier: float
    min_size: int | float  # whole px; NaN or inf when the base size is
    max_size: int | float
    clamp: str
    clamp_px: str


@dataclass(frozen=True)
class SpacePair:
    """A fluid range spanning from one space step's min to another's max."""

    label: str  # "<label_a>-<label_b>"
    min_size: int | float
    max_size: int | float
    clamp: str
    clamp_px: str


@dataclass(frozen=True)
class SpaceScale:
    """
    Full output of calculate_space_scale().

    sizes are ordered smallest first; one_up_pairs follow the same order.
    """

    sizes: tuple[SpaceSize, ...]
    one_up_pairs: tuple[SpacePair, ...]
    custom_pairs: tuple[SpacePair, ...]

    def get(self, label: str) -> SpaceSize | None:
        """Return the size with this label, or None."""
        return next((size for size in self.sizes if size.label == label), None)
