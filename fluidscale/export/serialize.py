"""
Dict export for generator results.

Results are converted to plain dicts with camelCase keys, the shape
stylesheet and design-token tooling consumes. Which fields appear is chosen
with an OutputProfile:

  MINIMAL   label/step, sizes and the rem clamp only
  STANDARD  adds step labels and WCAG results on type steps, px clamps on
            every entry, and multipliers on space sizes
  FULL      every dataclass field
"""

from __future__ import annotations

from dataclasses import fields
from enum import Enum
from types import MappingProxyType
from typing import Any

from fluidscale.schemas.results import ClampPair, SpacePair, SpaceScale, SpaceSize, TypeStep


class OutputProfile(str, Enum):
    """Field set used when exporting results."""

    MINIMAL = "minimal"
    STANDARD = "standard"
    FULL = "full"


_MINIMAL_FIELDS: MappingProxyType[type, tuple[str, ...]] = MappingProxyType(
    {
        ClampPair: ("label", "clamp"),
        TypeStep: ("step", "min_font_size", "max_font_size", "clamp"),
        SpaceSize: ("label", "min_size", "max_size", "clamp"),
        SpacePair: ("label", "min_size", "max_size", "clamp"),
    }
)

_STANDARD_FIELDS: MappingProxyType[type, tuple[str, ...]] = MappingProxyType(
    {
        ClampPair: ("label", "clamp", "clamp_px"),
        TypeStep: ("step", "label", "min_font_size", "max_font_size", "wcag_violation", "clamp"),
        SpaceSize: ("label", "min_size", "max_size", "clamp", "clamp_px", "multiplier"),
        SpacePair: ("label", "min_size", "max_size", "clamp", "clamp_px"),
    }
)


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def _field_names(cls: type, profile: OutputProfile) -> tuple[str, ...]:
    if profile is OutputProfile.MINIMAL:
        return _MINIMAL_FIELDS[cls]
    if profile is OutputProfile.STANDARD:
        return _STANDARD_FIELDS[cls]
    return tuple(f.name for f in fields(cls))


def to_dict(result: Any, profile: OutputProfile = OutputProfile.STANDARD) -> Any:
    """
    Convert a result (or a list/tuple of results) to plain data.

    Args:
        result: A ClampPair, TypeStep, SpaceSize, SpacePair, SpaceScale, or a
            list/tuple of these.
        profile: Which fields to include.

    Returns:
        A dict for a single result, a list for a sequence, and
        {"sizes", "oneUpPairs", "customPairs"} for a SpaceScale.

    Raises:
        TypeError: If result is not a fluidscale result.
    """
    if isinstance(result, (list, tuple)):
        return [to_dict(item, profile) for item in result]
    if isinstance(result, SpaceScale):
        return {
            "sizes": to_dict(result.sizes, profile),
            "oneUpPairs": to_dict(result.one_up_pairs, profile),
            "customPairs": to_dict(result.custom_pairs, profile),
        }
    cls = type(result)
    if cls not in _STANDARD_FIELDS:
        raise TypeError(f"cannot export {cls.__name__}")
    return {_camel(name): getattr(result, name) for name in _field_names(cls, profile)}
