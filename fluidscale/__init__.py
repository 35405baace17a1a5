"""
fluidscale: fluid type and space scales as CSS clamp() expressions.

Every generator is a pure function of a frozen config dataclass:

    calculate_clamp(ClampConfig)            → str
    calculate_clamps(ClampsConfig)          → list[ClampPair]
    calculate_type_scale(TypeScaleConfig)   → list[TypeStep]
    calculate_space_scale(SpaceScaleConfig) → SpaceScale

Results export to plain dicts with to_dict(); named configs are available
from the preset registry via get_registry().
"""

from .clamp import calculate_clamp, calculate_clamps, check_wcag
from .export import OutputProfile, to_dict
from .presets import get_registry
from .scales import calculate_space_scale, calculate_type_scale
from .schemas import (
    ClampConfig,
    ClampPair,
    ClampsConfig,
    LabelStyle,
    RelativeTo,
    SpacePair,
    SpaceScale,
    SpaceScaleConfig,
    SpaceSize,
    TypeScaleConfig,
    TypeStep,
)

__all__ = [
    # operations
    "calculate_clamp",
    "calculate_clamps",
    "calculate_type_scale",
    "calculate_space_scale",
    "check_wcag",
    "to_dict",
    "get_registry",
    # options
    "RelativeTo",
    "LabelStyle",
    "OutputProfile",
    # configs
    "ClampConfig",
    "ClampsConfig",
    "TypeScaleConfig",
    "SpaceScaleConfig",
    # results
    "ClampPair",
    "TypeStep",
    "SpaceSize",
    "SpacePair",
    "SpaceScale",
]
