"""Config and result schemas for fluidscale."""

from .config import (
    ClampConfig,
    ClampsConfig,
    LabelStyle,
    RelativeTo,
    SpaceScaleConfig,
    TypeScaleConfig,
)
from .results import ClampPair, SpacePair, SpaceScale, SpaceSize, TypeStep

__all__ = [
    # enums
    "RelativeTo",
    "LabelStyle",
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
