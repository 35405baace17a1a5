from .registry import PresetRegistry, SpaceScalePreset, TypeScalePreset, get_registry

__all__ = [
    "PresetRegistry",
    "TypeScalePreset",
    "SpaceScalePreset",
    "get_registry",
]
