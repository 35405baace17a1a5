"""
Preset registry: named type and space scale configs loaded from YAML.

The registry is a module-level singleton; call get_registry() to obtain it.
Both tables are loaded and validated once at import time and never written
afterwards. Instantiate PresetRegistry directly to read presets from another
directory (e.g. a project's own preset files, or a fixture in tests).

Data files (in data_dir):
  type_scales.yaml   top-level key ``type_scales``: list of entries whose
                     fields mirror TypeScaleConfig, plus id and description
  space_scales.yaml  top-level key ``space_scales``: list of entries whose
                     fields mirror SpaceScaleConfig, plus id, description
                     and an optional ``type_scale`` reference
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path

import yaml

from fluidscale.schemas.config import (
    LabelStyle,
    RelativeTo,
    SpaceScaleConfig,
    TypeScaleConfig,
)

_DATA_DIR = Path(__file__).parent / "data"

_TYPE_FIELDS = (
    "min_width",
    "max_width",
    "min_font_size",
    "max_font_size",
    "min_type_scale",
    "max_type_scale",
)
_SPACE_FIELDS = ("min_width", "max_width", "min_size", "max_size")


@dataclass(frozen=True)
class TypeScalePreset:
    id: str
    description: str
    config: TypeScaleConfig


@dataclass(frozen=True)
class SpaceScalePreset:
    id: str
    description: str
    config: SpaceScaleConfig
    type_scale: str | None = None  # id of the type scale preset this spacing pairs with


def _require(entry: dict, keys: tuple[str, ...], table: str) -> None:
    missing = [key for key in keys if key not in entry]
    if missing:
        raise ValueError(
            f"{table} entry {entry.get('id', '<no id>')!r} is missing: {', '.join(missing)}"
        )


class PresetRegistry:
    """
    Immutable registry of named scale presets.

    Instantiate directly to use a custom data directory; otherwise use
    get_registry() for the module singleton.
    """

    def __init__(self, data_dir: Path = _DATA_DIR) -> None:
        self._data_dir = Path(data_dir)

        self.type_scales: dict[str, TypeScalePreset] = {}
        self.space_scales: dict[str, SpaceScalePreset] = {}

        self._load_all()
        self._validate_cross_references()

    # ── Loading ────────────────────────────────────────────────────────────────

    def _load_yaml(self, filename: str) -> dict:
        path = self._data_dir / filename
        with open(path) as f:
            data = yaml.safe_load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{path} must contain a mapping, got {type(data).__name__}")
        return data

    def _load_all(self) -> None:
        self._load_type_scales()
        self._load_space_scales()

    def _load_type_scales(self) -> None:
        data = self._load_yaml("type_scales.yaml")
        for entry in data["type_scales"]:
            _require(entry, ("id", *_TYPE_FIELDS), "type_scales")
            if entry["id"] in self.type_scales:
                raise ValueError(f"duplicate type scale preset id: {entry['id']!r}")
            label_style = entry.get("label_style")
            config = TypeScaleConfig(
                **{key: entry[key] for key in _TYPE_FIELDS},
                positive_steps=entry.get("positive_steps", 0),
                negative_steps=entry.get("negative_steps", 0),
                label_style=LabelStyle(label_style) if label_style else None,
                relative_to=RelativeTo(entry.get("relative_to", RelativeTo.VIEWPORT.value)),
            )
            self.type_scales[entry["id"]] = TypeScalePreset(
                id=entry["id"],
                description=entry.get("description", "").strip(),
                config=config,
            )

    def _load_space_scales(self) -> None:
        data = self._load_yaml("space_scales.yaml")
        for entry in data["space_scales"]:
            _require(entry, ("id", *_SPACE_FIELDS), "space_scales")
            if entry["id"] in self.space_scales:
                raise ValueError(f"duplicate space scale preset id: {entry['id']!r}")
            config = SpaceScaleConfig(
                **{key: entry[key] for key in _SPACE_FIELDS},
                positive_steps=entry.get("positive_steps", []),
                negative_steps=entry.get("negative_steps", []),
                custom_sizes=entry.get("custom_sizes", []),
                relative_to=RelativeTo(entry.get("relative_to", RelativeTo.VIEWPORT.value)),
            )
            self.space_scales[entry["id"]] = SpaceScalePreset(
                id=entry["id"],
                description=entry.get("description", "").strip(),
                config=config,
                type_scale=entry.get("type_scale"),
            )

    # ── Cross-reference validation ─────────────────────────────────────────────

    def _validate_cross_references(self) -> None:
        """
        Run at startup. Raises ValueError listing all problems found if a
        space preset references an unknown type preset or disagrees with it
        on the viewport range.
        """
        errors: list[str] = []

        for space in self.space_scales.values():
            if space.type_scale is None:
                continue
            paired = self.type_scales.get(space.type_scale)
            if paired is None:
                errors.append(
                    f"space scale {space.id!r} references unknown type scale: "
                    f"{space.type_scale!r}"
                )
                continue
            if (space.config.min_width, space.config.max_width) != (
                paired.config.min_width,
                paired.config.max_width,
            ):
                errors.append(
                    f"space scale {space.id!r} viewport range "
                    f"{space.config.min_width}-{space.config.max_width} does not match "
                    f"type scale {paired.id!r} "
                    f"{paired.config.min_width}-{paired.config.max_width}"
                )

        if errors:
            raise ValueError(
                "Preset registry cross-reference validation failed:\n"
                + "\n".join(f"  • {e}" for e in errors)
            )

    # ── Query API ──────────────────────────────────────────────────────────────

    def type_config(self, name: str, **overrides) -> TypeScaleConfig:
        """
        Return the named type scale config, with any fields replaced.

        Raises:
            KeyError: If no preset has this name.
        """
        if name not in self.type_scales:
            raise KeyError(f"unknown type scale preset: {name!r}")
        return replace(self.type_scales[name].config, **overrides)

    def space_config(self, name: str, **overrides) -> SpaceScaleConfig:
        """
        Return the named space scale config, with any fields replaced.

        Raises:
            KeyError: If no preset has this name.
        """
        if name not in self.space_scales:
            raise KeyError(f"unknown space scale preset: {name!r}")
        return replace(self.space_scales[name].config, **overrides)


# ── Module-level singleton ─────────────────────────────────────────────────────
#
# Built at import time from the bundled data; read-only afterwards.

_registry: PresetRegistry = PresetRegistry()


def get_registry() -> PresetRegistry:
    """Return the module-level registry singleton."""
    return _registry
