"""Configuration loading for buildplan (.buildplan.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Sequence

import yaml

from .models import Builder

CONFIG_FILENAME = ".buildplan.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class BuildPlanConfig:
    """Represents the settings defined in .buildplan.yml."""

    root: Path
    exclude_paths: List[str] = field(default_factory=list)
    builds: List[Builder] = field(default_factory=list)

    @property
    def has_explicit_builds(self) -> bool:
        return bool(self.builds)


def load_config(config_path: Path) -> BuildPlanConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(Path(config_path))
    root = config_file.parent.resolve()

    if not config_file.exists():
        return BuildPlanConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    return BuildPlanConfig(
        root=root,
        exclude_paths=_as_str_list(data.get("exclude_paths")),
        builds=_parse_builds(data.get("builds")),
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _parse_builds(value: Any) -> List[Builder]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigError("`builds` must be a list of {src, use} entries")
    builds: List[Builder] = []
    for entry in value:
        try:
            builds.append(Builder.from_dict(entry))
        except ValueError as exc:
            raise ConfigError(f"Invalid entry in `builds`: {exc}") from exc
    return builds


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []
