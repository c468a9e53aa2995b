"""Core data models shared across buildplan components."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple


def _freeze(value: Any) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        return MappingProxyType({})
    return MappingProxyType({str(key): item for key, item in value.items()})


@dataclass(frozen=True)
class BuilderConfig:
    """Options handed to a builder alongside its source pattern.

    ``zero_config`` marks builders chosen by inference. Any other named
    option a user configures is kept read-only in ``options``.
    """

    zero_config: bool = True
    options: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        object.__setattr__(self, "options", _freeze(self.options))

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = dict(self.options)
        if self.zero_config:
            data["zeroConfig"] = True
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "BuilderConfig":
        if not data:
            return cls(zero_config=False)
        options = {key: value for key, value in data.items() if key != "zeroConfig"}
        return cls(zero_config=bool(data.get("zeroConfig", False)), options=options)


@dataclass(frozen=True)
class Builder:
    """Declarative assignment of a build strategy to a file or glob."""

    src: str
    use: str
    config: BuilderConfig = field(default_factory=BuilderConfig)

    def with_src(self, src: str) -> "Builder":
        """Return a copy of the builder bound to a concrete path."""
        return replace(self, src=src)

    def to_dict(self) -> Dict[str, Any]:
        return {"src": self.src, "use": self.use, "config": self.config.to_dict()}

    @classmethod
    def from_dict(cls, data: Any) -> "Builder":
        """Parse an explicitly configured build entry."""
        if not isinstance(data, Mapping):
            raise ValueError("build entries must be mappings with `src` and `use`")
        src = data.get("src")
        use = data.get("use")
        if not isinstance(src, str) or not src:
            raise ValueError("build entry is missing a `src` string")
        if not isinstance(use, str) or not use:
            raise ValueError(f"build entry for '{src}' is missing a `use` string")
        config = data.get("config")
        if config is not None and not isinstance(config, Mapping):
            raise ValueError(f"build entry for '{src}' has a non-mapping `config`")
        return cls(src=src, use=use, config=BuilderConfig.from_dict(config))


@dataclass(frozen=True)
class ConfigurationError:
    """Machine-readable code plus a human-readable explanation."""

    code: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"code": self.code, "message": self.message}


@dataclass(frozen=True)
class PackageManifest:
    """The parts of a parsed package.json that drive builder detection."""

    dependencies: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    dev_dependencies: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    scripts: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "PackageManifest":
        """Build a manifest, treating missing or malformed fields as empty."""
        data = data if isinstance(data, Mapping) else {}
        return cls(
            dependencies=_freeze(data.get("dependencies")),
            dev_dependencies=_freeze(data.get("devDependencies")),
            scripts=_freeze(data.get("scripts")),
        )

    @property
    def all_dependencies(self) -> Mapping[str, Any]:
        merged: Dict[str, Any] = dict(self.dependencies)
        merged.update(self.dev_dependencies)
        return MappingProxyType(merged)

    @property
    def has_build_script(self) -> bool:
        return bool(self.scripts.get("build"))


@dataclass(frozen=True)
class DetectionResult:
    """Outcome of zero-config detection.

    ``None`` marks a field as absent. An empty tuple is never stored, and a
    result never carries both builders and errors.
    """

    builders: Optional[Tuple[Builder, ...]] = None
    errors: Optional[Tuple[ConfigurationError, ...]] = None

    def __post_init__(self) -> None:
        if self.builders is not None and not self.builders:
            raise ValueError("an empty builder sequence must be reported as None")
        if self.errors is not None and not self.errors:
            raise ValueError("an empty error sequence must be reported as None")
        if self.builders is not None and self.errors is not None:
            raise ValueError("a detection result cannot carry both builders and errors")

    @classmethod
    def from_lists(
        cls,
        builders: Iterable[Builder] = (),
        errors: Iterable[ConfigurationError] = (),
    ) -> "DetectionResult":
        builder_tuple = tuple(builders)
        error_tuple = tuple(errors)
        return cls(
            builders=builder_tuple or None,
            errors=error_tuple or None,
        )

    @property
    def ok(self) -> bool:
        return self.errors is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "builders": (
                [builder.to_dict() for builder in self.builders]
                if self.builders is not None
                else None
            ),
            "errors": (
                [error.to_dict() for error in self.errors]
                if self.errors is not None
                else None
            ),
        }


__all__ = [
    "Builder",
    "BuilderConfig",
    "ConfigurationError",
    "DetectionResult",
    "PackageManifest",
]
