"""Zero-config plan assembly."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Sequence, Union

from .detectors import detect_api_builders, detect_project_builder, detect_static_builders
from .logging import get_logger
from .models import Builder, ConfigurationError, DetectionResult, PackageManifest

_LOGGER = get_logger("planner")

ManifestInput = Union[PackageManifest, Mapping[str, Any], None]


def _coerce_manifest(manifest: ManifestInput) -> Optional[PackageManifest]:
    if manifest is None or isinstance(manifest, PackageManifest):
        return manifest
    return PackageManifest.from_dict(manifest)


def detect_builders(files: Sequence[str], manifest: ManifestInput = None) -> DetectionResult:
    """Infer the builders for a project that has no explicit build configuration."""
    files = list(files)
    package = _coerce_manifest(manifest)

    # API builders are detected first and regardless of the manifest.
    builders: List[Builder] = detect_api_builders(files)
    _LOGGER.debug("Detected %d API builder(s)", len(builders))

    if package is not None and package.has_build_script:
        project_builder = detect_project_builder(package)
        _LOGGER.debug("Build script present; using %s", project_builder.use)
        builders.append(project_builder)
        return DetectionResult.from_lists(builders)

    fallback = detect_static_builders(files, package, builders)
    if isinstance(fallback, ConfigurationError):
        _LOGGER.debug("Project is not buildable: %s", fallback.code)
        return DetectionResult.from_lists(errors=[fallback])

    _LOGGER.debug("Adding %d static builder(s)", len(fallback))
    builders.extend(fallback)
    return DetectionResult.from_lists(builders)


async def detect_builders_async(
    files: Sequence[str], manifest: ManifestInput = None
) -> DetectionResult:
    """Awaitable form of :func:`detect_builders` for async hosts."""
    return detect_builders(files, manifest)


__all__ = ["detect_builders", "detect_builders_async"]
