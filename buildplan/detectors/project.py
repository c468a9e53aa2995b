"""Selects the single builder responsible for the non-API project tree."""

from __future__ import annotations

from ..models import Builder, PackageManifest
from ..registry import FRAMEWORK_BUILDERS, STATIC_BUILD_BUILDER


def detect_project_builder(manifest: PackageManifest) -> Builder:
    """Return the framework builder for ``manifest`` or the static-build default.

    Only meaningful when the manifest declares a ``build`` script.
    """
    dependencies = manifest.all_dependencies
    for dependency, builder in FRAMEWORK_BUILDERS:
        if dependencies.get(dependency):
            return builder
    return STATIC_BUILD_BUILDER


__all__ = ["detect_project_builder"]
