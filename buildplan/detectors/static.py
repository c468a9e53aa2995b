"""Static file builders for projects without a build step."""

from __future__ import annotations

from typing import List, Optional, Sequence, Union

from ..models import Builder, ConfigurationError, PackageManifest
from ..registry import (
    API_DIRECTORY,
    MANIFEST_FILE,
    MISSING_BUILD_SCRIPT,
    PUBLIC_DIRECTORY,
    PUBLIC_GLOB,
    STATIC_BUILDER_USE,
    ZERO_CONFIG,
)


def has_public_directory(files: Sequence[str]) -> bool:
    return any(name.startswith(PUBLIC_DIRECTORY) for name in files)


def detect_static_builders(
    files: Sequence[str],
    manifest: Optional[PackageManifest],
    api_builders: Sequence[Builder],
) -> Union[List[Builder], ConfigurationError]:
    """Return static builders, or the error that makes the project unbuildable."""
    if manifest is not None and not api_builders:
        # Only an error without API builders; their runtimes may be what the
        # manifest dependencies are for.
        return MISSING_BUILD_SCRIPT

    if has_public_directory(files):
        return [Builder(src=PUBLIC_GLOB, use=STATIC_BUILDER_USE, config=ZERO_CONFIG)]

    if api_builders:
        # A negated glob like `!(api)/**/*` does not select the right files,
        # so every remaining file is listed individually.
        return [
            Builder(src=name, use=STATIC_BUILDER_USE, config=ZERO_CONFIG)
            for name in files
            if not name.startswith(API_DIRECTORY) and name != MANIFEST_FILE
        ]

    return []


__all__ = ["detect_static_builders", "has_public_directory"]
