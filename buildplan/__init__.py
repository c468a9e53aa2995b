"""Zero-config builder detection for deployable projects."""

from __future__ import annotations

from .models import Builder, BuilderConfig, ConfigurationError, DetectionResult, PackageManifest
from .planner import detect_builders, detect_builders_async

__all__ = [
    "Builder",
    "BuilderConfig",
    "ConfigurationError",
    "DetectionResult",
    "PackageManifest",
    "detect_builders",
    "detect_builders_async",
]
