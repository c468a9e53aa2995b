"""Detector stages that turn a file list into builder assignments."""

from __future__ import annotations

from .api import detect_api_builders, is_api_file, match_api_builder
from .project import detect_project_builder
from .static import detect_static_builders, has_public_directory

__all__ = [
    "detect_api_builders",
    "detect_project_builder",
    "detect_static_builders",
    "has_public_directory",
    "is_api_file",
    "match_api_builder",
]
