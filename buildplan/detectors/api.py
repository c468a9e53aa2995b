"""Detects per-file serverless function builders under the API directory."""

from __future__ import annotations

from typing import Iterable, List, Optional

from ..models import Builder
from ..registry import API_BUILDERS
from .utils import glob_matches, has_ignored_segment, sort_files


def match_api_builder(path: str) -> Optional[Builder]:
    """Return the first registered API builder whose pattern matches ``path``."""
    for builder in API_BUILDERS:
        if glob_matches(path, builder.src):
            return builder
    return None


def is_api_file(path: str) -> bool:
    """Return True when ``path`` should become its own function build."""
    if has_ignored_segment(path):
        return False
    # Files that match no builder, e.g. ``api/README.md``, get no route.
    return match_api_builder(path) is not None


def detect_api_builders(files: Iterable[str]) -> List[Builder]:
    """Assign one builder per qualifying API file, in locale-sorted order.

    Sorting keeps the generated routes stable between runs so equivalent
    plans dedupe downstream.
    """
    builders: List[Builder] = []
    for path in sort_files(files):
        if not is_api_file(path):
            continue
        template = match_api_builder(path)
        if template is not None:
            builders.append(template.with_src(path))
    return builders


__all__ = ["detect_api_builders", "is_api_file", "match_api_builder"]
