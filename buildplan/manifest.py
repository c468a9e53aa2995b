"""Loading of the project manifest (package.json)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from .models import PackageManifest
from .registry import MANIFEST_FILE


class ManifestError(RuntimeError):
    """Raised when package.json exists but cannot be parsed."""


def load_manifest(root: Path) -> Optional[PackageManifest]:
    """Return the parsed manifest under ``root``, or None when there is none."""
    path = Path(root) / MANIFEST_FILE
    if not path.is_file():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Failed to parse {MANIFEST_FILE}: {exc}") from exc
    if not isinstance(data, dict):
        raise ManifestError(f"{MANIFEST_FILE} must contain an object at the root")
    return PackageManifest.from_dict(data)


__all__ = ["ManifestError", "load_manifest"]
