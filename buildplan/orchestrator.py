"""Coordinates config loading, scanning, and builder detection for a project."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import BuildPlanConfig, load_config
from .logging import get_logger
from .manifest import load_manifest
from .models import DetectionResult
from .planner import detect_builders
from .repo_scanner import RepoScanner


@dataclass
class PlanOutcome:
    """Result of planning a project directory."""

    root: Path
    result: DetectionResult
    explicit: bool = False


class Orchestrator:
    """Runs zero-config detection against a project on disk."""

    def __init__(self, scanner: RepoScanner | None = None) -> None:
        self.scanner = scanner or RepoScanner()
        self.logger = get_logger("orchestrator")

    def run_detect(self, path: str | Path) -> PlanOutcome:
        """Compute the build plan for the project at ``path``."""
        root = Path(path).expanduser().resolve()
        if not root.exists():
            raise FileNotFoundError(f"Project path not found: {path}")
        self.logger.info("Planning builds for %s", root)

        config = self._load_config(root)
        if config.has_explicit_builds:
            self.logger.info(
                "Using %d explicitly configured build(s); skipping detection",
                len(config.builds),
            )
            return PlanOutcome(
                root=root,
                result=DetectionResult.from_lists(config.builds),
                explicit=True,
            )

        files = self.scanner.scan(root, exclude_paths=config.exclude_paths)
        manifest = load_manifest(root)
        self.logger.debug(
            "Scanner discovered %d files; manifest %s",
            len(files),
            "present" if manifest is not None else "absent",
        )

        result = detect_builders(files, manifest)
        if result.errors:
            for error in result.errors:
                self.logger.warning("%s: %s", error.code, error.message)
        else:
            count = len(result.builders) if result.builders else 0
            self.logger.info("Detected %d builder(s)", count)
        return PlanOutcome(root=root, result=result)

    def _load_config(self, root: Path) -> BuildPlanConfig:
        return load_config(root)


__all__ = ["Orchestrator", "PlanOutcome"]
