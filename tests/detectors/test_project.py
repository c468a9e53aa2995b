"""Tests for project builder selection."""

from __future__ import annotations

from buildplan.detectors.project import detect_project_builder
from buildplan.models import PackageManifest


def _manifest(**fields: object) -> PackageManifest:
    return PackageManifest.from_dict({"scripts": {"build": "build"}, **fields})


def test_first_registered_framework_wins() -> None:
    manifest = _manifest(dependencies={"nuxt": "^2.0.0", "next": "^9.0.0"})

    builder = detect_project_builder(manifest)

    assert builder.use == "@now/next"
    assert builder.src == "package.json"


def test_dev_dependencies_are_considered() -> None:
    manifest = _manifest(devDependencies={"nuxt": "^2.0.0"})

    assert detect_project_builder(manifest).use == "@now/nuxt"


def test_falls_back_to_static_build() -> None:
    manifest = _manifest(dependencies={"react": "^16.0.0"})

    builder = detect_project_builder(manifest)

    assert builder.use == "@now/static-build"
    assert builder.src == "package.json"
    assert builder.config.zero_config is True


def test_empty_version_does_not_select_framework() -> None:
    manifest = _manifest(dependencies={"next": ""})

    assert detect_project_builder(manifest).use == "@now/static-build"
