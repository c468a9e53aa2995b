"""Tests for buildplan.models."""

from __future__ import annotations

import dataclasses

import pytest

from buildplan.models import (
    Builder,
    BuilderConfig,
    ConfigurationError,
    DetectionResult,
    PackageManifest,
)


def test_builder_to_dict_marks_zero_config() -> None:
    builder = Builder(src="api/a.js", use="@now/node@canary")

    assert builder.to_dict() == {
        "src": "api/a.js",
        "use": "@now/node@canary",
        "config": {"zeroConfig": True},
    }


def test_builder_with_src_returns_copy() -> None:
    template = Builder(src="api/**/*.js", use="@now/node@canary")

    concrete = template.with_src("api/a.js")

    assert concrete.src == "api/a.js"
    assert template.src == "api/**/*.js"
    assert concrete.use == template.use


def test_models_are_immutable() -> None:
    builder = Builder(src="a", use="b")

    with pytest.raises(dataclasses.FrozenInstanceError):
        builder.src = "c"  # type: ignore[misc]


def test_builder_from_dict() -> None:
    builder = Builder.from_dict({"src": "index.html", "use": "@now/static"})

    assert builder == Builder(src="index.html", use="@now/static", config=BuilderConfig(False))
    assert builder.to_dict()["config"] == {}


@pytest.mark.parametrize(
    "data",
    [
        "index.html",
        {"use": "@now/static"},
        {"src": "index.html"},
        {"src": "index.html", "use": "@now/static", "config": "yes"},
    ],
)
def test_builder_from_dict_rejects_malformed_entries(data) -> None:
    with pytest.raises(ValueError):
        Builder.from_dict(data)


def test_detection_result_rejects_empty_sequences() -> None:
    with pytest.raises(ValueError):
        DetectionResult(builders=())
    with pytest.raises(ValueError):
        DetectionResult(errors=())


def test_detection_result_rejects_builders_and_errors_together() -> None:
    with pytest.raises(ValueError):
        DetectionResult(
            builders=(Builder(src="a", use="b"),),
            errors=(ConfigurationError(code="x", message="y"),),
        )


def test_detection_result_from_lists_normalizes_empty_to_none() -> None:
    result = DetectionResult.from_lists([], [])

    assert result.builders is None
    assert result.errors is None
    assert result.ok
    assert result.to_dict() == {"builders": None, "errors": None}


def test_detection_result_to_dict_with_errors() -> None:
    result = DetectionResult.from_lists(errors=[ConfigurationError(code="x", message="y")])

    assert not result.ok
    assert result.to_dict() == {"builders": None, "errors": [{"code": "x", "message": "y"}]}


def test_package_manifest_tolerates_missing_and_malformed_fields() -> None:
    manifest = PackageManifest.from_dict({"dependencies": ["next"], "scripts": None})

    assert dict(manifest.dependencies) == {}
    assert dict(manifest.scripts) == {}
    assert not manifest.has_build_script
    assert PackageManifest.from_dict(None) == PackageManifest.from_dict({})


def test_package_manifest_merges_dependencies() -> None:
    manifest = PackageManifest.from_dict(
        {
            "dependencies": {"next": "9", "react": "16"},
            "devDependencies": {"react": "17", "jest": "24"},
            "scripts": {"build": "next build"},
        }
    )

    assert dict(manifest.all_dependencies) == {"next": "9", "react": "17", "jest": "24"}
    assert manifest.has_build_script


def test_builder_config_round_trips_extra_options() -> None:
    config = BuilderConfig.from_dict({"zeroConfig": True, "maxLambdaSize": "10mb"})

    assert config.zero_config
    assert dict(config.options) == {"maxLambdaSize": "10mb"}
    assert config.to_dict() == {"maxLambdaSize": "10mb", "zeroConfig": True}


def test_builder_config_options_are_read_only() -> None:
    source = {"maxLambdaSize": "10mb"}
    config = BuilderConfig(options=source)
    source["maxLambdaSize"] = "50mb"

    assert config.options["maxLambdaSize"] == "10mb"
    with pytest.raises(TypeError):
        config.options["runtime"] = "nodejs12.x"  # type: ignore[index]
