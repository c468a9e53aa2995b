"""Static lookup tables used by zero-config detection.

Both tables are ordered tuples: position is precedence, so the first match
always wins.
"""

from __future__ import annotations

from typing import Tuple

from .models import Builder, BuilderConfig, ConfigurationError

MANIFEST_FILE = "package.json"
API_DIRECTORY = "api/"
PUBLIC_DIRECTORY = "public/"
PUBLIC_GLOB = "public/**/*"

ZERO_CONFIG = BuilderConfig(zero_config=True)

STATIC_BUILDER_USE = "@now/static"

# Framework builders, keyed by the dependency that selects them.
FRAMEWORK_BUILDERS: Tuple[Tuple[str, Builder], ...] = (
    ("next", Builder(src=MANIFEST_FILE, use="@now/next", config=ZERO_CONFIG)),
    ("nuxt", Builder(src=MANIFEST_FILE, use="@now/nuxt", config=ZERO_CONFIG)),
)

STATIC_BUILD_BUILDER = Builder(src=MANIFEST_FILE, use="@now/static-build", config=ZERO_CONFIG)

API_BUILDERS: Tuple[Builder, ...] = (
    Builder(src="api/**/*.js", use="@now/node@canary", config=ZERO_CONFIG),
    Builder(src="api/**/*.ts", use="@now/node@canary", config=ZERO_CONFIG),
    Builder(src="api/**/*.rs", use="@now/rust", config=ZERO_CONFIG),
    Builder(src="api/**/*.go", use="@now/go", config=ZERO_CONFIG),
    Builder(src="api/**/*.php", use="@now/php", config=ZERO_CONFIG),
    Builder(src="api/**/*.py", use="@now/python", config=ZERO_CONFIG),
    Builder(src="api/**/*.rb", use="@now/ruby", config=ZERO_CONFIG),
    Builder(src="api/**/*.sh", use="@now/bash", config=ZERO_CONFIG),
)

MISSING_BUILD_SCRIPT = ConfigurationError(
    code="missing_build_script",
    message=(
        "Your `package.json` file is missing a `build` property inside the `scripts` property."
        "\nMore details: https://zeit.co/docs/v2/advanced/platform/"
        "frequently-asked-questions#missing-build-script"
    ),
)


__all__ = [
    "API_BUILDERS",
    "API_DIRECTORY",
    "FRAMEWORK_BUILDERS",
    "MANIFEST_FILE",
    "MISSING_BUILD_SCRIPT",
    "PUBLIC_DIRECTORY",
    "PUBLIC_GLOB",
    "STATIC_BUILDER_USE",
    "STATIC_BUILD_BUILDER",
    "ZERO_CONFIG",
]
