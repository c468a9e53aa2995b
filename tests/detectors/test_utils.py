"""Tests for detector glob and ordering helpers."""

from __future__ import annotations

import pytest

from buildplan.detectors.utils import (
    glob_matches,
    has_ignored_segment,
    locale_sort_key,
    sort_files,
)


@pytest.mark.parametrize(
    ("path", "pattern", "expected"),
    [
        ("api/hello.js", "api/**/*.js", True),
        ("api/users/[id]/index.js", "api/**/*.js", True),
        ("api/a/b/c.ts", "api/**/*.ts", True),
        ("api/hello.jsx", "api/**/*.js", False),
        ("apix/hello.js", "api/**/*.js", False),
        ("lib/api/hello.js", "api/**/*.js", False),
        ("api/.hello.js", "api/**/*.js", False),
        ("public/css/site.css", "public/**/*", True),
        ("public/index.html", "public/**/*", True),
        ("api/a.go", "api/[ab].go", True),
        ("api/c.go", "api/[!ab].go", True),
        ("api/a.go", "api/?.go", True),
        ("api/ab.go", "api/?.go", False),
    ],
)
def test_glob_matches(path: str, pattern: str, expected: bool) -> None:
    assert glob_matches(path, pattern) is expected


def test_has_ignored_segment_flags_hidden_and_private_segments() -> None:
    assert has_ignored_segment("api/_lib/db.js")
    assert has_ignored_segment("api/.well-known/handler.js")
    assert has_ignored_segment("api/_helper.py")
    assert not has_ignored_segment("api/users/index.js")
    assert not has_ignored_segment("api/my_handler.js")


def test_sort_files_orders_case_insensitively_with_lowercase_first() -> None:
    files = ["api/b.js", "api/B.js", "api/a.js", "api/C.js"]

    assert sort_files(files) == ["api/a.js", "api/b.js", "api/B.js", "api/C.js"]


def test_sort_files_places_punctuation_before_digits_before_letters() -> None:
    files = ["api/b.js", "api/a.js", "api/1.js", "api/a_b.js", "api/a-b.js"]

    assert sort_files(files) == ["api/1.js", "api/a_b.js", "api/a-b.js", "api/a.js", "api/b.js"]


def test_sort_files_does_not_mutate_input() -> None:
    files = ["api/z.js", "api/a.js"]

    sort_files(files)

    assert files == ["api/z.js", "api/a.js"]


def test_sort_files_places_accented_letters_beside_their_base_letter() -> None:
    files = ["api/é.js", "api/f.js", "api/e.js", "api/z.js", "api/ä.js", "api/b.js"]

    assert sort_files(files) == [
        "api/ä.js",
        "api/b.js",
        "api/e.js",
        "api/é.js",
        "api/f.js",
        "api/z.js",
    ]


def test_sort_files_treats_composed_and_decomposed_accents_alike() -> None:
    composed = "api/\u00e9t\u00e9.js"
    decomposed = "api/e\u0301te\u0301.js"

    assert locale_sort_key(composed) == locale_sort_key(decomposed)
    assert sort_files(["api/f.js", decomposed, "api/ete.js"]) == [
        "api/ete.js",
        decomposed,
        "api/f.js",
    ]
