"""Shared helper utilities for detector implementations."""

from __future__ import annotations

import re
import unicodedata
from functools import lru_cache
from typing import Iterable, List, Pattern, Tuple

# Root collation order for ASCII punctuation and symbols; they sort before
# digits, which sort before letters.
_PUNCTUATION_ORDER = "_-,;:!?.'\"()[]{}@*/\\&#%`^+<=>|~$"
_PUNCTUATION_WEIGHTS = {char: index for index, char in enumerate(_PUNCTUATION_ORDER)}

SortKey = Tuple[Tuple[Tuple[int, int], ...], Tuple[Tuple[int, ...], ...], str]


def _primary_weight(char: str) -> Tuple[int, int]:
    if char.isspace():
        return (0, 0)
    if char in _PUNCTUATION_WEIGHTS:
        return (1, _PUNCTUATION_WEIGHTS[char])
    if char.isdigit():
        return (2, ord(char))
    return (3, ord(char.casefold()[0]))


def locale_sort_key(path: str) -> SortKey:
    """Return a reproducible, locale-style ordering key for a path.

    Levels compare in order: base letters without accents or case, then
    accents, then case with lowercase first. Accented letters therefore sort
    next to their base letter (``ä`` between ``a`` and ``b``). The key does
    not depend on the process locale.
    """
    primary: List[Tuple[int, int]] = []
    accents: List[Tuple[int, ...]] = []
    for char in unicodedata.normalize("NFD", path):
        if unicodedata.combining(char) and accents:
            accents[-1] += (ord(char),)
            continue
        primary.append(_primary_weight(char))
        accents.append(())
    return tuple(primary), tuple(accents), unicodedata.normalize("NFC", path).swapcase()


def sort_files(files: Iterable[str]) -> List[str]:
    """Return a new, locale-sorted list of file paths."""
    return sorted(files, key=locale_sort_key)


def has_ignored_segment(path: str) -> bool:
    """Return True when any path segment is hidden (``.``) or private (``_``)."""
    return any(segment.startswith((".", "_")) for segment in path.split("/"))


def glob_matches(path: str, pattern: str) -> bool:
    """Match a forward-slash path against a glob pattern.

    ``**`` spans zero or more whole segments, ``*`` and ``?`` stay inside a
    segment, and wildcards never match a leading dot.
    """
    return _compile_glob(pattern).fullmatch(path) is not None


@lru_cache(maxsize=256)
def _compile_glob(pattern: str) -> Pattern[str]:
    segments = pattern.split("/")
    last = len(segments) - 1
    parts: List[str] = []
    for index, segment in enumerate(segments):
        if segment == "**":
            if index == last:
                parts.append(r"(?:(?!\.)[^/]+(?:/(?!\.)[^/]+)*)?")
            else:
                parts.append(r"(?:(?!\.)[^/]+/)*")
            continue
        parts.append(_translate_segment(segment))
        if index != last:
            parts.append("/")
    return re.compile("".join(parts))


def _translate_segment(segment: str) -> str:
    out: List[str] = []
    if segment[:1] in {"*", "?", "["}:
        out.append(r"(?!\.)")
    index = 0
    while index < len(segment):
        char = segment[index]
        if char == "*":
            out.append(r"[^/]*")
        elif char == "?":
            out.append(r"[^/]")
        elif char == "[":
            end = segment.find("]", index + 2)
            if end == -1:
                out.append(re.escape(char))
            else:
                body = segment[index + 1 : end]
                if body.startswith("!"):
                    body = "^" + body[1:]
                out.append("[" + body.replace("\\", "\\\\") + "]")
                index = end
        else:
            out.append(re.escape(char))
        index += 1
    return "".join(out)


__all__ = ["glob_matches", "has_ignored_segment", "locale_sort_key", "sort_files"]
