from __future__ import annotations

from enum import Enum
from itertools import zip_longest
from typing import Optional, Sequence, Tuple

from envmanager.domain.versioning.parser import ParsedVersion, parse_version


class VersionOrdering(str, Enum):
    LESS = "LESS"
    EQUAL = "EQUAL"
    GREATER = "GREATER"

    def inverse(self) -> "VersionOrdering":
        if self is VersionOrdering.LESS:
            return VersionOrdering.GREATER
        if self is VersionOrdering.GREATER:
            return VersionOrdering.LESS
        return VersionOrdering.EQUAL


def compare_versions(a: Sequence[int], b: Sequence[int]) -> VersionOrdering:
    """
    Compare two parsed versions segment by segment.

    The shorter side is treated as if padded with trailing zeros, so (1, 2)
    equals (1, 2, 0, 0). An empty (unparseable) version is never ordered
    against anything and always compares EQUAL.
    """
    if not a or not b:
        return VersionOrdering.EQUAL

    for left, right in zip_longest(a, b, fillvalue=0):
        if left < right:
            return VersionOrdering.LESS
        if left > right:
            return VersionOrdering.GREATER
    return VersionOrdering.EQUAL


def compare_version_strings(a: Optional[str], b: Optional[str]) -> VersionOrdering:
    return compare_versions(parse_version(a), parse_version(b))


def version_sort_key(version: Optional[str]) -> Tuple[bool, ParsedVersion]:
    """
    Sort key for version strings.

    Unparseable strings sort first. Trailing zeros are stripped so "1.2" and
    "1.2.0" tie, while "0" still sorts after an unparseable string.
    """
    parsed = list(parse_version(version))
    parseable = bool(parsed)
    while parsed and parsed[-1] == 0:
        parsed.pop()
    return parseable, tuple(parsed)
