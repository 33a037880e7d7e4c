from __future__ import annotations

from envmanager.domain.versioning.comparison import (
    VersionOrdering,
    compare_version_strings,
    compare_versions,
    version_sort_key,
)
from envmanager.domain.versioning.major_minor import (
    count_major_minor_drift,
    get_major_minor_version,
    is_same_major_minor,
)
from envmanager.domain.versioning.outdated import (
    HasVersion,
    count_outdated,
    filter_outdated,
    installation_version,
    is_outdated,
)
from envmanager.domain.versioning.parser import ParsedVersion, is_parseable, parse_version

__all__ = [
    "HasVersion",
    "ParsedVersion",
    "VersionOrdering",
    "compare_version_strings",
    "compare_versions",
    "count_major_minor_drift",
    "count_outdated",
    "filter_outdated",
    "get_major_minor_version",
    "installation_version",
    "is_outdated",
    "is_parseable",
    "is_same_major_minor",
    "parse_version",
    "version_sort_key",
]
