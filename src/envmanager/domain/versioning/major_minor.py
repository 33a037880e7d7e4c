from __future__ import annotations

from typing import Any, Iterable, Optional

from envmanager.domain.versioning.outdated import installation_version


def get_major_minor_version(version: Optional[str]) -> Optional[str]:
    """
    Extract the major.minor part of a dotted version.

    "1.18.0.3" -> "1.18". Returns None when there are fewer than two parts.
    """
    if not version:
        return None

    parts = version.split(".")
    if len(parts) < 2:
        return None
    return ".".join(parts[:2])


def is_same_major_minor(version1: Optional[str], version2: Optional[str]) -> bool:
    v1 = get_major_minor_version(version1)
    v2 = get_major_minor_version(version2)
    if not v1 or not v2:
        return False
    return v1 == v2


def count_major_minor_drift(latest: Optional[str], installations: Iterable[Any]) -> int:
    """
    Count installations whose major.minor differs from the latest one.

    Unlike count_outdated this also counts installations ahead of latest.
    """
    latest_major_minor = get_major_minor_version(latest)
    if not latest_major_minor:
        return 0

    drift = 0
    for item in installations:
        installed_major_minor = get_major_minor_version(installation_version(item))
        if installed_major_minor and installed_major_minor != latest_major_minor:
            drift += 1
    return drift
