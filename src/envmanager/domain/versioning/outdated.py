from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping, Optional, Protocol, TypeVar

from envmanager.domain.versioning.comparison import VersionOrdering, compare_versions
from envmanager.domain.versioning.parser import parse_version

logger = logging.getLogger(__name__)


class HasVersion(Protocol):
    version: Optional[str]


T = TypeVar("T")


def installation_version(installation: Any) -> Optional[str]:
    """Read the version of an installation given as a mapping or an object.

    Only string versions are returned; anything else reads as missing.
    """
    if isinstance(installation, Mapping):
        version = installation.get("version")
    else:
        version = getattr(installation, "version", None)
    return version if isinstance(version, str) else None


def is_outdated(installed: Optional[str], latest: Optional[str]) -> bool:
    """
    Decide whether an installed version is behind the latest known version.

    Missing or unparseable input on either side is never flagged. Versions
    ahead of latest (e.g. a prerelease) are not outdated either.
    """
    if not latest or not installed:
        return False

    installed_parsed = parse_version(installed)
    latest_parsed = parse_version(latest)
    if not installed_parsed or not latest_parsed:
        logger.debug("Unparseable version pair installed=%r latest=%r", installed, latest)
        return False

    return compare_versions(installed_parsed, latest_parsed) is VersionOrdering.LESS


def filter_outdated(latest: Optional[str], installations: Iterable[T]) -> List[T]:
    if not latest:
        return []
    return [item for item in installations if is_outdated(installation_version(item), latest)]


def count_outdated(latest: Optional[str], installations: Iterable[HasVersion | Mapping[str, Any]]) -> int:
    """Count installations that are outdated relative to ``latest``."""
    if not latest:
        return 0
    return sum(1 for item in installations if is_outdated(installation_version(item), latest))
