from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from envmanager.domain.common.ids import AppId


@dataclass(frozen=True)
class CatalogApplication:
    app_id: AppId
    name: str
    publisher: str
    github_repo_name: Optional[str] = None
    latest_release_version: Optional[str] = None
    latest_prerelease_version: Optional[str] = None

    @staticmethod
    def new(
        app_id: str,
        name: str,
        publisher: str,
        github_repo_name: Optional[str] = None,
        latest_release_version: Optional[str] = None,
        latest_prerelease_version: Optional[str] = None,
    ) -> "CatalogApplication":
        return CatalogApplication(
            app_id=AppId(app_id),
            name=name,
            publisher=publisher,
            github_repo_name=github_repo_name,
            latest_release_version=latest_release_version,
            latest_prerelease_version=latest_prerelease_version,
        )


@dataclass(frozen=True)
class Catalog:
    """Applications known to the catalog, keyed by app id."""

    applications: dict[str, CatalogApplication] = field(default_factory=dict)

    @classmethod
    def from_applications(cls, applications: Iterable[CatalogApplication]) -> "Catalog":
        return cls(applications={app.app_id: app for app in applications})

    def get(self, app_id: str) -> Optional[CatalogApplication]:
        return self.applications.get(app_id)

    def latest_version(self, app_id: str) -> Optional[str]:
        app = self.applications.get(app_id)
        return app.latest_release_version if app else None

    def latest_versions(self) -> dict[str, Optional[str]]:
        # Release versions only; prereleases are never the reference
        return {app_id: app.latest_release_version for app_id, app in self.applications.items()}

    def __len__(self) -> int:
        return len(self.applications)
