from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional

from envmanager.domain.catalog.model import CatalogApplication
from envmanager.domain.environments.model import Environment
from envmanager.domain.environments.ordering import count_non_microsoft_apps
from envmanager.domain.versioning.major_minor import count_major_minor_drift
from envmanager.domain.versioning.outdated import count_outdated, is_outdated


@dataclass(frozen=True)
class EnvironmentSummary:
    tenant_id: str
    name: str
    apps_count: int
    outdated_apps_count: int
    non_microsoft_apps_count: int
    outdated_app_ids: tuple[str, ...]


@dataclass(frozen=True)
class ApplicationSummary:
    app_id: str
    latest_version: Optional[str]
    installations_count: int
    outdated_count: int
    major_minor_drift_count: int


def summarize_environment(
    environment: Environment,
    latest_versions: Mapping[str, Optional[str]],
    microsoft_publisher: str = "Microsoft",
) -> EnvironmentSummary:
    """Dashboard counters for an environment card."""
    outdated_ids = tuple(
        app.app_id
        for app in environment.installed_apps
        if is_outdated(app.version, latest_versions.get(app.app_id))
    )
    return EnvironmentSummary(
        tenant_id=environment.tenant_id,
        name=environment.name,
        apps_count=len(environment.installed_apps),
        outdated_apps_count=len(outdated_ids),
        non_microsoft_apps_count=count_non_microsoft_apps(environment, microsoft_publisher),
        outdated_app_ids=outdated_ids,
    )


def summarize_application(application: CatalogApplication, installations: Iterable[Any]) -> ApplicationSummary:
    installations = list(installations)
    latest = application.latest_release_version
    return ApplicationSummary(
        app_id=application.app_id,
        latest_version=latest,
        installations_count=len(installations),
        outdated_count=count_outdated(latest, installations),
        major_minor_drift_count=count_major_minor_drift(latest, installations),
    )
