"""Pydantic models for environment comparison and summary endpoints."""

from __future__ import annotations

from typing import Sequence

from pydantic import BaseModel, Field

from envmanager.domain.environments.comparison import AppComparisonRow, ComparisonStats
from envmanager.domain.environments.model import Environment, InstalledApp
from envmanager.domain.environments.summary import EnvironmentSummary


class InstalledAppModel(BaseModel):
    id: str
    name: str
    version: str
    publisher: str
    published_as: str = Field("global", description="tenant | global")
    state: str | None = None

    def to_domain(self) -> InstalledApp:
        return InstalledApp.new(
            app_id=self.id,
            name=self.name,
            version=self.version,
            publisher=self.publisher,
            published_as=self.published_as,
            state=self.state,
        )

    @classmethod
    def from_domain(cls, app: InstalledApp) -> "InstalledAppModel":
        return cls(
            id=app.app_id,
            name=app.name,
            version=app.version,
            publisher=app.publisher,
            published_as=app.published_as,
            state=app.state,
        )


class EnvironmentModel(BaseModel):
    tenant_id: str
    name: str
    type: str | None = None
    status: str | None = None
    application_version: str | None = None
    platform_version: str | None = None
    location_name: str | None = None
    web_client_url: str | None = None
    customer_id: str | None = None
    customer_name: str | None = None
    installed_apps: list[InstalledAppModel] = Field(default_factory=list)

    def to_domain(self) -> Environment:
        return Environment.new(
            tenant_id=self.tenant_id,
            name=self.name,
            type=self.type,
            status=self.status,
            application_version=self.application_version,
            platform_version=self.platform_version,
            location_name=self.location_name,
            web_client_url=self.web_client_url,
            customer_id=self.customer_id,
            customer_name=self.customer_name,
            installed_apps=[app.to_domain() for app in self.installed_apps],
        )

    @classmethod
    def from_domain(cls, env: Environment) -> "EnvironmentModel":
        return cls(
            tenant_id=env.tenant_id,
            name=env.name,
            type=env.type,
            status=env.status,
            application_version=env.application_version,
            platform_version=env.platform_version,
            location_name=env.location_name,
            web_client_url=env.web_client_url,
            customer_id=env.customer_id,
            customer_name=env.customer_name,
            installed_apps=[InstalledAppModel.from_domain(app) for app in env.installed_apps],
        )


class EnvironmentCompareRequest(BaseModel):
    environments: list[EnvironmentModel] = Field(..., min_length=2)
    latest_versions: dict[str, str | None] = Field(default_factory=dict, description="App id -> latest release")
    hide_microsoft: bool | None = None
    hide_matching: bool | None = None


class ComparisonCell(BaseModel):
    tenant_id: str
    environment_name: str
    installed: bool
    version: str | None = None
    outdated: bool = False


class ComparisonRowModel(BaseModel):
    app_id: str
    name: str
    publisher: str
    published_as: str
    category: str = Field(..., description="MATCHING | DIFFERENT | ONLY_FIRST | ONLY_SECOND | PARTIAL")
    differing_fields: list[str]
    cells: list[ComparisonCell]

    @classmethod
    def from_domain(cls, row: AppComparisonRow, environments: Sequence[Environment]) -> "ComparisonRowModel":
        outdated = set(row.outdated_in)
        return cls(
            app_id=row.app_id,
            name=row.name,
            publisher=row.publisher,
            published_as=row.published_as,
            category=row.category,
            differing_fields=list(row.differing_fields),
            cells=[
                ComparisonCell(
                    tenant_id=env.tenant_id,
                    environment_name=env.name,
                    installed=cell is not None,
                    version=cell.version if cell else None,
                    outdated=i in outdated,
                )
                for i, (env, cell) in enumerate(zip(environments, row.cells))
            ],
        )


class ComparisonStatsModel(BaseModel):
    total: int
    in_all: int
    in_all_with_diff: int
    partial: int
    only_in_first: int
    only_in_second: int

    @classmethod
    def from_domain(cls, stats: ComparisonStats) -> "ComparisonStatsModel":
        return cls(
            total=stats.total,
            in_all=stats.in_all,
            in_all_with_diff=stats.in_all_with_diff,
            partial=stats.partial,
            only_in_first=stats.only_in_first,
            only_in_second=stats.only_in_second,
        )


class EnvironmentCompareResponse(BaseModel):
    rows: list[ComparisonRowModel]
    stats: ComparisonStatsModel


class EnvironmentSummaryRequest(BaseModel):
    environment: EnvironmentModel
    latest_versions: dict[str, str | None] = Field(default_factory=dict)


class EnvironmentSummaryResponse(BaseModel):
    tenant_id: str
    name: str
    apps_count: int
    outdated_apps_count: int
    non_microsoft_apps_count: int
    outdated_app_ids: list[str]

    @classmethod
    def from_domain(cls, summary: EnvironmentSummary) -> "EnvironmentSummaryResponse":
        return cls(
            tenant_id=summary.tenant_id,
            name=summary.name,
            apps_count=summary.apps_count,
            outdated_apps_count=summary.outdated_apps_count,
            non_microsoft_apps_count=summary.non_microsoft_apps_count,
            outdated_app_ids=list(summary.outdated_app_ids),
        )


class EnvironmentSortRequest(BaseModel):
    environments: list[EnvironmentModel]
    include_soft_deleted: bool = False


class EnvironmentSortResponse(BaseModel):
    environments: list[EnvironmentModel]
