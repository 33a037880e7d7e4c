from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from envmanager.domain.common.ids import AppId, EnvironmentKey, TenantId


@dataclass(frozen=True)
class InstalledApp:
    app_id: AppId
    name: str
    version: str
    publisher: str
    published_as: str  # tenant | global
    state: Optional[str] = None

    @staticmethod
    def new(
        app_id: str,
        name: str,
        version: str,
        publisher: str,
        published_as: str = "global",
        state: Optional[str] = None,
    ) -> "InstalledApp":
        return InstalledApp(
            app_id=AppId(app_id),
            name=name,
            version=version,
            publisher=publisher,
            published_as=published_as,
            state=state,
        )


@dataclass(frozen=True)
class Environment:
    tenant_id: TenantId
    name: str
    type: Optional[str] = None
    status: Optional[str] = None
    application_version: Optional[str] = None
    platform_version: Optional[str] = None
    location_name: Optional[str] = None
    web_client_url: Optional[str] = None
    customer_id: Optional[str] = None
    customer_name: Optional[str] = None
    installed_apps: tuple[InstalledApp, ...] = field(default_factory=tuple)

    @property
    def key(self) -> EnvironmentKey:
        return EnvironmentKey(tenant_id=self.tenant_id, name=self.name)

    @staticmethod
    def new(
        tenant_id: str,
        name: str,
        type: Optional[str] = None,
        status: Optional[str] = None,
        application_version: Optional[str] = None,
        platform_version: Optional[str] = None,
        location_name: Optional[str] = None,
        web_client_url: Optional[str] = None,
        customer_id: Optional[str] = None,
        customer_name: Optional[str] = None,
        installed_apps: Optional[list[InstalledApp]] = None,
    ) -> "Environment":
        return Environment(
            tenant_id=TenantId(tenant_id),
            name=name,
            type=type,
            status=status,
            application_version=application_version,
            platform_version=platform_version,
            location_name=location_name,
            web_client_url=web_client_url,
            customer_id=customer_id,
            customer_name=customer_name,
            installed_apps=tuple(installed_apps or ()),
        )
