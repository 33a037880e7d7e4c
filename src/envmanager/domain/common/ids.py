from __future__ import annotations

from dataclasses import dataclass
from typing import NewType

TenantId = NewType("TenantId", str)
AppId = NewType("AppId", str)


@dataclass(frozen=True)
class EnvironmentKey:
    tenant_id: TenantId
    name: str

    def __str__(self) -> str:
        return f"{self.tenant_id}/{self.name}"
