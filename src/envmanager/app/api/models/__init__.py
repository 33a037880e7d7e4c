"""Pydantic models for API requests and responses."""

from envmanager.app.api.models.environments import (
    EnvironmentCompareRequest,
    EnvironmentCompareResponse,
    EnvironmentModel,
    EnvironmentSortRequest,
    EnvironmentSortResponse,
    EnvironmentSummaryRequest,
    EnvironmentSummaryResponse,
    InstalledAppModel,
)
from envmanager.app.api.models.versions import (
    OutdatedCountRequest,
    OutdatedCountResponse,
    OutdatedRequest,
    OutdatedResponse,
    VersionCompareRequest,
    VersionCompareResponse,
)

__all__ = [
    "EnvironmentCompareRequest",
    "EnvironmentCompareResponse",
    "EnvironmentModel",
    "EnvironmentSortRequest",
    "EnvironmentSortResponse",
    "EnvironmentSummaryRequest",
    "EnvironmentSummaryResponse",
    "InstalledAppModel",
    "OutdatedCountRequest",
    "OutdatedCountResponse",
    "OutdatedRequest",
    "OutdatedResponse",
    "VersionCompareRequest",
    "VersionCompareResponse",
]
