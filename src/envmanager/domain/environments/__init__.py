from __future__ import annotations

from envmanager.domain.environments.comparison import (
    AppComparisonRow,
    ComparisonStats,
    EnvironmentComparison,
    compare_environments,
)
from envmanager.domain.environments.model import Environment, InstalledApp
from envmanager.domain.environments.ordering import (
    count_non_microsoft_apps,
    filter_active_environments,
    is_microsoft_app,
    is_soft_deleted,
    sort_environments,
)
from envmanager.domain.environments.summary import (
    ApplicationSummary,
    EnvironmentSummary,
    summarize_application,
    summarize_environment,
)
from envmanager.domain.environments import rules

__all__ = [
    "AppComparisonRow",
    "ApplicationSummary",
    "ComparisonStats",
    "Environment",
    "EnvironmentComparison",
    "EnvironmentSummary",
    "InstalledApp",
    "compare_environments",
    "count_non_microsoft_apps",
    "filter_active_environments",
    "is_microsoft_app",
    "is_soft_deleted",
    "rules",
    "sort_environments",
    "summarize_application",
    "summarize_environment",
]
