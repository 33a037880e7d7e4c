"""Router for environment comparison and summary endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from envmanager.app.api.dependencies import provide_settings
from envmanager.app.api.models.environments import (
    ComparisonRowModel,
    ComparisonStatsModel,
    EnvironmentCompareRequest,
    EnvironmentCompareResponse,
    EnvironmentModel,
    EnvironmentSortRequest,
    EnvironmentSortResponse,
    EnvironmentSummaryRequest,
    EnvironmentSummaryResponse,
)
from envmanager.application.errors import ComparisonError
from envmanager.domain.environments import (
    compare_environments,
    filter_active_environments,
    sort_environments,
    summarize_environment,
)
from envmanager.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/environments/compare", response_model=EnvironmentCompareResponse)
def compare(
    req: EnvironmentCompareRequest,
    settings: Settings = Depends(provide_settings),
) -> EnvironmentCompareResponse:
    """
    Compare the installed apps of two or more environments.

    Microsoft apps are hidden by default (COMPARE_HIDE_MICROSOFT), matching rows
    are kept unless hide_matching is set.
    """
    environments = [env.to_domain() for env in req.environments]
    try:
        comparison = compare_environments(environments, latest_versions=req.latest_versions)
    except ComparisonError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Environment comparison failed")
        raise HTTPException(status_code=500, detail=f"Error comparing environments: {str(e)}")

    hide_microsoft = settings.compare_hide_microsoft if req.hide_microsoft is None else req.hide_microsoft
    hide_matching = settings.compare_hide_matching if req.hide_matching is None else req.hide_matching
    filtered = comparison.filter(
        hide_microsoft=hide_microsoft,
        hide_matching=hide_matching,
        microsoft_publisher=settings.microsoft_publisher,
    )

    return EnvironmentCompareResponse(
        rows=[ComparisonRowModel.from_domain(row, filtered.environments) for row in filtered.rows],
        stats=ComparisonStatsModel.from_domain(filtered.stats()),
    )


@router.post("/environments/summary", response_model=EnvironmentSummaryResponse)
def summary(
    req: EnvironmentSummaryRequest,
    settings: Settings = Depends(provide_settings),
) -> EnvironmentSummaryResponse:
    result = summarize_environment(
        req.environment.to_domain(),
        req.latest_versions,
        microsoft_publisher=settings.microsoft_publisher,
    )
    return EnvironmentSummaryResponse.from_domain(result)


@router.post("/environments/sort", response_model=EnvironmentSortResponse)
def sort(req: EnvironmentSortRequest) -> EnvironmentSortResponse:
    """Order environments production first, then by status and name; soft-deleted dropped by default."""
    environments = [env.to_domain() for env in req.environments]
    if not req.include_soft_deleted:
        environments = filter_active_environments(environments)
    return EnvironmentSortResponse(
        environments=[EnvironmentModel.from_domain(env) for env in sort_environments(environments)]
    )
