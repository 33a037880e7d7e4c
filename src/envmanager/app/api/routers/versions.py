"""Router for version evaluation endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from envmanager.app.api.models.versions import (
    OutdatedCountRequest,
    OutdatedCountResponse,
    OutdatedRequest,
    OutdatedResponse,
    VersionCompareRequest,
    VersionCompareResponse,
)
from envmanager.domain.versioning import (
    compare_versions,
    count_major_minor_drift,
    count_outdated,
    is_outdated,
    parse_version,
)

router = APIRouter()


@router.post("/versions/compare", response_model=VersionCompareResponse)
def compare(req: VersionCompareRequest) -> VersionCompareResponse:
    """
    Compare two version strings.

    Unparseable versions are reported with comparable=false and always compare EQUAL.
    """
    a_parsed = parse_version(req.a)
    b_parsed = parse_version(req.b)
    return VersionCompareResponse(
        a=req.a,
        b=req.b,
        ordering=compare_versions(a_parsed, b_parsed).value,
        a_parsed=list(a_parsed),
        b_parsed=list(b_parsed),
        comparable=bool(a_parsed) and bool(b_parsed),
    )


@router.post("/versions/outdated", response_model=OutdatedResponse)
def outdated(req: OutdatedRequest) -> OutdatedResponse:
    return OutdatedResponse(
        installed=req.installed,
        latest=req.latest,
        outdated=is_outdated(req.installed, req.latest),
    )


@router.post("/versions/outdated-count", response_model=OutdatedCountResponse)
def outdated_count(req: OutdatedCountRequest) -> OutdatedCountResponse:
    """Count outdated installations for one application, as shown on the dashboard summary."""
    return OutdatedCountResponse(
        latest=req.latest,
        total=len(req.installations),
        outdated_count=count_outdated(req.latest, req.installations),
        major_minor_drift_count=count_major_minor_drift(req.latest, req.installations),
    )
