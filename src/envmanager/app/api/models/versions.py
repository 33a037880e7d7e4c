"""Pydantic models for version evaluation endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field


class VersionCompareRequest(BaseModel):
    a: str | None = None
    b: str | None = None


class VersionCompareResponse(BaseModel):
    a: str | None
    b: str | None
    ordering: str = Field(..., description="LESS | EQUAL | GREATER")
    a_parsed: list[int]
    b_parsed: list[int]
    comparable: bool = Field(..., description="False when either side has no digits")


class OutdatedRequest(BaseModel):
    installed: str | None = None
    latest: str | None = None


class OutdatedResponse(BaseModel):
    installed: str | None
    latest: str | None
    outdated: bool


class InstallationVersion(BaseModel):
    """Any installation record; only the version is evaluated."""

    version: str | None = None


class OutdatedCountRequest(BaseModel):
    latest: str | None = None
    installations: list[InstallationVersion] = Field(default_factory=list)


class OutdatedCountResponse(BaseModel):
    latest: str | None
    total: int
    outdated_count: int
    major_minor_drift_count: int
