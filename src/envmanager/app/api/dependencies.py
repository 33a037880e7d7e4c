"""FastAPI dependencies shared by routers."""

from __future__ import annotations

from envmanager.settings import Settings, get_settings


def provide_settings() -> Settings:
    """Dependency to provide cached Settings."""
    return get_settings()
