"""API routers for dashboard-facing evaluation endpoints."""

from envmanager.app.api.routers.environments import router as environments_router
from envmanager.app.api.routers.versions import router as versions_router

__all__ = ["environments_router", "versions_router"]
