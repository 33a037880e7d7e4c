from __future__ import annotations

from fastapi import FastAPI

from envmanager.app.api.routers import environments_router, versions_router
from envmanager.app.health import router as health_router
from envmanager.observability.logging import configure_logging
from envmanager.settings import get_settings

configure_logging()

settings = get_settings()

app = FastAPI(title="Customer Environment Manager")
app.include_router(health_router)
app.include_router(versions_router, prefix=settings.api_prefix, tags=["versions"])
app.include_router(environments_router, prefix=settings.api_prefix, tags=["environments"])
