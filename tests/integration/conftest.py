from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from envmanager.app.api.dependencies import provide_settings
from envmanager.app.main import app
from envmanager.settings import Settings


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def client(settings):
    app.dependency_overrides[provide_settings] = lambda: settings
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
