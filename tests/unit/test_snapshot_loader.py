"""Unit tests for snapshot loader service."""

from __future__ import annotations

import json
import tempfile
from pathlib import Path

import pytest

from envmanager.app.api.services.snapshot_loader import SnapshotLoaderService
from envmanager.application.errors import SnapshotValidationError
from envmanager.settings import Settings

PROD_SNAPSHOT = {
    "tenant_id": "contoso-tenant",
    "name": "PROD",
    "type": "Production",
    "status": "Active",
    "application_version": "24.3.1234.0",
    "customer_name": "Contoso",
    "installed_apps": [
        {"id": "a1", "name": "Reports", "version": "17.5", "publisher": "Contoso", "published_as": "tenant"},
        {"id": "ms", "name": "Base Application", "version": "24.3", "publisher": "Microsoft"},
    ],
}

CATALOG = {
    "applications": [
        {"id": "a1", "name": "Reports", "publisher": "Contoso", "latest_release_version": "18.0",
         "latest_prerelease_version": "18.1-beta"},
        {"id": "a2", "name": "Payroll", "publisher": "Contoso"},
    ]
}


@pytest.fixture
def temp_snapshots_dir():
    """Create a temporary directory with snapshot and catalog files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        base = Path(tmpdir)
        with open(base / "prod.json", "w") as f:
            json.dump(PROD_SNAPSHOT, f)
        with open(base / "catalog.json", "w") as f:
            json.dump(CATALOG, f)
        yield base


def test_load_valid_environment(temp_snapshots_dir):
    """Test loading a valid environment snapshot."""
    loader = SnapshotLoaderService(Settings())

    environment = loader.load_environment(temp_snapshots_dir / "prod.json")

    assert environment.tenant_id == "contoso-tenant"
    assert environment.name == "PROD"
    assert environment.type == "Production"
    assert len(environment.installed_apps) == 2
    assert environment.installed_apps[0].published_as == "tenant"
    # published_as defaults to global
    assert environment.installed_apps[1].published_as == "global"


def test_load_invalid_environment_reports_errors(temp_snapshots_dir):
    """Test that a snapshot missing required fields raises SnapshotValidationError."""
    loader = SnapshotLoaderService(Settings())
    invalid = {"tenant_id": "t1", "installed_apps": [{"id": "a1", "name": "Reports"}]}
    path = temp_snapshots_dir / "invalid.json"
    with open(path, "w") as f:
        json.dump(invalid, f)

    with pytest.raises(SnapshotValidationError) as exc_info:
        loader.load_environment(path)

    assert exc_info.value.path == str(path)
    assert len(exc_info.value.errors) >= 2
    assert any("version" in message for message in exc_info.value.errors)


def test_load_malformed_json(temp_snapshots_dir):
    loader = SnapshotLoaderService(Settings())
    path = temp_snapshots_dir / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(SnapshotValidationError):
        loader.load_environment(path)


def test_load_missing_file(temp_snapshots_dir):
    loader = SnapshotLoaderService(Settings())

    with pytest.raises(FileNotFoundError):
        loader.load_environment(temp_snapshots_dir / "missing.json")


def test_missing_schema_raises(temp_snapshots_dir):
    loader = SnapshotLoaderService(Settings(snapshot_schema_path=str(temp_snapshots_dir / "nope.json")))

    with pytest.raises(FileNotFoundError):
        loader.parse_environment(PROD_SNAPSHOT)


def test_load_catalog(temp_snapshots_dir):
    loader = SnapshotLoaderService(Settings())

    catalog = loader.load_catalog(temp_snapshots_dir / "catalog.json")

    assert len(catalog) == 2
    assert catalog.latest_version("a1") == "18.0"
    assert catalog.latest_versions() == {"a1": "18.0", "a2": None}
    assert catalog.get("a1").latest_prerelease_version == "18.1-beta"


def test_load_catalog_from_settings(temp_snapshots_dir):
    loader = SnapshotLoaderService(Settings(catalog_path=str(temp_snapshots_dir / "catalog.json")))

    assert len(loader.load_catalog()) == 2


def test_load_catalog_without_path_is_empty():
    loader = SnapshotLoaderService(Settings())

    assert len(loader.load_catalog()) == 0
