"""Service for loading and validating environment snapshot and catalog files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

import jsonschema

from envmanager.application.errors import SnapshotValidationError
from envmanager.domain.catalog.model import Catalog, CatalogApplication
from envmanager.domain.environments.model import Environment, InstalledApp
from envmanager.settings import Settings

logger = logging.getLogger(__name__)


class SnapshotLoaderService:
    """Loads environment snapshots and catalogs from JSON, validated against bundled schemas."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self._schemas: dict[str, dict[str, Any]] = {}

    def _load_schema(self, schema_path: str) -> dict[str, Any]:
        if schema_path not in self._schemas:
            path = Path(schema_path)
            if not path.exists():
                raise FileNotFoundError(f"Schema file not found: {path}")
            with open(path, "r", encoding="utf-8") as f:
                self._schemas[schema_path] = json.load(f)
        return self._schemas[schema_path]

    def _validate(self, data: Any, schema_path: str, source: str | None) -> None:
        schema = self._load_schema(schema_path)
        validator = jsonschema.Draft202012Validator(schema)
        errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.path])
        if errors:
            messages = [
                f"{'/'.join(str(p) for p in error.path) or '<root>'}: {error.message}" for error in errors
            ]
            raise SnapshotValidationError(
                f"JSON validation failed for {source or 'document'}: {messages[0]}",
                path=source,
                errors=messages,
            )

    def _read_json(self, path: Path) -> Any:
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise SnapshotValidationError(f"Invalid JSON in {path}: {e}", path=str(path), errors=[str(e)]) from e

    def parse_environment(self, data: dict[str, Any], source: str | None = None) -> Environment:
        """Validate a snapshot document and build an Environment from it."""
        self._validate(data, self.settings.snapshot_schema_path, source)
        apps = [
            InstalledApp.new(
                app_id=app["id"],
                name=app["name"],
                version=app["version"],
                publisher=app["publisher"],
                published_as=app.get("published_as", "global"),
                state=app.get("state"),
            )
            for app in data["installed_apps"]
        ]
        return Environment.new(
            tenant_id=data["tenant_id"],
            name=data["name"],
            type=data.get("type"),
            status=data.get("status"),
            application_version=data.get("application_version"),
            platform_version=data.get("platform_version"),
            location_name=data.get("location_name"),
            web_client_url=data.get("web_client_url"),
            customer_id=data.get("customer_id"),
            customer_name=data.get("customer_name"),
            installed_apps=apps,
        )

    def load_environment(self, path: str | Path) -> Environment:
        path = Path(path)
        environment = self.parse_environment(self._read_json(path), source=str(path))
        logger.info(
            "Loaded snapshot %s/%s with %d apps from %s",
            environment.tenant_id,
            environment.name,
            len(environment.installed_apps),
            path,
        )
        return environment

    def load_environments(self, paths: Iterable[str | Path]) -> list[Environment]:
        return [self.load_environment(path) for path in paths]

    def parse_catalog(self, data: dict[str, Any], source: str | None = None) -> Catalog:
        self._validate(data, self.settings.catalog_schema_path, source)
        return Catalog.from_applications(
            CatalogApplication.new(
                app_id=app["id"],
                name=app["name"],
                publisher=app["publisher"],
                github_repo_name=app.get("github_repo_name"),
                latest_release_version=app.get("latest_release_version"),
                latest_prerelease_version=app.get("latest_prerelease_version"),
            )
            for app in data["applications"]
        )

    def load_catalog(self, path: str | Path | None = None) -> Catalog:
        """Load the catalog from ``path`` or the configured CATALOG_PATH; empty when neither is set."""
        path = path or self.settings.catalog_path
        if not path:
            return Catalog()
        path = Path(path)
        catalog = self.parse_catalog(self._read_json(path), source=str(path))
        logger.info("Loaded catalog with %d applications from %s", len(catalog), path)
        return catalog
