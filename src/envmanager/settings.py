from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_SNAPSHOT_SCHEMA_PATH = str(Path(__file__).parent / "schemas" / "environment_snapshot.schema.json")
DEFAULT_CATALOG_SCHEMA_PATH = str(Path(__file__).parent / "schemas" / "catalog.schema.json")


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class Settings:
    """Runtime settings sourced from environment variables."""

    log_level: str = "INFO"
    api_prefix: str = "/v1"
    microsoft_publisher: str = "Microsoft"
    # Environment comparison defaults
    compare_hide_microsoft: bool = True
    compare_hide_matching: bool = False
    # Snapshot files
    snapshot_schema_path: str = DEFAULT_SNAPSHOT_SCHEMA_PATH
    catalog_schema_path: str = DEFAULT_CATALOG_SCHEMA_PATH
    catalog_path: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            log_level=os.getenv("LOG_LEVEL", cls.log_level),
            api_prefix=os.getenv("API_PREFIX", cls.api_prefix),
            microsoft_publisher=os.getenv("MICROSOFT_PUBLISHER", cls.microsoft_publisher),
            compare_hide_microsoft=_env_bool("COMPARE_HIDE_MICROSOFT", cls.compare_hide_microsoft),
            compare_hide_matching=_env_bool("COMPARE_HIDE_MATCHING", cls.compare_hide_matching),
            snapshot_schema_path=os.getenv("SNAPSHOT_SCHEMA_PATH", cls.snapshot_schema_path),
            catalog_schema_path=os.getenv("CATALOG_SCHEMA_PATH", cls.catalog_schema_path),
            catalog_path=os.getenv("CATALOG_PATH"),
        )


def get_settings(_cache: dict[str, Settings] = {}) -> Settings:
    """Provide a simple cached settings object."""

    if "settings" not in _cache:
        _cache["settings"] = Settings.from_env()
    return _cache["settings"]
