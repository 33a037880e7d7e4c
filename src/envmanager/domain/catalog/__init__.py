from __future__ import annotations

from envmanager.domain.catalog.model import Catalog, CatalogApplication

__all__ = ["Catalog", "CatalogApplication"]
