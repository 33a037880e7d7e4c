#!/usr/bin/env python3
"""Validation script for environment snapshot and catalog JSON files.

Scans a directory for *.json snapshot files (and an optional catalog.json) and
validates them against the schemas bundled with the envmanager package.
Exits with error code if any invalid files are found.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from envmanager.app.api.services.snapshot_loader import SnapshotLoaderService
from envmanager.application.errors import SnapshotValidationError
from envmanager.settings import get_settings

CATALOG_FILE_NAME = "catalog.json"


def main() -> int:
    """Main validation function."""
    parser = argparse.ArgumentParser(description="Validate environment snapshot files")
    parser.add_argument("directory", nargs="?", default="snapshots")
    args = parser.parse_args()

    snapshots_dir = Path(args.directory)
    if not snapshots_dir.is_dir():
        print(f"ERROR: Directory not found: {snapshots_dir}", file=sys.stderr)
        return 1

    loader = SnapshotLoaderService(get_settings())
    errors: list[str] = []

    for path in sorted(snapshots_dir.glob("*.json")):
        try:
            if path.name == CATALOG_FILE_NAME:
                loader.load_catalog(path)
            else:
                loader.load_environment(path)
        except SnapshotValidationError as e:
            errors.extend(f"{path}: {message}" for message in e.errors or [str(e)])
        else:
            print(f"✓ {path}")

    # Report errors
    if errors:
        print("\nValidation errors:", file=sys.stderr)
        for error in errors:
            print(f"  {error}", file=sys.stderr)
        return 1

    print("\nAll files validated successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
