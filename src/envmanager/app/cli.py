from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from typing import Any, Optional, Sequence

from envmanager.app.api.services.snapshot_loader import SnapshotLoaderService
from envmanager.application.errors import ComparisonError, SnapshotValidationError
from envmanager.domain.environments import compare_environments, summarize_environment
from envmanager.domain.versioning import (
    compare_versions,
    count_major_minor_drift,
    count_outdated,
    is_outdated,
    parse_version,
)
from envmanager.observability.logging import configure_logging
from envmanager.settings import get_settings

logger = logging.getLogger(__name__)


def _emit(payload: Any) -> None:
    print(json.dumps(payload, indent=2, default=str))


def _cmd_compare(args: argparse.Namespace) -> int:
    a_parsed = parse_version(args.a)
    b_parsed = parse_version(args.b)
    _emit(
        {
            "a": args.a,
            "b": args.b,
            "ordering": compare_versions(a_parsed, b_parsed).value,
            "a_parsed": list(a_parsed),
            "b_parsed": list(b_parsed),
        }
    )
    return 0


def _cmd_outdated(args: argparse.Namespace) -> int:
    _emit({"installed": args.installed, "latest": args.latest, "outdated": is_outdated(args.installed, args.latest)})
    return 0


def _cmd_count(args: argparse.Namespace) -> int:
    installations = [{"version": v} for v in args.versions]
    _emit(
        {
            "latest": args.latest,
            "total": len(installations),
            "outdated_count": count_outdated(args.latest, installations),
            "major_minor_drift_count": count_major_minor_drift(args.latest, installations),
        }
    )
    return 0


def _cmd_diff(args: argparse.Namespace) -> int:
    settings = get_settings()
    loader = SnapshotLoaderService(settings)
    environments = loader.load_environments(args.snapshots)
    catalog = loader.load_catalog(args.catalog)

    comparison = compare_environments(environments, latest_versions=catalog.latest_versions())
    comparison = comparison.filter(
        hide_microsoft=not args.show_microsoft,
        hide_matching=args.hide_matching,
        microsoft_publisher=settings.microsoft_publisher,
    )
    labels = [str(env.key) for env in comparison.environments]
    _emit(
        {
            "environments": labels,
            "stats": asdict(comparison.stats()),
            "rows": [
                {
                    "app_id": row.app_id,
                    "name": row.name,
                    "publisher": row.publisher,
                    "category": row.category,
                    "differing_fields": list(row.differing_fields),
                    "versions": {
                        label: (cell.version if cell else None) for label, cell in zip(labels, row.cells)
                    },
                    "outdated_in": [labels[i] for i in row.outdated_in],
                }
                for row in comparison.rows
            ],
        }
    )
    return 0


def _cmd_summary(args: argparse.Namespace) -> int:
    settings = get_settings()
    loader = SnapshotLoaderService(settings)
    catalog = loader.load_catalog(args.catalog)
    latest_versions = catalog.latest_versions()
    _emit(
        [
            asdict(summarize_environment(env, latest_versions, microsoft_publisher=settings.microsoft_publisher))
            for env in loader.load_environments(args.snapshots)
        ]
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Customer Environment Manager CLI")
    subparsers = parser.add_subparsers(dest="command")

    compare_parser = subparsers.add_parser("compare", help="Compare two version strings")
    compare_parser.add_argument("a")
    compare_parser.add_argument("b")
    compare_parser.set_defaults(handler=_cmd_compare)

    outdated_parser = subparsers.add_parser("outdated", help="Check whether an installed version is outdated")
    outdated_parser.add_argument("installed")
    outdated_parser.add_argument("latest")
    outdated_parser.set_defaults(handler=_cmd_outdated)

    count_parser = subparsers.add_parser("count", help="Count outdated installed versions")
    count_parser.add_argument("--latest", required=True)
    count_parser.add_argument("versions", nargs="*")
    count_parser.set_defaults(handler=_cmd_count)

    diff_parser = subparsers.add_parser("diff", help="Compare installed apps across environment snapshots")
    diff_parser.add_argument("snapshots", nargs="+")
    diff_parser.add_argument("--catalog", help="Catalog JSON file (defaults to CATALOG_PATH)")
    diff_parser.add_argument("--show-microsoft", action="store_true")
    diff_parser.add_argument("--hide-matching", action="store_true")
    diff_parser.set_defaults(handler=_cmd_diff)

    summary_parser = subparsers.add_parser("summary", help="Summarize outdated apps per environment snapshot")
    summary_parser.add_argument("snapshots", nargs="+")
    summary_parser.add_argument("--catalog", help="Catalog JSON file (defaults to CATALOG_PATH)")
    summary_parser.set_defaults(handler=_cmd_summary)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    # stdout carries the JSON output
    configure_logging(stream=sys.stderr)
    parser = build_parser()
    args = parser.parse_args(argv)
    if not getattr(args, "handler", None):
        parser.print_help()
        return 1

    try:
        return args.handler(args)
    except FileNotFoundError as e:
        logger.error("%s", e)
        return 2
    except (SnapshotValidationError, ComparisonError) as e:
        logger.error("%s", e)
        return 2


if __name__ == "__main__":
    sys.exit(main())
