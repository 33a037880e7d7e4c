from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from envmanager.application.errors import ComparisonError
from envmanager.domain.environments import rules
from envmanager.domain.environments.model import Environment, InstalledApp
from envmanager.domain.versioning.outdated import is_outdated

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppComparisonRow:
    app_id: str
    name: str
    publisher: str
    published_as: str
    cells: tuple[Optional[InstalledApp], ...]
    differing_fields: tuple[str, ...]
    category: str
    outdated_in: tuple[int, ...] = ()

    @property
    def present_in(self) -> tuple[int, ...]:
        return tuple(i for i, cell in enumerate(self.cells) if cell is not None)

    @property
    def missing_in(self) -> tuple[int, ...]:
        return tuple(i for i, cell in enumerate(self.cells) if cell is None)

    @property
    def in_all(self) -> bool:
        return not self.missing_in

    @property
    def has_diff(self) -> bool:
        return bool(self.differing_fields)

    @property
    def version_diff(self) -> bool:
        return rules.FIELD_VERSION in self.differing_fields

    @property
    def name_diff(self) -> bool:
        return rules.FIELD_NAME in self.differing_fields

    @property
    def publisher_diff(self) -> bool:
        return rules.FIELD_PUBLISHER in self.differing_fields

    @property
    def published_as_diff(self) -> bool:
        return rules.FIELD_PUBLISHED_AS in self.differing_fields


@dataclass(frozen=True)
class ComparisonStats:
    total: int
    in_all: int
    in_all_with_diff: int
    partial: int
    only_in_first: int
    only_in_second: int


@dataclass(frozen=True)
class EnvironmentComparison:
    environments: tuple[Environment, ...]
    rows: tuple[AppComparisonRow, ...] = ()

    def filter(
        self,
        hide_microsoft: bool = True,
        hide_matching: bool = False,
        microsoft_publisher: str = "Microsoft",
    ) -> "EnvironmentComparison":
        kept = []
        for row in self.rows:
            if hide_microsoft and row.publisher.lower() == microsoft_publisher.lower():
                continue
            if hide_matching and row.category == rules.MATCHING:
                continue
            kept.append(row)
        return EnvironmentComparison(environments=self.environments, rows=tuple(kept))

    def stats(self) -> ComparisonStats:
        return ComparisonStats(
            total=len(self.rows),
            in_all=sum(1 for r in self.rows if r.in_all),
            in_all_with_diff=sum(1 for r in self.rows if r.in_all and r.has_diff),
            partial=sum(1 for r in self.rows if not r.in_all),
            only_in_first=sum(1 for r in self.rows if r.category == rules.ONLY_FIRST),
            only_in_second=sum(1 for r in self.rows if r.category == rules.ONLY_SECOND),
        )


def _differing_fields(apps: list[InstalledApp]) -> tuple[str, ...]:
    differing = []
    for field_name in rules.COMPARED_FIELDS:
        if len({getattr(app, field_name) for app in apps}) > 1:
            differing.append(field_name)
    return tuple(differing)


def _categorize(cells: Sequence[Optional[InstalledApp]], differing: tuple[str, ...]) -> str:
    present = [cell is not None for cell in cells]
    if all(present):
        return rules.DIFFERENT if differing else rules.MATCHING
    if len(cells) == 2:
        return rules.ONLY_FIRST if present[0] else rules.ONLY_SECOND
    return rules.PARTIAL


def _index_apps(env: Environment) -> dict[str, InstalledApp]:
    # First entry wins when an environment lists the same app id twice
    indexed: dict[str, InstalledApp] = {}
    for app in env.installed_apps:
        if app.app_id in indexed:
            logger.debug("Duplicate app %s in environment %s, keeping first entry", app.app_id, env.key)
            continue
        indexed[app.app_id] = app
    return indexed


def compare_environments(
    environments: Sequence[Environment],
    latest_versions: Optional[Mapping[str, Optional[str]]] = None,
) -> EnvironmentComparison:
    """
    Diff the installed apps of two or more environments.

    One row is produced per app id found in any environment. Row metadata comes
    from the first environment holding the app. Rows are ordered matching,
    different, only-first/partial, only-second, then by name.
    """
    if len(environments) < 2:
        raise ComparisonError("At least two environments are required for a comparison")

    keys = [env.key for env in environments]
    if len(set(keys)) != len(keys):
        raise ComparisonError(f"Duplicated environments in comparison: {', '.join(str(k) for k in keys)}")

    app_maps = [_index_apps(env) for env in environments]
    # Preserve first-seen order of app ids
    app_ids: dict[str, None] = {}
    for app_map in app_maps:
        app_ids.update(dict.fromkeys(app_map))

    rows: list[AppComparisonRow] = []
    for app_id in app_ids:
        cells = tuple(app_map.get(app_id) for app_map in app_maps)
        present = [cell for cell in cells if cell is not None]
        metadata = present[0]
        differing = _differing_fields(present)

        outdated_in: tuple[int, ...] = ()
        if latest_versions:
            latest = latest_versions.get(app_id)
            outdated_in = tuple(
                i for i, cell in enumerate(cells) if cell is not None and is_outdated(cell.version, latest)
            )

        rows.append(
            AppComparisonRow(
                app_id=app_id,
                name=metadata.name,
                publisher=metadata.publisher,
                published_as=metadata.published_as,
                cells=cells,
                differing_fields=differing,
                category=_categorize(cells, differing),
                outdated_in=outdated_in,
            )
        )

    rows.sort(key=lambda r: (rules.CATEGORY_RANK[r.category], r.name.casefold(), r.app_id))
    logger.debug("Compared %d environments, %d distinct apps", len(environments), len(rows))
    return EnvironmentComparison(environments=tuple(environments), rows=tuple(rows))
