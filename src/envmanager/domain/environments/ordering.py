from __future__ import annotations

from typing import Iterable

from envmanager.domain.environments.model import Environment, InstalledApp

SOFT_DELETED = "softdeleted"

TYPE_ORDER = {
    "production": 0,
    "sandbox": 1,
    "test": 2,
}

STATUS_ORDER = {
    "active": 0,
    "ready": 1,
    "pending": 2,
    "preparing": 3,
    "mounting": 4,
    "removing": 5,
    "notready": 6,
}

_UNKNOWN_RANK = 999


def sort_environments(environments: Iterable[Environment]) -> list[Environment]:
    """
    Sort environments for display.

    Sort key priority:
    1. type: production, sandbox, test, then anything else
    2. status: active, ready, pending, preparing, mounting, removing, notready, then anything else
    3. name, case-insensitive
    """
    def sort_key(env: Environment) -> tuple:
        type_rank = TYPE_ORDER.get((env.type or "").lower(), _UNKNOWN_RANK)
        status_rank = STATUS_ORDER.get((env.status or "").lower(), _UNKNOWN_RANK)
        return (type_rank, status_rank, env.name.casefold(), env.name)

    return sorted(environments, key=sort_key)


def is_soft_deleted(environment: Environment) -> bool:
    return (environment.status or "").lower() == SOFT_DELETED


def filter_active_environments(environments: Iterable[Environment]) -> list[Environment]:
    return [env for env in environments if not is_soft_deleted(env)]


def is_microsoft_app(app: InstalledApp, publisher: str = "Microsoft") -> bool:
    return (app.publisher or "").lower() == publisher.lower()


def count_non_microsoft_apps(environment: Environment, publisher: str = "Microsoft") -> int:
    return sum(1 for app in environment.installed_apps if not is_microsoft_app(app, publisher))
