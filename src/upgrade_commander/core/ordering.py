"""Deterministic ordering and filtering of upgrade lists."""

from __future__ import annotations

import functools
import logging
import re
from typing import Iterable

from upgrade_commander.models.upgrade import Upgrade, UpgradeFilter, UpgradeList

logger = logging.getLogger(__name__)


def upgrade_less(a: Upgrade, b: Upgrade, repos: list[str]) -> bool:
    """Return True if ``a`` sorts before ``b``.

    Records from the same repository compare by name. Otherwise the
    repository found first in ``repos`` wins, falling back to comparing
    the repository names when neither is listed.
    """
    if a.repository == b.repository:
        return a.name < b.name

    for repo in repos:
        if repo == a.repository:
            return True
        if repo == b.repository:
            return False

    return a.repository < b.repository


def order_upgrades(upgrade_list: UpgradeList) -> list[Upgrade]:
    """Stable-sort ``upgrade_list.upgrades`` in place and return it."""
    repos = upgrade_list.repos

    def compare(a: Upgrade, b: Upgrade) -> int:
        if upgrade_less(a, b, repos):
            return -1
        if upgrade_less(b, a, repos):
            return 1
        return 0

    upgrade_list.upgrades.sort(key=functools.cmp_to_key(compare))
    return upgrade_list.upgrades


def name_filter(pattern: str) -> UpgradeFilter:
    """Match package names against a regular expression (search semantics)."""
    regex = re.compile(pattern)
    return lambda u: regex.search(u.name) is not None


def repo_filter(repositories: Iterable[str]) -> UpgradeFilter:
    wanted = set(repositories)
    return lambda u: u.repository in wanted


def filter_upgrades(upgrade_list: UpgradeList, *filters: UpgradeFilter) -> UpgradeList:
    """Return a new list holding the upgrades accepted by every filter."""
    kept = [u for u in upgrade_list.upgrades if all(f(u) for f in filters)]
    logger.debug("Filtered upgrades: kept %d of %d", len(kept), len(upgrade_list.upgrades))
    return UpgradeList(upgrades=kept, repos=list(upgrade_list.repos))
