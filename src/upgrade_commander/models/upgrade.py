"""Upgrade record models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable


def _text(value: Any) -> str:
    """Render a record field as text; missing and null fields are empty."""
    return "" if value is None else str(value)


@dataclass(frozen=True)
class Upgrade:
    name: str
    repository: str
    local_version: str
    remote_version: str

    @classmethod
    def from_dict(cls, d: dict) -> Upgrade:
        return cls(
            name=_text(d["name"]),
            repository=_text(d.get("repository", d.get("repo"))),
            local_version=_text(d.get("local_version", d.get("localVersion"))),
            remote_version=_text(d.get("remote_version", d.get("remoteVersion"))),
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "name": self.name,
            "repository": self.repository,
            "local_version": self.local_version,
            "remote_version": self.remote_version,
        }


@dataclass
class UpgradeList:
    upgrades: list[Upgrade] = field(default_factory=list)
    repos: list[str] = field(default_factory=list)  # earlier = higher priority

    def __len__(self) -> int:
        return len(self.upgrades)


# Decides whether a specific upgrade is included in the results.
UpgradeFilter = Callable[[Upgrade], bool]
