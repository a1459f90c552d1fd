"""Diff role and repository color maps."""

from upgrade_commander.models import DiffRole

ROLE_COLORS: dict[DiffRole, str] = {
    DiffRole.REMOVED: "red",
    DiffRole.ADDED: "green",
}

REPO_COLORS: tuple[str, ...] = (
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
)

NUMBER_COLOR = "magenta"

_HASH_MASK = 0xFFFFFFFFFFFFFFFF


def repo_color(name: str) -> str:
    """Pick a stable color for a repository name (64-bit djb2 hash)."""
    h = 5381
    for byte in name.encode("utf-8"):
        h = (h * 33 + byte) & _HASH_MASK
    return REPO_COLORS[h % len(REPO_COLORS)]
