"""Highlight the differing tail of two version strings.

The common prefix is left plain. From the first differing component
onward every alphanumeric run is marked with the string's role, while the
separators between them stay plain.
"""

from __future__ import annotations

from typing import Callable

from upgrade_commander.models import DiffRole, DiffSegment

StyleFunc = Callable[[str, DiffRole], str]

# Pre-release words that start a new component even without a separator.
PRERELEASE_MARKERS = ("rc", "pre", "alpha", "beta")


def plain_style(text: str, role: DiffRole) -> str:
    return text


def is_separator(char: str) -> bool:
    return not char.isalnum()


def starts_component(version: str, index: int, marker_source: str) -> bool:
    """Return True if position ``index + 1`` of ``version`` starts a new component.

    That is the case after a separator in ``version`` itself, or when a
    pre-release marker begins at ``index + 1`` of ``marker_source``.
    """
    if is_separator(version[index]):
        return True
    start = index + 1
    return any(marker_source[start:start + len(word)] == word for word in PRERELEASE_MARKERS)


def diff_position(old_version: str, new_version: str) -> int:
    """Index of the first differing character, or the shorter length."""
    for index, (old_char, new_char) in enumerate(zip(old_version, new_version)):
        if old_char != new_char:
            return index
    return min(len(old_version), len(new_version))


def component_start(version: str, position: int, marker_source: str) -> int:
    """Walk back from ``position`` to the start of its enclosing component."""
    if position < len(version) and is_separator(version[position]):
        return position
    for index in range(min(position, len(version)) - 1, -1, -1):
        if starts_component(version, index, marker_source):
            return index + 1
    return 0


def _colorize(version: str, start: int, role: DiffRole) -> list[DiffSegment]:
    segments = [DiffSegment(version[:start])] if start else []
    offset = start
    for index in range(start + 1, len(version)):
        if is_separator(version[index]):
            segments.append(DiffSegment(version[offset:index], role))
            segments.append(DiffSegment(version[index]))
            offset = index + 1
    segments.append(DiffSegment(version[offset:], role))
    return segments


def version_diff_segments(
    old_version: str, new_version: str
) -> tuple[list[DiffSegment], list[DiffSegment]]:
    """Split both versions into plain and highlighted segments.

    Each list always ends with a highlighted segment, which is empty when
    the versions are equal.
    """
    if old_version == new_version:
        return (
            [DiffSegment(old_version), DiffSegment("", DiffRole.REMOVED)],
            [DiffSegment(new_version), DiffSegment("", DiffRole.ADDED)],
        )

    position = diff_position(old_version, new_version)
    # Marker words are looked up in the old version for both sides.
    left = _colorize(old_version, component_start(old_version, position, old_version), DiffRole.REMOVED)
    right = _colorize(new_version, component_start(new_version, position, old_version), DiffRole.ADDED)
    return left, right


def render_segments(segments: list[DiffSegment], style: StyleFunc = plain_style) -> str:
    return "".join(s.text if s.role is None else style(s.text, s.role) for s in segments)


def get_version_diff(
    old_version: str, new_version: str, style: StyleFunc = plain_style
) -> tuple[str, str]:
    """Return ``(left, right)`` with the changed parts passed through ``style``."""
    left, right = version_diff_segments(old_version, new_version)
    return render_segments(left, style), render_segments(right, style)
