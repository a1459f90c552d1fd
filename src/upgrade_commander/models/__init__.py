"""Data models for Upgrade Commander."""

from __future__ import annotations

import enum
from typing import NamedTuple, Optional


class DiffRole(enum.Enum):
    REMOVED = "removed"
    ADDED = "added"


class DiffSegment(NamedTuple):
    text: str
    role: Optional[DiffRole] = None
