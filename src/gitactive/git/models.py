"""Data models for working-tree status."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class StatusCode(str, Enum):
    """Per-side change kind, valued by git's porcelain letter."""

    UNMODIFIED = " "
    MODIFIED = "M"
    ADDED = "A"
    DELETED = "D"
    RENAMED = "R"
    UNTRACKED = "?"
    COPIED = "C"
    UPDATED_BUT_UNMERGED = "U"

    @classmethod
    def from_porcelain(cls, letter: str) -> "StatusCode":
        # Type changes are reported as plain modifications
        if letter == "T":
            return cls.MODIFIED
        return cls(letter)


@dataclass(frozen=True, slots=True)
class FileStatus:
    """Staged (index) and unstaged (worktree) state of one path."""

    staging: StatusCode = StatusCode.UNMODIFIED
    worktree: StatusCode = StatusCode.UNMODIFIED
    extra: str = ""  # original path on renames and copies

    @property
    def is_staged_deleted(self) -> bool:
        return self.staging is StatusCode.DELETED
