"""Git interface layer — adapter and status models."""

from gitactive.git.adapter import (
    GitError,
    Worktree,
    get_repo_root,
    get_worktree_status,
    parse_porcelain,
)
from gitactive.git.models import FileStatus, StatusCode

__all__ = [
    "FileStatus",
    "GitError",
    "StatusCode",
    "Worktree",
    "get_repo_root",
    "get_worktree_status",
    "parse_porcelain",
]
