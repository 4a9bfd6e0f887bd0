"""gitactive — list the files a git working tree has added or modified."""

from gitactive.filters import (
    ActiveFilesError,
    ActiveFilesOptions,
    collect_active_files,
    get_active_files,
)
from gitactive.git import FileStatus, StatusCode, Worktree

__version__ = "0.1.0"

__all__ = [
    "ActiveFilesError",
    "ActiveFilesOptions",
    "FileStatus",
    "StatusCode",
    "Worktree",
    "collect_active_files",
    "get_active_files",
]
