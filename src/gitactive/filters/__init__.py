"""Status filtering — active-file collection, actions, path matching."""

from gitactive.filters.actions import ActionError, CommandAction, LoggedAction, PathAction
from gitactive.filters.active_files import (
    ActiveFilesError,
    ActiveFilesOptions,
    StatusSource,
    collect_active_files,
    file_extension,
    get_active_files,
)
from gitactive.filters.matcher import PathMatcher

__all__ = [
    "ActionError",
    "ActiveFilesError",
    "ActiveFilesOptions",
    "CommandAction",
    "LoggedAction",
    "PathAction",
    "PathMatcher",
    "StatusSource",
    "collect_active_files",
    "file_extension",
    "get_active_files",
]
