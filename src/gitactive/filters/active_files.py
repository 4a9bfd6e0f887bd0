"""Collect added/modified paths from a working-tree status map."""

from __future__ import annotations

import logging
import os
import posixpath
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Mapping, Optional, Protocol

from gitactive.filters.actions import PathAction
from gitactive.git.adapter import GitError
from gitactive.git.models import FileStatus

logger = logging.getLogger(__name__)


class ActiveFilesError(Exception):
    """Raised when the status query or a per-path action fails."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class StatusSource(Protocol):
    def status(self) -> Mapping[str, FileStatus]: ...


@dataclass(frozen=True)
class ActiveFilesOptions:
    root: str = ""  # when set, results are joined onto it
    include_deleted: bool = False
    extension: str = ""  # ".go", ".txt"; includes the leading dot
    no_extension: bool = False  # only paths without an extension
    match_path: Optional[Callable[[str], bool]] = None
    action: Optional[PathAction] = None


def file_extension(path: str) -> str:
    """Return the suffix of the last path component from its final dot.

    Dotfiles keep their whole name: ``.env`` has extension ``.env``.
    """
    name = posixpath.basename(path.replace(os.sep, "/"))
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def collect_active_files(
    status_map: Mapping[str, FileStatus],
    options: ActiveFilesOptions,
) -> List[str]:
    """Filter *status_map* down to the active paths described by *options*."""
    active: List[str] = []

    for sub_path, sts in status_map.items():
        if not options.include_deleted and sts.is_staged_deleted:
            continue

        ext = file_extension(sub_path)
        if options.extension and ext != options.extension:
            continue
        if options.no_extension and ext:
            continue

        if options.root:
            res_path = os.path.normpath(os.path.join(options.root, sub_path))
            if options.match_path is not None and not options.match_path(res_path):
                continue

            # The action may rewrite the file, so it has to exist
            if (
                options.action is not None
                and not sts.is_staged_deleted
                and Path(res_path).is_file()
            ):
                try:
                    options.action(res_path)
                except Exception as exc:
                    raise ActiveFilesError(
                        f"action failed on {res_path}: {exc}", path=res_path
                    ) from exc
        else:
            res_path = sub_path
            if options.match_path is not None and not options.match_path(res_path):
                continue

        active.append(res_path)

    logger.debug("Collected %d of %d changed paths", len(active), len(status_map))
    return active


def get_active_files(worktree: StatusSource, options: ActiveFilesOptions) -> List[str]:
    """Query *worktree* for its status and return the active paths."""
    try:
        status_map = worktree.status()
    except (GitError, OSError) as exc:
        raise ActiveFilesError(f"failed to read working-tree status: {exc}") from exc
    return collect_active_files(status_map, options)
