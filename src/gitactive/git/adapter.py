"""Git subprocess wrapper — repo root and working-tree status."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Dict, Optional

from gitactive.git.models import FileStatus, StatusCode


class GitError(Exception):
    """Raised when git is unavailable or returns an unexpected error."""


def _run_git(
    args: list[str],
    cwd: Path,
    timeout: int = 30,
    errors: str = "replace",
) -> str:
    """Run a git command and return stdout. Raises GitError on failure.

    Pass ``errors="surrogateescape"`` when the output carries file names,
    so undecodable bytes survive the round trip back to the filesystem.
    """
    if not Path(cwd).is_dir():
        raise GitError(f"not a directory: {cwd}")
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
            encoding="utf-8",
            errors=errors,
        )
    except FileNotFoundError:
        raise GitError("git is not installed or not on PATH")
    except subprocess.TimeoutExpired:
        raise GitError(f"git command timed out after {timeout}s: git {' '.join(args)}")
    except OSError as exc:
        raise GitError(f"cannot run git in {cwd}: {exc}") from exc

    if result.returncode != 0:
        stderr = result.stderr.strip() or f"exit status {result.returncode}"
        raise GitError(f"git error: {stderr}")
    return result.stdout


def get_repo_root(cwd: Optional[Path] = None) -> Path:
    """Return the root of the current git repository."""
    cwd = cwd or Path.cwd()
    out = _run_git(["rev-parse", "--show-toplevel"], cwd=cwd, errors="surrogateescape")
    return Path(out.strip())


def parse_porcelain(text: str) -> Dict[str, FileStatus]:
    """Parse ``git status --porcelain=v1 -z`` output into a status map.

    Each record is ``XY <path>``; renames and copies are followed by one
    more NUL-terminated field holding the original path.
    """
    fields = text.split("\0")
    statuses: Dict[str, FileStatus] = {}
    idx = 0
    while idx < len(fields):
        record = fields[idx]
        idx += 1
        if not record:
            continue
        if len(record) < 4 or record[2] != " ":
            raise GitError(f"malformed status record: {record!r}")

        try:
            staging = StatusCode.from_porcelain(record[0])
            worktree = StatusCode.from_porcelain(record[1])
        except ValueError as exc:
            raise GitError(f"unknown status code in record: {record!r}") from exc

        extra = ""
        if staging in (StatusCode.RENAMED, StatusCode.COPIED) or worktree in (
            StatusCode.RENAMED,
            StatusCode.COPIED,
        ):
            if idx >= len(fields):
                raise GitError(f"rename record without source path: {record!r}")
            extra = fields[idx]
            idx += 1

        statuses[record[3:]] = FileStatus(staging=staging, worktree=worktree, extra=extra)
    return statuses


def get_worktree_status(repo_root: Path) -> Dict[str, FileStatus]:
    """Return the status of every changed or untracked path in *repo_root*."""
    output = _run_git(
        ["status", "--porcelain=v1", "-z", "--untracked-files=all"],
        cwd=repo_root,
        errors="surrogateescape",
    )
    return parse_porcelain(output)


class Worktree:
    """The checked-out files of one repository."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    @classmethod
    def discover(cls, cwd: Optional[Path] = None) -> "Worktree":
        return cls(get_repo_root(cwd))

    def status(self) -> Dict[str, FileStatus]:
        return get_worktree_status(self.root)

    def __repr__(self) -> str:
        return f"Worktree({str(self.root)!r})"
