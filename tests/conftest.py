"""Shared test fixtures — status maps, recording actions, temp git repos."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Dict, List

import pytest

from gitactive.git.models import FileStatus, StatusCode


def git(repo: Path, *args: str) -> None:
    subprocess.run(["git", *args], cwd=repo, capture_output=True, check=True)


class RecordingAction:
    """Fake per-path action that remembers every path it was given."""

    def __init__(self, fail_on: str | None = None) -> None:
        self.calls: List[str] = []
        self.fail_on = fail_on

    def __call__(self, path: str) -> None:
        self.calls.append(path)
        if self.fail_on is not None and path.endswith(self.fail_on):
            raise RuntimeError(f"cannot process {path}")


@pytest.fixture
def recording_action() -> RecordingAction:
    return RecordingAction()


@pytest.fixture
def sample_status() -> Dict[str, FileStatus]:
    """a.go modified, b.txt added, c.go staged for deletion."""
    return {
        "a.go": FileStatus(worktree=StatusCode.MODIFIED),
        "b.txt": FileStatus(staging=StatusCode.ADDED),
        "c.go": FileStatus(staging=StatusCode.DELETED),
    }


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository for integration tests."""
    git(tmp_path, "init")
    git(tmp_path, "config", "user.email", "test@test.com")
    git(tmp_path, "config", "user.name", "Test")
    # Initial commit
    (tmp_path / "README.md").write_text("# Test\n")
    (tmp_path / "old.py").write_text("x = 0\n")
    git(tmp_path, "add", ".")
    git(tmp_path, "commit", "-m", "init")
    return tmp_path


@pytest.fixture
def dirty_git_repo(tmp_git_repo: Path) -> Path:
    """A repo with a modified, an untracked, a staged, and a deleted file."""
    (tmp_git_repo / "README.md").write_text("# Test\n\nmore\n")
    (tmp_git_repo / "new.py").write_text("y = 1\n")
    (tmp_git_repo / "Makefile").write_text("all:\n")
    git(tmp_git_repo, "add", "Makefile")
    git(tmp_git_repo, "rm", "-q", "old.py")
    return tmp_git_repo
