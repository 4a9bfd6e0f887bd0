"""Per-path actions run while collecting active files."""

from __future__ import annotations

import logging
import subprocess
from typing import Callable, List, Protocol, Sequence

logger = logging.getLogger(__name__)

_PLACEHOLDER = "{}"


class ActionError(Exception):
    """Raised when a per-path action cannot complete."""


class PathAction(Protocol):
    """Anything called with one resolved path; raises to abort collection."""

    def __call__(self, path: str) -> None: ...


class LoggedAction:
    """Wrap a callback that cannot fail, logging each path it receives."""

    def __init__(self, fn: Callable[[str], object]) -> None:
        self._fn = fn

    def __call__(self, path: str) -> None:
        logger.info("run-on-path path=%s", path)
        self._fn(path)


class CommandAction:
    """Run an external command on each path.

    ``{}`` in *argv* is replaced with the path; without one the path is
    appended, so ``CommandAction(["black"])`` runs ``black <path>``.
    """

    def __init__(self, argv: Sequence[str], timeout: int = 300) -> None:
        if not argv:
            raise ActionError("command must not be empty")
        self.argv = list(argv)
        self.timeout = timeout

    def command_for(self, path: str) -> List[str]:
        if _PLACEHOLDER in self.argv:
            return [path if arg == _PLACEHOLDER else arg for arg in self.argv]
        return [*self.argv, path]

    def __call__(self, path: str) -> None:
        cmd = self.command_for(path)
        logger.info("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(cmd, capture_output=True, text=True, timeout=self.timeout)
        except FileNotFoundError:
            raise ActionError(f"command not found: {cmd[0]}")
        except subprocess.TimeoutExpired:
            raise ActionError(f"command timed out after {self.timeout}s: {cmd[0]}")

        if result.returncode != 0:
            stderr = result.stderr.strip()
            detail = f": {stderr}" if stderr else ""
            raise ActionError(f"{cmd[0]} exited with status {result.returncode}{detail}")
