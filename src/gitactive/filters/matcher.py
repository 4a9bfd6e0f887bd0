"""Glob-based path predicate for include/exclude lists."""

from __future__ import annotations

import os
from fnmatch import fnmatch
from typing import Iterable, List, Optional


class PathMatcher:
    """Accept paths matching any *include* glob and no *exclude* glob.

    When *root* is given, paths under it are matched relative to it so the
    same globs work for absolute and repo-relative results.
    """

    def __init__(
        self,
        include: Iterable[str] = (),
        exclude: Iterable[str] = (),
        root: Optional[str] = None,
    ) -> None:
        self.include: List[str] = list(include)
        self.exclude: List[str] = list(exclude)
        self.root = root

    def _relative(self, path: str) -> str:
        if self.root and os.path.isabs(path):
            rel = os.path.relpath(path, self.root)
            if rel != os.pardir and not rel.startswith(os.pardir + os.sep):
                path = rel
        return path.replace(os.sep, "/")

    def __call__(self, path: str) -> bool:
        rel = self._relative(path)
        basename = rel.rsplit("/", 1)[-1]

        def _hit(globs: List[str]) -> bool:
            return any(fnmatch(rel, g) or fnmatch(basename, g) for g in globs)

        if self.include and not _hit(self.include):
            return False
        return not _hit(self.exclude)

    def __bool__(self) -> bool:
        return bool(self.include or self.exclude)
