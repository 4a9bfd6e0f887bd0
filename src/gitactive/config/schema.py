"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal

OutputFormat = Literal["plain", "json"]

OUTPUT_FORMATS: tuple[str, ...] = ("plain", "json")


@dataclass
class FilterConfig:
    include_deleted: bool = False
    extension: str = ""  # e.g. ".py"; empty = any
    no_extension: bool = False
    relative: bool = False  # print repo-relative paths instead of absolute ones


@dataclass
class PathsConfig:
    include: List[str] = field(default_factory=list)  # empty = everything
    exclude: List[str] = field(default_factory=list)


@dataclass
class OutputConfig:
    format: OutputFormat = "plain"
    show_summary: bool = True


@dataclass
class GitActiveConfig:
    version: str = "1.0"
    filter: FilterConfig = field(default_factory=FilterConfig)
    paths: PathsConfig = field(default_factory=PathsConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
