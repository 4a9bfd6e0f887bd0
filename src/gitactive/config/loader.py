"""Load and merge configuration from .gitactive.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from gitactive.config.schema import (
    OUTPUT_FORMATS,
    FilterConfig,
    GitActiveConfig,
    OutputConfig,
    PathsConfig,
)

CONFIG_FILENAME = ".gitactive.toml"


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(repo_root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = repo_root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _truthy(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _merge_env_overrides(cfg: GitActiveConfig) -> None:
    """Apply GITACTIVE_* environment variable overrides."""
    if val := os.environ.get("GITACTIVE_EXTENSION"):
        cfg.filter.extension = val.strip()
    if val := os.environ.get("GITACTIVE_INCLUDE_DELETED"):
        cfg.filter.include_deleted = _truthy(val)
    if val := os.environ.get("GITACTIVE_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]
    if val := os.environ.get("GITACTIVE_EXCLUDE"):
        cfg.paths.exclude.extend(p.strip() for p in val.split(os.pathsep) if p.strip())


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    body = data.get(section, {})
    if not isinstance(body, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in body.items() if k in valid_fields}
    return cls(**filtered)


def load_config(
    repo_root: Path,
    config_override: Optional[str] = None,
) -> GitActiveConfig:
    """Load, validate, and return a GitActiveConfig."""
    config_path = find_config_file(repo_root, config_override)

    if config_path is None:
        cfg = GitActiveConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = GitActiveConfig(
            version=raw.get("version", "1.0"),
            filter=_build_section(raw, FilterConfig, "filter"),
            paths=_build_section(raw, PathsConfig, "paths"),
            output=_build_section(raw, OutputConfig, "output"),
        )

    _merge_env_overrides(cfg)

    if cfg.output.format not in OUTPUT_FORMATS:
        raise ConfigError(f"Unknown output format: {cfg.output.format}")
    return cfg
