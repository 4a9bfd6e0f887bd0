"""gitactive CLI — Typer application with list, exec, and init commands."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from gitactive import __version__
from gitactive.config.schema import GitActiveConfig
from gitactive.filters.actions import PathAction
from gitactive.filters.active_files import ActiveFilesOptions

app = typer.Typer(
    name="gitactive",
    help="List the files your working tree has added or modified.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _resolve_repo_root() -> Path:
    """Find the git repo root, exit 2 on failure."""
    from gitactive.git.adapter import GitError, get_repo_root

    try:
        return get_repo_root()
    except GitError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


def _load(repo_root: Path, config: Optional[str]) -> GitActiveConfig:
    from gitactive.config.loader import ConfigError, load_config

    try:
        return load_config(repo_root, config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


def _apply_overrides(
    cfg: GitActiveConfig,
    *,
    ext: Optional[str],
    no_ext: bool,
    include_deleted: bool,
    include: List[str],
    exclude: List[str],
) -> None:
    if ext:
        cfg.filter.extension = ext
    if no_ext:
        cfg.filter.no_extension = True
    if include_deleted:
        cfg.filter.include_deleted = True
    cfg.paths.include.extend(include)
    cfg.paths.exclude.extend(exclude)

    if cfg.filter.extension and not cfg.filter.extension.startswith("."):
        console.print(
            f"[bold red]Invalid extension:[/bold red] {cfg.filter.extension} "
            "(include the leading dot, e.g. .py)"
        )
        raise typer.Exit(code=2)
    if cfg.filter.extension and cfg.filter.no_extension:
        console.print("[bold red]Error:[/bold red] --ext and --no-ext are mutually exclusive")
        raise typer.Exit(code=2)


def _build_options(
    cfg: GitActiveConfig,
    repo_root: Path,
    *,
    relative: bool,
    action: Optional[PathAction] = None,
) -> ActiveFilesOptions:
    from gitactive.filters.matcher import PathMatcher

    root = "" if relative else str(repo_root)
    matcher = PathMatcher(cfg.paths.include, cfg.paths.exclude, root=root or None)
    return ActiveFilesOptions(
        root=root,
        include_deleted=cfg.filter.include_deleted,
        extension=cfg.filter.extension,
        no_extension=cfg.filter.no_extension,
        match_path=matcher if matcher else None,
        action=action,
    )


def _report(files: List[str], options: ActiveFilesOptions, cfg: GitActiveConfig) -> None:
    from gitactive.output import json_report, terminal

    if cfg.output.format == "json":
        print(json_report.render(files, options))
    else:
        terminal.render(files, options, show_summary=cfg.output.show_summary, console=console)


# ── list ──────────────────────────────────────────────────────────────────────


@app.command("list")
def list_files(
    ext: Optional[str] = typer.Option(None, "--ext", "-e", help="Only files with this extension, e.g. .py"),
    no_ext: bool = typer.Option(False, "--no-ext", help="Only files without an extension"),
    include_deleted: bool = typer.Option(False, "--include-deleted", "-d", help="Include staged deletions"),
    relative: bool = typer.Option(False, "--relative", "-r", help="Print repo-relative paths"),
    include: List[str] = typer.Option([], "--include", "-i", help="Glob a path must match (repeatable)"),
    exclude: List[str] = typer.Option([], "--exclude", "-x", help="Glob that drops a path (repeatable)"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: plain | json"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .gitactive.toml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """List added and modified files in the working tree."""
    from gitactive.config.schema import OUTPUT_FORMATS
    from gitactive.filters.active_files import ActiveFilesError, get_active_files
    from gitactive.git.adapter import Worktree

    _configure_logging(verbose)
    repo_root = _resolve_repo_root()
    cfg = _load(repo_root, config)

    if format:
        if format not in OUTPUT_FORMATS:
            console.print(f"[bold red]Invalid format:[/bold red] {format}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]
    _apply_overrides(
        cfg, ext=ext, no_ext=no_ext, include_deleted=include_deleted,
        include=include, exclude=exclude,
    )

    options = _build_options(cfg, repo_root, relative=relative or cfg.filter.relative)
    try:
        files = get_active_files(Worktree(repo_root), options)
    except ActiveFilesError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    _report(files, options, cfg)


# ── exec ──────────────────────────────────────────────────────────────────────


@app.command("exec")
def exec_command(
    command: List[str] = typer.Argument(..., help="Command to run per file; {} is replaced with the path"),
    ext: Optional[str] = typer.Option(None, "--ext", "-e", help="Only files with this extension, e.g. .py"),
    no_ext: bool = typer.Option(False, "--no-ext", help="Only files without an extension"),
    include: List[str] = typer.Option([], "--include", "-i", help="Glob a path must match (repeatable)"),
    exclude: List[str] = typer.Option([], "--exclude", "-x", help="Glob that drops a path (repeatable)"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .gitactive.toml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Run a command on every added or modified file, e.g. `gitactive exec -e .py -- black {}`."""
    from gitactive.filters.actions import CommandAction
    from gitactive.filters.active_files import ActiveFilesError, get_active_files
    from gitactive.git.adapter import Worktree

    _configure_logging(verbose)
    repo_root = _resolve_repo_root()
    cfg = _load(repo_root, config)
    _apply_overrides(
        cfg, ext=ext, no_ext=no_ext, include_deleted=False,
        include=include, exclude=exclude,
    )

    # Actions only run against resolved absolute paths
    options = _build_options(cfg, repo_root, relative=False, action=CommandAction(command))
    try:
        files = get_active_files(Worktree(repo_root), options)
    except ActiveFilesError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        code = 2 if exc.path is None else 1
        raise typer.Exit(code=code) from exc

    _report(files, options, cfg)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .gitactive.toml in the repo root."""
    from gitactive.config.defaults import DEFAULT_TOML
    from gitactive.config.loader import CONFIG_FILENAME

    repo_root = _resolve_repo_root()
    config_path = repo_root / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"gitactive {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """gitactive — list the files your working tree has added or modified."""
