"""Plain-text reporter — paths on stdout, summary through Rich on stderr."""

from __future__ import annotations

from typing import List, Optional

from rich.console import Console

from gitactive.filters.active_files import ActiveFilesOptions


def _describe_filters(options: ActiveFilesOptions) -> str:
    parts: List[str] = []
    if options.extension:
        parts.append(f"extension {options.extension}")
    if options.no_extension:
        parts.append("no extension")
    if options.include_deleted:
        parts.append("deletions included")
    return ", ".join(parts)


def render(
    files: List[str],
    options: ActiveFilesOptions,
    *,
    show_summary: bool = True,
    console: Optional[Console] = None,
) -> None:
    """Print one path per line, then a one-line summary on stderr."""
    for path in files:
        print(path)

    if not show_summary:
        return

    console = console or Console(stderr=True)
    if not files:
        console.print("[dim]No active files.[/dim]")
        return

    noun = "file" if len(files) == 1 else "files"
    filters = _describe_filters(options)
    suffix = f" [dim]({filters})[/dim]" if filters else ""
    console.print(f"[bold green]{len(files)}[/bold green] active {noun}{suffix}")
