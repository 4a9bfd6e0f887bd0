"""JSON reporter for scripts and CI pipelines."""

from __future__ import annotations

import json
from typing import Any, Dict, List

from gitactive.filters.active_files import ActiveFilesOptions


def to_dict(files: List[str], options: ActiveFilesOptions) -> Dict[str, Any]:
    """Convert collected paths and the filters that produced them to a dict."""
    return {
        "version": "1.0",
        "root": options.root or None,
        "filters": {
            "include_deleted": options.include_deleted,
            "extension": options.extension or None,
            "no_extension": options.no_extension,
        },
        "count": len(files),
        "files": files,
    }


def render(files: List[str], options: ActiveFilesOptions) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(files, options), indent=2)
