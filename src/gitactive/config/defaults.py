"""Starter .gitactive.toml template."""

DEFAULT_TOML = """\
# gitactive configuration
version = "1.0"

[filter]
include_deleted = false   # list staged deletions too
extension = ""            # ".py" / ".go" — exact match, including the dot
no_extension = false      # only files without an extension
relative = false          # print repo-relative paths

[paths]
# include = ["src/*"]     # empty = everything
# exclude = ["vendor/*", "*.lock"]

[output]
format = "plain"          # plain | json
show_summary = true
"""
