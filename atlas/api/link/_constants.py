"""Constants for magic link handling (private)."""

# Marker that prefixes each candidate id in the colon dialect: [:id1|:id2]
COLON_MARKER = ":"

# Separator used when naming a fallback chain in diagnostics
FALLBACK_SEPARATOR = " | "

DEFAULT_PLACEHOLDER_CLASS = "placeholder-link"

DEFAULT_PATTERNS = ("**/*.md", "**/*.mdx")

# Directories never descended into by the checker
SKIP_DIRS = frozenset({"node_modules", ".git", "dist", ".astro"})
