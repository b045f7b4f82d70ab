"""Content file discovery (UNO: single function)."""

from collections.abc import Iterable
from pathlib import Path

from ._constants import SKIP_DIRS


def _matches(path: Path, patterns: Iterable[str]) -> bool:
    ext = path.suffix.lower()
    for pattern in patterns:
        if "*" in pattern:
            # Simple pattern matching on extension: "**/*.md" -> ".md"
            if ext == pattern.replace("**/", "", 1).replace("*", "", 1).lower():
                return True
        elif str(path).endswith(pattern):
            return True
    return False


def find_files(root: Path, patterns: Iterable[str], skip_names: Iterable[str] = SKIP_DIRS) -> list[Path]:
    """Find all files matching patterns beneath ``root``.

    Args:
        root: Directory to walk; a missing directory yields no files
        patterns: Glob-like patterns (``**/*.md``) or path suffixes
        skip_names: Directory names never descended into

    Returns:
        Matching file paths in sorted walk order
    """
    patterns = list(patterns)
    skip = set(skip_names)
    files: list[Path] = []

    def _walk(current: Path) -> None:
        if not current.exists():
            return
        for entry in sorted(current.iterdir()):
            if entry.is_dir():
                if entry.name not in skip:
                    _walk(entry)
            elif entry.is_file() and _matches(entry, patterns):
                files.append(entry)

    _walk(root)
    return files
