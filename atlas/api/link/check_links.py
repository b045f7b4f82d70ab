"""Batch magic link checker (UNO: single function)."""

import logging
from collections.abc import Iterable
from pathlib import Path

from ._constants import DEFAULT_PATTERNS
from .CheckFinding import CheckFinding
from .extract_links import extract_links
from .find_files import find_files
from .LinkCheckResult import LinkCheckResult
from .LinkResolver import LinkResolver
from .LinkTarget import LinkTarget
from .ResolveResult import Placeholder, Unresolved

logger = logging.getLogger(__name__)


def check_links(
    content_dir: Path,
    targets: Iterable[LinkTarget],
    patterns: Iterable[str] | None = None,
) -> LinkCheckResult:
    """Check all magic links in content files for broken or placeholder links.

    Files are never modified. Broken and placeholder links are reported, not
    raised; I/O errors while reading files propagate.

    Args:
        content_dir: Directory containing content files
        targets: Available link targets
        patterns: File patterns to check (default: ``**/*.md`` and ``**/*.mdx``)

    Returns:
        LinkCheckResult with broken and placeholder findings
    """
    resolver = LinkResolver(targets)
    result = LinkCheckResult()

    for file in find_files(Path(content_dir), DEFAULT_PATTERNS if patterns is None else patterns):
        text = file.read_text(encoding="utf-8")
        result.files_checked += 1

        for id, line in extract_links(text):
            resolved = resolver.resolve(id)
            if isinstance(resolved, Unresolved):
                result.broken.append(CheckFinding(file=file, line=line, id=id))
            elif isinstance(resolved, Placeholder):
                result.placeholders.append(CheckFinding(file=file, line=line, id=id))

    logger.debug(
        "Checked %d files: %d broken, %d placeholder",
        result.files_checked,
        len(result.broken),
        len(result.placeholders),
    )
    return result
