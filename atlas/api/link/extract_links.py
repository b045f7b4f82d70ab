"""Line-oriented magic link extraction for checking."""

import re
from collections.abc import Iterator

# Both dialects in one pattern; only the first id of a fallback chain is captured
MAGIC_LINK_PATTERN = re.compile(r"\[:([^\]|]+)(?:\|[^\]]+)?\]|\[\[([^\]|]+)(?:\|[^\]]+)?\]\]")


def extract_links(text: str) -> Iterator[tuple[str, int]]:
    """Extract magic link ids from text with their line numbers.

    Args:
        text: File content

    Yields:
        (id, line_number) tuples; line numbers are 1-based
    """
    for line_num, line in enumerate(text.split("\n"), start=1):
        for match in MAGIC_LINK_PATTERN.finditer(line):
            # First group is colon syntax, second is wiki syntax
            raw = match.group(1) if match.group(1) is not None else match.group(2)
            id = raw.split("|")[0]
            if id.startswith(":"):
                id = id[1:]
            yield id.strip(), line_num
