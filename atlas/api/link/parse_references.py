"""Magic link parser for the colon and wiki dialects."""

import re

from ._constants import COLON_MARKER
from .LinkSyntax import LinkSyntax
from .ParsedReference import ParsedReference

# Colon syntax: [:id], [:id1|:id2] or [:id|Display Text]; captures everything inside [:...]
COLON_LINK_PATTERN = re.compile(r"\[:([^\]]+)\]")
# Wiki syntax: [[id]] or [[id|Display Text]]
WIKI_LINK_PATTERN = re.compile(r"\[\[([^\]|]+)(?:\|([^\]]+))?\]\]")


def parse_colon_content(content: str) -> tuple[list[str], str | None]:
    """Split colon-dialect content into candidate ids and display text.

    Parts prefixed with ``:`` are ids. The first unprefixed part after at least
    one id is the display text and ends parsing. An unprefixed first part is a
    bare id.

    Args:
        content: Text between ``[:`` and ``]``

    Returns:
        Tuple of (ids, display_text)
    """
    ids: list[str] = []
    display_text = None

    for part in content.split("|"):
        trimmed = part.strip()
        if trimmed.startswith(COLON_MARKER):
            ids.append(trimmed[len(COLON_MARKER) :])
        elif ids:
            display_text = trimmed
            break
        else:
            ids.append(trimmed)

    return ids, display_text


def _parse_colon(text: str) -> list[ParsedReference]:
    references = []
    for match in COLON_LINK_PATTERN.finditer(text):
        ids, display_text = parse_colon_content(match.group(1))
        if not ids:
            continue
        references.append(
            ParsedReference(
                raw_span=match.group(0),
                start_offset=match.start(),
                candidate_ids=tuple(ids),
                display_text=display_text,
            )
        )
    return references


def _parse_wiki(text: str) -> list[ParsedReference]:
    references = []
    for match in WIKI_LINK_PATTERN.finditer(text):
        display_text = match.group(2)
        references.append(
            ParsedReference(
                raw_span=match.group(0),
                start_offset=match.start(),
                candidate_ids=(match.group(1).strip(),),
                display_text=display_text.strip() if display_text is not None else None,
            )
        )
    return references


def parse_references(text: str, syntax: LinkSyntax = "both") -> list[ParsedReference]:
    """Find all magic links in text.

    Each enabled dialect is scanned over the whole text; the results are merged
    and stably sorted by start offset. Overlapping matches from different
    dialects are kept as-is.

    Args:
        text: Text to scan
        syntax: Which dialects to scan for

    Returns:
        ParsedReference list in left-to-right order
    """
    references: list[ParsedReference] = []

    if syntax in ("colon", "both"):
        references.extend(_parse_colon(text))
    if syntax in ("wiki", "both"):
        references.extend(_parse_wiki(text))

    return sorted(references, key=lambda ref: ref.start_offset)
