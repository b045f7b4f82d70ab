"""Parsed magic link reference (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParsedReference:
    """A magic link span found in text."""

    raw_span: str
    start_offset: int
    candidate_ids: tuple[str, ...]
    display_text: str | None = None

    @property
    def end_offset(self) -> int:
        return self.start_offset + len(self.raw_span)
