"""Output schemas for link commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LinkCheckOutput(BaseOutputSchema):
    """Output schema for link check command.

    Output structure:
    - errors: list[str] - list of error messages, empty list if no errors
    - warnings: list[str] - one entry per placeholder link
    - content_dir: str - directory that was scanned
    - files_checked: int - number of content files read
    - broken: list[dict] - {file, line, id} per unresolved link
    - placeholders: list[dict] - {file, line, id} per placeholder link
    """

    content_dir: str = Field(..., description="Directory that was scanned")
    files_checked: int = Field(..., description="Number of content files read")
    broken: list[dict[str, Any]] = Field(..., description="Unresolved link occurrences")
    placeholders: list[dict[str, Any]] = Field(..., description="Placeholder link occurrences")


class LinkResolveOutput(BaseOutputSchema):
    """Output schema for link resolve command."""

    ids: list[str] = Field(..., description="Candidate ids in fallback order")
    status: str = Field(..., description="resolved, placeholder or unresolved")
    matched_id: str = Field(..., description="Id that matched, or the first candidate if unresolved")
    target: dict[str, Any] | None = Field(..., description="Matched target, None if unresolved")


# Register schemas
register_output_schema("link", "check", LinkCheckOutput)
register_output_schema("link", "resolve", LinkResolveOutput)
