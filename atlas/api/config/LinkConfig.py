"""Link section of the project configuration."""

from pydantic import BaseModel, ConfigDict, Field

from ..link._constants import DEFAULT_PLACEHOLDER_CLASS
from ..link.LinkSyntax import LinkSyntax, UnresolvedBehavior


class LinkConfig(BaseModel):
    """Magic link options shared by the transformer and the checker."""

    model_config = ConfigDict(extra="forbid")

    syntax: LinkSyntax = Field(default="both", description="Syntax style to parse")
    unresolved_behavior: UnresolvedBehavior = Field(default="text", description="Behavior for unresolved links")
    placeholder_class: str = Field(
        default=DEFAULT_PLACEHOLDER_CLASS, description="CSS class added to placeholder links"
    )
