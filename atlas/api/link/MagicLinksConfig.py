"""Magic link transform configuration."""

from pydantic import BaseModel, ConfigDict, Field

from ._constants import DEFAULT_PLACEHOLDER_CLASS
from .LinkSyntax import LinkSyntax, UnresolvedBehavior
from .LinkTarget import LinkTarget


class MagicLinksConfig(BaseModel):
    """Configuration for the magic link transformer."""

    model_config = ConfigDict(extra="forbid")

    targets: list[LinkTarget] = Field(..., description="Available link targets")
    syntax: LinkSyntax = Field(default="both", description="Syntax style to parse")
    unresolved_behavior: UnresolvedBehavior = Field(default="text", description="Behavior for unresolved links")
    placeholder_class: str = Field(
        default=DEFAULT_PLACEHOLDER_CLASS, description="CSS class added to placeholder links"
    )
