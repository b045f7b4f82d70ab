"""Link target model (UNO: single model)."""

from pydantic import BaseModel, ConfigDict, Field


class LinkTarget(BaseModel):
    """A resolvable destination for magic links."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(..., description="Primary identifier, unique case-insensitively")
    slug: str = Field(..., description="URL slug, used as a fallback key")
    url: str = Field(..., description="Full URL path to this target")
    aliases: tuple[str, ...] = Field(default=(), description="Alternative identifiers")
    placeholder: bool = Field(default=False, description="Exists but not yet published")
