"""Top-level Atlas configuration."""

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError

from ..link._constants import DEFAULT_PATTERNS
from ..link.LinkTarget import LinkTarget
from ..link.load_targets import load_targets
from ..link.MagicLinksConfig import MagicLinksConfig
from .LinkConfig import LinkConfig
from .LogConfig import LogConfig


class AtlasConfig(BaseModel):
    """Project configuration read from ``atlas.json``."""

    model_config = ConfigDict(extra="forbid")

    content_dir: str = Field(..., description="Directory containing content files")
    targets_file: str = Field(..., description="JSON file listing link targets")
    patterns: list[str] = Field(default_factory=lambda: list(DEFAULT_PATTERNS), description="File patterns to check")
    link: LinkConfig = Field(default_factory=LinkConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    _base_dir: Path = PrivateAttr(default_factory=Path.cwd)

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file from ATLAS_CONFIG or default to ./atlas.json."""
        env_path = os.environ.get("ATLAS_CONFIG")
        if env_path:
            return Path(env_path).expanduser().resolve()
        return Path.cwd() / "atlas.json"

    @classmethod
    def load(cls, path: Path | None = None) -> "AtlasConfig":
        """Load and validate config from file.

        Raises:
            ValueError: If config file not found, invalid JSON, or validation error
        """
        path = Path(path) if path is not None else cls.get_config_path()

        if not path.exists():
            raise ValueError(f"Configuration file not found at {path}")

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        try:
            config = cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

        config._base_dir = path.parent
        return config

    def resolve_path(self, value: str) -> Path:
        """Resolve a configured path against the config file's directory."""
        path = Path(value).expanduser()
        return path if path.is_absolute() else self._base_dir / path

    @property
    def content_path(self) -> Path:
        return self.resolve_path(self.content_dir)

    @property
    def targets_path(self) -> Path:
        return self.resolve_path(self.targets_file)

    def load_targets(self) -> list[LinkTarget]:
        """Load the configured link targets."""
        return load_targets(self.targets_path)

    def magic_links_config(self) -> MagicLinksConfig:
        """Build the transformer configuration from this project config."""
        return MagicLinksConfig(targets=self.load_targets(), **self.link.model_dump())

    def to_dict(self) -> dict[str, Any]:
        """Convert AtlasConfig instance to a dictionary for serialization."""
        return self.model_dump(mode="json")
