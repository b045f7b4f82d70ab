"""Configuration domain."""

from .AtlasConfig import AtlasConfig
from .LinkConfig import LinkConfig
from .LogConfig import LogConfig

__all__ = ["AtlasConfig", "LinkConfig", "LogConfig"]
