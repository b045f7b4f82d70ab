"""Content tree domain."""

from .Node import Node
from .visit import SKIP, visit

__all__ = ["SKIP", "Node", "visit"]
