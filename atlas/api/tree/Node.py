"""Content tree node (UNO: single model)."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Node:
    """A node in a document content tree.

    Text-bearing nodes carry ``value``; link nodes carry ``url`` and their
    visible text as children. Ownership is top-down only: a node knows its
    children, never its parent.
    """

    type: str
    value: str | None = None
    url: str | None = None
    children: list[Node] = field(default_factory=list)
    data: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def text(cls, value: str) -> Node:
        return cls(type="text", value=value)

    @classmethod
    def link(cls, url: str, text: str, data: dict[str, Any] | None = None) -> Node:
        return cls(type="link", url=url, children=[cls.text(text)], data=dict(data or {}))

    @classmethod
    def parent(cls, type: str, *children: Node) -> Node:
        return cls(type=type, children=list(children))

    def depth_first(self) -> Iterator[Node]:
        """Traverse tree depth-first, yielding self then children."""
        yield self
        for child in self.children:
            yield from child.depth_first()

    def to_text(self) -> str:
        """Concatenate the text of all text-bearing descendants."""
        return "".join(node.value or "" for node in self.depth_first() if node.type == "text")
