"""Magic link option types."""

from typing import Literal

LinkSyntax = Literal["colon", "wiki", "both"]

UnresolvedBehavior = Literal["text", "warn", "error"]
