"""Tagged outcomes of resolving a magic link id."""

from dataclasses import dataclass
from typing import Literal

from .LinkTarget import LinkTarget


@dataclass(frozen=True)
class Resolved:
    """The id matched a published target."""

    target: LinkTarget
    matched_id: str
    status: Literal["resolved"] = "resolved"


@dataclass(frozen=True)
class Placeholder:
    """The id matched a target that is not yet published."""

    target: LinkTarget
    matched_id: str
    status: Literal["placeholder"] = "placeholder"


@dataclass(frozen=True)
class Unresolved:
    """No target matched; ``id`` is the (first) candidate as written."""

    id: str
    status: Literal["unresolved"] = "unresolved"


ResolveResult = Resolved | Placeholder | Unresolved
