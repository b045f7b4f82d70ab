"""Link API domain: magic link resolution, transformation and checking."""

from .check_links import check_links
from .CheckFinding import CheckFinding
from .LinkCheckResult import LinkCheckResult
from .LinkResolver import LinkResolver
from .LinkSyntax import LinkSyntax, UnresolvedBehavior
from .LinkTarget import LinkTarget
from .load_targets import load_targets
from .MagicLinksConfig import MagicLinksConfig
from .MagicLinkTransformer import MagicLinkTransformer
from .parse_references import parse_references
from .ParsedReference import ParsedReference
from .ResolveResult import Placeholder, Resolved, ResolveResult, Unresolved
from .UnresolvedLinkError import UnresolvedLinkError

__all__ = [
    "CheckFinding",
    "LinkCheckResult",
    "LinkResolver",
    "LinkSyntax",
    "LinkTarget",
    "MagicLinkTransformer",
    "MagicLinksConfig",
    "ParsedReference",
    "Placeholder",
    "ResolveResult",
    "Resolved",
    "UnresolvedBehavior",
    "UnresolvedLinkError",
    "Unresolved",
    "check_links",
    "load_targets",
    "parse_references",
]
