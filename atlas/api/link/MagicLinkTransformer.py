"""Magic link tree transformer (UNO: single class)."""

import logging
from collections.abc import Callable

from ..tree.Node import Node
from ..tree.visit import visit
from ._constants import FALLBACK_SEPARATOR
from .LinkResolver import LinkResolver
from .MagicLinksConfig import MagicLinksConfig
from .parse_references import parse_references
from .ParsedReference import ParsedReference
from .ResolveResult import Placeholder, Unresolved
from .UnresolvedLinkError import UnresolvedLinkError

logger = logging.getLogger(__name__)


class MagicLinkTransformer:
    """Rewrites magic link syntax in text nodes into link nodes.

    Supports two syntax styles:
    - Colon: ``[:id]``, ``[:id|:fallback]`` or ``[:id|Display Text]``
    - Wiki: ``[[id]]`` or ``[[id|Display Text]]``

    Text outside matched spans is preserved exactly.
    """

    def __init__(self, config: MagicLinksConfig, on_warning: Callable[[str], None] | None = None):
        """Initialize transformer.

        Args:
            config: Targets and policy options
            on_warning: Sink for ``warn`` policy diagnostics; defaults to the module logger
        """
        self.config = config
        self.resolver = LinkResolver(config.targets)
        self.on_warning = on_warning or logger.warning

    def __call__(self, tree: Node) -> Node:
        """Transform ``tree`` in place and return it.

        Raises:
            UnresolvedLinkError: If a link is unresolved and the policy is ``error``
        """
        visit(tree, "text", self._visit_text)
        return tree

    def _visit_text(self, node: Node, index: int | None, parent: Node | None) -> int | None:
        if parent is None or index is None:
            return None

        new_nodes = self.transform_text(node.value or "")
        if new_nodes is None:
            return None

        parent.children[index : index + 1] = new_nodes
        # Continue after the inserted nodes so they are not scanned again
        return index + len(new_nodes)

    def transform_text(self, text: str) -> list[Node] | None:
        """Build the replacement nodes for one text value.

        Returns:
            Ordered text/link nodes, or None when the text has no magic links
        """
        references = parse_references(text, self.config.syntax)
        if not references:
            return None

        new_nodes: list[Node] = []
        last_index = 0

        for reference in references:
            if reference.start_offset > last_index:
                new_nodes.append(Node.text(text[last_index : reference.start_offset]))
            new_nodes.append(self._render(reference))
            last_index = reference.end_offset

        if last_index < len(text):
            new_nodes.append(Node.text(text[last_index:]))

        return new_nodes

    def _render(self, reference: ParsedReference) -> Node:
        result = self.resolver.resolve_first(reference.candidate_ids)

        if isinstance(result, Unresolved):
            chain = FALLBACK_SEPARATOR.join(reference.candidate_ids)
            if self.config.unresolved_behavior == "error":
                raise UnresolvedLinkError(reference.candidate_ids)
            if self.config.unresolved_behavior == "warn":
                self.on_warning(f"Warning: Unresolved magic link: {chain}")
            # Graceful degradation: keep only the readable text
            return Node.text(reference.display_text or reference.candidate_ids[0])

        data = {}
        if isinstance(result, Placeholder):
            data = {"hProperties": {"class": self.config.placeholder_class}}
        return Node.link(result.target.url, reference.display_text or result.matched_id, data)
