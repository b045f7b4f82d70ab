"""Tree traversal with positional splicing (UNO: single function)."""

from collections.abc import Callable

from .Node import Node

SKIP = "skip"

Visitor = Callable[[Node, int | None, Node | None], int | str | None]


def visit(tree: Node, node_type: str | None, visitor: Visitor) -> None:
    """Walk ``tree`` depth-first and call ``visitor`` on every matching node.

    Parents are visited before their children and siblings left to right. The
    visitor receives ``(node, index, parent)``; the root gets ``(tree, None, None)``.
    It may splice ``parent.children`` and then return the index at which the
    walk should continue inside that parent. Returning ``SKIP`` leaves the
    node's children unvisited; returning ``None`` continues at ``index + 1``.

    Args:
        tree: Root of the tree to walk
        node_type: Node type to match, or None to match every node
        visitor: Callback for matching nodes
    """

    def _walk(node: Node, index: int | None, parent: Node | None) -> int | str | None:
        action = visitor(node, index, parent) if node_type is None or node.type == node_type else None
        if action == SKIP or isinstance(action, int):
            return action
        # Only descend if the visitor left ``node`` in place
        if parent is not None and index is not None:
            if index >= len(parent.children) or parent.children[index] is not node:
                return None
        position = 0
        while position < len(node.children):
            child_action = _walk(node.children[position], position, node)
            position = child_action if isinstance(child_action, int) else position + 1
        return None

    _walk(tree, None, None)
