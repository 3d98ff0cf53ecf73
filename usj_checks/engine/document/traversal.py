# Path: usj_checks/engine/document/traversal.py
"""
Traversal Engine for USJ Documents

Depth-first pre-order walk over the Document Model. A node is always
visited before its children, siblings in document order.

The walk uses an explicit stack so deeply nested documents cannot
exhaust the interpreter's recursion limit. The engine holds no state of
its own: accumulators belong to the visitor.
"""

from typing import Callable, Iterable, Iterator

from .node import Node, TextNode, MarkerNode, DocumentDepthError
from ...constants import DEFAULT_MAX_DEPTH


Visitor = Callable[[Node, int], None]


def iter_nodes(
    nodes: Iterable[Node],
    max_depth: int = DEFAULT_MAX_DEPTH
) -> Iterator[tuple[Node, int]]:
    """
    Yield every node under nodes in pre-order.

    Args:
        nodes: Top-level nodes to walk
        max_depth: Deepest nesting accepted (top-level nodes are depth 0)

    Yields:
        (node, depth) tuples

    Raises:
        DocumentDepthError: If a node sits deeper than max_depth
    """
    # Reversed so that pop() returns siblings left to right
    stack = [(node, 0) for node in reversed(tuple(nodes))]

    while stack:
        node, depth = stack.pop()
        if depth > max_depth:
            raise DocumentDepthError(f"Document nesting deeper than {max_depth} levels")

        yield node, depth

        if isinstance(node, MarkerNode) and node.children:
            stack.extend((child, depth + 1) for child in reversed(node.children))


def traverse(
    nodes: Iterable[Node],
    visitor: Visitor,
    max_depth: int = DEFAULT_MAX_DEPTH
) -> None:
    """
    Invoke visitor(node, depth) for every node in pre-order.

    No early termination: a traversal always covers the whole tree.

    Args:
        nodes: Top-level nodes to walk
        visitor: Callable receiving each node and its depth
        max_depth: Deepest nesting accepted

    Example:
        chapters = []

        def collect(node, depth):
            if isinstance(node, MarkerNode) and node.is_chapter:
                chapters.append(node.number)

        traverse(document.children, collect)
    """
    for node, depth in iter_nodes(nodes, max_depth):
        visitor(node, depth)


def flatten_text(node: Node, max_depth: int = DEFAULT_MAX_DEPTH) -> str:
    """
    Concatenate the text leaves of a subtree.

    Nested footnotes and cross-references are skipped: their text is
    never part of the span that contains them.

    Args:
        node: Subtree root
        max_depth: Deepest nesting accepted

    Returns:
        Flattened text
    """
    if isinstance(node, TextNode):
        return node.text

    parts = []
    skip_below = None
    for child, depth in iter_nodes(node.children, max_depth):
        if skip_below is not None:
            if depth > skip_below:
                continue
            skip_below = None

        if isinstance(child, TextNode):
            parts.append(child.text)
        elif child.encloses_region:
            skip_below = depth

    return ''.join(parts)


__all__ = [
    'Visitor',
    'iter_nodes',
    'traverse',
    'flatten_text',
]
