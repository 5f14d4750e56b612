"""High-level API for CatalogTree.

This module provides simple, functional interfaces over cursors and
composite trees. They wrap the object-oriented API for the common cases.
"""

import logging
from typing import Any, Callable, Iterator, List, Optional, TextIO, TypeVar

from .core.cursor import Cursor
from .core.node import TreeComponent
from .errors import CapabilityUnsupportedError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def traverse_tree(root: TreeComponent) -> Iterator[TreeComponent]:
    """Yield every node under root, depth-first, root first.

    Example:
        >>> for node in traverse_tree(all_menus):
        ...     print(node.name)
    """
    traversal = root.create_traversal()
    while traversal.has_next():
        yield traversal.next()


def collect_names(root: TreeComponent) -> List[str]:
    """Names of every node under root, in traversal order."""
    return [node.name for node in traverse_tree(root)]


def filter_nodes(root: TreeComponent,
                 predicate: Callable[[TreeComponent], bool]) -> List[TreeComponent]:
    """Return the nodes for which predicate holds, in traversal order.

    A predicate that probes a leaf-only attribute will raise
    CapabilityUnsupportedError on containers; such nodes are skipped and the
    walk continues.

    Example:
        >>> filter_nodes(casino, lambda node: node.rtp > 97)
    """
    matches = []
    for node in traverse_tree(root):
        try:
            if predicate(node):
                matches.append(node)
        except CapabilityUnsupportedError as exc:
            logger.debug("Skipping %s: %s", node.kind(), exc)
    return matches


def find_items(root: TreeComponent, predicate: Callable[[Any], bool]) -> List[Any]:
    """Items anywhere under root that satisfy predicate (recursive search)."""
    return root.find(predicate)


def count_nodes(root: TreeComponent, leaves_only: bool = False) -> int:
    """Count nodes under root, including root itself."""
    return sum(1 for node in traverse_tree(root) if not leaves_only or node.is_leaf())


def get_leaf_items(root: TreeComponent) -> List[Any]:
    """Every item under root, in traversal order."""
    return [node.item for node in traverse_tree(root) if node.is_leaf()]


def get_tree_depth(root: TreeComponent) -> int:
    """Number of edges on the longest root-to-leaf path.

    Walks with an explicit stack of (node, depth) pairs, like the
    depth-first cursor does.
    """
    deepest = 0
    stack = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        deepest = max(deepest, depth)
        if not node.is_leaf():
            stack.extend((child, depth + 1) for child in node.children)
    return deepest


def drain(cursor: Cursor[T]) -> List[T]:
    """Pull every remaining element from cursor."""
    items = []
    while cursor.has_next():
        items.append(cursor.next())
    return items


def print_catalog(cursor: Cursor[T],
                  stream: Optional[TextIO] = None,
                  formatter: Callable[[T], str] = str,
                  indent: str = "  ") -> int:
    """Print every remaining element of any cursor, one per line.

    The same function serves list-, array- and map-backed catalogs.

    Returns:
        Number of lines printed
    """
    printed = 0
    while cursor.has_next():
        print(indent + formatter(cursor.next()), file=stream)
        printed += 1
    return printed
