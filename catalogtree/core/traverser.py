"""Depth-first traversal of composite trees.

The DepthFirstIterator walks any tree of leaves and containers without
recursion and without materialising the full node list: it keeps a stack of
pending nodes and expands one container per call to next().
"""

import logging
from typing import TYPE_CHECKING, List

from .cursor import Cursor

if TYPE_CHECKING:
    from .node import TreeComponent

logger = logging.getLogger(__name__)


class DepthFirstIterator(Cursor['TreeComponent']):
    """Pre-order, left-to-right cursor over a composite tree.

    Visits the root, then each child's whole subtree in the order the
    children were added. Every node is yielded; filtering by capability is
    the caller's job.

    Traversals are one-shot and have no reset: call create_traversal()
    again to start over.

    Example:
        root R with children A, B (A added first) and A with child A1
        yields R, A, A1, B.
    """

    def __init__(self, root: 'TreeComponent'):
        self._stack: List['TreeComponent'] = [root]
        logger.debug("Depth-first traversal created at %r", root)

    def has_next(self) -> bool:
        return bool(self._stack)

    def _advance(self) -> 'TreeComponent':
        node = self._stack.pop()
        if not node.is_leaf():
            # Reverse push leaves the first child on top of the stack
            self._stack.extend(reversed(node.children))
        return node
