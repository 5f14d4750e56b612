"""Core components: cursors, catalogs, composite nodes and traversal."""

from .cursor import Aggregate, BoundedCursor, Cursor, OrderedKeyCursor, SequenceCursor
from .catalog import BoundedCatalog, KeyedCatalog, ListCatalog
from .traverser import DepthFirstIterator
from .node import Container, Leaf, TreeComponent

__all__ = [
    'Cursor',
    'Aggregate',
    'SequenceCursor',
    'BoundedCursor',
    'OrderedKeyCursor',
    'ListCatalog',
    'BoundedCatalog',
    'KeyedCatalog',
    'DepthFirstIterator',
    'TreeComponent',
    'Leaf',
    'Container',
]
