"""CatalogTree - Iterator and Composite patterns over catalog trees.

Two small mechanisms make up the library:

    Cursors:      from catalogtree import ListCatalog, BoundedCatalog, KeyedCatalog
    Composites:   from catalogtree import Leaf, Container, traverse_tree

Themed examples (restaurant menus, casino games) live in catalogtree.domain.
"""

__version__ = "0.1.0"

from .errors import (
    CatalogTreeError,
    IteratorExhaustedError,
    CapacityExceededError,
    CapabilityUnsupportedError,
    IndexOutOfRangeError,
    ConfigurationError,
)
from .config import (
    DisplayConfig,
    CatalogConfig,
    DemoConfig,
    DemoSection,
    configure_logging,
)
from .core import (
    Cursor,
    Aggregate,
    SequenceCursor,
    BoundedCursor,
    OrderedKeyCursor,
    ListCatalog,
    BoundedCatalog,
    KeyedCatalog,
    DepthFirstIterator,
    TreeComponent,
    Leaf,
    Container,
)
from .api import (
    traverse_tree,
    collect_names,
    filter_nodes,
    find_items,
    count_nodes,
    get_leaf_items,
    get_tree_depth,
    drain,
    print_catalog,
)

__all__ = [
    "__version__",
    # Errors
    "CatalogTreeError",
    "IteratorExhaustedError",
    "CapacityExceededError",
    "CapabilityUnsupportedError",
    "IndexOutOfRangeError",
    "ConfigurationError",
    # Config
    "DisplayConfig",
    "CatalogConfig",
    "DemoConfig",
    "DemoSection",
    "configure_logging",
    # Core
    "Cursor",
    "Aggregate",
    "SequenceCursor",
    "BoundedCursor",
    "OrderedKeyCursor",
    "ListCatalog",
    "BoundedCatalog",
    "KeyedCatalog",
    "DepthFirstIterator",
    "TreeComponent",
    "Leaf",
    "Container",
    # API
    "traverse_tree",
    "collect_names",
    "filter_nodes",
    "find_items",
    "count_nodes",
    "get_leaf_items",
    "get_tree_depth",
    "drain",
    "print_catalog",
]
