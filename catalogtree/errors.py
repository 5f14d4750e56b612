"""Exception taxonomy for CatalogTree.

Every error is local and synchronous: it is raised to the immediate caller,
which decides whether to skip or abort. Each class also derives from the
closest builtin so ordinary Python idioms keep working (for example
``getattr(node, "rtp", None)`` on a container returns ``None``).
"""


class CatalogTreeError(Exception):
    """Base exception for all CatalogTree errors."""
    pass


class IteratorExhaustedError(CatalogTreeError, LookupError):
    """Raised when next() is called on a cursor with no remaining elements."""
    pass


class CapacityExceededError(CatalogTreeError, OverflowError):
    """Raised when adding to a fixed-capacity catalog that is already full."""

    def __init__(self, capacity: int):
        super().__init__(f"Catalog is full (capacity {capacity})")
        self.capacity = capacity


class CapabilityUnsupportedError(CatalogTreeError, AttributeError):
    """Raised when an operation is invoked on a node variant that lacks it.

    Leaves have no children, so add/remove/get_child fail on them.
    Containers carry no item, so domain attributes (price, rtp, ...) fail
    on them.
    """

    def __init__(self, node_kind: str, capability: str):
        super().__init__(
            f"Operation '{capability}' not supported for {node_kind}"
        )
        self.node_kind = node_kind
        self.capability = capability


class IndexOutOfRangeError(CatalogTreeError, IndexError):
    """Raised when get_child() is called with an invalid index."""

    def __init__(self, index: int, size: int):
        super().__init__(
            f"Child index {index} out of range for container with {size} children"
        )
        self.index = index
        self.size = size


class ConfigurationError(CatalogTreeError, ValueError):
    """Raised when a configuration fails validation."""
    pass
