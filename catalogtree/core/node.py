"""Composite tree nodes for CatalogTree.

The TreeComponent base declares only what is valid for every node:
name, description, rendering, traversal and recursive search. The two
variants add their own capabilities:

- Leaf wraps one immutable item and has no children
- Container owns an ordered, mutable list of child components

Callers that hold a node of unknown variant either check ``is_leaf()``,
use the optional ``probe()`` accessor, or catch CapabilityUnsupportedError.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterator, List, Optional, TextIO, Tuple

from .traverser import DepthFirstIterator
from ..config import DisplayConfig
from ..errors import CapabilityUnsupportedError, IndexOutOfRangeError

_MISSING = object()


def _is_public(attribute: str) -> bool:
    return not attribute.startswith("_")


class TreeComponent(ABC):
    """Abstract node of a composite tree."""

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        pass

    @abstractmethod
    def is_leaf(self) -> bool:
        pass

    @abstractmethod
    def describe(self, config: Optional[DisplayConfig] = None) -> str:
        """Return the one-line text shown for this node."""
        pass

    @abstractmethod
    def lines(self, config: Optional[DisplayConfig] = None, depth: int = 0) -> Iterator[str]:
        """Yield one rendered line per node in this subtree, pre-order."""
        pass

    @abstractmethod
    def find(self, predicate: Callable[[Any], bool]) -> List[Any]:
        """Collect every item in this subtree that satisfies predicate.

        The predicate receives items, never containers, so it only needs
        to understand leaf data.
        """
        pass

    @abstractmethod
    def probe(self, attribute: str, default: Any = None) -> Any:
        """Read a leaf attribute without raising.

        Returns:
            The attribute value, or default when this node does not carry it
        """
        pass

    def require(self, attribute: str) -> Any:
        """Read a leaf attribute, failing loudly when it is not supported.

        Raises:
            CapabilityUnsupportedError: If this node does not carry the attribute
        """
        value = self.probe(attribute, _MISSING)
        if value is _MISSING:
            raise CapabilityUnsupportedError(self.kind(), attribute)
        return value

    def kind(self) -> str:
        return f"{self.__class__.__name__} {self.name!r}"

    def display(self, stream: Optional[TextIO] = None,
                config: Optional[DisplayConfig] = None) -> None:
        """Print this subtree, one line per node."""
        for line in self.lines(config):
            print(line, file=stream)

    def create_traversal(self) -> DepthFirstIterator:
        """Return a fresh depth-first cursor rooted at this node."""
        return DepthFirstIterator(self)

    def __iter__(self) -> DepthFirstIterator:
        return self.create_traversal()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


class Leaf(TreeComponent):
    """Leaf node wrapping exactly one item.

    The item must expose ``name`` and ``description``; any other public
    attribute it has is a leaf capability, readable directly on the leaf
    (``leaf.rtp``) or through probe()/require(). Reading a capability the
    item lacks raises CapabilityUnsupportedError.
    """

    def __init__(self, item: Any):
        self._item = item

    def __getattr__(self, attribute: str) -> Any:
        # Only reached for names not defined on the leaf class itself
        if not _is_public(attribute):
            raise AttributeError(
                f"{self.__class__.__name__!r} object has no attribute {attribute!r}"
            )
        value = getattr(self._item, attribute, _MISSING)
        if value is _MISSING:
            raise CapabilityUnsupportedError(self.kind(), attribute)
        return value

    @property
    def item(self) -> Any:
        return self._item

    @property
    def name(self) -> str:
        return self._item.name

    @property
    def description(self) -> str:
        return self._item.description

    def is_leaf(self) -> bool:
        return True

    def describe(self, config: Optional[DisplayConfig] = None) -> str:
        config = config or DisplayConfig()
        if config.show_descriptions and self.description:
            return f"{self.name} -- {self.description}"
        return self.name

    def lines(self, config: Optional[DisplayConfig] = None, depth: int = 0) -> Iterator[str]:
        config = config or DisplayConfig()
        yield config.prefix(depth) + self.describe(config)

    def find(self, predicate: Callable[[Any], bool]) -> List[Any]:
        return [self._item] if predicate(self._item) else []

    def probe(self, attribute: str, default: Any = None) -> Any:
        return getattr(self._item, attribute, default)

    # Structural operations belong to containers only

    def add(self, component: TreeComponent) -> None:
        raise CapabilityUnsupportedError(self.kind(), "add")

    def remove(self, component: TreeComponent) -> bool:
        raise CapabilityUnsupportedError(self.kind(), "remove")

    def get_child(self, index: int) -> TreeComponent:
        raise CapabilityUnsupportedError(self.kind(), "get_child")


class Container(TreeComponent):
    """Composite node holding an ordered list of child components.

    Child order is both iteration and display order. The same child may be
    added more than once. Adding a container to its own subtree creates a
    cycle, which traversal does not detect.

    A container carries no item, so reading any public attribute it does
    not define (``rtp``, ``price`` ...) raises CapabilityUnsupportedError.
    Private and dunder lookups keep the plain AttributeError that copy and
    pickle expect.
    """

    def __init__(self, name: str, description: str = ""):
        self._name = name
        self._description = description
        self._children: List[TreeComponent] = []

    def __getattr__(self, attribute: str) -> Any:
        if _is_public(attribute):
            raise CapabilityUnsupportedError(self.kind(), attribute)
        raise AttributeError(
            f"{self.__class__.__name__!r} object has no attribute {attribute!r}"
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def children(self) -> Tuple[TreeComponent, ...]:
        """Snapshot of the direct children, in order."""
        return tuple(self._children)

    @property
    def child_count(self) -> int:
        return len(self._children)

    def is_leaf(self) -> bool:
        return False

    def add(self, component: TreeComponent) -> 'Container':
        """Append a child. Returns self so builders can chain calls."""
        self._children.append(component)
        return self

    def remove(self, component: TreeComponent) -> bool:
        """Remove the first occurrence of component (matched by identity).

        Returns:
            True if a child was removed, False if it was not present
        """
        for index, child in enumerate(self._children):
            if child is component:
                del self._children[index]
                return True
        return False

    def get_child(self, index: int) -> TreeComponent:
        """Return the direct child at index.

        Negative indexes are rejected rather than counted from the end.

        Raises:
            IndexOutOfRangeError: If index < 0 or index >= child_count
        """
        if index < 0 or index >= len(self._children):
            raise IndexOutOfRangeError(index, len(self._children))
        return self._children[index]

    def describe(self, config: Optional[DisplayConfig] = None) -> str:
        if self.description:
            return f"{self.name}, {self.description}"
        return self.name

    def lines(self, config: Optional[DisplayConfig] = None, depth: int = 0) -> Iterator[str]:
        config = config or DisplayConfig()
        yield config.prefix(depth) + self.describe(config)
        for child in self._children:
            yield from child.lines(config, depth + 1)

    def find(self, predicate: Callable[[Any], bool]) -> List[Any]:
        found: List[Any] = []
        for child in self._children:
            found.extend(child.find(predicate))
        return found

    def probe(self, attribute: str, default: Any = None) -> Any:
        return default
