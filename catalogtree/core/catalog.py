"""Catalog storage strategies for CatalogTree.

Three backing stores, one cursor contract:

- ListCatalog: growable list, insertion order
- BoundedCatalog: fixed-capacity slot array, insertion order, rejects overflow
- KeyedCatalog: key to item map, deterministic sorted order
"""

import logging
from typing import Any, Callable, Dict, List, Optional, TypeVar

from .cursor import Aggregate, BoundedCursor, Cursor, OrderedKeyCursor, SequenceCursor
from ..errors import CapacityExceededError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ListCatalog(Aggregate[T]):
    """Catalog backed by a growable list."""

    def __init__(self, name: str = ""):
        self.name = name or self.__class__.__name__
        self._items: List[T] = []

    def add(self, item: T) -> None:
        self._items.append(item)
        logger.debug("%s: added %r (%d items)", self.name, item, len(self._items))

    def create_iterator(self) -> Cursor[T]:
        return SequenceCursor(self._items)

    def __len__(self) -> int:
        return len(self._items)


class BoundedCatalog(Aggregate[T]):
    """Catalog backed by a preallocated slot array.

    Tracks a logical length separately from the capacity, so callers never
    see an unused slot.
    """

    def __init__(self, capacity: int, name: str = ""):
        """Allocate the slot array.

        Args:
            capacity: Maximum number of items (must be positive)
            name: Display name used in log records

        Raises:
            ValueError: If capacity is not positive
        """
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.name = name or self.__class__.__name__
        self._slots: List[Optional[T]] = [None] * capacity
        self._count = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def is_full(self) -> bool:
        return self._count >= len(self._slots)

    def add(self, item: T) -> None:
        """Store an item in the next free slot.

        Raises:
            CapacityExceededError: If every slot is taken
        """
        if self.is_full():
            logger.warning("%s: rejected %r, capacity %d reached",
                           self.name, item, self.capacity)
            raise CapacityExceededError(self.capacity)
        self._slots[self._count] = item
        self._count += 1
        logger.debug("%s: added %r (%d/%d)", self.name, item, self._count, self.capacity)

    def create_iterator(self) -> Cursor[T]:
        return BoundedCursor(self._slots, self._count)

    def __len__(self) -> int:
        return self._count


class KeyedCatalog(Aggregate[T]):
    """Catalog backed by a key to item map.

    Iteration order is a deterministic sort, never insertion order. By
    default items are visited by ascending key; pass ``order_key`` to rank
    them by something else (it receives ``(key, item)``).

    Without ``order_key`` the keys must be mutually comparable; mixing, say,
    ints and strings makes create_iterator() raise TypeError. Pass an
    ``order_key`` such as ``lambda key, item: str(key)`` for mixed keys.
    """

    def __init__(self,
                 order_key: Optional[Callable[[Any, T], Any]] = None,
                 reverse: bool = False,
                 name: str = ""):
        self.name = name or self.__class__.__name__
        self._items: Dict[Any, T] = {}
        self._order_key = order_key
        self._reverse = reverse

    def add(self, key: Any, item: T) -> None:
        """Store an item under key, replacing any previous item for it."""
        if key in self._items:
            logger.debug("%s: replacing item for key %r", self.name, key)
        self._items[key] = item
        logger.debug("%s: added %r under %r", self.name, item, key)

    def get(self, key: Any) -> Optional[T]:
        return self._items.get(key)

    def __contains__(self, key: Any) -> bool:
        return key in self._items

    def create_iterator(self) -> OrderedKeyCursor[T]:
        return OrderedKeyCursor(self._items, self._order_key, self._reverse)

    def __len__(self) -> int:
        return len(self._items)
