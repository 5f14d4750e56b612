"""Cursor abstraction for CatalogTree.

A Cursor is a pull-based, single-pass, forward-only accessor: callers ask
``has_next()`` and then take ``next()``. The same contract is implemented
once per backing store so that client code never needs to know whether a
catalog keeps its items in a list, a fixed array or a keyed map.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, List, Mapping, Optional, Sequence, TypeVar

from ..errors import IteratorExhaustedError

T = TypeVar("T")


class Cursor(ABC, Generic[T]):
    """Abstract pull-based iterator.

    Subclasses implement ``has_next`` and ``_advance``; this base class
    enforces the exhaustion contract and bridges to the Python iterator
    protocol so cursors also work in ``for`` loops.
    """

    @abstractmethod
    def has_next(self) -> bool:
        """Check if another element is available.

        Must be free of side effects and safe to call repeatedly.

        Returns:
            True if next() will return an element
        """
        pass

    @abstractmethod
    def _advance(self) -> T:
        """Return the next element and move the position forward.

        Only called after has_next() returned True.
        """
        pass

    def next(self) -> T:
        """Take the next element.

        Returns:
            The next element in this cursor's order

        Raises:
            IteratorExhaustedError: If no elements remain
        """
        if not self.has_next():
            raise IteratorExhaustedError(
                f"{self.__class__.__name__} has no more elements"
            )
        return self._advance()

    def __iter__(self) -> 'Cursor[T]':
        return self

    def __next__(self) -> T:
        if not self.has_next():
            raise StopIteration
        return self._advance()


class Aggregate(ABC, Generic[T]):
    """A collection that hands out cursors over its elements.

    Every call to create_iterator() returns a fresh, independently
    positioned cursor.
    """

    @abstractmethod
    def create_iterator(self) -> Cursor[T]:
        pass

    def __iter__(self) -> Cursor[T]:
        return self.create_iterator()


class SequenceCursor(Cursor[T]):
    """Cursor over a growable list, in insertion order."""

    def __init__(self, items: Sequence[T]):
        self._items = tuple(items)
        self._position = 0

    def has_next(self) -> bool:
        return self._position < len(self._items)

    def _advance(self) -> T:
        item = self._items[self._position]
        self._position += 1
        return item


class BoundedCursor(Cursor[T]):
    """Cursor over a fixed-capacity slot array.

    Only the first ``count`` slots are visited; unused slots are never
    exposed to the caller.
    """

    def __init__(self, slots: Sequence[Optional[T]], count: int):
        self._slots = tuple(slots[:count])
        self._count = count
        self._position = 0

    def has_next(self) -> bool:
        return self._position < self._count

    def _advance(self) -> T:
        item = self._slots[self._position]
        self._position += 1
        return item


class OrderedKeyCursor(Cursor[T]):
    """Cursor over a keyed map in a deterministic order.

    The key order is computed once, at creation, so later changes to the
    map do not disturb an in-flight traversal.
    """

    def __init__(self,
                 mapping: Mapping[Any, T],
                 order_key: Optional[Callable[[Any, T], Any]] = None,
                 reverse: bool = False):
        """Snapshot the map and fix the visiting order.

        Args:
            mapping: Key to element map
            order_key: Ranking function taking (key, element); defaults to the
                key itself, so keys must then be mutually comparable
            reverse: Sort descending instead of ascending

        Raises:
            TypeError: If no order_key is given and the keys cannot be compared
        """
        if order_key is None:
            ordered = sorted(mapping.items(), key=lambda pair: pair[0], reverse=reverse)
        else:
            ordered = sorted(
                mapping.items(),
                key=lambda pair: order_key(pair[0], pair[1]),
                reverse=reverse,
            )
        self._keys: List[Any] = [key for key, _ in ordered]
        self._items: List[T] = [item for _, item in ordered]
        self._position = 0

    @property
    def keys(self) -> List[Any]:
        """Keys in visiting order."""
        return list(self._keys)

    def has_next(self) -> bool:
        return self._position < len(self._items)

    def _advance(self) -> T:
        item = self._items[self._position]
        self._position += 1
        return item
