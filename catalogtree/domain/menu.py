"""Restaurant menus: the Objectville Diner and Pancake House catalogs.

Iterator side:
    PancakeHouseMenu keeps a growable list, DinerMenu a fixed array. Both
    hand out cursors, so print_catalog() can walk either without knowing
    how it is stored.

Composite side:
    Menu containers hold MenuLeaf items and other menus; the Waitress is the
    client that prints the whole hierarchy or only its vegetarian items.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, TextIO

from ..config import DisplayConfig
from ..core.catalog import BoundedCatalog, ListCatalog
from ..core.node import Container, Leaf, TreeComponent
from ..errors import CapabilityUnsupportedError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MenuItem:
    """One dish on a menu."""
    name: str
    description: str
    vegetarian: bool
    price: float


def format_menu_item(item: MenuItem, config: Optional[DisplayConfig] = None) -> str:
    """Render a menu item on one line, e.g. ``Waffles(v), $3.59 -- ...``."""
    config = config or DisplayConfig()
    text = f"{item.name}{'(v)' if item.vegetarian else ''}, {config.currency}{item.price:.2f}"
    if config.show_descriptions and item.description:
        text += f" -- {item.description}"
    return text


class PancakeHouseMenu(ListCatalog[MenuItem]):
    """Breakfast menu stored in a growable list."""

    def __init__(self):
        super().__init__("Pancake House Menu")

    def add_item(self, name: str, description: str, vegetarian: bool, price: float) -> MenuItem:
        item = MenuItem(name, description, vegetarian, price)
        self.add(item)
        return item


class DinerMenu(BoundedCatalog[MenuItem]):
    """Lunch menu stored in a fixed-size array."""

    def __init__(self, capacity: int = 6):
        super().__init__(capacity, "Diner Menu")

    def add_item(self, name: str, description: str, vegetarian: bool, price: float) -> MenuItem:
        item = MenuItem(name, description, vegetarian, price)
        self.add(item)
        return item


class MenuLeaf(Leaf):
    """A menu item placed in a menu hierarchy."""

    def __init__(self, name: str, description: str, vegetarian: bool, price: float):
        super().__init__(MenuItem(name, description, vegetarian, price))

    @classmethod
    def from_item(cls, item: MenuItem) -> 'MenuLeaf':
        return cls(item.name, item.description, item.vegetarian, item.price)

    @property
    def vegetarian(self) -> bool:
        return self.item.vegetarian

    @property
    def price(self) -> float:
        return self.item.price

    def describe(self, config: Optional[DisplayConfig] = None) -> str:
        return format_menu_item(self.item, config)


class Menu(Container):
    """A menu that holds dishes and sub-menus."""


class Waitress:
    """Client of the menu hierarchy.

    Treats single dishes and whole menus the same way: printing the root
    prints everything, and the vegetarian listing walks the same tree with a
    depth-first cursor.
    """

    def __init__(self, all_menus: TreeComponent):
        self.all_menus = all_menus

    def print_menu(self, stream: Optional[TextIO] = None,
                   config: Optional[DisplayConfig] = None) -> None:
        self.all_menus.display(stream, config)

    def vegetarian_items(self) -> List[MenuItem]:
        """Vegetarian dishes across the whole hierarchy, in traversal order."""
        found = []
        traversal = self.all_menus.create_traversal()
        while traversal.has_next():
            component = traversal.next()
            try:
                if component.vegetarian:
                    found.append(component.item)
            except CapabilityUnsupportedError:
                # Menu headers carry no vegetarian flag
                logger.debug("Skipping %s", component.kind())
        return found

    def print_vegetarian_menu(self, stream: Optional[TextIO] = None,
                              config: Optional[DisplayConfig] = None) -> None:
        config = config or DisplayConfig()
        print("VEGETARIAN MENU", file=stream)
        print("----", file=stream)
        for item in self.vegetarian_items():
            print(config.indent + format_menu_item(item, config), file=stream)
