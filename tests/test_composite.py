"""Tests for composite tree nodes: structure, capabilities and rendering."""

import copy
import io

import pytest

from catalogtree import (
    CapabilityUnsupportedError,
    Container,
    DisplayConfig,
    IndexOutOfRangeError,
    Leaf,
)
from catalogtree.domain import GameCategory, GameLeaf, Menu, MenuItem, MenuLeaf


def _game(name, rtp=96.0, category="Slots"):
    return GameLeaf(name, f"{name} game", category, rtp, 0.10)


class TestContainerStructure:
    """Add, remove and indexed access on containers."""

    def test_add_and_get_child(self):
        category = GameCategory("SLOTS", "Slot machines")
        first = _game("Book of Dead")
        second = _game("Starburst")
        category.add(first)
        category.add(second)

        assert category.get_child(0) is first
        assert category.get_child(1) is second
        assert category.child_count == 2
        assert category.children == (first, second)

    def test_remove_shifts_children(self):
        category = GameCategory("SLOTS", "Slot machines")
        first = _game("Book of Dead")
        second = _game("Starburst")
        category.add(first).add(second)

        assert category.remove(first) is True
        assert category.get_child(0) is second
        with pytest.raises(IndexOutOfRangeError):
            category.get_child(1)

    def test_remove_missing_child_returns_false(self):
        category = GameCategory("SLOTS")
        assert category.remove(_game("Ghost")) is False

    def test_remove_matches_identity_and_first_occurrence(self):
        menu = Menu("M")
        dish = MenuLeaf("Pie", "", True, 1.0)
        twin = MenuLeaf("Pie", "", True, 1.0)
        menu.add(dish).add(twin).add(dish)

        menu.remove(dish)
        assert menu.children == (twin, dish)

    @pytest.mark.parametrize("index", [0, -1, 5])
    def test_get_child_invalid_index(self, index):
        category = GameCategory("EMPTY", "No games")
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            category.get_child(index)
        assert exc_info.value.index == index
        assert isinstance(exc_info.value, IndexError)

    def test_index_error_is_not_capability_error(self):
        category = GameCategory("EMPTY")
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            category.get_child(0)
        assert not isinstance(exc_info.value, CapabilityUnsupportedError)

    def test_children_snapshot_is_detached(self):
        menu = Menu("M")
        menu.add(MenuLeaf("A", "", True, 1.0))
        snapshot = menu.children
        menu.add(MenuLeaf("B", "", True, 1.0))
        assert len(snapshot) == 1
        assert menu.child_count == 2

    def test_duplicates_by_reference_allowed(self):
        menu = Menu("M")
        dish = MenuLeaf("Pie", "", True, 1.0)
        menu.add(dish).add(dish)
        assert menu.child_count == 2


class TestLeafCapabilities:
    """Leaves refuse structural operations."""

    @pytest.mark.parametrize("operation", ["add", "remove"])
    def test_structural_operations_fail(self, operation):
        leaf = _game("Blackjack", 99.28, "Table")
        with pytest.raises(CapabilityUnsupportedError) as exc_info:
            getattr(leaf, operation)(_game("Roulette", 97.30, "Table"))
        assert exc_info.value.capability == operation

    def test_get_child_fails(self):
        leaf = MenuLeaf("Waffles", "", True, 3.59)
        with pytest.raises(CapabilityUnsupportedError):
            leaf.get_child(0)

    def test_leaf_attributes(self):
        leaf = GameLeaf("Blackjack", "21", "Table", 99.28, 1.0, "RTG")
        assert leaf.name == "Blackjack"
        assert leaf.description == "21"
        assert leaf.rtp == 99.28
        assert leaf.min_bet == 1.0
        assert leaf.category == "Table"
        assert leaf.provider == "RTG"
        assert leaf.is_leaf()

    def test_leaf_wraps_item(self):
        item = MenuItem("Waffles", "Fresh", True, 3.59)
        leaf = MenuLeaf.from_item(item)
        assert leaf.item == item
        assert leaf.vegetarian is True
        assert leaf.price == 3.59


class TestPlainLeafAttributes:
    """A core Leaf exposes its item's attributes directly."""

    def test_reads_through_to_item(self):
        leaf = Leaf(MenuItem("Waffles", "Fresh", True, 3.59))
        assert leaf.vegetarian is True
        assert leaf.price == 3.59
        assert getattr(leaf, "rtp", None) is None

    def test_missing_attribute_is_capability_error(self):
        leaf = Leaf(MenuItem("Waffles", "Fresh", True, 3.59))
        with pytest.raises(CapabilityUnsupportedError) as exc_info:
            leaf.rtp
        assert exc_info.value.capability == "rtp"

    def test_private_lookup_is_plain_attribute_error(self):
        leaf = Leaf(MenuItem("Waffles", "Fresh", True, 3.59))
        with pytest.raises(AttributeError) as exc_info:
            leaf._no_such_thing
        assert not isinstance(exc_info.value, CapabilityUnsupportedError)


class TestContainerCapabilities:
    """Containers refuse leaf-only attributes."""

    @pytest.mark.parametrize("attribute", ["rtp", "min_bet", "category", "provider"])
    def test_game_attributes_unsupported(self, attribute):
        category = GameCategory("SLOTS", "Slot machines")
        with pytest.raises(CapabilityUnsupportedError) as exc_info:
            getattr(category, attribute)
        assert exc_info.value.capability == attribute

    @pytest.mark.parametrize("attribute", ["price", "vegetarian"])
    def test_menu_attributes_unsupported(self, attribute):
        with pytest.raises(CapabilityUnsupportedError):
            getattr(Menu("DINER MENU", "Lunch"), attribute)

    def test_getattr_default_acts_as_optional_probe(self):
        assert getattr(GameCategory("SLOTS"), "rtp", None) is None

    @pytest.mark.parametrize("attribute", ["rtp", "price", "vegetarian"])
    def test_plain_container_refuses_leaf_attributes(self, attribute):
        with pytest.raises(CapabilityUnsupportedError) as exc_info:
            getattr(Container("X"), attribute)
        assert exc_info.value.capability == attribute

    def test_private_lookup_is_plain_attribute_error(self):
        with pytest.raises(AttributeError) as exc_info:
            Container("X")._no_such_thing
        assert not isinstance(exc_info.value, CapabilityUnsupportedError)

    def test_plain_container_can_be_copied(self):
        root = Container("ROOT").add(_game("Starburst"))
        clone = copy.copy(root)
        assert clone.name == "ROOT"
        assert clone.child_count == 1

    def test_probe_and_require(self):
        category = GameCategory("SLOTS")
        leaf = _game("Starburst", 96.09)

        assert category.probe("rtp") is None
        assert category.probe("rtp", 0) == 0
        assert leaf.probe("rtp") == 96.09
        assert leaf.probe("price") is None

        assert leaf.require("rtp") == 96.09
        with pytest.raises(CapabilityUnsupportedError):
            category.require("rtp")
        with pytest.raises(CapabilityUnsupportedError):
            leaf.require("price")

    def test_name_and_description_defined_for_containers(self):
        container = Container("ROOT", "Everything")
        assert container.name == "ROOT"
        assert container.description == "Everything"
        assert not container.is_leaf()


class TestRendering:
    """display() prints one line per node, parents before children."""

    def _menu(self):
        root = Menu("ALL MENUS", "All menus combined")
        dessert = Menu("DESSERT MENU", "Dessert of course!")
        dessert.add(MenuLeaf("Apple Pie", "With ice cream", True, 1.59))
        root.add(MenuLeaf("Hotdog", "With relish", False, 3.05))
        root.add(dessert)
        return root

    def test_one_line_per_node(self):
        out = io.StringIO()
        self._menu().display(out)
        lines = out.getvalue().splitlines()
        assert lines == [
            "ALL MENUS, All menus combined",
            "  Hotdog, $3.05 -- With relish",
            "  DESSERT MENU, Dessert of course!",
            "    Apple Pie(v), $1.59 -- With ice cream",
        ]

    def test_display_config(self):
        config = DisplayConfig(indent="\t", show_descriptions=False, currency="EUR ")
        lines = list(self._menu().lines(config))
        assert lines[1] == "\tHotdog, EUR 3.05"
        assert lines[3] == "\t\tApple Pie(v), EUR 1.59"

    def test_game_rendering(self):
        category = GameCategory("TABLE GAMES", "Card and table games")
        category.add(GameLeaf("Blackjack", "21", "Table", 99.28, 1.0))
        category.add(GameLeaf("Alien Wins", "Free spins", "Promotional", 96.5, 0.01))

        lines = list(category.lines(DisplayConfig(show_descriptions=False)))
        assert lines == [
            "TABLE GAMES - Card and table games",
            "  Blackjack - RTP: 99.28% | Min Bet: $1.00",
            "  [promo] Alien Wins - RTP: 96.50% | Min Bet: $0.01",
        ]

    def test_leaf_display(self, capsys):
        Leaf(MenuItem("Plain", "Generic leaf", False, 1.0)).display()
        assert capsys.readouterr().out == "Plain -- Generic leaf\n"


class TestRecursiveFind:
    """find() accumulates matching items across the whole tree."""

    def test_find_across_nested_categories(self):
        root = GameCategory("CASINO")
        slots = GameCategory("SLOTS")
        nested = GameCategory("PROMO")
        root.add(slots)
        slots.add(_game("Low", 90.0)).add(nested)
        nested.add(_game("High", 98.0))
        root.add(_game("Mid", 97.0))

        found = root.find(lambda game: game.rtp >= 97.0)
        assert [game.name for game in found] == ["High", "Mid"]

    def test_find_on_leaf(self):
        leaf = _game("Solo", 96.0)
        assert leaf.find(lambda game: True) == [leaf.item]
        assert leaf.find(lambda game: False) == []

    def test_find_on_empty_container(self):
        assert GameCategory("EMPTY").find(lambda game: True) == []
