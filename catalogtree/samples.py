"""Sample catalogs and trees.

Used by the console demo and handy in tests. Each builder returns a fresh
structure, so callers may mutate what they get.
"""

from typing import Optional

from .config import CatalogConfig
from .domain.casino import (
    CasinoGame,
    GameCatalog,
    GameCategory,
    GameLeaf,
    SlotsCatalog,
    TableGamesCatalog,
)
from .domain.menu import DinerMenu, Menu, MenuLeaf, PancakeHouseMenu

# (name, description, vegetarian, price)
PANCAKE_HOUSE_ITEMS = [
    ("K&B's Pancake Breakfast", "Pancakes with scrambled eggs and toast", True, 2.99),
    ("Regular Pancake Breakfast", "Pancakes with fried eggs, sausage", False, 2.99),
    ("Blueberry Pancakes", "Pancakes made with fresh blueberries", True, 3.49),
    ("Waffles", "Waffles with your choice of blueberries or strawberries", True, 3.59),
]

DINER_ITEMS = [
    ("Vegetarian BLT", "(Fakin') Bacon with lettuce & tomato on whole wheat", True, 2.99),
    ("BLT", "Bacon with lettuce & tomato on whole wheat", False, 2.99),
    ("Soup of the day", "Soup of the day, with a side of potato salad", False, 3.29),
    ("Hotdog", "A hot dog, with sauerkraut, relish, onions, topped with cheese", False, 3.05),
    ("Steamed Veggies and Brown Rice", "Steamed vegetables over brown rice", True, 3.99),
]

CAFE_ITEMS = [
    ("Veggie Burger and Air Fries", "Veggie burger on a whole wheat bun, lettuce, tomato, and fries", True, 3.99),
    ("Soup of the day", "A cup of the soup of the day, with a side salad", False, 3.69),
    ("Burrito", "A large burrito, with whole pinto beans, salsa, guacamole", True, 4.29),
]

DESSERT_ITEMS = [
    ("Apple Pie", "Apple pie with a flakey crust, topped with vanilla ice cream", True, 1.59),
    ("Cheesecake", "Creamy New York cheesecake, with a chocolate graham crust", True, 1.99),
    ("Sorbet", "A scoop of raspberry and a scoop of lime", True, 1.89),
]

SLOT_GAMES = [
    CasinoGame("Doragon's Gems", "Cascading wins and free games with gamble option", "Slots", 96.21, 10.00, "RTG"),
    CasinoGame("Whispers of Seasons", "Japanese-themed slot with expanding wilds", "Slots", 96.09, 0.10, "RTG"),
    CasinoGame("Plentiful Treasure", "Asian treasure slot", "Slots", 95.97, 0.20, "RTG"),
    CasinoGame("Spirit of the Inca", "Progressive slot with millionaire jackpot", "Slots", 88.12, 0.25, "RTG"),
]

TABLE_GAMES = [
    CasinoGame("Blackjack", "21 against the house", "Table", 99.28, 1.00, "RTG"),
    CasinoGame("European Roulette", "Roulette with single zero", "Table", 97.30, 0.50, "RTG"),
    CasinoGame("Baccarat", "High-class card game", "Table", 98.94, 5.00, "RTG"),
    CasinoGame("Texas Hold'em Poker", "The king of card games", "Table", 97.82, 2.00, "RTG"),
    CasinoGame("Craps", "Exciting dice game", "Table", 98.64, 1.00, "RTG"),
]

LIVE_GAMES = [
    CasinoGame("Live VIP Blackjack", "Blackjack with real dealer", "Live", 99.28, 5.00, "RTG"),
    CasinoGame("Live Roulette", "Live roulette with multiple cameras", "Live", 97.30, 1.00, "RTG"),
    CasinoGame("Live Baccarat", "Live baccarat with card squeezing", "Live", 98.94, 10.00, "RTG"),
]

PROMOTIONAL_GAMES = [
    CasinoGame("Alien Wins", "Slot with daily free spins", "Promotional", 96.50, 0.01, "RTG"),
    CasinoGame("Horseman Prize", "The haunted ride of free games", "Promotional", 97.00, 0.10, "RTG"),
    CasinoGame("Fu Long Plinko", "Bonus drops for free tokens", "Promotional", 97.80, 1.00, "RTG"),
]


def build_pancake_house_menu() -> PancakeHouseMenu:
    menu = PancakeHouseMenu()
    for entry in PANCAKE_HOUSE_ITEMS:
        menu.add_item(*entry)
    return menu


def build_diner_menu(config: Optional[CatalogConfig] = None) -> DinerMenu:
    config = config or CatalogConfig()
    menu = DinerMenu(config.diner_capacity)
    for entry in DINER_ITEMS[:config.diner_capacity]:
        menu.add_item(*entry)
    return menu


def build_menu_hierarchy() -> Menu:
    """ALL MENUS with pancake, diner and cafe menus; dessert nests under diner."""
    all_menus = Menu("ALL MENUS", "All menus combined")
    pancake_house = Menu("PANCAKE HOUSE MENU", "Breakfast")
    diner = Menu("DINER MENU", "Lunch")
    cafe = Menu("CAFE MENU", "Dinner")
    dessert = Menu("DESSERT MENU", "Dessert of course!")

    all_menus.add(pancake_house).add(diner).add(cafe)

    for entry in PANCAKE_HOUSE_ITEMS:
        pancake_house.add(MenuLeaf(*entry))
    for entry in DINER_ITEMS[:4]:
        diner.add(MenuLeaf(*entry))
    diner.add(dessert)
    for entry in CAFE_ITEMS:
        cafe.add(MenuLeaf(*entry))
    for entry in DESSERT_ITEMS:
        dessert.add(MenuLeaf(*entry))
    return all_menus


def build_slots_catalog() -> SlotsCatalog:
    catalog = SlotsCatalog()
    for game in SLOT_GAMES:
        catalog.add_game(game)
    return catalog


def build_table_games_catalog(config: Optional[CatalogConfig] = None) -> TableGamesCatalog:
    config = config or CatalogConfig()
    catalog = TableGamesCatalog(config.table_capacity)
    for game in TABLE_GAMES[:config.table_capacity]:
        catalog.add_game(game)
    return catalog


def build_game_catalog() -> GameCatalog:
    catalog = GameCatalog()
    for game in SLOT_GAMES + TABLE_GAMES:
        catalog.add_game(game.name.lower().replace(" ", "-"), game)
    return catalog


def build_casino(with_promotions: bool = True) -> GameCategory:
    """RTG CASINO with slots, table and live categories.

    With promotions enabled, a PROMOTIONAL GAMES category nests under slots.
    """
    casino = GameCategory("RTG CASINO", "Complete RTG gaming platform")
    slots = GameCategory("SLOT GAMES", "Real Series video slot games")
    tables = GameCategory("TABLE GAMES", "Card and table games")
    live = GameCategory("LIVE CASINO", "Games with real dealers")
    casino.add(slots).add(tables).add(live)

    for game in SLOT_GAMES:
        slots.add(GameLeaf.from_game(game))
    for game in TABLE_GAMES:
        tables.add(GameLeaf.from_game(game))
    for game in LIVE_GAMES:
        live.add(GameLeaf.from_game(game))

    if with_promotions:
        promotions = GameCategory("PROMOTIONAL GAMES", "Games with special bonuses")
        for game in PROMOTIONAL_GAMES:
            promotions.add(GameLeaf.from_game(game))
        slots.add(promotions)
    return casino
