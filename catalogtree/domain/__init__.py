"""Themed catalogs built on the core: restaurant menus and casino games."""

from .menu import (
    DinerMenu,
    Menu,
    MenuItem,
    MenuLeaf,
    PancakeHouseMenu,
    Waitress,
    format_menu_item,
)
from .casino import (
    CasinoGame,
    GameCatalog,
    GameCategory,
    GameLeaf,
    GameManager,
    SlotsCatalog,
    TableGamesCatalog,
    format_game,
    rank_by_rtp,
)

__all__ = [
    # Menus
    'MenuItem',
    'PancakeHouseMenu',
    'DinerMenu',
    'MenuLeaf',
    'Menu',
    'Waitress',
    'format_menu_item',
    # Casino
    'CasinoGame',
    'SlotsCatalog',
    'TableGamesCatalog',
    'GameCatalog',
    'GameLeaf',
    'GameCategory',
    'GameManager',
    'format_game',
    'rank_by_rtp',
]
