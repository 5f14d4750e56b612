"""Casino game catalogs and the casino game hierarchy.

Iterator side:
    SlotsCatalog (list), TableGamesCatalog (fixed array) and GameCatalog
    (keyed map ranked by RTP) all hand out the same cursor contract.

Composite side:
    GameCategory containers hold GameLeaf games and other categories; the
    GameManager is the client that queries the whole hierarchy.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, TextIO, Tuple

from ..config import DisplayConfig
from ..core.catalog import BoundedCatalog, KeyedCatalog, ListCatalog
from ..core.node import Container, Leaf, TreeComponent
from ..errors import CapabilityUnsupportedError

logger = logging.getLogger(__name__)

DEFAULT_HIGH_RTP = 97.0


@dataclass(frozen=True)
class CasinoGame:
    """One casino game.

    rtp is the Return to Player percentage; min_bet the smallest stake.
    """
    name: str
    description: str
    category: str
    rtp: float
    min_bet: float
    provider: str = ""


def format_game(game: CasinoGame, config: Optional[DisplayConfig] = None) -> str:
    """Render a game on one line, e.g. ``Blackjack - RTP: 99.28% | Min Bet: $1.00``."""
    config = config or DisplayConfig()
    text = f"{game.name} - RTP: {game.rtp:.2f}% | Min Bet: {config.currency}{game.min_bet:.2f}"
    if game.provider:
        text += f" | {game.provider}"
    if config.show_descriptions and game.description:
        text += f" -- {game.description}"
    return text


def rank_by_rtp(key: str, game: CasinoGame) -> Tuple[float, str]:
    """Sort key: highest RTP first, ties broken by name."""
    return (-game.rtp, game.name)


class SlotsCatalog(ListCatalog[CasinoGame]):
    """Slot games stored in a growable list."""

    def __init__(self):
        super().__init__("Slots Catalog")

    def add_game(self, game: CasinoGame) -> None:
        self.add(game)


class TableGamesCatalog(BoundedCatalog[CasinoGame]):
    """Table games stored in a fixed-size array."""

    def __init__(self, capacity: int = 10):
        super().__init__(capacity, "Table Games Catalog")

    def add_game(self, game: CasinoGame) -> None:
        self.add(game)


class GameCatalog(KeyedCatalog[CasinoGame]):
    """Games keyed by id, iterated by descending RTP then name."""

    def __init__(self):
        super().__init__(order_key=rank_by_rtp, name="Game Catalog")

    def add_game(self, game_id: str, game: CasinoGame) -> None:
        self.add(game_id, game)


class GameLeaf(Leaf):
    """A casino game placed in a category hierarchy."""

    def __init__(self, name: str, description: str, category: str,
                 rtp: float, min_bet: float, provider: str = ""):
        super().__init__(CasinoGame(name, description, category, rtp, min_bet, provider))

    @classmethod
    def from_game(cls, game: CasinoGame) -> 'GameLeaf':
        return cls(game.name, game.description, game.category,
                   game.rtp, game.min_bet, game.provider)

    @property
    def category(self) -> str:
        return self.item.category

    @property
    def rtp(self) -> float:
        return self.item.rtp

    @property
    def min_bet(self) -> float:
        return self.item.min_bet

    @property
    def provider(self) -> str:
        return self.item.provider

    def is_promotional(self) -> bool:
        return self.category.lower() == "promotional"

    def describe(self, config: Optional[DisplayConfig] = None) -> str:
        text = format_game(self.item, config)
        if self.is_promotional():
            text = "[promo] " + text
        return text


class GameCategory(Container):
    """A category that holds games and sub-categories."""

    def describe(self, config: Optional[DisplayConfig] = None) -> str:
        if self.description:
            return f"{self.name} - {self.description}"
        return self.name


class GameManager:
    """Client of the casino hierarchy.

    Every query walks the tree with a depth-first cursor and skips category
    nodes, which do not carry game attributes.
    """

    def __init__(self, all_games: TreeComponent):
        self.all_games = all_games

    def show_all_games(self, stream: Optional[TextIO] = None,
                       config: Optional[DisplayConfig] = None) -> None:
        self.all_games.display(stream, config)

    def _games_where(self, attribute: str, test) -> List[CasinoGame]:
        found = []
        traversal = self.all_games.create_traversal()
        while traversal.has_next():
            component = traversal.next()
            try:
                value = getattr(component, attribute)
            except CapabilityUnsupportedError:
                logger.debug("Skipping %s: no %s", component.kind(), attribute)
                continue
            if test(value):
                found.append(component.item)
        return found

    def high_rtp_games(self, threshold: float = DEFAULT_HIGH_RTP) -> List[CasinoGame]:
        """Games whose RTP is strictly above threshold."""
        return self._games_where("rtp", lambda rtp: rtp > threshold)

    def games_by_category(self, category: str) -> List[CasinoGame]:
        wanted = category.lower()
        return self._games_where("category", lambda value: value.lower() == wanted)

    def games_by_provider(self, provider: str) -> List[CasinoGame]:
        wanted = provider.lower()
        return self._games_where("provider", lambda value: value.lower() == wanted)

    def find_games_by_rtp(self, min_rtp: float) -> List[CasinoGame]:
        """Games with RTP of at least min_rtp, via recursive search."""
        return self.all_games.find(lambda game: game.rtp >= min_rtp)

    def show_high_rtp_games(self, threshold: float = DEFAULT_HIGH_RTP,
                            stream: Optional[TextIO] = None,
                            config: Optional[DisplayConfig] = None) -> None:
        self._print_games(f"HIGH RTP GAMES (>{threshold:g}%)",
                          self.high_rtp_games(threshold), stream, config)

    def show_games_by_category(self, category: str,
                               stream: Optional[TextIO] = None,
                               config: Optional[DisplayConfig] = None) -> None:
        self._print_games(f"GAMES BY CATEGORY: {category.upper()}",
                          self.games_by_category(category), stream, config)

    def _print_games(self, title: str, games: List[CasinoGame],
                     stream: Optional[TextIO], config: Optional[DisplayConfig]) -> None:
        config = config or DisplayConfig()
        print(title, file=stream)
        print("=" * len(title), file=stream)
        for game in games:
            print(config.indent + format_game(game, config), file=stream)
