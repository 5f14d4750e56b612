"""Console narration of the Iterator and Composite patterns.

Usage:
    python -m catalogtree                      # Run every section
    python -m catalogtree --section iterator   # Only the Iterator pattern
    python -m catalogtree --section casino -v  # Casino section with INFO logs
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from .api import collect_names, filter_nodes, print_catalog
from .config import CatalogConfig, DemoConfig, DemoSection, DisplayConfig, configure_logging
from .domain.casino import GameManager, format_game
from .domain.menu import Waitress, format_menu_item
from .samples import (
    build_casino,
    build_diner_menu,
    build_game_catalog,
    build_menu_hierarchy,
    build_pancake_house_menu,
    build_slots_catalog,
    build_table_games_catalog,
)

logger = logging.getLogger(__name__)


def _banner(title: str, out: TextIO) -> None:
    print("", file=out)
    print("=" * 60, file=out)
    print(title, file=out)
    print("=" * 60, file=out)


def run_iterator_section(config: DemoConfig, out: TextIO) -> None:
    _banner("PART 1: ITERATOR PATTERN", out)
    print("One cursor contract, whatever the storage behind it.", file=out)

    display = config.display
    pancake_house = build_pancake_house_menu()
    diner = build_diner_menu(config.catalogs)
    logger.info("Built %d pancake house and %d diner items", len(pancake_house), len(diner))

    print("\nPANCAKE HOUSE MENU (growable list):", file=out)
    print_catalog(pancake_house.create_iterator(), out,
                  lambda item: format_menu_item(item, display), display.indent)

    print("\nDINER MENU (fixed array):", file=out)
    print_catalog(diner.create_iterator(), out,
                  lambda item: format_menu_item(item, display), display.indent)


def run_composite_section(config: DemoConfig, out: TextIO) -> None:
    _banner("PART 2: COMPOSITE PATTERN", out)
    print("Menus hold dishes and other menus; the dessert menu nests under the diner menu.",
          file=out)

    waitress = Waitress(build_menu_hierarchy())
    print("\nCOMPLETE MENU STRUCTURE:", file=out)
    waitress.print_menu(out, config.display)

    print("", file=out)
    waitress.print_vegetarian_menu(out, config.display)


def run_casino_section(config: DemoConfig, out: TextIO) -> None:
    _banner("PART 3: CASINO CATALOGS", out)
    display = config.display
    threshold = config.catalogs.high_rtp_threshold

    print("\nSLOTS CATALOG (growable list):", file=out)
    print_catalog(build_slots_catalog().create_iterator(), out,
                  lambda game: format_game(game, display), display.indent)

    print("\nTABLE GAMES CATALOG (fixed array):", file=out)
    print_catalog(build_table_games_catalog(config.catalogs).create_iterator(), out,
                  lambda game: format_game(game, display), display.indent)

    print("\nGAME CATALOG (keyed map, ranked by RTP):", file=out)
    print_catalog(build_game_catalog().create_iterator(), out,
                  lambda game: format_game(game, display), display.indent)

    casino = build_casino()
    manager = GameManager(casino)
    print("\nCASINO HIERARCHY:", file=out)
    manager.show_all_games(out, display)

    print("", file=out)
    manager.show_high_rtp_games(threshold, out, display)
    print("", file=out)
    manager.show_games_by_category("Promotional", out, display)

    high = filter_nodes(casino, lambda node: node.rtp > threshold)
    logger.info("%d of %d nodes passed the RTP filter",
                len(high), len(collect_names(casino)))


SECTIONS = [
    (DemoSection.ITERATOR, run_iterator_section),
    (DemoSection.COMPOSITE, run_composite_section),
    (DemoSection.CASINO, run_casino_section),
]


def run_demo(config: DemoConfig, out: Optional[TextIO] = None) -> None:
    """Run every section the configuration asks for."""
    config.ensure_valid()
    out = out or sys.stdout
    for section, runner in SECTIONS:
        if config.wants(section):
            logger.debug("Running section %s", section.value)
            runner(config, out)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="catalogtree",
        description="Iterator and Composite patterns over menu and casino catalogs",
    )
    parser.add_argument("--section", action="append",
                        choices=[section.value for section in DemoSection],
                        help="Section to run (repeatable, default: all)")
    parser.add_argument("--no-descriptions", action="store_true",
                        help="Omit item descriptions")
    parser.add_argument("--threshold", type=float, default=CatalogConfig.high_rtp_threshold,
                        help="RTP threshold for the high RTP listing")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Increase log verbosity (-v INFO, -vv DEBUG)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)
    sections = {DemoSection(value) for value in (args.section or ["all"])}
    config = DemoConfig(
        sections=sections,
        display=DisplayConfig(show_descriptions=not args.no_descriptions),
        catalogs=CatalogConfig(high_rtp_threshold=args.threshold),
        verbosity=args.verbose,
    )

    errors = config.validate()
    if errors:
        parser.error("; ".join(errors))

    run_demo(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
