"""Configuration system for CatalogTree.

This module defines how callers tune rendering, catalog sizing and the
console demo. Configuration objects are plain dataclasses; ``validate()``
returns a list of problems and ``ensure_valid()`` raises on the first batch.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Set

from .errors import ConfigurationError


class DemoSection(Enum):
    """Which part of the console narration to run."""
    ITERATOR = "iterator"      # List and array menus through one cursor contract
    COMPOSITE = "composite"    # Nested menu hierarchy
    CASINO = "casino"          # Casino hierarchy and RTP-ranked catalog
    ALL = "all"


@dataclass
class DisplayConfig:
    """Configuration for one-line-per-node rendering."""

    indent: str = "  "                # Prefix repeated once per depth level
    show_descriptions: bool = True    # Append " -- description" to leaf lines
    currency: str = "$"

    def prefix(self, depth: int) -> str:
        return self.indent * depth

    def validate(self) -> List[str]:
        errors = []
        if self.indent.strip():
            errors.append("indent must contain only whitespace")
        if not self.currency:
            errors.append("currency symbol cannot be empty")
        return errors


@dataclass
class CatalogConfig:
    """Sizing and thresholds for the sample catalogs."""

    diner_capacity: int = 6
    table_capacity: int = 10
    high_rtp_threshold: float = 97.0

    def validate(self) -> List[str]:
        errors = []
        if self.diner_capacity <= 0:
            errors.append("diner_capacity must be positive")
        if self.table_capacity <= 0:
            errors.append("table_capacity must be positive")
        if not 0.0 <= self.high_rtp_threshold <= 100.0:
            errors.append("high_rtp_threshold must be between 0 and 100")
        return errors


@dataclass
class DemoConfig:
    """Complete configuration for the console demo."""

    sections: Set[DemoSection] = field(default_factory=lambda: {DemoSection.ALL})
    display: DisplayConfig = field(default_factory=DisplayConfig)
    catalogs: CatalogConfig = field(default_factory=CatalogConfig)
    verbosity: int = 0

    def wants(self, section: DemoSection) -> bool:
        """Check if a section should run."""
        return DemoSection.ALL in self.sections or section in self.sections

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        if not self.sections:
            errors.append("at least one demo section is required")
        if self.verbosity < 0:
            errors.append("verbosity cannot be negative")
        errors.extend(self.display.validate())
        errors.extend(self.catalogs.validate())
        return errors

    def ensure_valid(self) -> 'DemoConfig':
        errors = self.validate()
        if errors:
            raise ConfigurationError(f"Invalid configuration: {'; '.join(errors)}")
        return self


_LEVELS = {0: logging.WARNING, 1: logging.INFO}


def configure_logging(verbosity: int = 0, fmt: Optional[str] = None) -> logging.Logger:
    """Configure the root logger for command-line use.

    Library modules only create loggers; handlers are attached here so that
    embedding applications keep control of their own logging setup.

    Args:
        verbosity: 0 = WARNING, 1 = INFO, 2+ = DEBUG
        fmt: Optional log format string

    Returns:
        The package logger
    """
    level = _LEVELS.get(verbosity, logging.DEBUG)
    logging.basicConfig(
        level=level,
        format=fmt or "%(levelname)s %(name)s: %(message)s",
        force=True,
    )
    logger = logging.getLogger("catalogtree")
    logger.setLevel(level)
    return logger
