"""Shared pytest setup: make the package importable from a source checkout."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))
