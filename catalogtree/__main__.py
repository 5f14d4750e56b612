"""Allow ``python -m catalogtree``."""

import sys

from .cli import main

sys.exit(main())
