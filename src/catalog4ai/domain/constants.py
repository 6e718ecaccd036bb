from __future__ import annotations

"""
Domain Constants.

Centralizes the default scan location, output artifact name, recognized
component extension and the reserved keys used in the serialized catalog.
"""

from typing import FrozenSet

DEFAULT_COMPONENTS_DIR = "output/components"
DEFAULT_OUTPUT_FILE = "components-catalog.json"
DEFAULT_EXTENSION = ".html"

# -----------------------------------------------------------------------------
# RESERVED CATALOG KEYS
# -----------------------------------------------------------------------------
META_KEY = "_meta"
FLAT_KEY = "_flat"
COMPONENTS_KEY = "_components"

RESERVED_KEYS: FrozenSet[str] = frozenset({META_KEY, FLAT_KEY, COMPONENTS_KEY})

JSON_INDENT = 2
