from __future__ import annotations

"""
Configuration Domain Management.

Defines the runtime configuration of a catalog run and loads optional
JSON configuration files. Unknown keys are ignored and unreadable files
fall back to defaults.
"""

import json
import logging
import os
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from catalog4ai.domain.constants import (
    DEFAULT_COMPONENTS_DIR,
    DEFAULT_EXTENSION,
    DEFAULT_OUTPUT_FILE,
)

logger = logging.getLogger(__name__)

CONFIG_KEYS = ("input_path", "output_path", "extension")


# -----------------------------------------------------------------------------
# Configuration Model
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class CatalogConfig:
    """
    Immutable parameters of a single catalog run.

    Attributes:
        input_path: Root directory holding the component files.
        output_path: Destination of the JSON catalog.
        extension: Recognized file suffix (case-sensitive).
    """
    input_path: str = DEFAULT_COMPONENTS_DIR
    output_path: str = DEFAULT_OUTPUT_FILE
    extension: str = DEFAULT_EXTENSION

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CatalogConfig":
        """Build a config from a dict, ignoring keys outside the schema."""
        values = {k: str(data[k]) for k in CONFIG_KEYS if data.get(k) not in (None, "")}
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return CatalogConfig().to_dict()


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration overrides from a JSON file on top of the defaults.

    Args:
        path: Optional JSON file. When missing or empty, defaults are returned.

    Returns:
        Dict[str, Any]: Merged configuration.
    """
    config = get_default_config()
    if not path:
        return config

    if not os.path.exists(path):
        logger.warning(f"Config file not found: {path}. Using defaults.")
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to load config '{path}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Corrupted config file '{path}'. Using defaults.")
        return config

    unknown = sorted(set(data) - set(CONFIG_KEYS))
    if unknown:
        logger.warning(f"Ignoring unknown config keys: {', '.join(unknown)}")

    for key in CONFIG_KEYS:
        if data.get(key) not in (None, ""):
            config[key] = str(data[key])

    logger.debug(f"Configuration loaded from {path}")
    return config
