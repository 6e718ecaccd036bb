from __future__ import annotations

"""
Catalog Persistence.

Serializes the catalog document to disk. The payload goes to a temporary
sibling file first and is moved into place only once fully written, so a
failed run never leaves a truncated catalog behind.
"""

import json
import logging
import os
import tempfile
from typing import Any, Dict

from catalog4ai.domain.constants import JSON_INDENT
from catalog4ai.infra.fs import ensure_parent_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# FILE OUTPUT MANAGEMENT
# -----------------------------------------------------------------------------

def render_catalog_json(catalog: Dict[str, Any]) -> str:
    """Return the catalog as pretty-printed JSON text."""
    return json.dumps(catalog, ensure_ascii=False, indent=JSON_INDENT)


def write_catalog_json(catalog: Dict[str, Any], output_path: str) -> str:
    """
    Persist the catalog as UTF-8 JSON with 2-space indentation.

    Args:
        catalog: Catalog document.
        output_path: Target file path.

    Returns:
        str: Absolute path of the written file.

    Raises:
        OSError: If the directory or file cannot be written.
        UnicodeEncodeError: If a catalog string cannot be encoded as UTF-8.
    """
    target = os.path.abspath(output_path)
    ensure_parent_dir(target)
    payload = render_catalog_json(catalog)

    fd, tmp_path = tempfile.mkstemp(
        prefix=".catalog-", suffix=".tmp", dir=os.path.dirname(target)
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(payload)
        # mkstemp creates 0600; give the catalog the usual umask-derived mode
        os.chmod(tmp_path, 0o666 & ~_current_umask())
        os.replace(tmp_path, target)
    except BaseException:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise

    logger.debug(f"Catalog serialized ({len(payload)} chars) to {target}")
    return target

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask
