from __future__ import annotations

"""
Component Discovery Service.

Walks the component directory and collects every file carrying the
recognized extension. Filesystem failures are not trapped here: a single
unreadable entry aborts the scan so that no partial catalog can be built.
"""

import logging
import os
import stat
from typing import Iterable, List

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API (DISCOVERY SERVICES)
# ==============================================================================

def scan_component_files(root: str, extension: str) -> List[str]:
    """
    Recursively collect component files under a root directory.

    Entries are visited in the order the platform lists them and each
    directory is fully descended before the next sibling is inspected.
    No sorting is applied.

    Args:
        root: Directory to scan.
        extension: Exact, case-sensitive filename suffix to keep.

    Returns:
        List[str]: Paths of matching files, joined onto ``root``.

    Raises:
        OSError: If the root is missing or any entry cannot be listed or stat'ed.
    """
    return _walk(root, extension, [])


def relative_component_paths(files: Iterable[str], root: str) -> List[str]:
    """
    Express scanned paths relative to the scan root using '/' separators.

    Name bytes that are not valid UTF-8 become U+FFFD, so every path can be
    written to the JSON catalog.

    Args:
        files: Paths returned by :func:`scan_component_files`.
        root: The root that was scanned.

    Returns:
        List[str]: Relative paths in scan order.
    """
    return [_to_text(os.path.relpath(f, root)).replace(os.sep, "/") for f in files]


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _walk(directory: str, extension: str, found: List[str]) -> List[str]:
    for name in os.listdir(directory):
        path = os.path.join(directory, name)
        # os.stat raises on dangling links and unreadable entries
        if stat.S_ISDIR(os.stat(path).st_mode):
            _walk(path, extension, found)
        elif name.endswith(extension):
            found.append(path)

    logger.debug(f"Scanned {directory}: {len(found)} component(s) so far")
    return found


def _to_text(path: str) -> str:
    # listdir hands back undecodable bytes as lone surrogates
    return os.fsencode(path).decode("utf-8", errors="replace")
