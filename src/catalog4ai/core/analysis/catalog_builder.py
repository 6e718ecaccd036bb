from __future__ import annotations

"""
Catalog Builder.

Folds a flat list of component paths into the hierarchical catalog
document. Runs in two passes: assembly of a mutable tree keyed by folder
segment, then a pure shaping pass that sorts component names and collapses
categories holding nothing but components into plain lists.
"""

import logging
from collections import Counter
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional, Sequence

from catalog4ai.domain.catalog_models import AssemblyNode, Branch, CatalogNode, Leaf
from catalog4ai.domain.constants import (
    COMPONENTS_KEY,
    FLAT_KEY,
    META_KEY,
    RESERVED_KEYS,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_catalog(
        rel_paths: Sequence[str],
        *,
        source: str,
        extension: str,
        generated: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Build the complete catalog document from relative component paths.

    Args:
        rel_paths: '/'-separated paths relative to the scan root, in discovery order.
        source: Scan root reported in the metadata block.
        extension: Recognized suffix, stripped from component names.
        generated: Timestamp override. Defaults to the current UTC time.

    Returns:
        Dict[str, Any]: JSON-ready catalog with '_meta', the category tree and '_flat'.
    """
    meta: Dict[str, Any] = {
        "generated": generated or _utc_timestamp(),
        "totalComponents": len(rel_paths),
        "source": source,
        "categories": summarize_categories(rel_paths),
    }

    root = cleanup_tree(assemble_tree(rel_paths, extension))

    # _meta keeps the first slot; folders named like a reserved block lose to it
    catalog: Dict[str, Any] = {META_KEY: None}
    catalog.update(node_to_dict(root))
    catalog[META_KEY] = meta
    catalog.pop(FLAT_KEY, None)
    catalog[FLAT_KEY] = build_flat_list(rel_paths, extension)
    return catalog


def assemble_tree(rel_paths: Iterable[str], extension: str) -> AssemblyNode:
    """
    First pass: nest component names under their folder segments.

    Intermediate nodes are created on demand and shared between siblings.
    Names keep the order in which paths were discovered.
    """
    root = AssemblyNode()
    for rel_path in rel_paths:
        *folders, file_name = rel_path.split("/")
        node = root
        for segment in folders:
            node = node.child(segment)
        node.names.append(strip_extension(file_name, extension))
    return root


def cleanup_tree(node: AssemblyNode) -> CatalogNode:
    """
    Second pass: produce the shaped catalog node for an assembled node.

    Never mutates its input. Each call returns new containers, so sibling
    subtrees share no state.
    """
    names = tuple(sorted(node.names)) if node.names else None

    if not node.children:
        return Leaf(names=names or ())

    children = {key: cleanup_tree(child) for key, child in node.children.items()}
    return Branch(children=children, components=names)


def node_to_dict(node: CatalogNode) -> Dict[str, Any]:
    """
    Serialize the root node into the mapping stored at the top of the catalog.

    A root that only holds components (files directly under the scan root)
    is emitted under the reserved components key.
    """
    if isinstance(node, Leaf):
        return {COMPONENTS_KEY: list(node.names)} if node.names else {}
    return _branch_to_dict(node)


def build_flat_list(rel_paths: Iterable[str], extension: str) -> List[str]:
    """Return every component path with its extension removed, sorted."""
    return sorted(strip_extension(p, extension) for p in rel_paths)


def summarize_categories(rel_paths: Iterable[str]) -> Dict[str, int]:
    """
    Count components per top-level category, in discovery order.

    Files placed directly under the scan root are counted under the
    reserved components key, where the tree also lists them.
    """
    counts: Counter[str] = Counter()
    for rel_path in rel_paths:
        head, sep, _ = rel_path.partition("/")
        counts[head if sep else COMPONENTS_KEY] += 1
    return dict(counts)


def find_reserved_collisions(rel_paths: Iterable[str]) -> List[str]:
    """Return folder segments that clash with reserved catalog keys."""
    clashes = set()
    for rel_path in rel_paths:
        clashes.update(s for s in rel_path.split("/")[:-1] if s in RESERVED_KEYS)
    return sorted(clashes)


def strip_extension(name: str, extension: str) -> str:
    """Remove a trailing extension, leaving other occurrences untouched."""
    if extension and name.endswith(extension):
        return name[: -len(extension)]
    return name

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _branch_to_dict(branch: Branch) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for key, child in branch.children.items():
        if isinstance(child, Leaf):
            out[key] = list(child.names)
        else:
            out[key] = _branch_to_dict(child)
    if branch.components is not None:
        out[COMPONENTS_KEY] = list(branch.components)
    return out


def _utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a 'Z' suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
