from __future__ import annotations

"""
Catalog Structure Data Models.

Provides the recursive node types produced by the shaping pass of the
catalog builder. A node is either a pure leaf (a sorted list of component
names) or a branch holding nested categories and, optionally, the names of
components that live directly at that level.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Leaf:
    """
    Category that only contains components.

    Attributes:
        names: Component names sorted in ascending order.
    """
    names: Tuple[str, ...]


@dataclass(frozen=True)
class Branch:
    """
    Category that contains nested categories.

    Attributes:
        children: Nested nodes keyed by folder segment, in discovery order.
        components: Sorted names of components stored at this level, if any.
    """
    children: Dict[str, "CatalogNode"] = field(default_factory=dict)
    components: Optional[Tuple[str, ...]] = None


CatalogNode = Union[Leaf, Branch]


# -----------------------------------------------------------------------------
# ASSEMBLY STRUCTURE
# -----------------------------------------------------------------------------

@dataclass
class AssemblyNode:
    """
    Mutable node used while folding scanned paths into a tree.

    Only lives for the duration of the first builder pass.
    """
    children: Dict[str, "AssemblyNode"] = field(default_factory=dict)
    names: List[str] = field(default_factory=list)

    def child(self, segment: str) -> "AssemblyNode":
        """Return the nested node for a segment, creating it on first use."""
        node = self.children.get(segment)
        if node is None:
            node = AssemblyNode()
            self.children[segment] = node
        return node
