from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result structure exchanged between the catalog engine and the
interface layer.
"""

from dataclasses import dataclass, field
from typing import Any, Dict

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class CatalogResult:
    """
    Outcome of a complete catalog run.

    Attributes:
        source: Scan root as configured.
        output_path: Destination of the JSON catalog.
        total_components: Number of components found.
        categories: Component count per top-level category, in discovery order.
        written: Whether the catalog was persisted (False on dry runs).
        catalog: The generated catalog document.
    """
    source: str
    output_path: str
    total_components: int
    categories: Dict[str, int] = field(default_factory=dict)
    written: bool = False
    catalog: Dict[str, Any] = field(default_factory=dict)

    def summary(self, include_catalog: bool = False) -> Dict[str, Any]:
        """Return a JSON-serializable view of the result."""
        out: Dict[str, Any] = {
            "source": self.source,
            "output_path": self.output_path,
            "total_components": self.total_components,
            "categories": dict(self.categories),
            "written": self.written,
        }
        if include_catalog:
            out["catalog"] = self.catalog
        return out
