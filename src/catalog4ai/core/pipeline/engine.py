from __future__ import annotations

"""
Core orchestration pipeline.

Coordinates a single catalog run:
1. Scans the component root.
2. Builds the catalog document.
3. Persists it (skipped on dry runs).

Filesystem errors are not caught here; they reach the interface layer,
which reports them and exits without any output having been written.
"""

import logging
from typing import Any, Dict, Optional, Union

from catalog4ai.core.analysis.catalog_builder import (
    build_catalog,
    find_reserved_collisions,
    summarize_categories,
)
from catalog4ai.core.pipeline.components.writer import write_catalog_json
from catalog4ai.core.services.scanner import relative_component_paths, scan_component_files
from catalog4ai.domain.config import CatalogConfig
from catalog4ai.domain.pipeline_models import CatalogResult

logger = logging.getLogger(__name__)


def run_catalog(
        config: Optional[Union[CatalogConfig, Dict[str, Any]]] = None,
        *,
        dry_run: bool = False,
        generated: Optional[str] = None,
) -> CatalogResult:
    """
    Execute the scan-build-write workflow.

    Args:
        config: Run parameters, as a CatalogConfig or a raw dict. Defaults apply when None.
        dry_run: If True, build the catalog without writing it.
        generated: Optional timestamp override for the metadata block.

    Returns:
        CatalogResult: Counts, output location and the catalog itself.

    Raises:
        OSError: On any failure to read the component tree or write the catalog.
    """
    if config is None:
        cfg = CatalogConfig()
    elif isinstance(config, dict):
        cfg = CatalogConfig.from_dict(config)
    else:
        cfg = config

    # 1) Discovery
    logger.info(f"Scanning {cfg.input_path}...")
    files = scan_component_files(cfg.input_path, cfg.extension)
    rel_paths = relative_component_paths(files, cfg.input_path)
    logger.info(f"Found {len(rel_paths)} components")

    clashes = find_reserved_collisions(rel_paths)
    if clashes:
        logger.warning(
            f"Folder names collide with reserved catalog keys: {', '.join(clashes)}. "
            "The generated structure for these entries is undefined."
        )

    # 2) Shaping
    catalog = build_catalog(
        rel_paths,
        source=cfg.input_path,
        extension=cfg.extension,
        generated=generated,
    )

    # 3) Persistence
    written = False
    if dry_run:
        logger.info("Dry run: catalog not written.")
    else:
        write_catalog_json(catalog, cfg.output_path)
        written = True
        logger.info(f"Written to {cfg.output_path}")

    return CatalogResult(
        source=cfg.input_path,
        output_path=cfg.output_path,
        total_components=len(rel_paths),
        categories=summarize_categories(rel_paths),
        written=written,
        catalog=catalog,
    )
