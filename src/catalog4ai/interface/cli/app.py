from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration
resolution (defaults, optional JSON file, command-line overrides), catalog
execution and result rendering.
"""

import json
import sys
from typing import Any, Dict, List, Optional

from catalog4ai.core.pipeline.engine import run_catalog
from catalog4ai.domain.config import CONFIG_KEYS, CatalogConfig, load_config
from catalog4ai.domain.pipeline_models import CatalogResult
from catalog4ai.infra.fs import normalize_path
from catalog4ai.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_default_log_path,
    get_logger,
)
from catalog4ai.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    # 1. Argument parsing
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap
    log_level = "DEBUG" if args.debug else "INFO"
    log_file = None
    if args.log_file is not None:
        log_file = normalize_path(args.log_file, get_default_log_path())
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=log_file))

    # 3. Configuration hierarchy
    base_conf = load_config(args.config_file)
    conf = CatalogConfig.from_dict(_merge_config(base_conf, cli_args.args_to_overrides(args)))
    logger.debug(f"Resolved configuration: {conf.to_dict()}")

    # 4. Execution
    try:
        result = run_catalog(conf, dry_run=bool(args.dry_run))
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return 130
    except OSError as e:
        logger.critical(f"Catalog generation failed: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    # 5. Rendering
    if args.json_output:
        print(json.dumps(result.summary(include_catalog=args.print_catalog), ensure_ascii=False, indent=2))
    else:
        print_human_summary(result)

    return 0

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow merge of non-None overrides restricted to known keys."""
    out = dict(base)
    for k in CONFIG_KEYS:
        if overrides.get(k) is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def print_human_summary(result: CatalogResult) -> None:
    """
    Print the write confirmation and the category breakdown.

    Categories are listed by name, whatever order they were discovered in.
    """
    if result.written:
        print(f"Catalog: {result.output_path} ({result.total_components} components)")
    else:
        print(f"Dry run: {result.total_components} components, nothing written.")

    print("\nCategory breakdown:")
    for category, count in sorted(result.categories.items()):
        print(f"  {category}: {count} components")


if __name__ == "__main__":
    sys.exit(main())
