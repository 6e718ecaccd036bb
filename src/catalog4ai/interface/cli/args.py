from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides.
"""

import argparse
from typing import Any, Dict

from catalog4ai.domain.constants import (
    DEFAULT_COMPONENTS_DIR,
    DEFAULT_EXTENSION,
    DEFAULT_OUTPUT_FILE,
)

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the Catalog4AI CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="catalog4ai",
        description="Generate a JSON catalog of HTML components for LLM context.",
    )

    # --- Path Management ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help=f"Component directory to scan (default: {DEFAULT_COMPONENTS_DIR}).",
    )
    p.add_argument(
        "-o", "--output",
        dest="output_path",
        default=None,
        help=f"Catalog file to write (default: {DEFAULT_OUTPUT_FILE}).",
    )
    p.add_argument(
        "--ext",
        dest="extension",
        default=None,
        help=f"Recognized component file suffix (default: {DEFAULT_EXTENSION}).",
    )
    p.add_argument(
        "--config",
        dest="config_file",
        default=None,
        help="JSON file with input_path, output_path and/or extension.",
    )

    # --- Runtime Behaviour ---
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Build the catalog without writing it.",
    )

    # --- Format Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the run result as JSON.",
    )
    p.add_argument(
        "--print-catalog",
        action="store_true",
        help="Include the full catalog in the JSON output.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--log-file",
        dest="log_file",
        nargs="?",
        const="",
        default=None,
        help="Also write logs to a rotating file (default location: ~/.catalog4ai/logs).",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Unset options map to None and are skipped during the merge.
    """
    return {
        "input_path": args.input_path,
        "output_path": args.output_path,
        "extension": args.extension,
    }
