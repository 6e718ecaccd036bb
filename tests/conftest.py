from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. A factory that materializes component trees under tmp_path.
3. Teardown of the logging subsystem between tests.
"""

import os
import sys
from pathlib import Path
from typing import Callable, Iterable

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from catalog4ai.infra.logging import shutdown_logging  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def reset_logging_state():
    """Detach handlers installed by configure_logging once the test ends."""
    yield
    shutdown_logging()


@pytest.fixture
def make_components(tmp_path: Path) -> Callable[[Iterable[str]], Path]:
    """
    Return a factory creating component files below ``tmp_path/components``.

    Each entry is a '/'-separated path relative to the components root.
    """
    def _make(rel_paths: Iterable[str]) -> Path:
        root = tmp_path / "components"
        root.mkdir(exist_ok=True)
        for rel in rel_paths:
            target = root.joinpath(*rel.split("/"))
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text("<div></div>", encoding="utf-8")
        return root

    return _make


@pytest.fixture
def sample_components(make_components) -> Path:
    """
    Structure:
    /components
      /buttons
        primary.html
        secondary.html
      /forms
        input.html
    """
    return make_components([
        "buttons/primary.html",
        "buttons/secondary.html",
        "forms/input.html",
    ])
