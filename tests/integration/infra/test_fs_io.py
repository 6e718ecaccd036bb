from __future__ import annotations

"""
Integration tests for FileSystem Infrastructure.

Validates path normalization, data directory resolution and parent
directory creation.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from catalog4ai.infra.fs import ensure_parent_dir, get_user_data_dir, normalize_path


def test_get_user_data_dir_windows() -> None:
    mock_appdata = "C:/Users/Test/AppData/Local"
    with patch("os.name", "nt"):
        with patch.dict(os.environ, {"LOCALAPPDATA": mock_appdata}):
            path = get_user_data_dir()
            assert "Catalog4AI" in path


def test_get_user_data_dir_unix() -> None:
    with patch("os.name", "posix"):
        with patch("os.path.expanduser", return_value="/home/testuser"):
            path = get_user_data_dir()
            assert path.replace("\\", "/").endswith("/home/testuser/.catalog4ai")


def test_normalize_path_expansion() -> None:
    with patch.dict(os.environ, {"TEST_VAR": "my_folder"}):
        path = normalize_path("$TEST_VAR/sub", fallback=".")
        assert path.lower().endswith(os.path.join("my_folder", "sub").lower())


def test_normalize_path_blank_uses_fallback(tmp_path: Path) -> None:
    assert normalize_path("   ", fallback=str(tmp_path)) == str(tmp_path)


def test_ensure_parent_dir_creates_hierarchy(tmp_path: Path) -> None:
    target = tmp_path / "deep" / "nested" / "file.json"

    ensure_parent_dir(str(target))

    assert target.parent.is_dir()
    assert not target.exists()


def test_ensure_parent_dir_propagates_errors(tmp_path: Path) -> None:
    with patch("os.makedirs", side_effect=PermissionError("Permission Denied")):
        with pytest.raises(PermissionError):
            ensure_parent_dir(str(tmp_path / "x" / "file.json"))
