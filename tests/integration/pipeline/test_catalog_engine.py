from __future__ import annotations

"""
Integration tests for the catalog engine.

Runs scan, build and write against real temporary directories.
"""

import json
import logging
import os
import sys
from pathlib import Path

import pytest

from catalog4ai.core.pipeline.engine import run_catalog
from catalog4ai.domain.config import CatalogConfig


def _config(root: Path, out: Path) -> CatalogConfig:
    return CatalogConfig(input_path=str(root), output_path=str(out))


def test_engine_writes_expected_catalog(sample_components: Path, tmp_path: Path) -> None:
    out = tmp_path / "components-catalog.json"

    result = run_catalog(_config(sample_components, out))

    assert result.written is True
    assert result.total_components == 3
    assert result.categories == {"buttons": 2, "forms": 1}

    catalog = json.loads(out.read_text(encoding="utf-8"))
    assert catalog["_flat"] == ["buttons/primary", "buttons/secondary", "forms/input"]
    assert catalog["buttons"] == ["primary", "secondary"]
    assert catalog["forms"] == ["input"]
    assert catalog["_meta"]["source"] == str(sample_components)


def test_engine_nested_scenario(make_components, tmp_path: Path) -> None:
    root = make_components(["cards/basic/simple.html"])

    result = run_catalog(_config(root, tmp_path / "out.json"))

    assert result.catalog["cards"] == {"basic": ["simple"]}
    assert result.catalog["_flat"] == ["cards/basic/simple"]


def test_engine_empty_root(tmp_path: Path) -> None:
    root = tmp_path / "empty"
    root.mkdir()
    out = tmp_path / "out.json"

    result = run_catalog(_config(root, out))

    catalog = json.loads(out.read_text(encoding="utf-8"))
    assert catalog["_flat"] == []
    assert catalog["_meta"]["totalComponents"] == 0
    assert catalog["_meta"]["categories"] == {}
    assert set(catalog) == {"_meta", "_flat"}
    assert result.total_components == 0


def test_engine_missing_root_leaves_output_untouched(tmp_path: Path) -> None:
    out = tmp_path / "out.json"
    out.write_text("previous", encoding="utf-8")

    with pytest.raises(FileNotFoundError):
        run_catalog(_config(tmp_path / "missing", out))

    assert out.read_text(encoding="utf-8") == "previous"


def test_engine_dry_run_does_not_write(sample_components: Path, tmp_path: Path) -> None:
    out = tmp_path / "out.json"

    result = run_catalog(_config(sample_components, out), dry_run=True)

    assert result.written is False
    assert result.catalog["_meta"]["totalComponents"] == 3
    assert not out.exists()


def test_engine_is_idempotent_apart_from_timestamp(sample_components: Path, tmp_path: Path) -> None:
    out = tmp_path / "out.json"

    first = run_catalog(_config(sample_components, out)).catalog
    second = run_catalog(_config(sample_components, out)).catalog

    for doc in (first, second):
        doc["_meta"].pop("generated")
    assert first == second


def test_engine_accepts_raw_dict(sample_components: Path, tmp_path: Path) -> None:
    out = tmp_path / "out.json"

    result = run_catalog({"input_path": str(sample_components), "output_path": str(out)})

    assert result.output_path == str(out)
    assert out.exists()


def test_engine_warns_on_reserved_names(
        make_components, tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    root = make_components(["_flat/odd.html", "ok/fine.html"])

    with caplog.at_level(logging.WARNING):
        run_catalog(_config(root, tmp_path / "out.json"), dry_run=True)

    assert "reserved catalog keys: _flat" in caplog.text


def test_engine_logs_progress(sample_components: Path, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO):
        run_catalog(_config(sample_components, tmp_path / "out.json"))

    assert f"Scanning {sample_components}..." in caplog.text
    assert "Found 3 components" in caplog.text
    assert "Written to" in caplog.text


@pytest.mark.skipif(not sys.platform.startswith("linux"), reason="needs byte file names")
def test_engine_handles_undecodable_file_names(make_components, tmp_path: Path) -> None:
    root = make_components(["a/ok.html"])
    with open(os.path.join(os.fsencode(str(root)), b"a", b"caf\xe9.html"), "w") as f:
        f.write("<div></div>")
    out = tmp_path / "out.json"

    result = run_catalog(_config(root, out))

    catalog = json.loads(out.read_text(encoding="utf-8"))
    assert result.total_components == 2
    assert catalog["a"] == ["caf�", "ok"]
    assert sorted(os.listdir(tmp_path)) == ["components", "out.json"]
