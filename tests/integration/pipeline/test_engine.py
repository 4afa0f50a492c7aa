from __future__ import annotations

"""
Integration tests for the pipeline engine.

Covers mode dispatch and the conversion of domain errors into failed
results for both directions.
"""

import logging
from pathlib import Path

from treescaffold.core.pipeline import engine
from treescaffold.core.pipeline.engine import execute_pipeline, run_pipeline
from treescaffold.core.pipeline.validator import validate_config


def test_create_mode(tmp_path: Path, diagram_file: Path):
    out = tmp_path / "out"
    result = run_pipeline({"mode": 0, "input_path": str(diagram_file), "output_dir": str(out)})

    assert result.ok, result.error
    assert result.base_path == str(out)
    assert result.summary == {"directories": 2, "files": 3, "dry_run": False}
    assert (out / "src" / "utils" / "helper.go").is_file()


def test_create_mode_dry_run(tmp_path: Path, diagram_file: Path):
    out = tmp_path / "out"
    result = run_pipeline(
        {"mode": 0, "input_path": str(diagram_file), "output_dir": str(out)}, dry_run=True
    )

    assert result.ok
    assert result.dry_run
    assert len(result.created_files) == 3
    assert not out.exists()


def test_create_mode_missing_input(tmp_path: Path):
    result = run_pipeline({"mode": 0, "input_path": str(tmp_path / "missing.txt")})
    assert not result.ok
    assert "missing.txt" in result.error


def test_create_mode_requires_input():
    result = run_pipeline({"mode": 0})
    assert not result.ok
    assert "input" in result.error


def test_create_mode_strict_rejects_bad_indent(tmp_path: Path):
    bad = tmp_path / "bad.txt"
    bad.write_text("│   ├── orphan.txt\n", encoding="utf-8")

    result = run_pipeline({"mode": 0, "input_path": str(bad), "output_dir": str(tmp_path), "strict": True})

    assert not result.ok
    assert "bad.txt:1" in result.error
    assert not (tmp_path / "orphan.txt").exists()


def test_show_mode(sample_project: Path, tmp_path: Path):
    tree_file = tmp_path / "saved" / "tree.txt"
    result = run_pipeline({"mode": 1, "path": str(sample_project), "tree_file": str(tree_file)})

    assert result.ok
    assert result.tree_lines == [
        "LICENSE",
        "README.md",
        "docs/",
        "├── guide.md",
        "src/",
        "├── app.py",
        "├── pkg/",
        "│   ├── mod.py",
    ]
    assert result.tree_path == str(tree_file)
    assert tree_file.read_text(encoding="utf-8").splitlines() == result.tree_lines


def test_show_mode_ignored_root_renders_nothing(sample_project: Path):
    result = run_pipeline({"mode": 1, "path": str(sample_project / ".git")})
    assert result.ok
    assert result.tree_lines == []


def test_show_mode_missing_path(tmp_path: Path):
    result = run_pipeline({"mode": 1, "path": str(tmp_path / "missing")})
    assert not result.ok
    assert "reading directory" in result.error


def test_invalid_mode():
    result = run_pipeline({"mode": 7})
    assert not result.ok
    assert result.error == "invalid mode"


def test_execute_pipeline_uses_validated_config_as_is(tmp_path: Path, diagram_file: Path, monkeypatch):
    cfg, _ = validate_config({"mode": 0, "input_path": str(diagram_file), "output_dir": str(tmp_path)})

    def _fail(*args, **kwargs):
        raise AssertionError("configuration validated twice")

    monkeypatch.setattr(engine, "validate_config", _fail)
    result = execute_pipeline(cfg, dry_run=True)

    assert result.ok, result.error
    assert result.summary == {"directories": 2, "files": 3, "dry_run": True}


def test_failures_are_returned_not_logged_as_errors(tmp_path: Path, caplog):
    with caplog.at_level(logging.DEBUG, logger="treescaffold"):
        created = run_pipeline({"mode": 0, "input_path": str(tmp_path / "missing.txt")})
        shown = run_pipeline({"mode": 1, "path": str(tmp_path / "missing")})

    assert not created.ok and not shown.ok
    assert not [r for r in caplog.records if r.levelno >= logging.ERROR]
