from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Path manipulation to ensure the 'src' directory is importable.
2. Logging reset so each test starts without our queue handlers attached.
3. Shared diagram and project fixtures.
"""

import os
import sys
from pathlib import Path
from typing import Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from treescaffold.infra.logging import shutdown_logging  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def reset_logging():
    """Detach our logging handlers before and after every test."""
    shutdown_logging()
    yield
    shutdown_logging()


@pytest.fixture
def sample_diagram() -> str:
    """
    A small project diagram in the flat convention.

    Structure:
    src/
      main.go
      utils/
        helper.go
    README.md
    """
    return "\n".join([
        "# project layout",
        "src/",
        "├── main.go",
        "├── utils/",
        "│   ├── helper.go  # shared helpers",
        "",
        "README.md",
    ]) + "\n"


@pytest.fixture
def diagram_file(tmp_path: Path, sample_diagram: str) -> Path:
    path = tmp_path / "layout.txt"
    path.write_text(sample_diagram, encoding="utf-8")
    return path


@pytest.fixture
def sample_project(tmp_path: Path) -> Path:
    """
    Create a project on disk, including VCS metadata that must be ignored.

    Structure:
    /project
      /.git
        HEAD
        /objects
      /docs
        guide.md
      /src
        app.py
        /pkg
          mod.py
      .gitignore
      LICENSE
      README.md
    """
    root = tmp_path / "project"
    (root / ".git" / "objects").mkdir(parents=True)
    (root / ".git" / "HEAD").write_text("ref: refs/heads/main", encoding="utf-8")
    (root / "docs").mkdir()
    (root / "docs" / "guide.md").write_text("# Guide", encoding="utf-8")
    (root / "src" / "pkg").mkdir(parents=True)
    (root / "src" / "app.py").write_text("print('hi')", encoding="utf-8")
    (root / "src" / "pkg" / "mod.py").write_text("", encoding="utf-8")
    (root / ".gitignore").write_text("*.pyc", encoding="utf-8")
    (root / "LICENSE").write_text("MIT", encoding="utf-8")
    (root / "README.md").write_text("# Project", encoding="utf-8")
    return root


@pytest.fixture
def layout_of():
    """Return a helper mapping every path below a base to its is_dir flag."""
    def _layout(base: Path) -> Dict[str, bool]:
        return {p.relative_to(base).as_posix(): p.is_dir() for p in base.rglob("*")}
    return _layout
