from __future__ import annotations

"""
Integration tests for the full tree <-> filesystem round trip.

Walk a project, render it, parse the diagram back and materialize it in an
empty directory: the relative paths and their file/directory kinds match.
"""

from pathlib import Path

import pytest

from treescaffold.core.analysis.tree_renderer import render_tree
from treescaffold.core.analysis.tree_walker import walk_directory
from treescaffold.core.parsing.tree_builder import parse_tree_lines
from treescaffold.core.scaffold.materializer import materialize_tree


def _strip_ignored(layout):
    return {
        k: v for k, v in layout.items()
        if not any(part in (".git", ".gitignore") for part in k.split("/"))
    }


@pytest.mark.parametrize("style", ["flat", "corners"])
def test_walk_render_parse_materialize(tmp_path: Path, sample_project: Path, layout_of, style):
    (sample_project / "conf.d").mkdir()
    (sample_project / "conf.d" / "site.conf").write_text("", encoding="utf-8")
    (sample_project / "empty").mkdir()

    lines = render_tree(walk_directory(str(sample_project)), style=style)
    rebuilt = parse_tree_lines(lines, strict=True)

    out = tmp_path / "rebuilt"
    materialize_tree(str(out), rebuilt)

    assert layout_of(out) == _strip_ignored(layout_of(sample_project))


def test_comment_marker_in_name_does_not_round_trip(tmp_path: Path):
    (tmp_path / "c#notes.txt").write_text("", encoding="utf-8")

    lines = render_tree(walk_directory(str(tmp_path)))
    rebuilt = parse_tree_lines(lines)

    assert lines == ["c#notes.txt"]
    # Everything from '#' on is a comment when read back
    assert [(c.name, c.is_dir) for c in rebuilt.children] == [("c", True)]
