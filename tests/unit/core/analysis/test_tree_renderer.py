from __future__ import annotations

"""
Unit tests for the Tree Renderer.

Verifies the flat prefix convention, directory suffixes, the opt-in
corner style and that rendered output parses back to the same tree.
"""

from treescaffold.core.analysis.tree_renderer import render_node, render_tree
from treescaffold.core.parsing.tree_builder import parse_tree_lines
from treescaffold.domain.tree_models import new_root


def _sample_tree():
    root = new_root()
    src = root.add_child("src", True)
    src.add_child("main.go", False)
    utils = src.add_child("utils", True)
    utils.add_child("helper.go", False)
    root.add_child("README.md", False)
    return root


def test_render_flat_style():
    assert render_tree(_sample_tree()) == [
        "src/",
        "├── main.go",
        "├── utils/",
        "│   ├── helper.go",
        "README.md",
    ]


def test_render_corner_style_marks_last_sibling():
    assert render_tree(_sample_tree(), style="corners") == [
        "src/",
        "├── main.go",
        "└── utils/",
        "│   └── helper.go",
        "README.md",
    ]


def test_render_node_single_subtree():
    utils = _sample_tree().children[0].children[1]
    lines = []
    render_node(utils, lines)
    assert lines == ["├── utils/", "│   ├── helper.go"]


def test_render_empty_tree():
    assert render_tree(new_root()) == []


def test_rendered_lines_parse_back_to_same_tree():
    for style in ("flat", "corners"):
        lines = render_tree(_sample_tree(), style=style)
        reparsed = parse_tree_lines(lines, strict=True)
        assert render_tree(reparsed, style=style) == lines
