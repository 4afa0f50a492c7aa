from __future__ import annotations

"""
Tree Renderer.

Converts a layout tree back into diagram lines, the inverse of the line
parser and tree builder. Every ancestor level is drawn as a continuation
bar and the entry's own level as a branch, so each level contributes
exactly one connector glyph and the output parses back to the same depths.
Directories carry a trailing '/'.
"""

from typing import List

from treescaffold.domain.constants import (
    BRANCH_PREFIX,
    CONTINUATION_PREFIX,
    DIRECTORY_SUFFIX,
    LAST_BRANCH_PREFIX,
    STYLE_CORNERS,
    STYLE_FLAT,
)
from treescaffold.domain.tree_models import Node

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(root: Node, style: str = STYLE_FLAT) -> List[str]:
    """
    Render every top-level entry of root (the root itself is not printed).

    Args:
        root: Synthetic root of the tree.
        style: 'flat' draws the same branch glyph for every sibling;
            'corners' draws a corner glyph for the last sibling.

    Returns:
        List[str]: Diagram lines in pre-order.
    """
    lines: List[str] = []
    total = len(root.children)
    for i, child in enumerate(root.children):
        render_node(child, lines, style=style, is_last=(i == total - 1))
    return lines


def render_node(node: Node, lines: List[str], style: str = STYLE_FLAT, is_last: bool = False) -> None:
    """
    Append the line for node and, for directories, all of its descendants.

    Args:
        node: Entry to render; its depth sets the indentation.
        lines: Accumulator list for output lines.
        style: Rendering style ('flat' or 'corners').
        is_last: Whether node is the last of its siblings.
    """
    prefix = _line_prefix(node.depth, use_corner=(style == STYLE_CORNERS and is_last))

    if not node.is_dir:
        lines.append(f"{prefix}{node.name}")
        return

    lines.append(f"{prefix}{node.name}{DIRECTORY_SUFFIX}")
    total = len(node.children)
    for i, child in enumerate(node.children):
        render_node(child, lines, style=style, is_last=(i == total - 1))

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _line_prefix(depth: int, use_corner: bool = False) -> str:
    if depth <= 0:
        return ""
    branch = LAST_BRANCH_PREFIX if use_corner else BRANCH_PREFIX
    return CONTINUATION_PREFIX * (depth - 1) + branch
