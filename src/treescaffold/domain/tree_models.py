from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the single recursive node type shared by the text parser, the
filesystem walker, the materializer and the renderer.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

ROOT_DEPTH = -1


@dataclass(eq=False)
class Node:
    """
    One entry (directory or file) of a layout tree.

    The synthetic root sits at depth -1 and stands for the base path;
    its immediate children are at depth 0.

    Attributes:
        name: Base name of the entry, without path separators.
        is_dir: True when the entry is a directory.
        children: Child entries in document or directory-read order.
        parent: Back-reference to the containing node (None for the root).
        depth: Nesting level, 0 for the root's immediate children.
    """
    name: str
    is_dir: bool = True
    children: List["Node"] = field(default_factory=list)
    parent: Optional["Node"] = field(default=None, repr=False)
    depth: int = ROOT_DEPTH

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def add_child(self, name: str, is_dir: bool) -> "Node":
        """Append a new child one level below this node and return it."""
        if not self.is_dir:
            # A file that gains children is a directory after all
            self.is_dir = True
        child = Node(name=name, is_dir=is_dir, parent=self, depth=self.depth + 1)
        self.children.append(child)
        return child

    def walk(self) -> Iterator["Node"]:
        """Yield every descendant in pre-order (parent before children)."""
        for child in self.children:
            yield child
            yield from child.walk()


def new_root(name: str = ".") -> Node:
    """Create the synthetic root that represents the base path."""
    return Node(name=name, is_dir=True, depth=ROOT_DEPTH)
