from __future__ import annotations

"""
Filesystem Walker.

Reads an existing directory recursively and mirrors it as a layout tree,
leaving out every name in the ignore set. An ignored directory is dropped
together with its whole subtree.
"""

import logging
import os
from typing import AbstractSet, Optional

from treescaffold.domain.constants import COMMENT_MARKER, DEFAULT_IGNORED_NAMES
from treescaffold.domain.errors import DirectoryReadError
from treescaffold.domain.tree_models import ROOT_DEPTH, Node
from treescaffold.infra.fs import list_directory

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def walk_directory(
        path: str,
        ignored_names: AbstractSet[str] = DEFAULT_IGNORED_NAMES,
        depth: int = ROOT_DEPTH,
) -> Optional[Node]:
    """
    Build a tree mirroring the directory at path.

    Args:
        path: Directory to walk.
        ignored_names: Exact base names to skip (files and directories).
        depth: Depth assigned to the node for path itself. The default
            makes it the synthetic root, so its entries sit at depth 0.

    Returns:
        Optional[Node]: The node for path, or None when its own base name
        is ignored.

    Raises:
        DirectoryReadError: Any directory in the walk could not be listed.
            No partial tree is returned.
    """
    name = os.path.basename(os.path.abspath(path))
    if name in ignored_names:
        logger.debug(f"Skipping ignored directory: {path}")
        return None

    node = Node(name=name, is_dir=True, depth=depth)
    logger.debug(f"Walking directory tree: {path}")
    _populate(node, path, ignored_names)
    return node

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _populate(node: Node, path: str, ignored_names: AbstractSet[str]) -> None:
    """Recursively attach the entries of path below node."""
    try:
        entries = list_directory(path)
    except OSError as e:
        raise DirectoryReadError(path, e.strerror or e) from e

    for entry_name, is_dir in entries:
        if entry_name in ignored_names:
            continue
        if COMMENT_MARKER in entry_name:
            logger.warning(
                f"'{entry_name}' contains '{COMMENT_MARKER}'; "
                f"a printed diagram cuts the name there when parsed back."
            )
        child = node.add_child(entry_name, is_dir)
        if is_dir:
            _populate(child, os.path.join(path, entry_name), ignored_names)
