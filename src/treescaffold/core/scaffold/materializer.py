from __future__ import annotations

"""
Filesystem Materializer.

Walks a layout tree in pre-order and issues the matching directory and
empty-file creation requests under a base path. The operation is not
transactional: the first failure aborts the remaining entries and whatever
was already created stays on disk. Entry names must be plain base names, so
nothing is ever created outside the base path.
"""

import logging
import os

from treescaffold.domain.constants import PATH_SEPARATORS
from treescaffold.domain.errors import DirectoryCreateError, FileCreateError
from treescaffold.domain.result_models import MaterializeResult
from treescaffold.domain.tree_models import Node
from treescaffold.infra.fs import create_empty_file, ensure_directory

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def materialize_tree(base_path: str, root: Node, dry_run: bool = False) -> MaterializeResult:
    """
    Create every descendant of root under base_path.

    Directories are created idempotently; files are created empty,
    truncating any existing content.

    Args:
        base_path: Directory under which the structure is created.
        root: Synthetic root of the layout tree.
        dry_run: Log and collect the planned paths without touching disk.

    Returns:
        MaterializeResult: Created directories and files, in pre-order.

    Raises:
        DirectoryCreateError: A directory (or a file's parent) could not be
            created, or a directory name is not a plain base name.
        FileCreateError: A file could not be created, or its name is not a
            plain base name.
    """
    result = MaterializeResult(dry_run=dry_run)
    _materialize_children(base_path, root, result)
    return result

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _materialize_children(base_path: str, node: Node, result: MaterializeResult) -> None:
    for child in node.children:
        full_path = _child_path(base_path, child)

        if child.is_dir:
            logger.info(f"Creating directory: {full_path}")
            if not result.dry_run:
                _make_dirs(full_path)
            result.directories.append(full_path)
            _materialize_children(full_path, child, result)
            continue

        logger.info(f"Creating file: {full_path}")
        if not result.dry_run:
            _make_dirs(os.path.dirname(full_path))
            try:
                create_empty_file(full_path)
            except OSError as e:
                raise FileCreateError(full_path, e.strerror or e) from e
        result.files.append(full_path)


def _child_path(base_path: str, child: Node) -> str:
    name = child.name
    has_separator = any(sep in name for sep in PATH_SEPARATORS)
    if name in ("", ".", "..") or has_separator or os.path.splitdrive(name)[0]:
        error_cls = DirectoryCreateError if child.is_dir else FileCreateError
        raise error_cls(f"{base_path}{os.sep}{name}", "entry name must be a plain base name")
    return os.path.join(base_path, name)


def _make_dirs(path: str) -> None:
    if not path:
        return
    try:
        ensure_directory(path)
    except OSError as e:
        raise DirectoryCreateError(path, e.strerror or e) from e
