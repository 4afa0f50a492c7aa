from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Thin wrappers over the 'os' module for the handful of primitives the core
needs: scoped line reading, directory creation, empty-file creation and
directory listing. Errors surface as plain OSError; the core layer turns
them into domain errors carrying the offending path.
"""

import os
from typing import Iterator, List, Optional, Tuple

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "TreeScaffold"
UNIX_APP_DIR_NAME = ".treescaffold"
DIR_MODE = 0o755

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for per-user settings.

    Standards:
    - Windows: %LOCALAPPDATA%/TreeScaffold
    - Linux/Mac: ~/.treescaffold

    The directory is not created; callers only read from it.

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)

# -----------------------------------------------------------------------------
# READ API
# -----------------------------------------------------------------------------

def iter_text_lines(path: str, encoding: str = "utf-8") -> Iterator[str]:
    """
    Yield the lines of a text file without their line terminators.

    The file stays open only while the generator is consumed and is closed
    on every exit path, including exceptions raised by the consumer.
    """
    with open(path, "r", encoding=encoding) as f:
        for raw in f:
            yield raw.rstrip("\r\n")


def list_directory(path: str) -> List[Tuple[str, bool]]:
    """
    List a directory as (name, is_dir) pairs sorted by name.

    Symlinked directories are reported as plain entries, not followed.
    """
    with os.scandir(path) as it:
        entries = [(e.name, e.is_dir(follow_symlinks=False)) for e in it]
    entries.sort(key=lambda item: item[0])
    return entries

# -----------------------------------------------------------------------------
# WRITE API
# -----------------------------------------------------------------------------

def ensure_directory(path: str) -> None:
    """Create a directory and its parents; an existing directory is fine."""
    os.makedirs(path, mode=DIR_MODE, exist_ok=True)


def create_empty_file(path: str) -> None:
    """Create an empty file, truncating it if it already exists."""
    with open(path, "w", encoding="utf-8"):
        pass


def write_text_lines(path: str, lines: List[str]) -> None:
    """Persist lines to a UTF-8 text file, creating parent directories."""
    out_dir = os.path.dirname(os.path.abspath(path))
    os.makedirs(out_dir, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines) + "\n")
