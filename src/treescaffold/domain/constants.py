from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Centralizes the tree-drawing glyph alphabet shared by the parser and the
renderer, together with the default lookup tables used to classify and
filter entries.
"""

from enum import IntEnum
from typing import FrozenSet

# -----------------------------------------------------------------------------
# TREE DIAGRAM ALPHABET
# -----------------------------------------------------------------------------

VERTICAL_GLYPH = "│"
TEE_GLYPH = "├"
CORNER_GLYPH = "└"
HORIZONTAL_GLYPH = "─"

# Each occurrence of a connector adds one nesting level
CONNECTOR_GLYPHS: FrozenSet[str] = frozenset({VERTICAL_GLYPH, TEE_GLYPH, CORNER_GLYPH})

# Purely cosmetic characters inside the indentation prefix
DECORATION_CHARS: FrozenSet[str] = frozenset({" ", "\t", "-", HORIZONTAL_GLYPH})

COMMENT_MARKER = "#"
DIRECTORY_SUFFIX = "/"
PATH_SEPARATORS = "/\\"

# Characters trimmed from both ends of a parsed entry name
NAME_TRIM_CHARS = " \t-" + HORIZONTAL_GLYPH + VERTICAL_GLYPH + TEE_GLYPH + CORNER_GLYPH

# Printer prefixes
CONTINUATION_PREFIX = VERTICAL_GLYPH + "   "
BRANCH_PREFIX = TEE_GLYPH + HORIZONTAL_GLYPH * 2 + " "
LAST_BRANCH_PREFIX = CORNER_GLYPH + HORIZONTAL_GLYPH * 2 + " "

# -----------------------------------------------------------------------------
# DEFAULT LOOKUP TABLES
# -----------------------------------------------------------------------------

# Lower-cased names treated as files although they carry no extension
DEFAULT_EXTENSIONLESS_FILES: FrozenSet[str] = frozenset({"license"})

# Names skipped while walking the filesystem
DEFAULT_IGNORED_NAMES: FrozenSet[str] = frozenset({".gitignore", ".git"})

# -----------------------------------------------------------------------------
# RENDERING STYLES
# -----------------------------------------------------------------------------

STYLE_FLAT = "flat"
STYLE_CORNERS = "corners"
TREE_STYLES = (STYLE_FLAT, STYLE_CORNERS)

# -----------------------------------------------------------------------------
# EXECUTION MODES
# -----------------------------------------------------------------------------

class Mode(IntEnum):
    """Operation selected once at startup."""
    CREATE_FROM_TREE = 0
    PRINT_TREE = 1
