from __future__ import annotations

"""
Depth-Name Line Parser.

Turns one line of a tree diagram into its nesting depth and entry name.
Depth is the number of connector glyphs (│ ├ └) in the indentation prefix;
spaces and dash glyphs only decorate the branches.
"""

from typing import Tuple

from treescaffold.domain.constants import (
    COMMENT_MARKER,
    CONNECTOR_GLYPHS,
    DECORATION_CHARS,
    NAME_TRIM_CHARS,
)

# Sentinel returned for lines that carry no entry
SKIP: Tuple[int, str] = (0, "")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_line(line: str) -> Tuple[int, str]:
    """
    Extract (depth, name) from a single diagram line.

    Blank lines, comment lines and lines made only of glyphs yield the
    (0, "") sentinel.

    Args:
        line: Raw line text, with or without trailing whitespace.

    Returns:
        Tuple[int, str]: Nesting depth and cleaned entry name.
    """
    text = line.rstrip()
    if not text or text.strip().startswith(COMMENT_MARKER):
        return SKIP

    depth = 0
    for i, char in enumerate(text):
        if char in CONNECTOR_GLYPHS:
            depth += 1
        elif char in DECORATION_CHARS:
            continue
        else:
            name = _clean_name(text[i:])
            return (depth, name) if name else SKIP

    return SKIP


def is_skip(parsed: Tuple[int, str]) -> bool:
    """True when the parse result is the 'not an entry' sentinel."""
    return not parsed[1]

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _clean_name(raw: str) -> str:
    """Cut any trailing comment and trim decoration from both ends."""
    return raw.split(COMMENT_MARKER, 1)[0].strip(NAME_TRIM_CHARS)
