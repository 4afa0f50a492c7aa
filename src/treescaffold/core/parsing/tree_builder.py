from __future__ import annotations

"""
Tree Builder.

Reconstructs a rooted layout tree from the flat, indentation-only stream
of (depth, name) pairs produced by the line parser. The builder keeps the
ancestor chain of the most recent entry: a deeper line nests under that
entry, a shallower one climbs the chain until it finds its parent.
"""

import logging
from typing import AbstractSet, Iterable, List, Optional, Tuple

from treescaffold.core.parsing.classifier import resolve_entry
from treescaffold.core.parsing.line_parser import is_skip, parse_line
from treescaffold.domain.constants import DEFAULT_EXTENSIONLESS_FILES
from treescaffold.domain.errors import InputOpenError, TreeParseError
from treescaffold.domain.tree_models import Node, new_root
from treescaffold.infra.fs import iter_text_lines

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# BUILDER
# -----------------------------------------------------------------------------

class TreeBuilder:
    """
    Incremental (depth, name) -> Node tree assembler.

    Args:
        extensionless_files: Names classified as files despite lacking a dot.
        strict: Raise TreeParseError on malformed depth jumps instead of
            clamping them.
        source: Label used in error messages (usually the input file path).
    """

    def __init__(
            self,
            extensionless_files: AbstractSet[str] = DEFAULT_EXTENSIONLESS_FILES,
            strict: bool = False,
            source: str = "<lines>",
    ) -> None:
        self.root: Node = new_root()
        self._extensionless_files = extensionless_files
        self._strict = strict
        self._source = source
        # (visual depth, node) for the last entry and each of its ancestors
        self._chain: List[Tuple[int, Node]] = []

    @property
    def current_depth(self) -> int:
        return self._chain[-1][0] if self._chain else 0

    def add(self, depth: int, name: str, line_number: Optional[int] = None) -> Optional[Node]:
        """
        Attach one entry to the tree.

        Args:
            depth: Visual depth reported by the line parser.
            name: Entry name, optionally suffixed with '/'.
            line_number: 1-based source line, for error messages.

        Returns:
            Optional[Node]: The created node, or None if the name was empty.
        """
        name, is_dir = resolve_entry(name, self._extensionless_files)
        if not name:
            return None

        if not self._chain and depth > 0:
            self._reject_or_clamp(
                f"first entry '{name}' is indented {depth} level(s)", line_number
            )
        elif self._chain and depth > self.current_depth + 1:
            self._reject_or_clamp(
                f"entry '{name}' jumps from depth {self.current_depth} to {depth}", line_number
            )

        # Climb towards the root until the top of the chain is shallower
        while self._chain and self._chain[-1][0] >= depth:
            self._chain.pop()

        parent = self._chain[-1][1] if self._chain else self.root
        if not parent.is_dir:
            logger.debug(f"'{parent.name}' has nested entries; treating it as a directory.")

        node = parent.add_child(name, is_dir)
        self._chain.append((depth, node))
        return node

    def _reject_or_clamp(self, reason: str, line_number: Optional[int]) -> None:
        if self._strict:
            raise TreeParseError(self._source, reason, line_number=line_number)
        logger.debug(f"Clamping malformed depth: {reason}.")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(
        entries: Iterable[Tuple[int, str]],
        extensionless_files: AbstractSet[str] = DEFAULT_EXTENSIONLESS_FILES,
        strict: bool = False,
) -> Node:
    """Build a tree from already parsed (depth, name) pairs."""
    builder = TreeBuilder(extensionless_files=extensionless_files, strict=strict)
    for depth, name in entries:
        builder.add(depth, name)
    return builder.root


def parse_tree_lines(
        lines: Iterable[str],
        extensionless_files: AbstractSet[str] = DEFAULT_EXTENSIONLESS_FILES,
        strict: bool = False,
        source: str = "<lines>",
) -> Node:
    """
    Parse raw diagram lines into a layout tree.

    Args:
        lines: Diagram text, one entry per line.
        extensionless_files: Names classified as files despite lacking a dot.
        strict: Reject malformed depth jumps.
        source: Label used in error messages.

    Returns:
        Node: The synthetic root of the parsed tree.
    """
    builder = TreeBuilder(extensionless_files=extensionless_files, strict=strict, source=source)
    for line_number, line in enumerate(lines, start=1):
        logger.debug(f"{line_number:>4} | {line}")
        parsed = parse_line(line)
        if is_skip(parsed):
            continue
        builder.add(parsed[0], parsed[1], line_number=line_number)
    return builder.root


def parse_tree_file(
        path: str,
        extensionless_files: AbstractSet[str] = DEFAULT_EXTENSIONLESS_FILES,
        strict: bool = False,
) -> Node:
    """
    Read and parse a tree diagram file.

    Raises:
        InputOpenError: The file cannot be opened or read.
        TreeParseError: The file is not valid UTF-8 text, or a strict
            parse found a malformed depth jump.
    """
    try:
        return parse_tree_lines(
            iter_text_lines(path),
            extensionless_files=extensionless_files,
            strict=strict,
            source=path,
        )
    except UnicodeDecodeError as e:
        raise TreeParseError(path, e) from e
    except OSError as e:
        raise InputOpenError(path, e.strerror or e) from e
