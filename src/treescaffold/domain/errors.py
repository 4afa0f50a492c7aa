from __future__ import annotations

"""
Domain Error Hierarchy.

Every failure the core can report is a TreeScaffoldError carrying the
offending path, so interface layers can render a single uniform message.
"""

from typing import Optional


class TreeScaffoldError(Exception):
    """Base class for all fatal tree/filesystem conversion errors."""

    action = "processing"

    def __init__(self, path: str, reason: object = None) -> None:
        self.path = path
        self.reason = reason
        super().__init__(self._format())

    def _format(self) -> str:
        msg = f"error {self.action} {self.path}"
        if self.reason is not None:
            msg += f": {self.reason}"
        return msg


class InputOpenError(TreeScaffoldError):
    """The tree diagram file could not be opened or read."""

    action = "opening tree file"


class TreeParseError(TreeScaffoldError):
    """The tree diagram could not be scanned or is structurally malformed."""

    action = "parsing"

    def __init__(self, path: str, reason: object = None, line_number: Optional[int] = None) -> None:
        self.line_number = line_number
        super().__init__(path, reason)

    def _format(self) -> str:
        where = f"{self.path}:{self.line_number}" if self.line_number is not None else self.path
        msg = f"error {self.action} {where}"
        if self.reason is not None:
            msg += f": {self.reason}"
        return msg


class DirectoryCreateError(TreeScaffoldError):
    action = "creating directory"


class FileCreateError(TreeScaffoldError):
    action = "creating file"


class DirectoryReadError(TreeScaffoldError):
    action = "reading directory"
