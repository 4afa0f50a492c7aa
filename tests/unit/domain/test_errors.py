from __future__ import annotations

"""
Unit tests for the domain error hierarchy.
"""

import pytest

from treescaffold.domain.errors import (
    DirectoryCreateError,
    DirectoryReadError,
    FileCreateError,
    InputOpenError,
    TreeParseError,
    TreeScaffoldError,
)


@pytest.mark.parametrize(
    "cls,action",
    [
        (InputOpenError, "opening tree file"),
        (DirectoryCreateError, "creating directory"),
        (FileCreateError, "creating file"),
        (DirectoryReadError, "reading directory"),
    ],
)
def test_errors_carry_path_and_reason(cls, action):
    err = cls("/tmp/x", "Permission denied")
    assert isinstance(err, TreeScaffoldError)
    assert err.path == "/tmp/x"
    assert str(err) == f"error {action} /tmp/x: Permission denied"


def test_parse_error_includes_line_number():
    err = TreeParseError("layout.txt", "bad indent", line_number=7)
    assert err.line_number == 7
    assert str(err) == "error parsing layout.txt:7: bad indent"
