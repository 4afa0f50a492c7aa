from __future__ import annotations

"""
Unit tests for the Entry Classifier.
"""

import pytest

from treescaffold.core.parsing.classifier import classify, resolve_entry


@pytest.mark.parametrize("name", ["main.go", "README.md", ".env", "archive.tar.gz", "v1.2"])
def test_names_with_dot_are_files(name):
    assert classify(name) is False


@pytest.mark.parametrize("name", ["LICENSE", "license", "License"])
def test_license_is_a_file_in_any_case(name):
    assert classify(name) is False


@pytest.mark.parametrize("name", ["src", "Makefile", "docs", "node_modules"])
def test_other_dot_free_names_are_directories(name):
    assert classify(name) is True


def test_extensionless_set_is_configurable():
    names = frozenset({"makefile", "dockerfile"})
    assert classify("Makefile", names) is False
    assert classify("Dockerfile", names) is False
    # LICENSE is no longer special once the set is replaced
    assert classify("LICENSE", names) is True


def test_resolve_entry_trailing_slash_marks_directory():
    assert resolve_entry("utils/") == ("utils", True)
    assert resolve_entry("conf.d/") == ("conf.d", True)


def test_resolve_entry_without_marker_uses_heuristic():
    assert resolve_entry("main.go") == ("main.go", False)
    assert resolve_entry("pkg") == ("pkg", True)


def test_resolve_entry_drops_leading_separators():
    assert resolve_entry("/docs") == ("docs", True)
    assert resolve_entry("/tmp/") == ("tmp", True)
    assert resolve_entry("\\notes.txt") == ("notes.txt", False)
    assert resolve_entry("/") == ("", True)
