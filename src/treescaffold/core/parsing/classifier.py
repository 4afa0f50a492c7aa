from __future__ import annotations

"""
Entry Classifier.

Decides whether a bare name from a tree diagram denotes a directory or a
file. Names with an extension are files; a small configurable set of
extension-less names (LICENSE, ...) are files too; everything else is a
directory. A trailing '/' always marks a directory; leading separators are
dropped so an entry never names an absolute path.
"""

from typing import AbstractSet, Tuple

from treescaffold.domain.constants import (
    DEFAULT_EXTENSIONLESS_FILES,
    DIRECTORY_SUFFIX,
    PATH_SEPARATORS,
)


def classify(name: str, extensionless_files: AbstractSet[str] = DEFAULT_EXTENSIONLESS_FILES) -> bool:
    """
    Return True when the name denotes a directory.

    Args:
        name: Entry name without path separators.
        extensionless_files: Lower-cased names that are files despite
            having no extension.
    """
    return "." not in name and name.lower() not in extensionless_files


def resolve_entry(
        name: str,
        extensionless_files: AbstractSet[str] = DEFAULT_EXTENSIONLESS_FILES,
) -> Tuple[str, bool]:
    """Strip separators and an explicit directory marker, then classify the name."""
    name = name.lstrip(PATH_SEPARATORS)
    if name.endswith(DIRECTORY_SUFFIX):
        return name.rstrip(DIRECTORY_SUFFIX).strip(), True
    return name, classify(name, extensionless_files)
