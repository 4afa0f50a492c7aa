from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema, accepting both the historical single-dash
flags (-mode, -input, -output, -path) and their GNU-style spellings, and
translates the parsed namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict, List, Optional

from treescaffold.domain.constants import TREE_STYLES

MODE_HELP = "0: create project folders and files from a tree file; 1: print the tree of a project path"

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the treescaffold CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="treescaffold",
        description="Convert between tree diagrams and directory layouts.",
    )

    # --- Mode & Paths ---
    p.add_argument("-mode", "--mode", dest="mode", type=int, default=None, help=MODE_HELP)
    p.add_argument(
        "-input", "--input",
        dest="input_path",
        default=None,
        help="Input file containing the directory structure (mode 0).",
    )
    p.add_argument(
        "-output", "--output",
        dest="output_dir",
        default=None,
        help="Output directory where the structure will be created (default: .).",
    )
    p.add_argument(
        "-path", "--path",
        dest="path",
        default=None,
        help="Project path to print as a tree (mode 1, default: .).",
    )

    # --- Parsing & Rendering ---
    p.add_argument(
        "--style",
        dest="tree_style",
        choices=TREE_STYLES,
        default=None,
        help="Tree style for mode 1: 'flat' (same branch glyph for all siblings) or 'corners'.",
    )
    p.add_argument(
        "--tree-file",
        dest="tree_file",
        default=None,
        help="Also save the printed tree to this file (mode 1).",
    )
    p.add_argument(
        "--strict",
        action="store_true",
        help="Fail on malformed indentation instead of clamping it.",
    )
    p.add_argument(
        "--ignore",
        dest="ignore",
        default=None,
        help="Comma-separated names to skip while walking, added to the defaults.",
    )
    p.add_argument(
        "--extensionless",
        dest="extensionless",
        default=None,
        help="Comma-separated names without extension to treat as files (e.g. Makefile).",
    )

    # --- Runtime ---
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what mode 0 would create without touching the filesystem.",
    )

    # --- Configuration and Diagnostics ---
    p.add_argument("--config", dest="config_file", default=None, help="JSON configuration file.")
    p.add_argument("--use-defaults", action="store_true", help="Ignore any configuration file.")
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the resolved configuration as JSON and exit.",
    )
    p.add_argument("--debug", action="store_true", help="Elevate logging verbosity to DEBUG.")
    p.add_argument("--log-file", dest="log_file", default=None, help="Also write logs to this file.")

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Values left unset on the command line map to None so they do not mask
    the configuration file. List flags are returned under 'extra_*' keys
    because they extend, rather than replace, the configured lists.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {
        "mode": args.mode,
        "input_path": args.input_path,
        "output_dir": args.output_dir,
        "path": args.path,
        "tree_style": args.tree_style,
        "tree_file": args.tree_file,
    }

    if args.strict:
        overrides["strict"] = True

    overrides["extra_ignored_names"] = _split_csv(args.ignore)
    overrides["extra_extensionless_files"] = _split_csv(args.extensionless)

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """Convert a comma-separated string into a list of trimmed items."""
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
