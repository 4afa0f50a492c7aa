from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies both flag spellings, mapping to configuration overrides and CSV
list parsing.
"""

from treescaffold.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    return build_parser().parse_args(arg_list)


def test_single_dash_flags():
    args = parse_args(["-mode", "0", "-input", "layout.txt", "-output", "out"])
    overrides = args_to_overrides(args)

    assert overrides["mode"] == 0
    assert overrides["input_path"] == "layout.txt"
    assert overrides["output_dir"] == "out"


def test_double_dash_flags():
    args = parse_args(["--mode", "1", "--path", "/project", "--style", "corners", "--tree-file", "t.txt"])
    overrides = args_to_overrides(args)

    assert overrides["mode"] == 1
    assert overrides["path"] == "/project"
    assert overrides["tree_style"] == "corners"
    assert overrides["tree_file"] == "t.txt"


def test_unset_flags_map_to_none():
    overrides = args_to_overrides(parse_args([]))

    assert overrides["mode"] is None
    assert overrides["input_path"] is None
    assert overrides["output_dir"] is None
    assert overrides["path"] is None
    assert "strict" not in overrides
    assert overrides["extra_ignored_names"] is None


def test_csv_list_parsing():
    args = parse_args(["--ignore", "node_modules, dist,,", "--extensionless", "Makefile,Dockerfile", "--strict"])
    overrides = args_to_overrides(args)

    assert overrides["extra_ignored_names"] == ["node_modules", "dist"]
    assert overrides["extra_extensionless_files"] == ["Makefile", "Dockerfile"]
    assert overrides["strict"] is True


def test_runtime_flags():
    args = parse_args(["--dry-run", "--debug", "--use-defaults", "--log-file", "run.log"])
    assert args.dry_run and args.debug and args.use_defaults
    assert args.log_file == "run.log"
