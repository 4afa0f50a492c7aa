from __future__ import annotations

"""
Core orchestration pipeline.

Dispatches a validated configuration to one of the two conversions:
1. CREATE_FROM_TREE: diagram file -> parser -> builder -> materializer -> disk.
2. PRINT_TREE: disk -> walker -> renderer -> diagram lines (optionally saved).

Domain errors are converted into failed PipelineResult objects so the
interface layer only has to render (and report) the outcome.
"""

import logging
from typing import Any, Dict, Optional

from treescaffold.core.analysis.tree_renderer import render_tree
from treescaffold.core.analysis.tree_walker import walk_directory
from treescaffold.core.parsing.tree_builder import parse_tree_file
from treescaffold.core.pipeline.validator import validate_config
from treescaffold.core.scaffold.materializer import materialize_tree
from treescaffold.domain.constants import STYLE_FLAT, Mode
from treescaffold.domain.errors import TreeScaffoldError
from treescaffold.domain.result_models import (
    PipelineResult,
    create_error_result,
    create_success_result,
)
from treescaffold.domain.tree_models import new_root
from treescaffold.infra.fs import normalize_path, write_text_lines

logger = logging.getLogger(__name__)


def run_pipeline(config: Optional[Dict[str, Any]], *, dry_run: bool = False) -> PipelineResult:
    """
    Execute the conversion selected by config['mode'].

    Args:
        config: The configuration dictionary (raw or partial).
        dry_run: Simulate filesystem writes in create mode.

    Returns:
        PipelineResult: Outcome of the run.
    """
    cfg, warnings = validate_config(config or {})
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")
    return execute_pipeline(cfg, dry_run=dry_run)


def execute_pipeline(cfg: Dict[str, Any], *, dry_run: bool = False) -> PipelineResult:
    """Dispatch an already validated configuration to its mode."""
    mode = cfg["mode"]
    if mode == Mode.CREATE_FROM_TREE:
        return run_create_pipeline(cfg, dry_run=dry_run)
    if mode == Mode.PRINT_TREE:
        return run_show_pipeline(cfg)

    logger.debug(f"Invalid mode: {mode}")
    return create_error_result("invalid mode", mode, "")

# -----------------------------------------------------------------------------
# MODE: CREATE FROM TREE
# -----------------------------------------------------------------------------

def run_create_pipeline(cfg: Dict[str, Any], *, dry_run: bool = False) -> PipelineResult:
    """
    Parse the diagram at cfg['input_path'] and materialize it under
    cfg['output_dir'].
    """
    mode = int(Mode.CREATE_FROM_TREE)
    output_dir = normalize_path(cfg.get("output_dir"), ".")
    input_path = (cfg.get("input_path") or "").strip()

    if not input_path:
        return create_error_result("input file must be specified", mode, output_dir)

    try:
        root = parse_tree_file(
            input_path,
            extensionless_files=frozenset(cfg.get("extensionless_files", [])),
            strict=bool(cfg.get("strict", False)),
        )
        logger.debug(f"Materializing parsed tree under: {output_dir}")
        materialized = materialize_tree(output_dir, root, dry_run=dry_run)
    except TreeScaffoldError as e:
        logger.debug(f"Run failed: {e}")
        return create_error_result(str(e), mode, output_dir)

    summary = {
        "directories": len(materialized.directories),
        "files": len(materialized.files),
        "dry_run": dry_run,
    }
    logger.debug(
        f"Structure ready: {summary['directories']} directories, {summary['files']} files"
        + (" (dry run)" if dry_run else "")
    )
    return create_success_result(mode, output_dir, materialized=materialized, summary_extra=summary)

# -----------------------------------------------------------------------------
# MODE: PRINT TREE
# -----------------------------------------------------------------------------

def run_show_pipeline(cfg: Dict[str, Any]) -> PipelineResult:
    """
    Walk cfg['path'] and render it as diagram lines, saving them to
    cfg['tree_file'] when set.
    """
    mode = int(Mode.PRINT_TREE)
    path = normalize_path(cfg.get("path"), ".")

    try:
        root = walk_directory(path, ignored_names=frozenset(cfg.get("ignored_names", [])))
    except TreeScaffoldError as e:
        logger.debug(f"Run failed: {e}")
        return create_error_result(str(e), mode, path)

    lines = render_tree(root or new_root(), style=cfg.get("tree_style", STYLE_FLAT))

    tree_path = ""
    save_path = (cfg.get("tree_file") or "").strip()
    if save_path:
        try:
            write_text_lines(save_path, lines)
            tree_path = save_path
            logger.debug(f"Tree saved to file: {save_path}")
        except OSError as e:
            msg = f"Failed to save tree to '{save_path}': {e}"
            logger.debug(msg)
            return create_error_result(msg, mode, path)

    return create_success_result(
        mode, path, tree_lines=lines, tree_path=tree_path, summary_extra={"lines": len(lines)}
    )
