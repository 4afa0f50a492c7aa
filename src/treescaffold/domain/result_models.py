from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result structures used to communicate execution outcomes
between the core orchestrators and the interface layer (CLI).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass
class MaterializeResult:
    """
    Side effects issued by the filesystem materializer.

    Attributes:
        directories: Paths of directories created (or ensured), in pre-order.
        files: Paths of empty files created, in pre-order.
        dry_run: True when nothing was actually written.
    """
    directories: List[str] = field(default_factory=list)
    files: List[str] = field(default_factory=list)
    dry_run: bool = False


@dataclass(frozen=True)
class PipelineResult:
    """
    Unified result object of a single 'create' or 'show' run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        mode: Numeric mode that produced the result.
        base_path: Output directory (create) or walked directory (show).
        created_directories: Directories issued by the materializer.
        created_files: Files issued by the materializer.
        dry_run: Whether filesystem writes were simulated.
        tree_lines: Rendered diagram lines (show mode).
        tree_path: Path the diagram was saved to, if any.
        summary: Execution statistics.
    """
    ok: bool
    error: str
    mode: int
    base_path: str

    created_directories: List[str] = field(default_factory=list)
    created_files: List[str] = field(default_factory=list)
    dry_run: bool = False

    tree_lines: List[str] = field(default_factory=list)
    tree_path: str = ""

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        mode: int,
        base_path: str,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> PipelineResult:
    """
    Create a failed pipeline result instance.

    Args:
        error: Detailed error description.
        mode: Mode of the failed run.
        base_path: The target directory.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        PipelineResult: An immutable error result object.
    """
    return PipelineResult(
        ok=False,
        error=error,
        mode=mode,
        base_path=base_path,
        summary=summary_extra or {},
    )


def create_success_result(
        mode: int,
        base_path: str,
        materialized: Optional[MaterializeResult] = None,
        tree_lines: Optional[List[str]] = None,
        tree_path: str = "",
        summary_extra: Optional[Dict[str, Any]] = None,
) -> PipelineResult:
    """
    Create a successful pipeline result instance.

    Args:
        mode: Mode of the run.
        base_path: The target directory.
        materialized: Materializer output (create mode).
        tree_lines: Rendered diagram (show mode).
        tree_path: Path of the persisted diagram.
        summary_extra: Final execution metrics.

    Returns:
        PipelineResult: An immutable success result object.
    """
    materialized = materialized or MaterializeResult()
    return PipelineResult(
        ok=True,
        error="",
        mode=mode,
        base_path=base_path,
        created_directories=list(materialized.directories),
        created_files=list(materialized.files),
        dry_run=materialized.dry_run,
        tree_lines=tree_lines or [],
        tree_path=tree_path,
        summary=summary_extra or {},
    )
