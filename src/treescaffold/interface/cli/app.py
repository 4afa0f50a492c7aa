from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration
resolution (defaults, config file, CLI overrides), mode dispatch and
result rendering. Diagram lines and status messages go to stdout;
diagnostics go to stderr through the logging subsystem.
"""

import json
import sys
from typing import Any, Dict, List, Optional

from treescaffold.core.pipeline.engine import execute_pipeline
from treescaffold.core.pipeline.validator import validate_config
from treescaffold.domain.config import get_default_config, load_config
from treescaffold.domain.constants import Mode
from treescaffold.domain.result_models import PipelineResult
from treescaffold.infra.logging import LoggingConfig, configure_logging, get_logger
from treescaffold.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    if sys.platform == "win32":
        # Box-drawing glyphs need a UTF-8 console
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    # 3. Configuration hierarchy: defaults < config file < CLI
    base_conf = get_default_config() if args.use_defaults else load_config(args.config_file)
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    # 4. Mode dispatch pre-flight
    mode = clean_conf["mode"]
    if mode not in (Mode.CREATE_FROM_TREE, Mode.PRINT_TREE):
        print("invalid mode", file=sys.stderr)
        parser.print_help(sys.stderr)
        return EXIT_FAILURE

    if mode == Mode.CREATE_FROM_TREE:
        if not clean_conf["input_path"]:
            print("Error: Input file must be specified with -input flag", file=sys.stderr)
            parser.print_help(sys.stderr)
            return EXIT_FAILURE
        print(f"Creating project structure in: {clean_conf['output_dir']}")

    # 5. Execution
    try:
        result = execute_pipeline(clean_conf, dry_run=bool(args.dry_run))
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return EXIT_INTERRUPTED
    except Exception as e:
        logger.critical(f"Unexpected failure: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE

    # 6. Rendering
    _print_result(result)
    return EXIT_OK if result.ok else EXIT_FAILURE

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge CLI overrides into the base configuration.

    Scalar keys replace base values when set; 'extra_*' lists extend the
    corresponding base lists.

    Args:
        base: The configuration loaded from defaults or file.
        overrides: Values derived from the command line.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    keys_to_merge = ["mode", "input_path", "output_dir", "path", "tree_style", "tree_file", "strict"]
    for k in keys_to_merge:
        if overrides.get(k) is not None:
            out[k] = overrides[k]

    for key in ("ignored_names", "extensionless_files"):
        extra = overrides.get(f"extra_{key}")
        if extra:
            current = out.get(key) or []
            if isinstance(current, str):
                current = [current]
            out[key] = list(current) + [x for x in extra if x not in current]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _print_result(result: PipelineResult) -> None:
    """Print the outcome of a run to the standard streams."""
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    if result.mode == Mode.PRINT_TREE:
        for line in result.tree_lines:
            print(line)
        # stdout carries only the diagram
        if result.tree_path:
            print(f"Tree saved to: {result.tree_path}", file=sys.stderr)
        return

    if result.dry_run:
        summary = result.summary
        print(
            f"Dry run: {summary.get('directories', 0)} directories and "
            f"{summary.get('files', 0)} files would be created in: {result.base_path}"
        )
        return

    print("Project structure created successfully!")


if __name__ == "__main__":
    sys.exit(main())
