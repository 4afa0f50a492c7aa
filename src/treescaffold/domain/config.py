from __future__ import annotations

"""
Configuration Domain Management.

Provides the default runtime configuration and loads user overrides from a
JSON file. The configuration is a plain dictionary that is normalized by
the pipeline validator before use.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from treescaffold.domain.constants import (
    DEFAULT_EXTENSIONLESS_FILES,
    DEFAULT_IGNORED_NAMES,
    STYLE_FLAT,
    Mode,
)
from treescaffold.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Mode selection
        "mode": int(Mode.CREATE_FROM_TREE),

        # IO Paths
        "input_path": "",
        "output_dir": ".",
        "path": ".",
        "tree_file": "",

        # Lookup tables
        "extensionless_files": sorted(DEFAULT_EXTENSIONLESS_FILES),
        "ignored_names": sorted(DEFAULT_IGNORED_NAMES),

        # Parsing & Rendering
        "tree_style": STYLE_FLAT,
        "strict": False,
    }


def get_user_config_path() -> str:
    """Resolve the per-user configuration file location."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(config_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration overrides from disk on top of the defaults.

    A missing file is not an error. A corrupted file is reported as a
    warning and the defaults are returned.

    Args:
        config_file: Explicit JSON file. Defaults to the per-user file.

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    config = get_default_config()
    path = config_file or get_user_config_path()

    if not os.path.exists(path):
        logger.debug(f"Config file not found at {path}. Using defaults.")
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to load config '{path}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Corrupted config file '{path}'. Using defaults.")
        return config

    config.update(data)
    logger.debug(f"Configuration loaded from {path}")
    return config
