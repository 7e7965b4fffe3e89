from __future__ import annotations

"""
Runtime Configuration.

Dict-based settings for the command-line tool, with defaults and an
optional JSON file on disk. Loading never raises: a missing or corrupt
file is logged and the defaults are used.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
OUTPUT_FORMATS = ("text", "json")
CONFIG_ENV_VAR = "PATH_TO_UNICODE_FILENAME_CONFIG"


def get_default_config() -> Dict[str, Any]:
    """
    Return the default runtime configuration.

    Returns:
        Dict[str, Any]: Default values for every known key.
    """
    return {
        # Encoding constraints
        "max_length": None,

        # Output
        "output_format": "text",

        # Diagnostics
        "log_level": "WARNING",
        "log_file": None,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from a JSON file merged over the defaults.

    Args:
        path: JSON file to read. Falls back to the file named by the
              PATH_TO_UNICODE_FILENAME_CONFIG environment variable.

    Returns:
        Dict[str, Any]: The merged configuration (unvalidated).
    """
    config = get_default_config()
    path = path or os.environ.get(CONFIG_ENV_VAR)

    if not path:
        return config
    if not os.path.exists(path):
        logger.debug(f"Config file {path} not found. Using defaults.")
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config {path}: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Config file {path} does not hold a JSON object. Using defaults.")
        return config

    config.update(data)
    return config
