from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by validate_config().
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="path-to-unicode-filename",
        description="Encode filesystem paths into reversible unicode filenames, or decode them back.",
    )

    p.add_argument(
        "items",
        nargs="+",
        metavar="ITEM",
        help="Paths to encode (or filenames to decode with --decode).",
    )

    # --- Direction ---
    p.add_argument(
        "-d", "--decode",
        action="store_true",
        help="Decode filenames back into paths instead of encoding paths.",
    )

    # --- Encoding Constraints ---
    p.add_argument(
        "--max-length",
        dest="max_length",
        type=int,
        default=None,
        help="Reject encoded filenames longer than this many UTF-8 bytes.",
    )

    # --- Format Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print a JSON list of results instead of one line per item.",
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="JSON configuration file.",
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore any configuration file.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this rotating log file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Overrides; None means "keep the configured value".
    """
    overrides: Dict[str, Any] = {}

    overrides["max_length"] = args.max_length
    overrides["log_file"] = args.log_file

    if args.json_output:
        overrides["output_format"] = "json"
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides
