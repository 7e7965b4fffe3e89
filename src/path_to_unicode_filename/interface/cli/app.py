from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, configuration resolution
(defaults, JSON file, command-line overrides), logging bootstrap, encoding
or decoding of every item, and result rendering.
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional

from path_to_unicode_filename.core.codec import to_filename, to_path
from path_to_unicode_filename.core.validator import validate_config
from path_to_unicode_filename.domain.config import get_default_config, load_config
from path_to_unicode_filename.domain.errors import PathCodecError
from path_to_unicode_filename.infra.logging import LoggingConfig, configure_logging, get_logger
from path_to_unicode_filename.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments. Defaults to sys.argv.

    Returns:
        int: 0 when every item succeeded, 1 when at least one failed,
        2 on a configuration error.
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    if args.config_path and not os.path.exists(args.config_path):
        print(f"ERROR: Config file not found: {args.config_path}", file=sys.stderr)
        return 2

    # 2. Resolve configuration (defaults vs file) and merge overrides
    base_conf = get_default_config() if args.use_defaults else load_config(args.config_path)
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    conf, warnings = validate_config(raw_conf, strict=False)

    # 3. Logging bootstrap
    configure_logging(LoggingConfig(level=conf["log_level"], console=True, log_file=conf["log_file"]))

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    # 4. Codec execution phase
    results = [_run_item(item, decode=args.decode, max_length=conf["max_length"]) for item in args.items]

    # 5. Output rendering phase
    if conf["output_format"] == "json":
        print(json.dumps(results, ensure_ascii=False, indent=2))
    else:
        _print_lines(results)

    return 0 if all(r["error"] is None for r in results) else 1

# -----------------------------------------------------------------------------
# EXECUTION
# -----------------------------------------------------------------------------

def _run_item(item: str, *, decode: bool, max_length: Optional[int]) -> Dict[str, Any]:
    """
    Encode or decode a single item, capturing codec errors per item.

    The item goes back to its argv bytes first, so an argument that is not
    valid UTF-8 fails here with NotUnicodeError instead of at print time.
    """
    raw = os.fsencode(item)
    try:
        output = to_path(raw) if decode else to_filename(raw, max_length=max_length)
    except PathCodecError as e:
        logger.warning(f"{type(e).__name__}: {e}")
        return {"input": _printable(raw), "output": None, "error": str(e)}

    logger.debug(f"{item!r} -> {output!r}")
    return {"input": item, "output": output, "error": None}


def _printable(raw: bytes) -> str:
    """Render undecodable bytes as backslash escapes."""
    return raw.decode("utf-8", errors="backslashreplace")

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow merge of non-None overrides into the base configuration.

    Args:
        base: Configuration from defaults or file.
        overrides: Values mapped from the command line.

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    out = dict(base)
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_lines(results: List[Dict[str, Any]]) -> None:
    """One output per line on stdout; failures go to stderr."""
    for r in results:
        if r["error"] is None:
            print(r["output"])
        else:
            print(f"ERROR: {r['error']}", file=sys.stderr)
