from __future__ import annotations

"""
Configuration Validation.

Normalizes an untrusted configuration dictionary (JSON file merged with
command-line overrides) into typed values, collecting a warning for every
value it had to replace.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from path_to_unicode_filename.domain.config import OUTPUT_FORMATS, get_default_config
from path_to_unicode_filename.infra.logging.config import _LEVEL_MAP

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a configuration dictionary.

    Args:
        config: Raw configuration data.
        strict: Raise on invalid values instead of falling back to defaults.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
        the warnings produced while normalizing it.

    Raises:
        TypeError: In strict mode, on a value of the wrong type.
        ValueError: In strict mode, on a value of the right type but out of range.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    unknown = sorted(set(config) - set(defaults))
    for key in unknown:
        msg = f"Unknown config key '{key}'."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Ignored.")

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if k in defaults})

    merged["max_length"] = _as_max_length(merged["max_length"], warnings, strict)
    merged["output_format"] = _as_choice(
        merged["output_format"], OUTPUT_FORMATS, defaults["output_format"], "output_format", warnings, strict
    )
    merged["log_level"] = _as_choice(
        merged["log_level"], tuple(_LEVEL_MAP), defaults["log_level"], "log_level", warnings, strict
    )
    merged["log_file"] = _as_optional_str(merged["log_file"], "log_file", warnings, strict)

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_max_length(value: Any, warnings: List[str], strict: bool) -> Optional[int]:
    """A positive int, or None for no limit."""
    if value is None:
        return None

    if isinstance(value, str) and not strict:
        s = value.strip()
        if s.isdigit():
            warnings.append(f"Field 'max_length' converted from '{value}' to int.")
            value = int(s)

    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"Invalid field 'max_length': expected int, received {type(value).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} No limit applied.")
        return None

    if value <= 0:
        msg = f"Invalid field 'max_length': {value} is not positive."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} No limit applied.")
        return None

    return value


def _as_choice(
        value: Any,
        choices: Tuple[str, ...],
        fallback: str,
        field: str,
        warnings: List[str],
        strict: bool,
) -> str:
    """Case-insensitive selection among known string values."""
    if isinstance(value, str):
        for choice in choices:
            if value.strip().lower() == choice.lower():
                return choice

    msg = f"Invalid field '{field}': {value!r} is not one of {', '.join(choices)}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using fallback '{fallback}'.")
    return fallback


def _as_optional_str(value: Any, field: str, warnings: List[str], strict: bool) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        v = value.strip()
        return v or None

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Ignored.")
    return None
