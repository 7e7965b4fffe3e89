from __future__ import annotations

"""
Unit tests for Configuration Validation.

Verifies:
1. Defaults are injected and valid values kept.
2. Invalid values fall back with a warning in lenient mode.
3. Strict mode raises instead of coercing.
"""

import pytest

from path_to_unicode_filename.core.validator import validate_config
from path_to_unicode_filename.domain.config import get_default_config


def test_empty_config_yields_defaults():
    conf, warnings = validate_config({})
    assert conf == get_default_config()
    assert warnings == []


def test_valid_values_are_kept_and_normalized():
    conf, warnings = validate_config({
        "max_length": 255,
        "output_format": "JSON",
        "log_level": "debug",
        "log_file": "  /tmp/codec.log  ",
    })
    assert conf["max_length"] == 255
    assert conf["output_format"] == "json"
    assert conf["log_level"] == "DEBUG"
    assert conf["log_file"] == "/tmp/codec.log"
    assert warnings == []


def test_non_dict_config_falls_back_to_defaults():
    conf, warnings = validate_config(["not", "a", "dict"])
    assert conf == get_default_config()
    assert len(warnings) == 1


@pytest.mark.parametrize("value", [0, -5, "abc", 3.5, True])
def test_invalid_max_length_disables_limit(value):
    conf, warnings = validate_config({"max_length": value})
    assert conf["max_length"] is None
    assert warnings


def test_numeric_string_max_length_is_coerced():
    conf, warnings = validate_config({"max_length": " 200 "})
    assert conf["max_length"] == 200
    assert any("converted" in w for w in warnings)


def test_unknown_keys_are_dropped_with_warning():
    conf, warnings = validate_config({"colour": "blue"})
    assert "colour" not in conf
    assert any("colour" in w for w in warnings)


def test_invalid_choice_uses_fallback():
    conf, warnings = validate_config({"output_format": "xml", "log_level": 10})
    assert conf["output_format"] == "text"
    assert conf["log_level"] == "WARNING"
    assert len(warnings) == 2


@pytest.mark.parametrize("config, exc", [
    ("nope", TypeError),
    ({"max_length": "12"}, TypeError),
    ({"max_length": 0}, ValueError),
    ({"output_format": "xml"}, ValueError),
    ({"log_file": 3}, TypeError),
    ({"colour": "blue"}, ValueError),
])
def test_strict_mode_raises(config, exc):
    with pytest.raises(exc):
        validate_config(config, strict=True)
