from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of CLI flags to configuration overrides.
2. Positional items and the decode switch.
3. Unset options map to None so the configured value is kept.
"""

import pytest

from path_to_unicode_filename.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_items_and_default_direction():
    args = parse_args(["/tmp/a", "/tmp/b"])
    assert args.items == ["/tmp/a", "/tmp/b"]
    assert args.decode is False


def test_decode_switch():
    assert parse_args(["-d", "／tmp"]).decode is True
    assert parse_args(["--decode", "／tmp"]).decode is True


def test_flags_mapping():
    args = parse_args(["--json", "--debug", "--max-length", "255", "--log-file", "/tmp/x.log", "p"])
    overrides = args_to_overrides(args)

    assert overrides["output_format"] == "json"
    assert overrides["log_level"] == "DEBUG"
    assert overrides["max_length"] == 255
    assert overrides["log_file"] == "/tmp/x.log"


def test_defaults_are_explicit_in_overrides():
    overrides = args_to_overrides(parse_args(["p"]))
    assert overrides["max_length"] is None
    assert overrides["log_file"] is None
    assert "output_format" not in overrides
    assert "log_level" not in overrides


def test_items_are_required():
    with pytest.raises(SystemExit):
        parse_args([])


def test_max_length_must_be_int():
    with pytest.raises(SystemExit):
        parse_args(["--max-length", "many", "p"])
