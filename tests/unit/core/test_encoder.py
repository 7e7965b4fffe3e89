from __future__ import annotations

"""
Unit tests for the Path Encoder.

Verifies:
1. Exact output for the documented scenarios.
2. Totality on degenerate inputs (empty, separators only, NUL, surrogates).
3. Template precedence: longest pattern wins, separators must be native.
4. Template matching at every segment boundary, not only at the start.
"""

import pytest

from path_to_unicode_filename.core.encoder import encode
from path_to_unicode_filename.domain.constants import RESERVED_CHARS
from path_to_unicode_filename.domain.templates import (
    Literal,
    Placeholder,
    TemplateEntry,
    TemplateTable,
)


# -----------------------------------------------------------------------------
# Scenario Tests
# -----------------------------------------------------------------------------
def test_encode_known_pairs(known_pair):
    path, filename = known_pair
    assert encode(path) == filename


def test_encode_windows_profile_beats_drive_letter():
    """'C:' alone is a drive, but 'C:\\Users\\<u>' is the more specific profile template."""
    assert encode("C:\\Users\\alice\\file.txt") == "💠🏠alice＼file.txt"
    assert encode("C:\\Users") == "💠🥞C＼Users"


def test_encode_home_subdir_beats_home():
    assert encode("/Users/alice/Documents") == "🍎📄alice"
    assert encode("/Users/alice/Documentation") == "🍎🏠alice／Documentation"


# -----------------------------------------------------------------------------
# Totality Tests
# -----------------------------------------------------------------------------
@pytest.mark.parametrize("path, expected", [
    ("", ""),
    ("/", "／"),
    ("\\\\", "＼＼"),
    ("/\\/", "／＼／"),
    ("\0", "〇"),
    ("\0\0", "〇〇"),
])
def test_encode_degenerate_inputs(path, expected):
    assert encode(path) == expected


def test_encode_lone_surrogate_passes_through():
    assert encode("/tmp/\udcff") == "／tmp／\udcff"


def test_literal_os_icons_use_the_escape_mark():
    """Look-alike glyphs such as 🍏 are ordinary text, not substitutes."""
    assert encode("🍎🐧💠") == "〃🍎〃🐧〃💠"
    assert encode("🍏🐤🚪") == "🍏🐤🚪"


def test_encode_output_never_contains_reserved_characters():
    path = "C:\\Users\\a:b\\*?\"<>|\0/x"
    out = encode(path)
    assert not set(out) & set(RESERVED_CHARS + "\0")


# -----------------------------------------------------------------------------
# Template Matching Rules
# -----------------------------------------------------------------------------
def test_template_requires_native_separators():
    """A Windows profile written with '/' is not the Windows template."""
    assert encode("C:/Users/alice") == "💠🥞C／Users／alice"


def test_template_requires_whole_segments():
    assert encode("/Users/alice2/Documents2") == "🍎🏠alice2／Documents2"
    assert encode("/Usersx/alice") == "／Usersx／alice"


def test_template_requires_non_empty_placeholder():
    assert encode("/Users//Documents") == "／Users／／Documents"
    assert encode("/Users/") == "／Users／"


def test_drive_letter_must_be_a_single_letter_segment():
    assert encode("CD:\\x") == "CD：＼x"
    assert encode("1:\\x") == "1：＼x"
    assert encode("C:foo\\x") == "C：foo＼x"
    assert encode("é:") == "💠🥞é"


def test_template_matches_after_a_separator_boundary():
    assert encode("/x//Users/alice/y") == "／x／🍎🏠alice／y"
    assert encode("/mnt/c:/data") == "／mnt／💠🥞c／data"


def test_template_is_not_matched_inside_a_segment():
    assert encode("x/Users/alice") == "x／Users／alice"


def test_placeholder_value_is_escaped():
    assert encode("/Users/a:b") == "🍎🏠a：b"
    assert encode("/Users/〃") == "🍎🏠〃〃"


# -----------------------------------------------------------------------------
# Custom Template Tables
# -----------------------------------------------------------------------------
def _table(*entries: TemplateEntry) -> TemplateTable:
    return TemplateTable(entries)


def test_equal_length_templates_resolve_by_declaration_order():
    first = TemplateEntry("first", "linux", "/", (Literal(""), Literal("srv"), Placeholder()), "🐧🏠")
    second = TemplateEntry("second", "linux", "/", (Literal(""), Placeholder(), Literal("www")), "🐧🎵")

    assert encode("/srv/www", _table(first, second)) == "🐧🏠www"
    assert encode("/srv/www", _table(second, first)) == "🐧🎵srv"


def test_strict_prefix_template_loses_to_longer_one():
    short = TemplateEntry("short", "linux", "/", (Literal(""), Literal("home"), Placeholder()), "🐧🏠")
    long = TemplateEntry("long", "linux", "/", (Literal(""), Literal("home"), Placeholder(), Literal("Music")), "🐧🎵")

    assert encode("/home/bob/Music/a", _table(short, long)) == "🐧🎵bob／a"
    assert encode("/home/bob/Music/a", _table(long, short)) == "🐧🎵bob／a"


def test_placeholder_less_template():
    tmp = TemplateEntry("tmp", "linux", "/", (Literal(""), Literal("tmp")), "🐧💾")
    assert encode("/tmp/file", _table(tmp)) == "🐧💾／file"
    assert encode("/tmp", _table(tmp)) == "🐧💾"
