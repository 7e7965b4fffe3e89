from __future__ import annotations

"""
Unit tests for Path Segmentation.

Verifies:
1. Both separators split, and each one is remembered positionally.
2. Leading, trailing and doubled separators yield empty segments.
3. Joining always reproduces the input.
"""

import pytest

from path_to_unicode_filename.core.segments import split_path


def test_split_posix_path():
    split = split_path("/tmp/file.txt")
    assert split.segments == ("", "tmp", "file.txt")
    assert split.separators == ("/", "/")


def test_split_mixed_separators_keeps_each_separator():
    split = split_path("C:\\Users/alice\\x")
    assert split.segments == ("C:", "Users", "alice", "x")
    assert split.separators == ("\\", "/", "\\")


def test_empty_path_is_one_empty_segment():
    split = split_path("")
    assert split.segments == ("",)
    assert split.separators == ()


def test_separator_only_path():
    split = split_path("//")
    assert split.segments == ("", "", "")
    assert split.separators == ("/", "/")


@pytest.mark.parametrize("path", [
    "", "/", "\\", "a", "/a/", "a//b", "C:", "C:\\", "\\\\server\\share", "x\0y/z", "/Users/alice/Documents",
])
def test_join_reproduces_input(path):
    assert split_path(path).join() == path
