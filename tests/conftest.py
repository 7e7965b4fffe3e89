from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Path manipulation to ensure the 'src' directory is importable.
2. Shared path/filename pairs used across the codec tests.
"""

import os
import sys
from typing import List, Tuple

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
KNOWN_PAIRS: List[Tuple[str, str]] = [
    ("", ""),
    ("/", "／"),
    ("/tmp", "／tmp"),
    ("/tmp/file.txt", "／tmp／file.txt"),
    ("/media/disk001/file.txt", "🐧🥞disk001／file.txt"),
    ("C:\\file.txt", "💠🥞C＼file.txt"),
    ("C:\\Users\\alice\\file.txt", "💠🏠alice＼file.txt"),
    ("C:\\Users\\alice\\Music\\file.mp3", "💠🎵alice＼file.mp3"),
    ("C:\\Users\\alice\\AppData\\Local\\app.db", "💠💾alice＼app.db"),
    ("/Users/alice/Library/Application Support", "🍎💾alice"),
    ("/home/alice/Desktop/", "🐧🔝alice／"),
    ("/home/alice/Documents/file.doc", "🐧📄alice／file.doc"),
    ("/home/alice/.local/share/app", "🐧💾alice／app"),
    ("/Users/alice/Documents/file.txt", "🍎📄alice／file.txt"),
    ("/Users/alice/Downloads/file.txt", "🍎⏬alice／file.txt"),
    ("C:\\Users\\alice\\Pictures\\file.jpg", "💠🎨alice＼file.jpg"),
    ("/home/alice/Videos/file.mp4", "🐧🎥alice／file.mp4"),
    ("/Volumes/disk001/file.txt", "🍎🥞disk001／file.txt"),
    ("/path/with\0null", "／path／with〇null"),
    ("platform_icon_🍎_test", "platform_icon_〃🍎_test"),
    ("dir_icon_📄_test", "dir_icon_〃📄_test"),
    ("all_escape_targets_\0\\/:*?\"<>|_test", "all_escape_targets_〇＼／：＊？＂＜＞｜_test"),
    ("escape_mark_〃_test", "escape_mark_〃〃_test"),
    ("/Volumes/disk🍎001/file.txt", "🍎🥞disk〃🍎001／file.txt"),
]


@pytest.fixture(params=KNOWN_PAIRS, ids=[repr(p) for p, _ in KNOWN_PAIRS])
def known_pair(request: pytest.FixtureRequest) -> Tuple[str, str]:
    """A (path, filename) pair with its exact expected encoding."""
    return request.param
