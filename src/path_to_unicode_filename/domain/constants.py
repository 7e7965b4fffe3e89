from __future__ import annotations

"""
Codec Constants and Static Glyph Tables.

Centralizes every codepoint the codec reads or writes: path separators,
reserved characters and their full-width substitutes, the NUL glyph, the
escape mark, and the OS/directory icons used by the template table.
"""

from types import MappingProxyType
from typing import Dict, Final, FrozenSet, Mapping

# -----------------------------------------------------------------------------
# SEPARATORS
# -----------------------------------------------------------------------------

POSIX_SEP: Final[str] = "/"
WINDOWS_SEP: Final[str] = "\\"
SEPARATORS: Final[FrozenSet[str]] = frozenset({POSIX_SEP, WINDOWS_SEP})

# -----------------------------------------------------------------------------
# RESERVED CHARACTER SUBSTITUTION
# -----------------------------------------------------------------------------

RESERVED_CHARS: Final[str] = "\\/:*?\"<>|"
FULL_WIDTH_CHARS: Final[str] = "＼／：＊？＂＜＞｜"

NUL_CHAR: Final[str] = "\0"
NUL_GLYPH: Final[str] = "〇"

# Precedes a literal table character in encoded output; doubled for itself
ESCAPE_MARK: Final[str] = "〃"

FULL_WIDTH_BY_RESERVED: Final[Mapping[str, str]] = MappingProxyType(
    dict(zip(RESERVED_CHARS, FULL_WIDTH_CHARS))
)
RESERVED_BY_FULL_WIDTH: Final[Mapping[str, str]] = MappingProxyType(
    dict(zip(FULL_WIDTH_CHARS, RESERVED_CHARS))
)

# -----------------------------------------------------------------------------
# ICONS
# -----------------------------------------------------------------------------

MAC_ICON: Final[str] = "🍎"
LINUX_ICON: Final[str] = "🐧"
WINDOWS_ICON: Final[str] = "💠"

HOME_ICON: Final[str] = "🏠"
MUSIC_ICON: Final[str] = "🎵"
APP_DATA_ICON: Final[str] = "💾"
DESKTOP_ICON: Final[str] = "🔝"
DOCUMENTS_ICON: Final[str] = "📄"
DOWNLOADS_ICON: Final[str] = "⏬"
PICTURES_ICON: Final[str] = "🎨"
VIDEOS_ICON: Final[str] = "🎥"
DRIVE_ICON: Final[str] = "🥞"

OS_ICONS: Final[FrozenSet[str]] = frozenset({MAC_ICON, LINUX_ICON, WINDOWS_ICON})

DIR_ICONS: Final[FrozenSet[str]] = frozenset({
    HOME_ICON,
    MUSIC_ICON,
    APP_DATA_ICON,
    DESKTOP_ICON,
    DOCUMENTS_ICON,
    DOWNLOADS_ICON,
    PICTURES_ICON,
    VIDEOS_ICON,
    DRIVE_ICON,
})

# -----------------------------------------------------------------------------
# WELL-KNOWN DIRECTORY NAMES
# -----------------------------------------------------------------------------

# Subdirectories of a home directory shared by every platform
COMMON_HOME_SUBDIRS: Final[Dict[str, str]] = {
    MUSIC_ICON: "Music",
    DESKTOP_ICON: "Desktop",
    DOCUMENTS_ICON: "Documents",
    DOWNLOADS_ICON: "Downloads",
    PICTURES_ICON: "Pictures",
    VIDEOS_ICON: "Videos",
}

# -----------------------------------------------------------------------------
# OUTPUT ALPHABET
# -----------------------------------------------------------------------------

TABLE_CHARS: Final[FrozenSet[str]] = frozenset(
    set(FULL_WIDTH_CHARS) | {NUL_GLYPH, ESCAPE_MARK} | OS_ICONS | DIR_ICONS
)
