from __future__ import annotations

"""
Reversible path-to-filename codec.

Encodes a filesystem path into one unicode filename component and back:

- chars `\\/:*?"<>|` become their full-width look-alikes,
- U+0000 becomes `〇`,
- a common directory (home, documents, pictures, drives, ...) becomes an OS
  icon (🍎, 🐧, 💠) plus a directory icon (🏠, 📄, 🎨, ...),
- any of those codec glyphs found in the path itself is written with the
  escape mark `〃` in front.

Literal icons are therefore written as `〃🍎`, `〃🐧`, ... rather than the
look-alike substitutes (`🍏`, `🐤`, `🚪`) of earlier path-to-filename
encoders, so filenames for paths holding any of these glyphs differ from
theirs byte for byte. Paths without them encode identically.

    >>> to_filename("/tmp/file.txt")
    '／tmp／file.txt'
    >>> to_path("🍎📄alice／file.txt")
    '/Users/alice/Documents/file.txt'
"""

from path_to_unicode_filename.core.codec import (
    to_filename,
    to_filename_from_str,
    to_path,
    to_path_from_str,
)
from path_to_unicode_filename.domain.errors import (
    DecodeError,
    EncodeError,
    FilenameTooLongError,
    InvalidPlaceholderError,
    MalformedEscapeError,
    NonCanonicalFilenameError,
    NotUnicodeError,
    PathCodecError,
    UnknownIconError,
)

__version__ = "0.1.0"

__all__ = [
    "to_filename",
    "to_filename_from_str",
    "to_path",
    "to_path_from_str",
    "PathCodecError",
    "EncodeError",
    "NotUnicodeError",
    "FilenameTooLongError",
    "DecodeError",
    "UnknownIconError",
    "MalformedEscapeError",
    "InvalidPlaceholderError",
    "NonCanonicalFilenameError",
]
