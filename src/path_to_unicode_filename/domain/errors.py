from __future__ import annotations

"""
Codec Exception Hierarchy.

Exception Hierarchy:
    PathCodecError (base)
    ├── NotUnicodeError (input bytes are not valid UTF-8, either direction)
    ├── EncodeError
    │   └── FilenameTooLongError (result exceeds a configured limit)
    └── DecodeError
        ├── UnknownIconError (icon pair not registered in the template table)
        ├── MalformedEscapeError (table character in an impossible position)
        ├── InvalidPlaceholderError (placeholder value rejected by its template)
        └── NonCanonicalFilenameError (decodes, but is not what encode produces)
"""

from typing import Optional, Union


class PathCodecError(Exception):
    """Base exception for all codec errors."""


class EncodeError(PathCodecError):
    """Base exception for failures while producing a filename."""


class NotUnicodeError(PathCodecError):
    """Raised by to_filename() and to_path() when bytes input is not valid UTF-8."""

    def __init__(self, raw: Union[bytes, bytearray]) -> None:
        self.raw = bytes(raw)
        super().__init__(f"Input is not valid UTF-8: {self.raw!r}")


class FilenameTooLongError(EncodeError):
    """Raised when the encoded filename is longer than the allowed maximum."""

    def __init__(self, filename: str, length: int, max_length: int) -> None:
        self.filename = filename
        self.length = length
        self.max_length = max_length
        super().__init__(
            f"Encoded filename is {length} bytes long, the limit is {max_length} bytes."
        )


class DecodeError(PathCodecError):
    """
    Base exception for filenames that are not valid codec output.

    Attributes:
        filename: The full input being decoded.
        position: Index in `filename` where decoding stopped, if known.
    """

    def __init__(self, message: str, filename: str, position: Optional[int] = None) -> None:
        self.filename = filename
        self.position = position
        where = f" at index {position}" if position is not None else ""
        super().__init__(f"{message}{where} in {filename!r}")


class UnknownIconError(DecodeError):
    """Raised when two adjacent icons do not form a registered icon pair."""

    def __init__(self, icon: str, filename: str, position: Optional[int] = None) -> None:
        self.icon = icon
        super().__init__(f"Unknown icon pair {icon!r}", filename, position)


class MalformedEscapeError(DecodeError):
    """Raised when a table character cannot be explained by any encoded unit."""


class InvalidPlaceholderError(DecodeError):
    """Raised when the text bound to a template placeholder is not acceptable."""

    def __init__(self, value: str, filename: str, position: Optional[int] = None) -> None:
        self.value = value
        super().__init__(f"Invalid placeholder value {value!r}", filename, position)


class NonCanonicalFilenameError(DecodeError):
    """Raised when a filename decodes, but re-encoding the path gives a different filename."""

    def __init__(self, filename: str, canonical: str) -> None:
        self.canonical = canonical
        super().__init__(f"Not a canonical encoding (expected {canonical!r})", filename)
