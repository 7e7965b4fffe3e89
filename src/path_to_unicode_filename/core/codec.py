from __future__ import annotations

"""
Public Codec API.

Front door of the library: accepts the path-like types callers actually
hold (str, bytes, os.PathLike), normalizes them to text, and delegates to
the pure encoder/decoder.
"""

import logging
import os
from typing import Optional, Union

from path_to_unicode_filename.core.decoder import decode
from path_to_unicode_filename.core.encoder import encode
from path_to_unicode_filename.domain.errors import FilenameTooLongError, NotUnicodeError

logger = logging.getLogger(__name__)

PathInput = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def to_filename(path: PathInput, *, max_length: Optional[int] = None) -> str:
    """
    Encode a filesystem path into a filename.

    Args:
        path: Path as text, UTF-8 bytes, or a path-like object.
        max_length: Optional limit on the UTF-8 byte length of the result.

    Returns:
        str: The encoded filename.

    Raises:
        NotUnicodeError: If `path` is bytes that are not valid UTF-8.
        FilenameTooLongError: If `max_length` is set and exceeded.

    Examples:
        >>> to_filename("C:\\\\Users\\\\alice\\\\file.txt")
        '💠🏠alice＼file.txt'
    """
    return to_filename_from_str(_as_text(path), max_length=max_length)


def to_filename_from_str(path: str, *, max_length: Optional[int] = None) -> str:
    filename = encode(path)

    if max_length is not None:
        length = len(filename.encode("utf-8", errors="surrogatepass"))
        if length > max_length:
            raise FilenameTooLongError(filename, length, max_length)

    return filename


def to_path(filename: PathInput) -> str:
    """
    Decode a filename produced by to_filename() back into the path.

    Args:
        filename: Filename as text, UTF-8 bytes, or a path-like object.

    Returns:
        str: The original path.

    Raises:
        NotUnicodeError: If `filename` is bytes that are not valid UTF-8.
        DecodeError: If `filename` is not valid codec output.
    """
    return to_path_from_str(_as_text(filename))


def to_path_from_str(filename: str) -> str:
    return decode(filename)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _as_text(value: PathInput) -> str:
    """Resolve path-likes and decode bytes strictly as UTF-8."""
    raw = os.fspath(value)
    if isinstance(raw, str):
        return raw
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        logger.debug(f"Rejecting non UTF-8 input: {e}")
        raise NotUnicodeError(raw) from e
