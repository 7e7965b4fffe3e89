from __future__ import annotations

"""
Literal Text Escaper.

Rewrites literal path text into filename-safe text and back:
reserved characters become their full-width look-alikes, U+0000 becomes the
NUL glyph, and any character from the codec's own output alphabet is written
as the escape mark followed by the character (the escape mark itself thus
appears doubled). A bare table character can then only be genuine codec
output.
"""

from typing import List, Tuple

from path_to_unicode_filename.core.charclass import CharClass, classify
from path_to_unicode_filename.domain.constants import (
    ESCAPE_MARK,
    FULL_WIDTH_BY_RESERVED,
    NUL_CHAR,
    NUL_GLYPH,
    RESERVED_BY_FULL_WIDTH,
)
from path_to_unicode_filename.domain.errors import MalformedEscapeError

# -----------------------------------------------------------------------------
# ESCAPE
# -----------------------------------------------------------------------------

def escape_char(char: str) -> str:
    """Apply the per-character substitution rule to one character."""
    char_class = classify(char)
    if char_class is CharClass.RESERVED:
        return FULL_WIDTH_BY_RESERVED[char]
    if char_class is CharClass.NUL:
        return NUL_GLYPH
    if char_class is CharClass.TABLE_CHAR:
        return ESCAPE_MARK + char
    return char


def escape(text: str) -> str:
    """
    Escape literal path text.

    Args:
        text: Any string, separators included.

    Returns:
        str: Text free of reserved characters and NUL, in which every
        table character is preceded by the escape mark.
    """
    return "".join(escape_char(c) for c in text)

# -----------------------------------------------------------------------------
# UNESCAPE
# -----------------------------------------------------------------------------

def unescape_unit(text: str, index: int) -> Tuple[str, int]:
    """
    Decode the single literal unit starting at `text[index]`.

    Args:
        text: The full encoded string, used for error reporting too.
        index: Position of the unit's first character.

    Returns:
        Tuple[str, int]: The decoded character and the index after the unit.

    Raises:
        MalformedEscapeError: On a dangling escape mark, a bare icon, or a raw
            reserved character, none of which escape() can produce.
    """
    char = text[index]
    char_class = classify(char)

    if char == ESCAPE_MARK:
        target = index + 1
        if target >= len(text) or classify(text[target]) is not CharClass.TABLE_CHAR:
            raise MalformedEscapeError("Escape mark not followed by a table character", text, index)
        return text[target], index + 2

    if char in RESERVED_BY_FULL_WIDTH:
        return RESERVED_BY_FULL_WIDTH[char], index + 1
    if char == NUL_GLYPH:
        return NUL_CHAR, index + 1

    if char_class is CharClass.TABLE_CHAR:
        raise MalformedEscapeError(f"Unescaped table character {char!r}", text, index)
    if char_class is not CharClass.PLAIN:
        raise MalformedEscapeError(f"Unencoded {char_class.value} character {char!r}", text, index)

    return char, index + 1


def unescape(text: str) -> str:
    """
    Exact inverse of escape().

    Raises:
        MalformedEscapeError: If `text` is not the output of escape().
    """
    out: List[str] = []
    index = 0
    while index < len(text):
        char, index = unescape_unit(text, index)
        out.append(char)
    return "".join(out)
