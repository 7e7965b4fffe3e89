from __future__ import annotations

"""
Character Classification.

Sorts every unicode scalar value into one of four classes that drive the
per-character substitution rule of the encoder and the grammar of the
decoder.
"""

from enum import Enum

from path_to_unicode_filename.domain.constants import NUL_CHAR, RESERVED_CHARS, TABLE_CHARS


class CharClass(Enum):
    """Substitution class of a single character."""

    RESERVED = "reserved"
    NUL = "nul"
    TABLE_CHAR = "table_char"
    PLAIN = "plain"


def classify(char: str) -> CharClass:
    """
    Return the substitution class of a single character.

    Args:
        char: A string of length one.

    Returns:
        CharClass: RESERVED for path separators and forbidden filename
        characters, NUL for U+0000, TABLE_CHAR for the codec's own output
        alphabet, PLAIN otherwise.

    Raises:
        ValueError: If `char` is not exactly one character long.
    """
    if len(char) != 1:
        raise ValueError(f"Expected a single character, received {char!r}.")

    if char in RESERVED_CHARS:
        return CharClass.RESERVED
    if char == NUL_CHAR:
        return CharClass.NUL
    if char in TABLE_CHARS:
        return CharClass.TABLE_CHAR
    return CharClass.PLAIN
