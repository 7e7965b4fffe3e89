from __future__ import annotations

"""
Filename Decoder.

Inverse of the encoder. Scans the filename left to right: an OS icon opens
an icon pair whose template is expanded (with the following literal text as
placeholder value), every other unit is unescaped. The result is then
re-encoded, and the filename is accepted only if it is exactly what the
encoder would have produced.
"""

import logging
from typing import FrozenSet, List, Optional, Tuple

from path_to_unicode_filename.core.encoder import encode
from path_to_unicode_filename.core.escaper import escape_char, unescape_unit
from path_to_unicode_filename.domain.constants import DIR_ICONS, OS_ICONS, SEPARATORS
from path_to_unicode_filename.domain.errors import (
    InvalidPlaceholderError,
    MalformedEscapeError,
    NonCanonicalFilenameError,
    UnknownIconError,
)
from path_to_unicode_filename.domain.templates import DIRECTORY_TEMPLATES, TemplateTable

logger = logging.getLogger(__name__)

_ENCODED_SEPARATORS: FrozenSet[str] = frozenset(escape_char(sep) for sep in SEPARATORS)
_ICONS: FrozenSet[str] = OS_ICONS | DIR_ICONS

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def decode(filename: str, templates: Optional[TemplateTable] = None) -> str:
    """
    Decode a filename produced by encode() back into the original path.

    Args:
        filename: The encoded filename.
        templates: Template table to use. Defaults to DIRECTORY_TEMPLATES.

    Returns:
        str: The original path.

    Raises:
        UnknownIconError: An OS icon is not followed by a registered directory icon.
        MalformedEscapeError: A table character appears where no encoded unit explains it.
        InvalidPlaceholderError: A template's placeholder text is empty or not acceptable.
        NonCanonicalFilenameError: The filename decodes, but encode() never produces it.
    """
    table = templates if templates is not None else DIRECTORY_TEMPLATES
    path = _parse(filename, table)

    canonical = encode(path, table)
    if canonical != filename:
        logger.debug(f"Rejecting non-canonical filename {filename!r} (canonical: {canonical!r})")
        raise NonCanonicalFilenameError(filename, canonical)

    return path

# -----------------------------------------------------------------------------
# PARSER
# -----------------------------------------------------------------------------

def _parse(filename: str, table: TemplateTable) -> str:
    out: List[str] = []
    index = 0
    while index < len(filename):
        if filename[index] in OS_ICONS:
            text, index = _parse_template(filename, index, table)
        else:
            _check_stray_icon_pair(filename, index)
            text, index = unescape_unit(filename, index)
        out.append(text)
    return "".join(out)


def _check_stray_icon_pair(filename: str, index: int) -> None:
    """A directory icon directly followed by another icon is an unregistered pair."""
    pair = filename[index:index + 2]
    if len(pair) == 2 and pair[0] in DIR_ICONS and pair[1] in _ICONS:
        raise UnknownIconError(pair, filename, index)


def _parse_template(filename: str, index: int, table: TemplateTable) -> Tuple[str, int]:
    """
    Expand the icon pair at `filename[index]` and its placeholder text.

    Returns:
        Tuple[str, int]: The literal path prefix and the index after the
        placeholder text, which is always an encoded separator or the end.
    """
    icon = filename[index:index + 2]
    entry = table.match_icon(icon)
    if entry is None:
        raise UnknownIconError(icon, filename, index)

    index += len(icon)
    placeholder = entry.placeholder

    if placeholder is None:
        if index < len(filename) and filename[index] not in _ENCODED_SEPARATORS:
            raise MalformedEscapeError(
                f"Template {entry.name} must be followed by a separator", filename, index
            )
        return entry.render(None), index

    start = index
    chars: List[str] = []
    while index < len(filename) and filename[index] not in _ENCODED_SEPARATORS:
        _check_stray_icon_pair(filename, index)
        char, index = unescape_unit(filename, index)
        chars.append(char)

    value = "".join(chars)
    if not placeholder.accepts(value):
        raise InvalidPlaceholderError(value, filename, start)

    return entry.render(value), index
