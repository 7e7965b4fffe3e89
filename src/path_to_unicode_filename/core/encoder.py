from __future__ import annotations

"""
Path Encoder.

Turns a path string into a single filename component. Walks the path
segment by segment; at every segment boundary the longest matching
directory template is replaced by its icon pair, everything else goes
through the per-character escape rule.
"""

import logging
from typing import List, Optional

from path_to_unicode_filename.core.escaper import escape, escape_char
from path_to_unicode_filename.core.segments import split_path
from path_to_unicode_filename.domain.templates import DIRECTORY_TEMPLATES, TemplateTable

logger = logging.getLogger(__name__)


def encode(path: str, templates: Optional[TemplateTable] = None) -> str:
    """
    Encode a path into a filename. Total: never raises for a `str` input.

    Args:
        path: Any path string, including "" and strings made only of separators.
        templates: Template table to use. Defaults to DIRECTORY_TEMPLATES.

    Returns:
        str: A string without separators, reserved characters or NUL.

    Examples:
        >>> encode("/tmp/file.txt")
        '／tmp／file.txt'
        >>> encode("/Users/alice/Documents/file.txt")
        '🍎📄alice／file.txt'
    """
    table = templates if templates is not None else DIRECTORY_TEMPLATES
    split = split_path(path)
    out: List[str] = []

    index = 0
    while index < len(split.segments):
        found = table.match_prefix(split, index)
        if found is not None:
            logger.debug(f"Template {found.entry.name} matched at segment {index}")
            out.append(found.entry.icon)
            if found.value is not None:
                out.append(escape(found.value))
            index += found.consumed
        else:
            out.append(escape(split.segments[index]))
            index += 1

        # Separator following the last consumed segment, if any
        if index - 1 < len(split.separators):
            out.append(escape_char(split.separators[index - 1]))

    return "".join(out)
