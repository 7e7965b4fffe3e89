from __future__ import annotations

"""
Path Segmentation.

Splits a path string into its segments while remembering which separator
stood at every position, so that joining the parts reproduces the input
exactly (leading separators, doubled separators and drive prefixes included).
"""

from dataclasses import dataclass
from typing import List, Tuple

from path_to_unicode_filename.domain.constants import SEPARATORS


@dataclass(frozen=True)
class SplitPath:
    """
    A path broken into segments.

    Attributes:
        segments: Maximal runs of non-separator characters, possibly empty.
        separators: The separator found after each segment but the last,
                    so `len(separators) == len(segments) - 1`.
    """
    segments: Tuple[str, ...]
    separators: Tuple[str, ...]

    def join(self) -> str:
        parts: List[str] = [self.segments[0]]
        for sep, segment in zip(self.separators, self.segments[1:]):
            parts.append(sep)
            parts.append(segment)
        return "".join(parts)


def split_path(path: str) -> SplitPath:
    """
    Split a path on both `/` and `\\`.

    Examples:
        >>> split_path("/tmp/a").segments
        ('', 'tmp', 'a')
        >>> split_path("").segments
        ('',)
    """
    segments: List[str] = []
    separators: List[str] = []
    current: List[str] = []

    for char in path:
        if char in SEPARATORS:
            segments.append("".join(current))
            separators.append(char)
            current = []
        else:
            current.append(char)
    segments.append("".join(current))

    return SplitPath(tuple(segments), tuple(separators))
