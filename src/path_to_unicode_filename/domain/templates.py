from __future__ import annotations

"""
Directory Template Table.

Well-known path prefixes (home directories, their standard subfolders and
removable drives) for each recognized OS family. Every template is a short
sequence of literal segments with at most one placeholder segment, and is
written in a filename as a two-codepoint icon: OS icon + directory icon.

Matching is longest-pattern-first; patterns of equal length are resolved by
declaration order, earliest wins.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from path_to_unicode_filename.core.segments import SplitPath
from path_to_unicode_filename.domain.constants import (
    APP_DATA_ICON,
    COMMON_HOME_SUBDIRS,
    DIR_ICONS,
    DRIVE_ICON,
    HOME_ICON,
    LINUX_ICON,
    MAC_ICON,
    OS_ICONS,
    POSIX_SEP,
    WINDOWS_ICON,
    WINDOWS_SEP,
)

# -----------------------------------------------------------------------------
# PATTERN ELEMENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Literal:
    """A segment that must appear verbatim."""
    text: str


@dataclass(frozen=True)
class Placeholder:
    """
    A segment bound to a variable value (user name, volume, drive letter).

    Attributes:
        suffix: Literal text closing the segment after the value (":" for drives).
        letter_only: Restrict the value to a single alphabetic character.
    """
    suffix: str = ""
    letter_only: bool = False

    def accepts(self, value: str) -> bool:
        if not value:
            return False
        if self.letter_only:
            return len(value) == 1 and value.isalpha()
        return True

    def bind(self, segment: str) -> Optional[str]:
        """Extract the value from a whole segment, or None if it does not fit."""
        if self.suffix:
            if not segment.endswith(self.suffix):
                return None
            segment = segment[:-len(self.suffix)]
        return segment if self.accepts(segment) else None

    def render(self, value: str) -> str:
        return value + self.suffix


PatternElement = Union[Literal, Placeholder]

# -----------------------------------------------------------------------------
# TEMPLATE ENTRIES
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TemplateEntry:
    """
    One well-known directory prefix.

    Attributes:
        name: Diagnostic identifier, e.g. "mac.documents".
        os_tag: OS family the prefix belongs to.
        sep: Native separator joining the pattern segments.
        pattern: Literal and placeholder segments, in path order.
        icon: OS icon followed by directory icon.
    """
    name: str
    os_tag: str
    sep: str
    pattern: Tuple[PatternElement, ...]
    icon: str

    @property
    def placeholder(self) -> Optional[Placeholder]:
        for element in self.pattern:
            if isinstance(element, Placeholder):
                return element
        return None

    def match(self, split: SplitPath, start: int) -> Optional[TemplateMatch]:
        """Try this template against `split.segments[start:]`."""
        count = len(self.pattern)
        if start + count > len(split.segments):
            return None

        value: Optional[str] = None
        for offset, element in enumerate(self.pattern):
            index = start + offset
            if offset and split.separators[index - 1] != self.sep:
                return None

            segment = split.segments[index]
            if isinstance(element, Placeholder):
                value = element.bind(segment)
                if value is None:
                    return None
            elif segment != element.text:
                return None

        return TemplateMatch(entry=self, consumed=count, value=value)

    def render(self, value: Optional[str]) -> str:
        """Expand the template back into the literal path prefix."""
        parts: List[str] = []
        for element in self.pattern:
            if isinstance(element, Placeholder):
                parts.append(element.render(value or ""))
            else:
                parts.append(element.text)
        return self.sep.join(parts)


@dataclass(frozen=True)
class TemplateMatch:
    """
    Result of a successful prefix match.

    Attributes:
        entry: The template that matched.
        consumed: Number of path segments covered by the template.
        value: Text bound to the placeholder, None for placeholder-less templates.
    """
    entry: TemplateEntry
    consumed: int
    value: Optional[str]

# -----------------------------------------------------------------------------
# TEMPLATE TABLE
# -----------------------------------------------------------------------------

class TemplateTable:
    """
    Ordered, read-only collection of template entries.

    Validates the entries once at construction: icons are an OS icon plus a
    directory icon, no icon is registered twice, and no pattern carries more
    than one placeholder.
    """

    def __init__(self, entries: Iterable[TemplateEntry]) -> None:
        self._entries: Tuple[TemplateEntry, ...] = tuple(entries)

        by_icon: Dict[str, TemplateEntry] = {}
        for entry in self._entries:
            _check_entry(entry)
            if entry.icon in by_icon:
                raise ValueError(
                    f"Icon {entry.icon!r} is used by both {by_icon[entry.icon].name} and {entry.name}."
                )
            by_icon[entry.icon] = entry
        self._by_icon: Mapping[str, TemplateEntry] = MappingProxyType(by_icon)

    def __iter__(self) -> Iterator[TemplateEntry]:
        return iter(self._entries)

    def match_prefix(self, split: SplitPath, start: int = 0) -> Optional[TemplateMatch]:
        """
        Find the template covering the most segments from `start` on.

        Args:
            split: The segmented path.
            start: Index of the first remaining segment.

        Returns:
            Optional[TemplateMatch]: The longest match, earliest declared on
            ties, or None when no template applies.
        """
        best: Optional[TemplateMatch] = None
        for entry in self._entries:
            found = entry.match(split, start)
            if found is not None and (best is None or found.consumed > best.consumed):
                best = found
        return best

    def match_icon(self, icon: str) -> Optional[TemplateEntry]:
        """Reverse lookup by the two-codepoint icon."""
        return self._by_icon.get(icon)


def _check_entry(entry: TemplateEntry) -> None:
    if len(entry.icon) != 2 or entry.icon[0] not in OS_ICONS or entry.icon[1] not in DIR_ICONS:
        raise ValueError(f"Template {entry.name} has an invalid icon {entry.icon!r}.")
    if not entry.pattern:
        raise ValueError(f"Template {entry.name} has an empty pattern.")
    placeholders = sum(isinstance(e, Placeholder) for e in entry.pattern)
    if placeholders > 1:
        raise ValueError(f"Template {entry.name} has {placeholders} placeholders, at most one is allowed.")

# -----------------------------------------------------------------------------
# PLATFORM DEFINITIONS
# -----------------------------------------------------------------------------

def _literals(*texts: str) -> Tuple[Literal, ...]:
    return tuple(Literal(t) for t in texts)


def _platform_templates(
        os_tag: str,
        os_icon: str,
        sep: str,
        home: Tuple[str, ...],
        app_data: Tuple[str, ...],
        drive: Tuple[PatternElement, ...],
) -> List[TemplateEntry]:
    """
    Build the templates of one OS family.

    Args:
        os_tag: OS family identifier.
        os_icon: Icon leading every template of the family.
        sep: Native separator.
        home: Literal segments preceding the user name placeholder.
        app_data: Literal segments of the application data folder under home.
        drive: Full pattern of the removable drive template.
    """
    home_pattern = _literals(*home) + (Placeholder(),)

    entries = [
        TemplateEntry(f"{os_tag}.home", os_tag, sep, home_pattern, os_icon + HOME_ICON),
        TemplateEntry(f"{os_tag}.app_data", os_tag, sep, home_pattern + _literals(*app_data),
                      os_icon + APP_DATA_ICON),
    ]
    for dir_icon, dir_name in COMMON_HOME_SUBDIRS.items():
        entries.append(TemplateEntry(
            f"{os_tag}.{dir_name.lower()}", os_tag, sep, home_pattern + _literals(dir_name), os_icon + dir_icon
        ))
    entries.append(TemplateEntry(f"{os_tag}.drive", os_tag, sep, drive, os_icon + DRIVE_ICON))
    return entries


DIRECTORY_TEMPLATES: TemplateTable = TemplateTable(
    _platform_templates(
        "mac", MAC_ICON, POSIX_SEP,
        home=("", "Users"),
        app_data=("Library", "Application Support"),
        drive=_literals("", "Volumes") + (Placeholder(),),
    )
    + _platform_templates(
        "linux", LINUX_ICON, POSIX_SEP,
        home=("", "home"),
        app_data=(".local", "share"),
        drive=_literals("", "media") + (Placeholder(),),
    )
    + _platform_templates(
        "windows", WINDOWS_ICON, WINDOWS_SEP,
        home=("C:", "Users"),
        app_data=("AppData", "Local"),
        drive=(Placeholder(suffix=":", letter_only=True),),
    )
)
