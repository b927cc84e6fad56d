"""UTF-16 offset helpers.

Text widgets commonly report positions in UTF-16 code units, while Python
strings index by code point.  Matching is done on code points (so a
character outside the BMP is never split) and converted at the boundary
with the helpers below.
"""

from __future__ import annotations

from typing import NamedTuple, Optional


class TextRange(NamedTuple):
    """Half-open span ``[location, location + length)`` in UTF-16 code units."""

    location: int
    length: int

    @property
    def start(self) -> int:
        return self.location

    @property
    def end(self) -> int:
        return self.location + self.length

    def contains(self, offset: int) -> bool:
        return self.start <= offset < self.end


def _units(char: str) -> int:
    return 2 if ord(char) > 0xFFFF else 1


def utf16_length(text: str) -> int:
    """Return the length of *text* in UTF-16 code units."""
    return sum(_units(c) for c in text)


def utf16_offset(text: str, index: int) -> int:
    """Convert a code-point *index* of *text* into a UTF-16 offset."""
    return utf16_length(text[:index])


def index_for_utf16_offset(text: str, offset: int) -> Optional[int]:
    """Convert a UTF-16 *offset* into a code-point index of *text*.

    Returns ``None`` when *offset* is negative, past the end of *text*, or
    falls between the two halves of a surrogate pair.
    """
    if offset < 0:
        return None
    units = 0
    for index, char in enumerate(text):
        if units == offset:
            return index
        if units > offset:
            return None
        units += _units(char)
    if units == offset:
        return len(text)
    return None


def caret_range_from_indices(text: str, start: int, end: int) -> TextRange:
    """Build a UTF-16 caret range from a code-point selection.

    The selection may be reversed (``start > end``) as hosts report it when
    the user selects leftwards; indices are clamped to the text.
    """
    lower, upper = sorted((start, end))
    lower = min(max(lower, 0), len(text))
    upper = min(max(upper, 0), len(text))
    location = utf16_offset(text, lower)
    return TextRange(location, utf16_offset(text, upper) - location)


def slice_utf16(text: str, text_range: TextRange) -> Optional[str]:
    """Return the part of *text* covered by *text_range*, or ``None`` if it splits a character."""
    start = index_for_utf16_offset(text, text_range.start)
    end = index_for_utf16_offset(text, text_range.end)
    if start is None or end is None:
        return None
    return text[start:end]
