"""Prefix/delimiter matching anchored to the caret.

Finds the "mention-like" token the user is currently typing, e.g.
``@nathan`` or ``#release``.  A match starts with one of the configured
prefixes, runs up to the upper bound of the caret and contains no delimiter
character, optionally tolerating short runs of whitespace.

Positions passed in and reported out are UTF-16 offsets (see
:mod:`mention_scan.context.offsets`); scanning itself works on code points.
"""

from __future__ import annotations

from typing import Container, Iterable, List, Mapping, NamedTuple, Optional

from loguru import logger

from mention_scan.context.character_set import WHITESPACES, CharacterSet
from mention_scan.context.offsets import TextRange, index_for_utf16_offset, utf16_length, utf16_offset
from mention_scan.context.whitespace import has_whitespace_run_longer_than

DelimiterSet = Container[str]
"""Anything answering ``char in delimiter_set``: a :class:`CharacterSet`, a set or a string."""


class Match(NamedTuple):
    """A mention found before the caret.

    Attributes:
        prefix: The prefix that matched (e.g. ``"@"``).
        word: The matched text, prefix included, delimiter excluded.
        range: Location of *word* in the text, in UTF-16 code units.
    """

    prefix: str
    word: str
    range: TextRange


def find_match(
    text: str,
    caret_end: int,
    prefix: str,
    delimiter_set: Optional[DelimiterSet],
    max_space_count_allowed: int = 0,
) -> Optional[Match]:
    """Return the last substring of *text* starting with *prefix* and ending at the caret.

    Only ``text[:caret_end]`` is scanned.  The rightmost occurrence of the
    first prefix character anchors the match; each following prefix
    character must then have its rightmost occurrence immediately after the
    previous one.  Earlier occurrences of the prefix are not tried.

    Args:
        text: Full text of the buffer.
        caret_end: Upper bound of the caret range, in UTF-16 code units.
        prefix: Literal prefix the word must start with.
        delimiter_set: Characters that may not appear in the word, or
            ``None`` for no restriction.
        max_space_count_allowed: Longest whitespace run tolerated inside the
            word; ``0`` keeps every delimiter, whitespace included.

    Returns:
        The :class:`Match`, or ``None`` when there is no valid word.
    """
    if not prefix:
        return None

    end = index_for_utf16_offset(text, caret_end)
    if end is None:
        logger.debug("Caret offset {} does not map onto the text", caret_end)
        return None

    leading_text = text[:end]

    prefix_start = 0
    last_matched = 0
    for i, char in enumerate(prefix):
        index = leading_text.rfind(char)
        if index == -1:
            logger.debug("Prefix {!r}: {!r} not found before the caret", prefix, char)
            return None
        if i == 0:
            prefix_start = index
            last_matched = index
        elif index - last_matched == 1:
            last_matched = index
        else:
            # A partial prefix would need another search in
            # leading_text[:prefix_start]; not supported.
            logger.debug("Prefix {!r}: {!r} is not adjacent to the previous character", prefix, char)
            return None

    word = leading_text[prefix_start:]

    if not is_word_valid(word, delimiter_set, max_space_count_allowed):
        logger.debug("Prefix {!r}: word {!r} rejected by the delimiter set", prefix, word)
        return None

    location = utf16_offset(leading_text, prefix_start)
    return Match(prefix, word, TextRange(location, utf16_length(word)))


def is_word_valid(word: str, delimiter_set: Optional[DelimiterSet], max_space_count_allowed: int = 0) -> bool:
    """Return ``True`` if *word* is an acceptable match.

    With ``max_space_count_allowed > 0`` whitespace runs up to that length
    are tolerated: the word is rejected only for a longer run, or for a
    delimiter that is not whitespace.  Otherwise any delimiter rejects it.

    Args:
        word: The candidate word, prefix included.
        delimiter_set: Characters that may not appear in *word*; ``None``
            means no restriction.
        max_space_count_allowed: Number of contiguous spaces allowed.
    """
    if max_space_count_allowed > 0:
        if has_whitespace_run_longer_than(word, max_space_count_allowed):
            return False
        if delimiter_set is None:
            return True
        return not _contains_delimiter(word, delimiter_set, tolerated=WHITESPACES)

    if delimiter_set is None:
        return True
    return not _contains_delimiter(word, delimiter_set)


def _contains_delimiter(word: str, delimiter_set: DelimiterSet, tolerated: Optional[CharacterSet] = None) -> bool:
    if isinstance(delimiter_set, CharacterSet):
        if tolerated is not None:
            delimiter_set = delimiter_set - tolerated
        return delimiter_set.first_member_in(word) != -1
    for char in word:
        if char in delimiter_set and (tolerated is None or char not in tolerated):
            return True
    return False


def ordered_prefixes(prefixes: Iterable[str]) -> List[str]:
    """Return the distinct *prefixes*, longest first then alphabetical."""
    return sorted(set(prefixes), key=lambda p: (-len(p), p))


def find_best_match(
    text: str,
    caret_end: int,
    prefixes: Iterable[str],
    delimiter_sets: Optional[Mapping[str, DelimiterSet]] = None,
    global_delimiter_set: Optional[DelimiterSet] = None,
    max_space_count_allowed: int = 0,
) -> Optional[Match]:
    """Return the most recent match among several prefixes.

    Each prefix uses its own entry of *delimiter_sets*, or
    *global_delimiter_set* when it has none.  Prefixes with neither are
    skipped.  Of the matches found, the one starting closest to the caret
    wins; ties keep the order of :func:`ordered_prefixes`.

    Args:
        text: Full text of the buffer.
        caret_end: Upper bound of the caret range, in UTF-16 code units.
        prefixes: Prefixes to match against.
        delimiter_sets: Delimiter set per prefix.
        global_delimiter_set: Fallback delimiter set.
        max_space_count_allowed: See :func:`find_match`.

    Returns:
        The winning :class:`Match`, or ``None``.
    """
    matches: List[Match] = []
    for prefix in ordered_prefixes(prefixes):
        delimiter_set = None
        if delimiter_sets is not None:
            delimiter_set = delimiter_sets.get(prefix)
        if delimiter_set is None:
            delimiter_set = global_delimiter_set
        if delimiter_set is None:
            logger.debug("Prefix {!r} skipped: no delimiter set", prefix)
            continue

        match = find_match(text, caret_end, prefix, delimiter_set, max_space_count_allowed)
        if match is not None:
            matches.append(match)

    if not matches:
        return None

    best = max(matches, key=lambda m: m.range.location)
    logger.debug("Best of {} match(es): {!r} at {}", len(matches), best.word, best.range.location)
    return best


def find(
    text: str,
    caret_end: int,
    prefixes: Iterable[str],
    delimiter_set: DelimiterSet,
    max_space_count_allowed: int = 0,
) -> Optional[Match]:
    """Shortcut for :func:`find_best_match` with a single delimiter set for every prefix."""
    return find_best_match(
        text,
        caret_end,
        prefixes,
        global_delimiter_set=delimiter_set,
        max_space_count_allowed=max_space_count_allowed,
    )


def find_with_sets(
    text: str,
    caret_end: int,
    prefixes: Iterable[str],
    delimiter_sets: Mapping[str, DelimiterSet],
    max_space_count_allowed: int = 0,
) -> Optional[Match]:
    """Shortcut for :func:`find_best_match` with per-prefix delimiter sets and no fallback."""
    return find_best_match(
        text,
        caret_end,
        prefixes,
        delimiter_sets=delimiter_sets,
        max_space_count_allowed=max_space_count_allowed,
    )
