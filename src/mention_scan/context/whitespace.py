"""Detection of long whitespace runs inside a candidate mention."""

from __future__ import annotations

import unicodedata


def is_whitespace_class(char: str) -> bool:
    """Return ``True`` for separator characters (``Z*`` categories) and tabs."""
    return char == "\t" or unicodedata.category(char).startswith("Z")


def has_whitespace_run_longer_than(text: str, count: int) -> bool:
    """Return ``True`` if *text* contains more than *count* contiguous whitespace characters.

    Whitespace here is any character of the Unicode separator categories
    (``Zs``, ``Zl``, ``Zp``) plus CHARACTER TABULATION (U+0009).  Newlines
    such as ``"\\n"`` are control characters and never extend a run.

    Args:
        text: The text to inspect.
        count: Longest tolerated run length.  Negative values behave like 0.

    Returns:
        ``True`` as soon as a run of length ``count + 1`` is seen.
    """
    limit = max(count, 0)
    run = 0
    for char in text:
        if is_whitespace_class(char):
            run += 1
            if run > limit:
                return True
        else:
            run = 0
    return False
