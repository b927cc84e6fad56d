"""Find the mention (``@user``, ``#tag``...) being typed at the caret."""

from loguru import logger

from mention_scan.context.character_set import (
    NEWLINES,
    PUNCTUATION,
    SYMBOLS,
    WHITESPACES,
    WHITESPACES_AND_NEWLINES,
    CharacterSet,
)
from mention_scan.context.keywords import Keywords
from mention_scan.context.matcher import Match, find, find_best_match, find_match, find_with_sets, is_word_valid
from mention_scan.context.offsets import TextRange, slice_utf16
from mention_scan.context.whitespace import has_whitespace_run_longer_than

logger.disable("mention_scan")

__all__ = [
    "CharacterSet",
    "Keywords",
    "Match",
    "NEWLINES",
    "PUNCTUATION",
    "SYMBOLS",
    "TextRange",
    "WHITESPACES",
    "WHITESPACES_AND_NEWLINES",
    "find",
    "find_best_match",
    "find_match",
    "find_with_sets",
    "has_whitespace_run_longer_than",
    "is_word_valid",
    "slice_utf16",
]
