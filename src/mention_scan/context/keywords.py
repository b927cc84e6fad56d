"""Trigger-based keyword lookup for autocomplete.

Provides the :class:`Keywords` helper that bundles the prefixes (``@``,
``#``, ``//``...) and delimiter configuration of an input, and finds the
mention being typed at the caret.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Mapping, Optional

from mention_scan.context.character_set import CharacterSet
from mention_scan.context.matcher import DelimiterSet, Match, find_best_match, ordered_prefixes
from mention_scan.context.offsets import TextRange

if TYPE_CHECKING:
    from mention_scan.config import ScanConfig


class Keywords:
    """Manages the trigger prefixes used to activate autocomplete providers.

    A trigger is a short prefix string (e.g. ``/``, ``@``) that starts a
    word the user may want completed.  The word runs from the trigger to the
    caret and may not contain delimiter characters.

    Attributes:
        prefixes: Trigger prefixes, longest first.
        delimiter_sets: Delimiter set per prefix.
        global_delimiter_set: Delimiter set for prefixes without their own.
        max_space_count_allowed: Contiguous whitespace tolerated in a word.
    """

    def __init__(
        self,
        prefixes: Iterable[str],
        delimiter_sets: Optional[Mapping[str, DelimiterSet]] = None,
        global_delimiter_set: Optional[DelimiterSet] = None,
        max_space_count_allowed: int = 0,
    ):
        """Initialise with the trigger prefixes and delimiter configuration.

        Args:
            prefixes: Trigger strings; empty strings are ignored.
            delimiter_sets: Optional mapping of prefix to delimiter set.
            global_delimiter_set: Fallback delimiter set.
            max_space_count_allowed: Whitespace run length tolerated inside
                a word (``0`` disables the tolerance).
        """
        self.prefixes = ordered_prefixes(p for p in prefixes if p)
        self.delimiter_sets = dict(delimiter_sets or {})
        self.global_delimiter_set = global_delimiter_set
        self.max_space_count_allowed = max_space_count_allowed

    @classmethod
    def from_config(cls, config: "ScanConfig") -> "Keywords":
        """Build a :class:`Keywords` from a loaded :class:`~mention_scan.config.ScanConfig`."""
        global_set = CharacterSet.parse(config.global_delimiter_set) if config.global_delimiter_set else None
        return cls(
            config.prefixes,
            delimiter_sets={p: CharacterSet.parse(value) for p, value in config.delimiter_sets.items()},
            global_delimiter_set=global_set,
            max_space_count_allowed=config.max_space_count_allowed,
        )

    def find_last_trigger(self, text: str, caret_range: Optional[TextRange]) -> Optional[Match]:
        """Find the mention that ends at the caret.

        Args:
            text: Full text of the input.
            caret_range: Current caret/selection in UTF-16 units, or ``None``
                when the host has no caret.

        Returns:
            The most recent :class:`~mention_scan.context.matcher.Match`, or
            ``None``.
        """
        if caret_range is None or not self.prefixes:
            return None
        return find_best_match(
            text,
            caret_range.end,
            self.prefixes,
            delimiter_sets=self.delimiter_sets,
            global_delimiter_set=self.global_delimiter_set,
            max_space_count_allowed=self.max_space_count_allowed,
        )

    def delimiter_set_for(self, prefix: str) -> Optional[DelimiterSet]:
        """Return the delimiter set applied to *prefix*, falling back to the global one."""
        delimiter_set = self.delimiter_sets.get(prefix)
        if delimiter_set is None:
            return self.global_delimiter_set
        return delimiter_set
