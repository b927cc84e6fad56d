"""Completion provider backed by a fixed candidate list.

Returns the candidates starting with the text typed after a trigger, e.g.
user names for ``@`` or tag names for ``#``.
"""

from __future__ import annotations

from typing import Iterable, List, NamedTuple


class CompletionItem(NamedTuple):
    """A suggestion shown in the dropdown.

    Attributes:
        main: Text inserted after the trigger when the item is chosen.
        icon: Decoration rendered before *main*; never inserted.
    """

    main: str
    icon: str = ""


class StaticProvider:
    """Provide autocomplete items from a fixed list of candidates.

    Callable that receives the text typed after the trigger and returns the
    matching :class:`CompletionItem` suggestions, in candidate order.

    Args:
        candidates: Completion values.
        icon: Decoration shown before every item.
        suffix: Text appended after an accepted completion.
        case_sensitive: Compare the typed text case-sensitively.
    """

    def __init__(
        self,
        candidates: Iterable[str],
        *,
        icon: str = "",
        suffix: str = " ",
        case_sensitive: bool = False,
    ):
        self.candidates = list(candidates)
        self.icon = icon
        self.suffix = suffix
        self.case_sensitive = case_sensitive

    def __call__(self, query: str) -> List[CompletionItem]:
        """Return the candidates starting with *query*.

        Args:
            query: Text typed after the trigger.

        Returns:
            A list of matching :class:`CompletionItem` instances.
        """
        if not self.case_sensitive:
            query = query.lower()
        return [
            CompletionItem(main=candidate, icon=self.icon)
            for candidate in self.candidates
            if (candidate if self.case_sensitive else candidate.lower()).startswith(query)
        ]
