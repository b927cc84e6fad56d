"""Text input widget with mention autocomplete.

Wraps a Textual :class:`~textual.widgets.Input` with an
:class:`~textual.widgets.OptionList` dropdown.  Each trigger prefix (``@``,
``#``...) is mapped to a :data:`CompletionProvider` callable that returns
matching :class:`~mention_scan.ui.textual.completion_provider.static_provider.CompletionItem`
suggestions for the word being typed.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

from loguru import logger
from textual.actions import SkipAction
from textual.binding import Binding
from textual.message import Message
from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import Input, OptionList
from textual.widgets.option_list import Option

from mention_scan.context.keywords import Keywords
from mention_scan.context.matcher import Match
from mention_scan.context.offsets import index_for_utf16_offset
from mention_scan.ui.textual.caret import caret_range
from mention_scan.ui.textual.completion_provider.static_provider import CompletionItem

CompletionProvider = Callable[[str], List[CompletionItem]]
"""Type alias for a completion provider: receives the typed word and returns items."""


class MentionInput(Widget):
    """Composite widget providing a text input with mention autocomplete.

    Whenever the text or the caret changes, the configured
    :class:`~mention_scan.context.keywords.Keywords` locate the mention
    ending at the caret and the provider registered for its prefix fills
    the dropdown.  Accepting a suggestion replaces exactly the matched range.

    Args:
        keywords: Trigger configuration used to find the active mention.
        providers: Mapping from prefixes to their completion providers.
        placeholder: Placeholder text shown when the input is empty.
        id: Optional widget identifier.
    """

    DEFAULT_CSS = """
    MentionInput {
        height: auto;
    }

    #mention_input {
        border: round $accent;
        padding: 0 1;
    }

    #mention_dropdown {
        max-height: 8;
        border: round $secondary;
    }
    """

    BINDINGS = [
        Binding("down", "highlight_next", "Next suggestion", show=False, priority=True),
        Binding("up", "highlight_previous", "Previous suggestion", show=False, priority=True),
        Binding("tab", "accept", "Accept suggestion", show=False, priority=True),
        Binding("enter", "accept", "Accept suggestion", show=False, priority=True),
        Binding("escape", "dismiss", "Hide suggestions", show=False, priority=True),
    ]

    value: reactive[str] = reactive("")

    def __init__(
        self,
        *,
        keywords: Keywords,
        providers: Dict[str, CompletionProvider],
        placeholder: str = "Type here…",
        id: Optional[str] = None,
    ):
        super().__init__(id=id)
        self.keywords = keywords
        self.providers = providers
        self.placeholder = placeholder
        self._match: Optional[Match] = None
        self._items: List[CompletionItem] = []

    # ─────────────────────────────────────
    # UI
    # ─────────────────────────────────────

    def compose(self):
        """Build the widget tree: an Input and the suggestion dropdown."""
        self._input = Input(
            placeholder=self.placeholder,
            id="mention_input",
        )
        self._dropdown = OptionList(id="mention_dropdown")
        self._dropdown.can_focus = False
        self._dropdown.display = False

        yield self._input
        yield self._dropdown

    def on_mount(self) -> None:
        """Focus the inner input and follow its caret."""
        self.watch(self._input, "selection", self._follow_caret, init=False)
        self._input.focus()

    @property
    def match(self) -> Optional[Match]:
        """The mention currently ending at the caret, if any."""
        return self._match

    @property
    def suggestions(self) -> List[CompletionItem]:
        """Items currently listed in the dropdown."""
        return list(self._items)

    # ─────────────────────────────────────
    # Autocomplete core
    # ─────────────────────────────────────

    def refresh_suggestions(self) -> None:
        """Recompute the active mention and repopulate the dropdown."""
        text = self._input.value
        match = self.keywords.find_last_trigger(text, caret_range(self._input))

        if match != self._match:
            self._match = match
            self.post_message(self.MatchChanged(self, match))

        self._items = self._candidates(match)
        self._dropdown.clear_options()
        if self._items:
            self._dropdown.add_options(Option(f"{item.icon}{item.main}") for item in self._items)
            self._dropdown.highlighted = 0
        self._dropdown.display = bool(self._items)

    def _candidates(self, match: Optional[Match]) -> List[CompletionItem]:
        """Return the provider's suggestions for the word typed after the prefix."""
        if match is None:
            return []
        provider = self.providers.get(match.prefix)
        if provider is None:
            return []
        return list(provider(match.word[len(match.prefix):]))

    def apply_completion(self, value: str) -> bool:
        """Replace the active mention with ``prefix + value + suffix``.

        Text before the mention and after the caret is left untouched and
        the cursor is placed right after the inserted text.

        Returns:
            ``False`` when there is no active mention.
        """
        match = self._match
        if match is None:
            return False

        text = self._input.value
        start = index_for_utf16_offset(text, match.range.start)
        end = index_for_utf16_offset(text, match.range.end)
        if start is None or end is None:
            logger.warning("Stale match range {} for the current text", match.range)
            return False

        replacement = match.prefix + value + self._suffix_for(match.prefix)
        self._input.replace(replacement, start, end)
        logger.debug("Completed {!r} as {!r}", match.word, replacement)
        self.refresh_suggestions()
        return True

    def _suffix_for(self, prefix: str) -> str:
        """Return the suffix appended after a completion for *prefix*.

        If the provider for *prefix* has a ``suffix`` attribute it is used;
        otherwise an empty string is returned.
        """
        return getattr(self.providers.get(prefix), "suffix", "")

    def _hide_suggestions(self) -> None:
        self._items = []
        self._dropdown.clear_options()
        self._dropdown.display = False

    # ─────────────────────────────────────
    # Actions
    # ─────────────────────────────────────

    def action_highlight_next(self) -> None:
        if not self._items:
            raise SkipAction()
        self._dropdown.action_cursor_down()

    def action_highlight_previous(self) -> None:
        if not self._items:
            raise SkipAction()
        self._dropdown.action_cursor_up()

    def action_accept(self) -> None:
        highlighted = self._dropdown.highlighted
        if not self._items or highlighted is None:
            raise SkipAction()
        self.apply_completion(self._items[highlighted].main)

    def action_dismiss(self) -> None:
        if not self._items:
            raise SkipAction()
        self._hide_suggestions()

    # ─────────────────────────────────────
    # Submit / Events
    # ─────────────────────────────────────

    def _follow_caret(self, _old, _new) -> None:
        self.refresh_suggestions()

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input is self._input:
            self.refresh_suggestions()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        event.stop()
        if 0 <= event.option_index < len(self._items):
            self.apply_completion(self._items[event.option_index].main)
        self._input.focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle Enter: post a :class:`Submitted` message and clear the input."""
        if event.input is not self._input:
            return
        text = event.value or ""
        if not text:
            return

        self.value = text
        self.post_message(self.Submitted(text))
        self._input.value = ""
        self._hide_suggestions()

    class Submitted(Message):
        """Message posted when the user submits text via Enter.

        Attributes:
            value: The submitted text.
        """

        def __init__(self, value: str):
            super().__init__()
            self.value = value

    class MatchChanged(Message):
        """Message posted when the mention at the caret changes.

        Attributes:
            mention_input: The widget that posted the message.
            match: The new active mention, or ``None``.
        """

        def __init__(self, mention_input: "MentionInput", match: Optional[Match]):
            super().__init__()
            self.mention_input = mention_input
            self.match = match
