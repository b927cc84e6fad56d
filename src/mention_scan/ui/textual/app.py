"""Textual demo application for the mention scanner.

Shows a :class:`~mention_scan.ui.textual.mention_input.MentionInput` wired to
``@`` (people) and ``#`` (tags) providers, with a status line describing the
mention found at the caret.

Keyboard shortcuts:
    Up/Down  Move through suggestions
    Tab      Accept the highlighted suggestion
    Escape   Hide suggestions
    Ctrl+Q   Quit
"""

from __future__ import annotations

from typing import Dict, Optional

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Footer, Header, Static

from mention_scan.config import ScanConfig, default_config_path
from mention_scan.context.keywords import Keywords
from mention_scan.ui.textual.completion_provider.static_provider import StaticProvider
from mention_scan.ui.textual.mention_input import CompletionProvider, MentionInput

PEOPLE = ["alice", "bob", "carol", "nathan", "ryan"]
TAGS = ["bug", "docs", "feature", "release", "question"]


def default_providers() -> Dict[str, CompletionProvider]:
    """Return the demo providers for ``@`` and ``#``."""
    return {
        "@": StaticProvider(PEOPLE, icon="👤 "),
        "#": StaticProvider(TAGS, icon="🏷 "),
    }


class MentionApp(App):
    """Single-screen demo of mention autocomplete.

    Submitted lines are appended to a scrollable log; the status bar shows
    the prefix, word and UTF-16 range of the active mention.
    """

    TITLE = "mention-scan"

    CSS = """
    #log {
        height: 1fr;
        border: round $primary;
        padding: 0 1;
    }

    #status_bar {
        height: 1;
        padding: 0 1;
    }
    """

    def __init__(
        self,
        config: Optional[ScanConfig] = None,
        providers: Optional[Dict[str, CompletionProvider]] = None,
    ):
        super().__init__()
        self.config = config if config is not None else ScanConfig(config_path=default_config_path())
        self.keywords = Keywords.from_config(self.config)
        self.providers = providers if providers is not None else default_providers()

    def compose(self) -> ComposeResult:
        yield Header()
        yield VerticalScroll(id="log")
        yield Static("", id="status_bar")
        yield MentionInput(keywords=self.keywords, providers=self.providers, id="mention")
        yield Footer()

    def on_mention_input_match_changed(self, event: MentionInput.MatchChanged) -> None:
        status = self.query_one("#status_bar", Static)
        match = event.match
        if match is None:
            status.update("")
            return
        status.update(
            Text.assemble(
                ("prefix ", "dim"),
                (match.prefix, "bold"),
                ("  word ", "dim"),
                (match.word, "bold cyan"),
                ("  range ", "dim"),
                f"{match.range.location}+{match.range.length}",
            )
        )

    def on_mention_input_submitted(self, event: MentionInput.Submitted) -> None:
        log = self.query_one("#log", VerticalScroll)
        log.mount(Static(event.value))
        log.scroll_end(animate=False)
