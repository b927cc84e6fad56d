"""Command line entry point.

``mention-scan find`` runs the scanner on a piece of text and prints the
mention found at the caret; ``mention-scan demo`` opens the Textual demo.
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table
from rich.text import Text

from mention_scan.config import ScanConfig
from mention_scan.context.character_set import CharacterSet
from mention_scan.context.keywords import Keywords
from mention_scan.context.matcher import Match
from mention_scan.context.offsets import TextRange, utf16_length
from mention_scan.log import setup_logger

console = Console()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="mention-scan",
        description="Find the @mention / #tag being typed at the caret.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress messages.")
    parser.add_argument("--debug", action="store_true", help="Log why each prefix matched or not.")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Config file (default: $MENTION_SCAN_CONFIG or ~/.config/mention_scan/mention_scan.json).",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    find = sub.add_parser("find", help="Scan TEXT and print the match at the caret.")
    find.add_argument("text", help="Text to scan.")
    find.add_argument(
        "--caret",
        type=int,
        default=None,
        help="Caret offset in UTF-16 units (default: end of text).",
    )
    find.add_argument(
        "-p",
        "--prefix",
        action="append",
        dest="prefixes",
        help="Trigger prefix; repeat for several (default: from config).",
    )
    find.add_argument(
        "-d",
        "--delimiters",
        action="append",
        default=None,
        help="Global delimiter set: a set name or literal characters; repeatable.",
    )
    find.add_argument(
        "--max-spaces",
        type=int,
        default=None,
        help="Contiguous whitespace allowed inside a match (default: from config).",
    )
    find.add_argument("--json", action="store_true", help="Print the result as JSON.")

    sub.add_parser("demo", help="Open the interactive Textual demo.")

    return parser.parse_args(argv)


def build_keywords(args: argparse.Namespace, config: ScanConfig) -> Keywords:
    """Return the :class:`Keywords` for *config* with command line overrides applied."""
    keywords = Keywords.from_config(config)
    if args.prefixes:
        keywords = Keywords(
            args.prefixes,
            delimiter_sets=keywords.delimiter_sets,
            global_delimiter_set=keywords.global_delimiter_set,
            max_space_count_allowed=keywords.max_space_count_allowed,
        )
    if args.delimiters:
        keywords.global_delimiter_set = CharacterSet.parse(args.delimiters)
    if args.max_spaces is not None:
        keywords.max_space_count_allowed = args.max_spaces
    return keywords


def match_to_dict(match: Optional[Match]) -> Optional[dict]:
    if match is None:
        return None
    return {
        "prefix": match.prefix,
        "word": match.word,
        "location": match.range.location,
        "length": match.range.length,
    }


def print_match(match: Optional[Match]) -> None:
    if match is None:
        console.print("[yellow]no match[/yellow]")
        return
    table = Table(show_header=False, box=None)
    table.add_row("prefix", Text(match.prefix))
    table.add_row("word", Text(match.word))
    table.add_row("range", f"{match.range.location}..{match.range.end} (UTF-16)")
    console.print(table)


def run_find(args: argparse.Namespace, config: ScanConfig) -> int:
    keywords = build_keywords(args, config)
    caret = args.caret if args.caret is not None else utf16_length(args.text)
    match = keywords.find_last_trigger(args.text, TextRange(caret, 0))

    if args.json:
        console.print_json(json.dumps(match_to_dict(match)))
    else:
        print_match(match)
    return 0 if match is not None else 1


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = parse_args(argv)
    setup_logger(verbose=args.verbose, debug=args.debug)

    try:
        config = ScanConfig.load(args.config)
        if args.command == "find":
            return run_find(args, config)

        from mention_scan.ui.textual.app import MentionApp

        app = MentionApp(config=config)
    except ValueError as e:
        console.print(f"[red]error:[/red] {e}")
        raise SystemExit(2) from e

    app.run()
    return 0
