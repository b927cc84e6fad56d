"""Tests for mention_scan.context.keywords.Keywords."""

from mention_scan.config import ScanConfig
from mention_scan.context.character_set import WHITESPACES, WHITESPACES_AND_NEWLINES
from mention_scan.context.keywords import Keywords
from mention_scan.context.offsets import TextRange


def _caret(text):
    return TextRange(len(text), 0)


class TestFindLastTrigger:
    def setup_method(self):
        self.kw = Keywords(["/", "@", ":", "#"], global_delimiter_set=WHITESPACES_AND_NEWLINES)

    def test_no_trigger(self):
        assert self.kw.find_last_trigger("hello world", _caret("hello world")) is None

    def test_trigger_at_start(self):
        match = self.kw.find_last_trigger("/workspace", _caret("/workspace"))
        assert match.prefix == "/"
        assert match.word == "/workspace"
        assert match.range == TextRange(0, 10)

    def test_trigger_after_space(self):
        match = self.kw.find_last_trigger("hello /ws", _caret("hello /ws"))
        assert match.range.location == 6
        assert match.prefix == "/"

    def test_trigger_after_tab(self):
        match = self.kw.find_last_trigger("text\t@file", _caret("text\t@file"))
        assert match.range.location == 5
        assert match.word == "@file"

    def test_trigger_after_newline(self):
        match = self.kw.find_last_trigger("line\n#tag", _caret("line\n#tag"))
        assert match.word == "#tag"

    def test_trigger_in_middle_of_word(self):
        match = self.kw.find_last_trigger("hello@world", _caret("hello@world"))
        assert match.range.location == 5

    def test_rightmost_trigger_wins(self):
        match = self.kw.find_last_trigger("/cmd @file", _caret("/cmd @file"))
        assert match.range.location == 5
        assert match.prefix == "@"

    def test_empty_string(self):
        assert self.kw.find_last_trigger("", TextRange(0, 0)) is None

    def test_no_caret(self):
        assert self.kw.find_last_trigger("@file", None) is None

    def test_selection_uses_its_upper_bound(self):
        match = self.kw.find_last_trigger("@alice bob", TextRange(1, 3))
        assert match.word == "@ali"


class TestKeywordsInit:
    def test_prefixes_are_ordered_and_deduplicated(self):
        kw = Keywords(["@", "##", "", "@"])
        assert kw.prefixes == ["##", "@"]

    def test_no_prefixes(self):
        kw = Keywords([], global_delimiter_set=WHITESPACES)
        assert kw.find_last_trigger("@a", TextRange(2, 0)) is None

    def test_delimiter_set_for(self):
        kw = Keywords(["@", "#"], delimiter_sets={"#": {"."}}, global_delimiter_set=WHITESPACES)
        assert kw.delimiter_set_for("#") == {"."}
        assert kw.delimiter_set_for("@") is WHITESPACES

    def test_delimiter_set_for_prefix_mapped_to_none(self):
        kw = Keywords(["@"], delimiter_sets={"@": None}, global_delimiter_set=WHITESPACES)
        assert kw.delimiter_set_for("@") is WHITESPACES
        assert kw.find_last_trigger("hi @a b", _caret("hi @a b")) is None

    def test_space_tolerance(self):
        kw = Keywords(["@"], global_delimiter_set=WHITESPACES, max_space_count_allowed=1)
        assert kw.find_last_trigger("hi @ana b", _caret("hi @ana b")).word == "@ana b"


class TestFromConfig:
    def test_builds_sets(self, tmp_path):
        cfg = ScanConfig(
            config_path=tmp_path / "cfg.json",
            prefixes=["@"],
            delimiter_sets={"@": ["whitespaces", "."]},
            global_delimiter_set=None,
            max_space_count_allowed=1,
        )
        kw = Keywords.from_config(cfg)
        assert kw.prefixes == ["@"]
        assert "." in kw.delimiter_set_for("@")
        assert kw.global_delimiter_set is None
        assert kw.find_last_trigger("hi @a b", _caret("hi @a b")).word == "@a b"
        assert kw.find_last_trigger("hi @a.b", _caret("hi @a.b")) is None

    def test_defaults(self, tmp_path):
        kw = Keywords.from_config(ScanConfig(config_path=tmp_path / "cfg.json"))
        assert kw.prefixes == ["#", "@"]
        assert kw.find_last_trigger("a #b\n@c", _caret("a #b\n@c")).word == "@c"
