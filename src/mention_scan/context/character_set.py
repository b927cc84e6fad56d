"""Character sets used as delimiters when scanning for mentions.

A :class:`CharacterSet` combines literal characters with Unicode general
categories (``Zs``, ``Po``...) so that classes such as "all whitespace" can
be expressed without enumerating every code point.  Sets are immutable and
support ``-`` (subtraction) and ``|`` (union).
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass, field, replace
from typing import FrozenSet, Iterable, Tuple, Union


@dataclass(frozen=True)
class CharacterSet:
    """Immutable set of characters defined by literals and Unicode categories.

    A character belongs to the set when it is one of :attr:`characters`, has
    a general category in :attr:`categories`, or belongs to one of
    :attr:`members`; and it belongs to none of :attr:`excluded`.

    Unions and differences keep their operands in :attr:`members` and
    :attr:`excluded`, so each operand's own exclusions still apply.

    Attributes:
        characters: Literal member characters.
        categories: Two-letter Unicode general categories (e.g. ``"Zs"``).
        members: Sets whose characters are included.
        excluded: Sets whose characters are removed.
    """

    characters: FrozenSet[str] = field(default_factory=frozenset)
    categories: FrozenSet[str] = field(default_factory=frozenset)
    members: Tuple["CharacterSet", ...] = ()
    excluded: Tuple["CharacterSet", ...] = ()

    @classmethod
    def of(cls, characters: Iterable[str] = (), categories: Iterable[str] = ()) -> "CharacterSet":
        """Build a set from any iterable of characters and categories.

        Strings are split into their individual characters.
        """
        return cls(frozenset("".join(characters)), frozenset(categories))

    @property
    def is_empty(self) -> bool:
        return not (self.characters or self.categories or self.members)

    def __contains__(self, char: object) -> bool:
        if not isinstance(char, str) or len(char) != 1:
            return False
        included = (
            char in self.characters
            or unicodedata.category(char) in self.categories
            or any(char in member for member in self.members)
        )
        return included and not any(char in other for other in self.excluded)

    def __sub__(self, other: "CharacterSet") -> "CharacterSet":
        if other.is_empty or self.is_empty:
            return self
        return replace(self, excluded=self.excluded + (other,))

    def __or__(self, other: "CharacterSet") -> "CharacterSet":
        if other.is_empty:
            return self
        if self.is_empty:
            return other
        if not self.excluded and not other.excluded:
            return CharacterSet(
                characters=self.characters | other.characters,
                categories=self.categories | other.categories,
                members=self.members + other.members,
            )
        return CharacterSet(members=(self, other))

    def first_member_in(self, text: str) -> int:
        """Return the index of the first character of *text* in the set, or -1."""
        for i, char in enumerate(text):
            if char in self:
                return i
        return -1

    @classmethod
    def named(cls, name: str) -> "CharacterSet":
        """Return one of the predefined sets by name.

        Args:
            name: ``"whitespaces"``, ``"newlines"``,
                ``"whitespaces_and_newlines"``, ``"punctuation"`` or
                ``"symbols"``.

        Raises:
            ValueError: If *name* is not a predefined set.
        """
        try:
            return NAMED_SETS[name]
        except KeyError:
            known = ", ".join(sorted(NAMED_SETS))
            raise ValueError(f"Unknown character set {name!r} (expected one of: {known})") from None

    @classmethod
    def parse(cls, value: Union[str, Iterable[str]]) -> "CharacterSet":
        """Build a set from a configuration value.

        *value* is either a single entry or a list of entries.  An entry that
        looks like an identifier (``"whitespaces"``) must name a predefined
        set (see :meth:`named`); any other string contributes its characters
        literally.

        Examples:
            ``"whitespaces"``, ``["whitespaces", ".,;"]``

        Raises:
            ValueError: If an identifier-like entry is not a predefined set.
        """
        entries = [value] if isinstance(value, str) else list(value)
        result = cls()
        for entry in entries:
            if len(entry) > 1 and entry.isidentifier():
                result = result | cls.named(entry)
            else:
                result = result | cls.of(entry)
        return result


WHITESPACES = CharacterSet.of("\t", categories={"Zs"})
NEWLINES = CharacterSet.of("\n\x0b\x0c\r\x85\u2028\u2029")
WHITESPACES_AND_NEWLINES = WHITESPACES | NEWLINES
PUNCTUATION = CharacterSet.of(categories={"Pc", "Pd", "Ps", "Pe", "Pi", "Pf", "Po"})
SYMBOLS = CharacterSet.of(categories={"Sm", "Sc", "Sk", "So"})

NAMED_SETS = {
    "whitespaces": WHITESPACES,
    "newlines": NEWLINES,
    "whitespaces_and_newlines": WHITESPACES_AND_NEWLINES,
    "punctuation": PUNCTUATION,
    "symbols": SYMBOLS,
}
