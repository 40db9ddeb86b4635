"""Immutable lookup tables of recognized state names and street suffixes.

A table answers one question for the matcher: which of my entries occurs as a
whole word in this candidate? Entries are compared case-insensitively and are
always scanned in the same order, longest first with ties broken
alphabetically, so that the most specific entry wins ("West Virginia" before
"Virginia", "Avenue" before "Ave").
"""

import re
from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

# Digits, word characters and word boundaries are ASCII-only
MATCH_FLAGS = re.IGNORECASE | re.ASCII


def whole_word(literal: str) -> str:
    """Return a regex fragment matching ``literal`` as a whole word.

    The literal is escaped. Lookarounds are used instead of ``\\b`` so entries
    that end in punctuation ("St.") still require a non-word neighbour.

    Example:
        >>> bool(re.search(whole_word("St."), "101 Townsend St., San Francisco"))
        True
    """
    return rf"(?<!\w){re.escape(literal)}(?!\w)"


class ReferenceTable:
    """An ordered, read-only set of case-insensitive literal strings.

    Safe for unsynchronized concurrent reads: nothing is mutated after
    construction.
    """

    __slots__ = ("_name", "_entries", "_patterns", "_folded")

    def __init__(self, name: str, entries: Iterable[str]) -> None:
        """Build a table.

        Blank entries are dropped and duplicates differing only in case are
        collapsed, keeping the first spelling seen.

        Args:
            name: Table name used in logs and errors (e.g. "states")
            entries: Literal strings to recognize
        """
        seen = {}
        for entry in entries:
            cleaned = " ".join(str(entry).split())
            if cleaned and cleaned.casefold() not in seen:
                seen[cleaned.casefold()] = cleaned

        ordered = sorted(seen.values(), key=lambda e: (-len(e), e.casefold()))

        self._name = name
        self._entries: Tuple[str, ...] = tuple(ordered)
        self._folded = frozenset(seen)
        self._patterns = tuple(
            (entry, re.compile(whole_word(entry), MATCH_FLAGS)) for entry in ordered
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def entries(self) -> Tuple[str, ...]:
        """Entries in scan order."""
        return self._entries

    def find(self, candidate: str) -> str:
        """Return the first entry found as a whole word in ``candidate``, or "".

        Args:
            candidate: Text window to scan

        Returns:
            The matching entry spelled as stored in the table, or empty string
        """
        for entry, pattern in self._patterns:
            if pattern.search(candidate):
                return entry
        return ""

    def __contains__(self, item: object) -> bool:
        return isinstance(item, str) and item.casefold() in self._folded

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ReferenceTable(name={self._name!r}, entries={len(self._entries)})"


@dataclass(frozen=True)
class ReferenceTables:
    """The pair of tables the candidate matcher consults.

    Attributes:
        states: Recognized state names and abbreviations
        street_suffixes: Recognized street-suffix words
    """

    states: ReferenceTable
    street_suffixes: ReferenceTable

    @classmethod
    def from_entries(
        cls, states: Iterable[str], street_suffixes: Iterable[str]
    ) -> "ReferenceTables":
        """Build both tables from plain iterables of strings."""
        return cls(
            states=ReferenceTable("states", states),
            street_suffixes=ReferenceTable("street_suffixes", street_suffixes),
        )
