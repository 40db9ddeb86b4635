"""Candidate matcher locating a US postal address inside one text window.

Matching runs in three steps:
1. Find a known state name in the candidate (none found means no address)
2. Find a known street suffix in the candidate (none found means no address)
3. Search the candidate with a positional pattern built from both literals:
   house number, up to three words, street suffix, anything, state,
   1-3 characters, then a ZIP or ZIP+4 code

The leftmost match of the pattern, with the country appended, is the result.
"""

import re
from functools import lru_cache
from typing import Pattern

from postal_extract.reference import MATCH_FLAGS, ReferenceTables, whole_word

COUNTRY_SUFFIX = ", USA"

NO_MATCH = ""


def find_state(candidate: str, tables: ReferenceTables) -> str:
    """Return the first state found as a whole word in the candidate, or ""."""
    return tables.states.find(candidate)


def find_street(candidate: str, tables: ReferenceTables) -> str:
    """Return the first street suffix found as a whole word in the candidate, or ""."""
    return tables.street_suffixes.find(candidate)


@lru_cache(maxsize=1024)
def address_pattern(state: str, street: str) -> Pattern[str]:
    """Compile the positional address pattern for a (state, street) pair.

    Both literals are escaped, so table entries containing regex
    metacharacters cannot break compilation.
    """
    return re.compile(
        r"\d+(,*\s*\w*){1,3}"
        + whole_word(street)
        + r".+"
        + whole_word(state)
        + r".{1,3}(\b\d{5}-\d{4}\b|\b\d{5}\b)",
        MATCH_FLAGS,
    )


def match_address(candidate: str, tables: ReferenceTables) -> str:
    """Extract an address from a single candidate window.

    Args:
        candidate: Window of consecutive words
        tables: State and street-suffix tables

    Returns:
        The matched address followed by ", USA", or "" when the candidate
        holds no address
    """
    state = find_state(candidate, tables)
    if not state:
        return NO_MATCH

    street = find_street(candidate, tables)
    if not street:
        return NO_MATCH

    match = address_pattern(state, street).search(candidate)
    if match is None:
        return NO_MATCH

    return match.group(0) + COUNTRY_SUFFIX
