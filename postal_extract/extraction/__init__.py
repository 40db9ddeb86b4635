"""Address extraction engine.

This module provides:
- tokenize: split normalized text into overlapping word windows
- match_address: find an address inside a single window
- AddressExtractor / extract_address: concurrent first-match-wins dispatch
- ExtractionResult: captured address plus dispatch statistics
"""

from .dispatcher import AddressExtractor, ResultSlot, extract_address
from .matcher import COUNTRY_SUFFIX, NO_MATCH, find_state, find_street, match_address
from .models import BOUNDED_POOL, THREAD_PER_CANDIDATE, ExtractionResult
from .tokenizer import DEFAULT_WINDOW_SIZE, tokenize

__all__ = [
    "tokenize",
    "DEFAULT_WINDOW_SIZE",
    "match_address",
    "find_state",
    "find_street",
    "COUNTRY_SUFFIX",
    "NO_MATCH",
    "AddressExtractor",
    "ResultSlot",
    "extract_address",
    "ExtractionResult",
    "THREAD_PER_CANDIDATE",
    "BOUNDED_POOL",
]
