"""Reference tables of recognized US state names and street suffixes.

This module provides:
- ReferenceTable: ordered, case-insensitive, read-only set of literals
- ReferenceTables: the state/street-suffix pair consulted by the matcher
- load_reference_tables: load tables from YAML data files
- default_reference_tables: the packaged US tables, loaded once
"""

from .exceptions import ReferenceTableError
from .loader import default_reference_tables, load_reference_tables, load_table
from .tables import MATCH_FLAGS, ReferenceTable, ReferenceTables, whole_word

__all__ = [
    "ReferenceTable",
    "ReferenceTables",
    "ReferenceTableError",
    "default_reference_tables",
    "load_reference_tables",
    "load_table",
    "whole_word",
    "MATCH_FLAGS",
]
