"""Postal address extraction from free-form web page text."""

from .extraction import AddressExtractor, extract_address, match_address, tokenize
from .reference import ReferenceTables, default_reference_tables, load_reference_tables

__version__ = "1.0.0"

__all__ = [
    "AddressExtractor",
    "ReferenceTables",
    "default_reference_tables",
    "extract_address",
    "load_reference_tables",
    "match_address",
    "tokenize",
]
