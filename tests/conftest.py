"""Shared fixtures for the postal address extractor tests."""

import logging

import pytest

from postal_extract.logging.context import clear_log_context
from postal_extract.reference import ReferenceTables, default_reference_tables


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the developer's environment out of configuration tests."""
    for name in ("LOG_LEVEL", "ENVIRONMENT", "POSTAL_EXTRACT_CONFIG"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def clean_context():
    """Clear logging context before and after each test."""
    clear_log_context()
    yield
    clear_log_context()


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after configure_logging()."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def small_tables():
    """Tiny tables for focused matcher tests."""
    return ReferenceTables.from_entries(
        states=["Illinois", "New York", "York"],
        street_suffixes=["Street", "St."],
    )


@pytest.fixture
def us_tables():
    """The packaged US tables."""
    return default_reference_tables()
