"""Unit tests for reference tables and their YAML loader."""

from pathlib import Path

import pytest

from postal_extract.reference import (
    ReferenceTable,
    ReferenceTableError,
    ReferenceTables,
    default_reference_tables,
    load_reference_tables,
    load_table,
)

TABLES_DIR = Path(__file__).parent / "fixtures" / "tables"


class TestReferenceTable:
    """Tests for ReferenceTable."""

    def test_longest_entries_scanned_first(self):
        """Test scan order is by length, then alphabetical."""
        table = ReferenceTable("states", ["Virginia", "West Virginia", "VA", "AL"])

        assert table.entries == ("West Virginia", "Virginia", "AL", "VA")

    def test_find_prefers_most_specific(self):
        """Test 'West Virginia' wins over 'Virginia'."""
        table = ReferenceTable("states", ["Virginia", "West Virginia"])

        assert table.find("Charleston, West Virginia 25301") == "West Virginia"

    def test_find_no_match(self):
        """Test find returns an empty string when nothing matches."""
        table = ReferenceTable("states", ["Virginia"])

        assert table.find("Virginian hospitality") == ""

    def test_case_insensitive_duplicates_collapse(self):
        """Test duplicates differing only in case keep the first spelling."""
        table = ReferenceTable("streets", ["Street", "STREET", "street", "  ", ""])

        assert table.entries == ("Street",)
        assert len(table) == 1

    def test_contains_is_case_insensitive(self):
        """Test membership ignores case."""
        table = ReferenceTable("streets", ["Avenue"])

        assert "avenue" in table
        assert "AVENUE" in table
        assert "Ave" not in table
        assert 42 not in table

    def test_inner_whitespace_normalized(self):
        """Test multi-word entries are stored with single spaces."""
        table = ReferenceTable("states", ["New   York"])

        assert table.entries == ("New York",)
        assert table.find("Albany, New York 12207") == "New York"

    def test_iteration_and_repr(self):
        """Test iteration follows scan order."""
        table = ReferenceTable("streets", ["St", "Street"])

        assert list(table) == ["Street", "St"]
        assert repr(table) == "ReferenceTable(name='streets', entries=2)"

    def test_from_entries(self):
        """Test building both tables from plain lists."""
        tables = ReferenceTables.from_entries(["Illinois"], ["Street"])

        assert tables.states.name == "states"
        assert tables.street_suffixes.name == "street_suffixes"
        assert "Illinois" in tables.states


class TestLoadTable:
    """Tests for load_table()."""

    def test_mapping_form(self):
        """Test a mapping with an entries list."""
        table = load_table(TABLES_DIR / "states_small.yaml", "states")

        assert table.entries == ("Illinois", "New York", "York")

    def test_list_form(self):
        """Test a bare top-level list."""
        table = load_table(TABLES_DIR / "streets_small.yaml", "street_suffixes")

        assert table.entries == ("Street", "St.")

    def test_missing_file(self, tmp_path):
        """Test a missing file raises ReferenceTableError with the path."""
        path = tmp_path / "missing.yaml"

        with pytest.raises(ReferenceTableError, match="not found") as exc_info:
            load_table(path, "states")

        assert exc_info.value.path == path

    def test_invalid_yaml(self, tmp_path):
        """Test unparsable YAML raises ReferenceTableError."""
        path = tmp_path / "broken.yaml"
        path.write_text("entries: [Illinois, Ohio\n")

        with pytest.raises(ReferenceTableError, match="Failed to parse"):
            load_table(path, "states")

    def test_empty_table(self):
        """Test a table with no entries is rejected."""
        with pytest.raises(ReferenceTableError, match="is empty"):
            load_table(TABLES_DIR / "empty.yaml", "states")

    def test_empty_file(self, tmp_path):
        """Test an empty file is rejected for its shape."""
        path = tmp_path / "blank.yaml"
        path.write_text("")

        with pytest.raises(ReferenceTableError, match="must be a list"):
            load_table(path, "states")

    def test_non_string_entries(self, tmp_path):
        """Test numeric or nested entries are rejected."""
        path = tmp_path / "numbers.yaml"
        path.write_text("- Illinois\n- 62704\n- [nested]\n")

        with pytest.raises(ReferenceTableError, match="non-string"):
            load_table(path, "states")


class TestPackagedTables:
    """Tests for the packaged US tables."""

    def test_default_tables_load(self):
        """Test the packaged tables hold the expected entries."""
        tables = load_reference_tables()

        assert "Illinois" in tables.states
        assert "New York" in tables.states
        assert "CA" in tables.states
        assert "District of Columbia" in tables.states
        assert "Street" in tables.street_suffixes
        assert "St." in tables.street_suffixes
        assert "Avenue" in tables.street_suffixes

    @pytest.mark.parametrize("word", ["IN", "OR", "ME", "OK", "HI", "OH", "ID", "AS"])
    def test_english_word_abbreviations_excluded(self, word):
        """Test two-letter codes that are common words are not recognized."""
        assert word not in default_reference_tables().states

    def test_full_names_of_excluded_codes_present(self):
        """Test the full names behind the excluded codes still match."""
        states = default_reference_tables().states

        for name in ("Indiana", "Oregon", "Maine", "Oklahoma", "Hawaii", "Ohio", "Idaho"):
            assert name in states

    def test_default_tables_cached(self):
        """Test the packaged tables are loaded once per process."""
        assert default_reference_tables() is default_reference_tables()

    def test_override_paths(self):
        """Test explicit paths replace the packaged tables."""
        tables = load_reference_tables(
            states_path=TABLES_DIR / "states_small.yaml",
            street_suffixes_path=TABLES_DIR / "streets_small.yaml",
        )

        assert len(tables.states) == 3
        assert len(tables.street_suffixes) == 2
