"""Loading of reference tables from YAML data files.

Each file holds either a top-level list of strings or a mapping with an
``entries`` list:

    name: states
    entries:
      - Alabama
      - AL

The packaged US tables live in ``postal_extract/reference/data``.
"""

from functools import lru_cache
from pathlib import Path
from typing import List, Optional

import yaml

from postal_extract.logging import get_logger

from .exceptions import ReferenceTableError
from .tables import ReferenceTable, ReferenceTables

logger = get_logger(__name__, component="reference")

DATA_DIR = Path(__file__).parent / "data"
DEFAULT_STATES_PATH = DATA_DIR / "states.yaml"
DEFAULT_STREET_SUFFIXES_PATH = DATA_DIR / "street_suffixes.yaml"


def load_table(path: Path, name: str) -> ReferenceTable:
    """Load a single reference table from a YAML file.

    Args:
        path: YAML file to read
        name: Table name for logs and errors

    Returns:
        ReferenceTable with the file's entries

    Raises:
        ReferenceTableError: If the file is missing, unparsable, has the wrong
            shape or yields no entries
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise ReferenceTableError(f"Reference table '{name}' not found: {path}", path=path)
    except yaml.YAMLError as e:
        raise ReferenceTableError(
            f"Failed to parse reference table '{name}' at {path}: {e}", path=path
        ) from e
    except OSError as e:
        raise ReferenceTableError(
            f"Failed to read reference table '{name}' at {path}: {e}", path=path
        ) from e

    entries = _extract_entries(data, name, path)
    table = ReferenceTable(name, entries)

    if not len(table):
        raise ReferenceTableError(f"Reference table '{name}' at {path} is empty", path=path)

    logger.debug(
        f"Loaded reference table {name}",
        extra={
            "event": "reference.table.loaded",
            "table": name,
            "path": str(path),
            "entry_count": len(table),
        },
    )
    return table


def _extract_entries(data: object, name: str, path: Path) -> List[str]:
    if isinstance(data, dict):
        data = data.get("entries")

    if not isinstance(data, list):
        raise ReferenceTableError(
            f"Reference table '{name}' at {path} must be a list or a mapping with an 'entries' list",
            path=path,
        )

    bad = [item for item in data if not isinstance(item, str)]
    if bad:
        raise ReferenceTableError(
            f"Reference table '{name}' at {path} contains non-string entries: {bad[:5]}",
            path=path,
        )

    return data


def load_reference_tables(
    states_path: Optional[Path] = None,
    street_suffixes_path: Optional[Path] = None,
) -> ReferenceTables:
    """Load the state and street-suffix tables.

    Args:
        states_path: Override for the packaged states table
        street_suffixes_path: Override for the packaged street-suffix table

    Returns:
        Immutable ReferenceTables

    Raises:
        ReferenceTableError: If either table cannot be loaded
    """
    tables = ReferenceTables(
        states=load_table(states_path or DEFAULT_STATES_PATH, "states"),
        street_suffixes=load_table(
            street_suffixes_path or DEFAULT_STREET_SUFFIXES_PATH, "street_suffixes"
        ),
    )

    logger.info(
        "Reference tables loaded",
        extra={
            "event": "reference.tables.loaded",
            "state_count": len(tables.states),
            "street_suffix_count": len(tables.street_suffixes),
        },
    )
    return tables


@lru_cache(maxsize=1)
def default_reference_tables() -> ReferenceTables:
    """Packaged US tables, loaded once per process."""
    return load_reference_tables()
