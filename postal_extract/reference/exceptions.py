"""Custom exceptions for reference table loading."""

from pathlib import Path
from typing import Optional


class ReferenceTableError(Exception):
    """A reference table file is missing, malformed or empty.

    Raised while loading tables at startup, before any extraction runs.
    """

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path
