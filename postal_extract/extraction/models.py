"""Data models for the extraction engine."""

from dataclasses import dataclass
from typing import Optional

THREAD_PER_CANDIDATE = "thread-per-candidate"
BOUNDED_POOL = "bounded-pool"


@dataclass
class ExtractionResult:
    """Outcome of one extraction call over a candidate sequence.

    Attributes:
        address: Winning address ending in ", USA", or "" when nothing matched
        candidate_count: Number of candidates dispatched
        matched_count: Candidates whose matcher produced an address. Every unit
            runs to completion, so this can exceed 1 even though only one
            address is kept
        error_count: Units that raised instead of returning
        worker_mode: THREAD_PER_CANDIDATE or BOUNDED_POOL
        max_workers: Pool size in bounded mode, None otherwise
        duration_seconds: Wall time from first dispatch to the completion barrier
    """

    address: str
    candidate_count: int = 0
    matched_count: int = 0
    error_count: int = 0
    worker_mode: str = THREAD_PER_CANDIDATE
    max_workers: Optional[int] = None
    duration_seconds: float = 0.0

    @property
    def found(self) -> bool:
        """Whether an address was captured."""
        return bool(self.address)
