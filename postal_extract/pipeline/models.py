"""Data models for pipeline execution tracking and reporting."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from postal_extract.extraction.models import ExtractionResult


@dataclass
class ExtractionRunResult:
    """
    Result of one end-to-end extraction run.

    Attributes:
        source: URL or label of the input
        address: Extracted address ending in ", USA", or "" when none was found
        text_length: Characters of normalized text handed to the tokenizer
        word_count: Words in the normalized text
        extraction: Dispatch statistics from the extraction engine
        run_started_at: UTC timestamp when the run began
        run_finished_at: UTC timestamp when the run completed
        total_duration_seconds: Total time for the run
    """

    source: str
    address: str
    run_started_at: datetime
    run_finished_at: datetime
    text_length: int = 0
    word_count: int = 0
    extraction: Optional[ExtractionResult] = None
    total_duration_seconds: float = 0.0

    def __post_init__(self):
        if self.total_duration_seconds == 0.0:
            delta = self.run_finished_at - self.run_started_at
            self.total_duration_seconds = delta.total_seconds()

    @property
    def found(self) -> bool:
        return bool(self.address)

    @property
    def candidate_count(self) -> int:
        return self.extraction.candidate_count if self.extraction else 0
