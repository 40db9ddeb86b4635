"""Pipeline orchestration for page fetching, text conversion and address extraction."""

from .models import ExtractionRunResult
from .runner import ExtractionPipeline

__all__ = [
    "ExtractionPipeline",
    "ExtractionRunResult",
]
