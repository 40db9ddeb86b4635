"""Pipeline orchestration: fetch a page, convert it to text, extract an address."""

from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from postal_extract.config.models import AppConfig
from postal_extract.extraction import AddressExtractor, tokenize
from postal_extract.fetch import PageFetcher, html_to_text
from postal_extract.logging import get_logger
from postal_extract.logging.context import log_context
from postal_extract.reference import ReferenceTables

from .models import ExtractionRunResult

logger = get_logger(__name__, component="pipeline")


class ExtractionPipeline:
    """
    Runs the full extraction flow for one input.

    URL input goes fetch → HTML-to-text → tokenize → concurrent extraction.
    Text and HTML inputs skip the steps they do not need. Fetch errors
    propagate to the caller untouched; the extraction engine only ever
    reports "no address" as an empty result.
    """

    def __init__(
        self,
        app_config: AppConfig,
        tables: ReferenceTables,
        fetcher: Optional[PageFetcher] = None,
    ):
        """
        Initialize the pipeline.

        Args:
            app_config: Application configuration
            tables: Reference tables, loaded once and shared by every run
            fetcher: Optional page fetcher (built from app_config.fetch otherwise)
        """
        self.app_config = app_config
        self.tables = tables
        self.fetcher = fetcher or PageFetcher(
            timeout=app_config.fetch.http_request_timeout,
            user_agent=app_config.fetch.user_agent,
        )
        self.extractor = AddressExtractor(
            tables, max_workers=app_config.extraction.max_workers
        )

    def run_for_url(self, url: str) -> ExtractionRunResult:
        """
        Fetch ``url`` and extract an address from it.

        Raises:
            FetchError: If the page cannot be retrieved
        """
        run_started_at = datetime.now(timezone.utc)
        with log_context(run_id=uuid4().hex, url=url):
            logger.info(
                "Pipeline run started",
                extra={"event": "pipeline.run.started", "input_kind": "url"},
            )
            markup = self.fetcher.fetch(url)
            return self._extract(url, html_to_text(markup), run_started_at)

    def run_for_html(self, markup: str, source: str = "<html>") -> ExtractionRunResult:
        """Extract an address from already retrieved HTML."""
        run_started_at = datetime.now(timezone.utc)
        with log_context(run_id=uuid4().hex, source=source):
            return self._extract(source, html_to_text(markup), run_started_at)

    def run_for_text(self, text: str, source: str = "<text>") -> ExtractionRunResult:
        """Extract an address from plain text.

        Line breaks are collapsed to spaces first, matching what the HTML
        converter hands to the engine.
        """
        run_started_at = datetime.now(timezone.utc)
        with log_context(run_id=uuid4().hex, source=source):
            return self._extract(source, " ".join(text.splitlines()), run_started_at)

    def _extract(
        self, source: str, text: str, run_started_at: datetime
    ) -> ExtractionRunResult:
        window_size = self.app_config.extraction.window_size
        candidates = tokenize(text, window_size)

        logger.debug(
            f"Tokenized {len(candidates)} candidates",
            extra={
                "event": "pipeline.tokenized",
                "text_length": len(text),
                "window_size": window_size,
                "candidate_count": len(candidates),
            },
        )

        extraction = self.extractor.run(candidates)

        result = ExtractionRunResult(
            source=source,
            address=extraction.address,
            run_started_at=run_started_at,
            run_finished_at=datetime.now(timezone.utc),
            text_length=len(text),
            word_count=len(text.split()),
            extraction=extraction,
        )

        logger.info(
            "Pipeline run completed",
            extra={
                "event": "pipeline.run.completed",
                "found": result.found,
                "candidate_count": result.candidate_count,
                "duration_ms": int(result.total_duration_seconds * 1000),
            },
        )
        return result

    def close(self) -> None:
        """Release the fetcher's HTTP session."""
        self.fetcher.close()
