"""Concurrent dispatch of the candidate matcher with first-match-wins aggregation.

Every candidate gets its own unit of work. Units that find an address offer it
to a single-slot result cell; the first offer is kept and the rest are dropped
without blocking. Nothing is cancelled once a result is captured: the
aggregator waits for every unit before reading the slot once.

Because units race, the captured address is the first one deposited, which is
not necessarily the leftmost address in the text.
"""

import contextvars
import logging
import queue
import threading
import time
from concurrent.futures import ThreadPoolExecutor, wait
from typing import List, Optional, Sequence

from postal_extract.logging import get_logger
from postal_extract.reference import ReferenceTables

from .matcher import NO_MATCH, match_address
from .models import BOUNDED_POOL, THREAD_PER_CANDIDATE, ExtractionResult

logger = get_logger(__name__, component="extraction")


class ResultSlot:
    """Write-once result cell with capacity 1.

    ``offer`` never blocks: it succeeds for the first caller and is a no-op
    for everyone after. ``take`` never blocks either and returns "" when the
    slot is empty.
    """

    def __init__(self) -> None:
        self._queue: "queue.Queue[str]" = queue.Queue(maxsize=1)

    def offer(self, value: str) -> bool:
        """Deposit ``value`` if the slot is still empty.

        Returns:
            True if this call filled the slot, False if it was already taken
        """
        try:
            self._queue.put_nowait(value)
        except queue.Full:
            return False
        return True

    def take(self) -> str:
        """Remove and return the deposited value, or "" if there is none."""
        try:
            return self._queue.get_nowait()
        except queue.Empty:
            return NO_MATCH


class AddressExtractor:
    """Runs the candidate matcher over a candidate sequence concurrently.

    By default one thread is started per candidate, all eagerly. With
    ``max_workers`` set, a bounded thread pool of that size runs the same
    units instead; every unit still runs to completion.
    """

    def __init__(
        self,
        tables: ReferenceTables,
        max_workers: Optional[int] = None,
        logger_instance: Optional[logging.Logger] = None,
    ):
        """Initialize AddressExtractor.

        Args:
            tables: Reference tables shared read-only by all units
            max_workers: Bounded pool size, or None for one thread per candidate
            logger_instance: Optional logger (defaults to module logger)

        Raises:
            ValueError: If max_workers is less than 1
        """
        if max_workers is not None and max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got: {max_workers}")

        self.tables = tables
        self.max_workers = max_workers
        self.logger = logger_instance or logger

    def extract(self, candidates: Sequence[str]) -> str:
        """Return the first address captured from ``candidates``, or ""."""
        return self.run(candidates).address

    def run(self, candidates: Sequence[str]) -> ExtractionResult:
        """Dispatch every candidate and aggregate the outcome.

        Args:
            candidates: Candidate windows in text order

        Returns:
            ExtractionResult with the captured address and dispatch statistics
        """
        started = time.monotonic()
        slot = ResultSlot()
        # One cell per unit; each unit writes only its own index
        outcomes: List[Optional[bool]] = [None] * len(candidates)

        if self.max_workers is None:
            worker_mode = THREAD_PER_CANDIDATE
            self._run_threads(candidates, slot, outcomes)
        else:
            worker_mode = BOUNDED_POOL
            self._run_pool(candidates, slot, outcomes)

        address = slot.take()
        result = ExtractionResult(
            address=address,
            candidate_count=len(candidates),
            matched_count=sum(1 for outcome in outcomes if outcome),
            error_count=sum(1 for outcome in outcomes if outcome is None),
            worker_mode=worker_mode,
            max_workers=self.max_workers,
            duration_seconds=time.monotonic() - started,
        )

        if result.found:
            self.logger.info(
                "Address extracted",
                extra={
                    "event": "extraction.completed",
                    "address": address,
                    "candidate_count": result.candidate_count,
                    "matched_count": result.matched_count,
                    "worker_mode": worker_mode,
                    "duration_ms": int(result.duration_seconds * 1000),
                },
            )
        else:
            self.logger.info(
                "No address found",
                extra={
                    "event": "extraction.no_match",
                    "candidate_count": result.candidate_count,
                    "worker_mode": worker_mode,
                    "duration_ms": int(result.duration_seconds * 1000),
                },
            )

        return result

    def _run_threads(
        self, candidates: Sequence[str], slot: ResultSlot, outcomes: List[Optional[bool]]
    ) -> None:
        threads = []
        for index, candidate in enumerate(candidates):
            context = contextvars.copy_context()
            thread = threading.Thread(
                target=context.run,
                args=(self._run_unit, index, candidate, slot, outcomes),
                name=f"address-candidate-{index}",
                daemon=True,
            )
            thread.start()
            threads.append(thread)

        # Completion barrier
        for thread in threads:
            thread.join()

    def _run_pool(
        self, candidates: Sequence[str], slot: ResultSlot, outcomes: List[Optional[bool]]
    ) -> None:
        with ThreadPoolExecutor(
            max_workers=self.max_workers, thread_name_prefix="address-candidate"
        ) as executor:
            futures = [
                executor.submit(
                    contextvars.copy_context().run,
                    self._run_unit,
                    index,
                    candidate,
                    slot,
                    outcomes,
                )
                for index, candidate in enumerate(candidates)
            ]
            wait(futures)

    def _run_unit(
        self,
        index: int,
        candidate: str,
        slot: ResultSlot,
        outcomes: List[Optional[bool]],
    ) -> None:
        """Match one candidate and offer any address to the slot.

        Failures are logged and leave this unit's outcome unset; they never
        stop the other units.
        """
        try:
            address = match_address(candidate, self.tables)
        except Exception as e:
            self.logger.error(
                f"Matcher failed on candidate {index}: {e}",
                extra={
                    "event": "extraction.unit.failed",
                    "candidate_index": index,
                    "error_type": type(e).__name__,
                },
                exc_info=True,
            )
            return

        outcomes[index] = bool(address)
        if address and slot.offer(address):
            self.logger.debug(
                "Result slot filled",
                extra={"event": "extraction.slot.filled", "candidate_index": index},
            )


def extract_address(
    candidates: Sequence[str],
    tables: ReferenceTables,
    max_workers: Optional[int] = None,
) -> str:
    """Run the matcher over every candidate concurrently and return the first address.

    Args:
        candidates: Candidate windows produced by the tokenizer
        tables: State and street-suffix tables
        max_workers: Optional bounded pool size (default: one thread per candidate)

    Returns:
        An address ending in ", USA", or "" when no candidate matched
    """
    return AddressExtractor(tables, max_workers=max_workers).extract(candidates)
