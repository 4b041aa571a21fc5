"""Turn one search request into state machine events."""

from __future__ import annotations

import itertools
from collections.abc import Callable

from loguru import logger

from hnsearch.search.client import SearchClient
from hnsearch.search.reducer import ReportError, ResultStateMachine, SetResults, StartFetching


class FetchOrchestrator:
    """
    Run search requests and dispatch their outcomes.

    Each run takes a new generation number. With `discard_stale_responses`
    enabled, a response that arrives after a newer run has started is dropped
    so an older query can never overwrite the results of a newer one.
    Disabled, whichever response lands last wins.
    """

    def __init__(
        self,
        client: SearchClient,
        machine: ResultStateMachine,
        term_source: Callable[[], str],
        discard_stale_responses: bool = True,
    ):
        self.client = client
        self.machine = machine
        self.term_source = term_source
        self.discard_stale_responses = discard_stale_responses
        self._generations = itertools.count(1)
        self._latest = 0

    @property
    def latest_generation(self) -> int:
        return self._latest

    async def run(self, url: str) -> None:
        """Fetch `url` once and dispatch SetResults or ReportError."""
        generation = next(self._generations)
        self._latest = generation

        if not self.term_source():
            logger.debug("Empty search term, skipping request")
            self.machine.dispatch(SetResults([]))
            return

        self.machine.dispatch(StartFetching())
        logger.debug("Search request #{} started: {}", generation, url)
        try:
            records = await self.client.get(url)
        except Exception as e:
            if self._is_stale(generation):
                return
            logger.warning("Search request #{} failed: {}", generation, e)
            self.machine.dispatch(ReportError("error"))
            return

        if self._is_stale(generation):
            return
        logger.info("Search request #{} returned {} records", generation, len(records))
        self.machine.dispatch(SetResults(records))

    def _is_stale(self, generation: int) -> bool:
        if not self.discard_stale_responses or generation == self._latest:
            return False
        logger.debug(
            "Dropping response for request #{} (latest is #{})", generation, self._latest
        )
        return True
