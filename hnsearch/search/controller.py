"""Search controller: the surface the presentation layer talks to."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from loguru import logger

from hnsearch.search.client import DEFAULT_ENDPOINT, SearchClient
from hnsearch.search.fetch import FetchOrchestrator
from hnsearch.search.models import SORT_MODES, Record, SortMode, ViewState
from hnsearch.search.reducer import DeleteRecord, ResultStateMachine
from hnsearch.search.sorting import sort_records
from hnsearch.search.storage import (
    DEFAULT_SEARCH_TERM,
    SEARCH_TERM_KEY,
    JsonFileStore,
    KeyValueStore,
    PersistentValue,
)

if TYPE_CHECKING:
    from hnsearch.config.schema import Config


def build_query_url(endpoint: str, term: str) -> str:
    """Append the URL-encoded term to the endpoint base."""
    return f"{endpoint}{quote(term, safe='')}"


class SearchController:
    """
    Wire the persisted search term to submit-triggered fetches.

    Typing updates and persists the term right away but never touches the
    network. Only `submit()` freezes the term into a new query URL and runs
    one fetch for it.
    """

    def __init__(
        self,
        term: PersistentValue,
        orchestrator: FetchOrchestrator,
        machine: ResultStateMachine,
        endpoint: str = DEFAULT_ENDPOINT,
    ):
        self._term = term
        self.orchestrator = orchestrator
        self.machine = machine
        self.endpoint = endpoint
        self._query_url = build_query_url(endpoint, term.value)
        self._sort_mode: SortMode = "none"

    @classmethod
    def create(
        cls,
        store: KeyValueStore,
        *,
        endpoint: str = DEFAULT_ENDPOINT,
        key: str = SEARCH_TERM_KEY,
        default_term: str = DEFAULT_SEARCH_TERM,
        client: SearchClient | None = None,
        discard_stale_responses: bool = True,
    ) -> "SearchController":
        """Build a controller and its collaborators around one key-value store."""
        term = PersistentValue(store, key, default_term)
        machine = ResultStateMachine()
        orchestrator = FetchOrchestrator(
            client or SearchClient(),
            machine,
            term_source=lambda: term.value,
            discard_stale_responses=discard_stale_responses,
        )
        return cls(term, orchestrator, machine, endpoint=endpoint)

    @classmethod
    def from_config(cls, config: "Config", client: SearchClient | None = None) -> "SearchController":
        return cls.create(
            JsonFileStore(Path(config.storage.path)),
            endpoint=config.search.endpoint,
            key=config.storage.search_term_key,
            default_term=config.storage.default_search_term,
            client=client or SearchClient(timeout=config.search.timeout_seconds),
            discard_stale_responses=config.search.discard_stale_responses,
        )

    @property
    def term(self) -> str:
        return self._term.value

    @property
    def query_url(self) -> str:
        return self._query_url

    @property
    def view(self) -> ViewState:
        return self.machine.state

    @property
    def sort_mode(self) -> SortMode:
        return self._sort_mode

    @sort_mode.setter
    def sort_mode(self, mode: SortMode) -> None:
        if mode not in SORT_MODES:
            raise ValueError(f"sort mode must be one of {list(SORT_MODES)}")
        self._sort_mode = mode

    def on_term_change(self, new_term: str) -> None:
        self._term.value = new_term

    async def submit(self) -> ViewState:
        """Freeze the current term into the query URL and fetch it once."""
        self._query_url = build_query_url(self.endpoint, self.term)
        logger.info("Search submitted: {!r}", self.term)
        await self.orchestrator.run(self._query_url)
        return self.machine.state

    def on_delete(self, record_id: Any) -> ViewState:
        # Local only; resubmitting the same query brings the record back.
        return self.machine.dispatch(DeleteRecord(record_id))

    def visible_records(self) -> tuple[Record, ...]:
        return sort_records(self.machine.state.records, self._sort_mode)
