"""Search result state, fetching and ordering."""

from hnsearch.search.client import DEFAULT_ENDPOINT, SearchClient, SearchFetchError
from hnsearch.search.controller import SearchController, build_query_url
from hnsearch.search.fetch import FetchOrchestrator
from hnsearch.search.models import SORT_MODES, Record, SortMode, ViewState
from hnsearch.search.reducer import (
    INITIAL_STATE,
    DeleteRecord,
    ReportError,
    ResultStateMachine,
    SearchEvent,
    SetResults,
    StartFetching,
    reduce,
)
from hnsearch.search.sorting import sort_records
from hnsearch.search.storage import (
    DEFAULT_SEARCH_TERM,
    SEARCH_TERM_KEY,
    InMemoryStore,
    JsonFileStore,
    KeyValueStore,
    PersistentValue,
)

__all__ = [
    "DEFAULT_ENDPOINT",
    "DEFAULT_SEARCH_TERM",
    "INITIAL_STATE",
    "SEARCH_TERM_KEY",
    "SORT_MODES",
    "DeleteRecord",
    "FetchOrchestrator",
    "InMemoryStore",
    "JsonFileStore",
    "KeyValueStore",
    "PersistentValue",
    "Record",
    "ReportError",
    "ResultStateMachine",
    "SearchClient",
    "SearchController",
    "SearchEvent",
    "SearchFetchError",
    "SetResults",
    "SortMode",
    "StartFetching",
    "ViewState",
    "build_query_url",
    "reduce",
    "sort_records",
]
