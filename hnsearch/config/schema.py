"""Configuration schema using Pydantic."""

from pydantic import BaseModel, Field

from hnsearch.search.client import DEFAULT_ENDPOINT
from hnsearch.search.storage import DEFAULT_SEARCH_TERM, SEARCH_TERM_KEY


class SearchConfig(BaseModel):
    """Remote search endpoint settings."""

    endpoint: str = DEFAULT_ENDPOINT
    timeout_seconds: float | None = Field(default=None, gt=0)  # None waits indefinitely
    discard_stale_responses: bool = True


class StorageConfig(BaseModel):
    """Where the search term is kept between sessions."""

    path: str = "~/.hnsearch/storage.json"
    search_term_key: str = SEARCH_TERM_KEY
    default_search_term: str = DEFAULT_SEARCH_TERM


class Config(BaseModel):
    """Root configuration for hnsearch."""

    title: str = "React"
    search: SearchConfig = Field(default_factory=SearchConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
