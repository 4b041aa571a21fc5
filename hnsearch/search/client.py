"""Hacker News search API transport."""

import httpx

from hnsearch.search.models import Record

DEFAULT_ENDPOINT = "https://hn.algolia.com/api/v1/search?query="


class SearchFetchError(Exception):
    """Raised when a search request fails for any reason."""


class SearchClient:
    """Issue one GET per call against a query URL and normalize the hits."""

    def __init__(self, timeout: float | None = None):
        self.timeout = timeout

    async def get(self, url: str) -> list[Record]:
        """Fetch `url` and return its hits as records."""
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    url,
                    headers={"Accept": "application/json"},
                    timeout=self.timeout,
                )
                response.raise_for_status()

            hits = response.json()["hits"]
            if not isinstance(hits, list):
                raise ValueError("hits must be an array")
            return [Record.from_hit(item) for item in hits]
        except Exception as e:
            raise SearchFetchError(f"search request failed: {e}") from e
