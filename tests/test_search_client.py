import httpx
import pytest

from hnsearch.search.client import SearchClient, SearchFetchError
from hnsearch.search.models import Record


class FakeResponse:
    def __init__(self, payload, error: Exception | None = None, body_error: Exception | None = None):
        self._payload = payload
        self._error = error
        self._body_error = body_error

    def raise_for_status(self) -> None:
        if self._error:
            raise self._error

    def json(self):
        if self._body_error:
            raise self._body_error
        return self._payload


def _stub_client(monkeypatch, response: FakeResponse | None = None, error: Exception | None = None) -> dict:
    calls: dict = {}

    class StubClient:
        async def __aenter__(self):
            return self

        async def __aexit__(self, exc_type, exc, tb):
            return False

        async def get(self, url, headers=None, timeout=None):
            calls["url"] = url
            calls["headers"] = headers
            calls["timeout"] = timeout
            calls["count"] = calls.get("count", 0) + 1
            if error:
                raise error
            return response

    monkeypatch.setattr("hnsearch.search.client.httpx.AsyncClient", StubClient)
    return calls


@pytest.mark.asyncio
async def test_get_maps_hits_to_records(monkeypatch) -> None:
    calls = _stub_client(
        monkeypatch,
        FakeResponse(
            {
                "hits": [
                    {
                        "title": "React",
                        "url": "https://reactjs.org/",
                        "author": "Jordan Walke",
                        "num_comments": 3,
                        "points": 4,
                        "objectID": 0,
                    }
                ]
            }
        ),
    )

    records = await SearchClient(timeout=5.0).get("https://hn.example/search?query=React")

    assert records == [
        Record(
            title="React",
            url="https://reactjs.org/",
            author="Jordan Walke",
            comment_count=3,
            score=4,
            id=0,
        )
    ]
    assert calls["url"] == "https://hn.example/search?query=React"
    assert calls["timeout"] == 5.0
    assert calls["count"] == 1


@pytest.mark.asyncio
async def test_get_defaults_to_no_timeout(monkeypatch) -> None:
    calls = _stub_client(monkeypatch, FakeResponse({"hits": []}))

    assert await SearchClient().get("https://hn.example/search?query=x") == []
    assert calls["timeout"] is None


@pytest.mark.asyncio
async def test_missing_hit_fields_become_none(monkeypatch) -> None:
    _stub_client(monkeypatch, FakeResponse({"hits": [{"title": "Only a title"}]}))

    records = await SearchClient().get("https://hn.example/search?query=x")

    assert records[0].title == "Only a title"
    assert records[0].author is None
    assert records[0].id is None


@pytest.mark.asyncio
async def test_http_error_wrapped(monkeypatch) -> None:
    _stub_client(monkeypatch, FakeResponse({}, error=httpx.HTTPError("boom")))

    with pytest.raises(SearchFetchError, match="search request failed: boom"):
        await SearchClient().get("https://hn.example/search?query=x")


@pytest.mark.asyncio
async def test_transport_error_wrapped(monkeypatch) -> None:
    _stub_client(monkeypatch, error=httpx.ConnectError("refused"))

    with pytest.raises(SearchFetchError) as exc_info:
        await SearchClient().get("https://hn.example/search?query=x")
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        FakeResponse(None, body_error=ValueError("not json")),
        FakeResponse({"results": []}),
        FakeResponse({"hits": "nope"}),
    ],
)
async def test_malformed_body_wrapped(monkeypatch, response) -> None:
    _stub_client(monkeypatch, response)

    with pytest.raises(SearchFetchError):
        await SearchClient().get("https://hn.example/search?query=x")
