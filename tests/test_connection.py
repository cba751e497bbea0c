"""Tests for the HTTP connection layer, against respx-mocked endpoints."""

import httpx
import pytest
import respx

from scryfall_tools import (
    ConsistencyError,
    DecodeError,
    Page,
    ScryfallError,
    TransportError,
    Uri,
)
from scryfall_tools.config import USER_AGENT
from scryfall_tools.connection import AsyncConnection, Connection
from scryfall_tools.models import Card

URL = "https://api.scryfall.com/cards/card-id-001"
LIST_URL = "https://api.scryfall.com/cards/search"


@pytest.fixture
def conn():
    c = Connection()
    yield c
    c.close()


# === fetch ===


@respx.mock
def test_fetch_validates_body(conn, sample_cards):
    route = respx.get(URL).mock(return_value=httpx.Response(200, json=sample_cards[0]))
    card = conn.fetch(Uri(URL, Card))
    assert isinstance(card, Card)
    assert card.name == "Lightning Bolt"
    assert route.calls.last.request.headers["user-agent"] == USER_AGENT


@respx.mock
def test_error_body_becomes_scryfall_error(conn, not_found):
    respx.get(URL).mock(return_value=httpx.Response(404, json=not_found))
    with pytest.raises(ScryfallError) as exc_info:
        conn.fetch(Uri(URL, Card))
    err = exc_info.value
    assert err.status == 404
    assert err.code == "not_found"
    assert err.details == "Your query didn't match any cards."
    assert err.warnings == ['Invalid expression "xyz:1" was ignored.']
    assert "404" in str(err)


@respx.mock
def test_non_json_error_uses_reason_phrase(conn):
    respx.get(URL).mock(return_value=httpx.Response(503, text="<html>down</html>"))
    with pytest.raises(ScryfallError) as exc_info:
        conn.fetch(Uri(URL, Card))
    assert exc_info.value.status == 503
    assert exc_info.value.details == "Service Unavailable"


@respx.mock
def test_transport_failure_carries_url(conn):
    respx.get(URL).mock(side_effect=httpx.ConnectError("connection refused"))
    with pytest.raises(TransportError) as exc_info:
        conn.fetch(Uri(URL, Card))
    assert exc_info.value.url == URL
    assert "connection refused" in str(exc_info.value)


@respx.mock
def test_unexpected_shape_is_decode_error(conn):
    respx.get(URL).mock(return_value=httpx.Response(200, json={"object": "card"}))
    with pytest.raises(DecodeError, match="Unexpected response shape"):
        conn.fetch(Uri(URL, Card))


@respx.mock
def test_get_sends_params(conn, make_list):
    route = respx.get(LIST_URL).mock(return_value=httpx.Response(200, json=make_list([1])))
    page = conn.get(LIST_URL, Uri(LIST_URL, Page[int]).adapter, [("q", "cmc:3")])
    assert page.data == [1]
    assert route.calls.last.request.url.params["q"] == "cmc:3"


# === Pagination ===


@respx.mock
def test_fetch_iter_follows_next_page(conn, make_list):
    # more specific route first: respx matches a bare URL against any query
    respx.get(f"{LIST_URL}?page=2").mock(return_value=httpx.Response(200, json=make_list([3])))
    respx.get(LIST_URL).mock(
        return_value=httpx.Response(200, json=make_list([1, 2], next_page=f"{LIST_URL}?page=2"))
    )
    assert list(conn.fetch_iter(Uri(LIST_URL, Page[int]))) == [1, 2, 3]


@respx.mock
def test_fetch_pages(conn, make_list):
    respx.get(f"{LIST_URL}?page=2").mock(return_value=httpx.Response(200, json=make_list([2])))
    respx.get(LIST_URL).mock(
        return_value=httpx.Response(200, json=make_list([1], next_page=f"{LIST_URL}?page=2"))
    )
    pages = list(conn.fetch_pages(Uri(LIST_URL, Page[int])))
    assert [p.data for p in pages] == [[1], [2]]


@respx.mock
def test_fetch_all_raises_on_failed_page(conn, make_list):
    respx.get(f"{LIST_URL}?page=2").mock(return_value=httpx.Response(500, json={"details": "oops"}))
    respx.get(LIST_URL).mock(
        return_value=httpx.Response(200, json=make_list([1], next_page=f"{LIST_URL}?page=2"))
    )
    with pytest.raises(ScryfallError):
        conn.fetch_all(Uri(LIST_URL, Page[int]))


@respx.mock
def test_fetch_all_checks_consistency(conn, make_list):
    respx.get(LIST_URL).mock(
        return_value=httpx.Response(200, json=make_list([1], has_more=True))
    )
    with pytest.raises(ConsistencyError):
        conn.fetch_all(Uri(LIST_URL, Page[int]))


# === stream / download ===


@respx.mock
def test_stream_yields_body(conn):
    url = "https://data.scryfall.io/file.json"
    respx.get(url).mock(return_value=httpx.Response(200, content=b"[1, 2, 3]"))
    with conn.stream(url) as chunks:
        assert b"".join(chunks) == b"[1, 2, 3]"


@respx.mock
def test_stream_checks_status_first(conn, not_found):
    url = "https://data.scryfall.io/missing.json"
    respx.get(url).mock(return_value=httpx.Response(404, json=not_found))
    with pytest.raises(ScryfallError):
        with conn.stream(url):
            pass


@respx.mock
def test_download_writes_file_and_reports_progress(tmp_path):
    url = "https://data.scryfall.io/oracle.json"
    body = b"[" + b"1," * 1000 + b"1]"
    respx.get(url).mock(
        return_value=httpx.Response(200, content=body)
    )
    calls = []
    with Connection(on_progress=lambda *a: calls.append(a)) as c:
        dest = c.download(url, tmp_path / "sub" / "oracle.json")
    assert dest.read_bytes() == body
    assert calls[-1] == ("oracle.json", len(body), len(body))
    assert not (tmp_path / "sub" / "oracle.json.tmp").exists()


@respx.mock
def test_failed_download_leaves_nothing(conn, tmp_path):
    url = "https://data.scryfall.io/oracle.json"
    respx.get(url).mock(side_effect=httpx.ReadTimeout("timed out"))
    dest = tmp_path / "oracle.json"
    with pytest.raises(TransportError):
        conn.download(url, dest)
    assert list(tmp_path.iterdir()) == []


# === Client ownership ===


def test_owned_client_is_created_lazily_and_closed():
    c = Connection()
    assert c._client is None
    client = c.client
    assert c.client is client
    c.close()
    assert client.is_closed
    assert c._client is None


def test_injected_client_is_left_open():
    client = httpx.Client()
    c = Connection(client=client)
    c.close()
    assert not client.is_closed
    client.close()


def test_base_url_trailing_slash_stripped():
    assert Connection(base_url="http://localhost:8080/").base_url == "http://localhost:8080"


# === Async ===


@pytest.mark.asyncio
@respx.mock
async def test_async_fetch(sample_cards):
    respx.get(URL).mock(return_value=httpx.Response(200, json=sample_cards[0]))
    async with AsyncConnection() as c:
        card = await c.fetch(Uri(URL, Card))
    assert card.id == "card-id-001"


@pytest.mark.asyncio
@respx.mock
async def test_async_transport_error():
    respx.get(URL).mock(side_effect=httpx.ConnectTimeout("slow"))
    async with AsyncConnection() as c:
        with pytest.raises(TransportError):
            await c.fetch(Uri(URL, Card))


@pytest.mark.asyncio
@respx.mock
async def test_async_fetch_all(make_list):
    respx.get(f"{LIST_URL}?page=2").mock(return_value=httpx.Response(200, json=make_list([2])))
    respx.get(LIST_URL).mock(
        return_value=httpx.Response(200, json=make_list([1], next_page=f"{LIST_URL}?page=2"))
    )
    async with AsyncConnection() as c:
        assert await c.fetch_all(Uri(LIST_URL, Page[int])) == [1, 2]


@pytest.mark.asyncio
@respx.mock
async def test_async_stream():
    url = "https://data.scryfall.io/file.json"
    respx.get(url).mock(return_value=httpx.Response(200, content=b"[1]"))
    async with AsyncConnection() as c:
        async with c.stream(url) as chunks:
            body = b"".join([chunk async for chunk in chunks])
    assert body == b"[1]"
