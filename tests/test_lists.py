"""Tests for list pages and the paginating iterators."""

import asyncio
import logging

import pytest

from scryfall_tools import (
    AsyncListIter,
    AsyncPageIter,
    ConsistencyError,
    ListIter,
    Page,
    PageIter,
    ScryfallError,
    TransportError,
    Uri,
)


def page(data, next_page=None, *, has_more=None, total=None, warnings=()):
    return Page[int](
        data=data,
        has_more=next_page is not None if has_more is None else has_more,
        next_page=next_page,
        total_cards=total,
        warnings=list(warnings),
    )


class FakeConn:
    """Serves pages by URL; an exception value is raised instead."""

    def __init__(self, pages):
        self.pages = pages
        self.requested = []

    def fetch(self, uri):
        self.requested.append(uri.url)
        result = self.pages[uri.url]
        if isinstance(result, Exception):
            raise result
        return result


class FakeAsyncConn(FakeConn):
    async def fetch(self, uri):
        return FakeConn.fetch(self, uri)


# === Page ===


def test_page_next_uri_keeps_type():
    p = page([1], "p2")
    assert p.next_uri == Uri("p2")
    assert p.next_uri.target is Page[int]
    assert page([1]).next_uri is None


def test_page_consistency():
    assert page([1], "p2").is_consistent
    assert not page([1], "p2", has_more=False).is_consistent
    assert not page([1], has_more=True).is_consistent


# === ListIter ===


def test_list_iter_follows_pages_in_order():
    conn = FakeConn({"p2": page([3, 4], "p3"), "p3": page([5])})
    it = ListIter(page([1, 2], "p2"), conn)
    assert list(it) == [1, 2, 3, 4, 5]
    assert conn.requested == ["p2", "p3"]
    assert it.pages == 3


def test_list_iter_fetches_lazily():
    conn = FakeConn({"p2": page([3])})
    it = ListIter(page([1, 2], "p2"), conn)
    assert next(it) == 1
    assert next(it) == 2
    assert conn.requested == []
    assert next(it) == 3
    assert conn.requested == ["p2"]


def test_list_iter_skips_empty_pages():
    conn = FakeConn({"p2": page([], "p3"), "p3": page([7])})
    assert list(ListIter(page([], "p2"), conn)) == [7]


def test_size_hint_tracks_total():
    conn = FakeConn({"p2": page([4, 5], total=5)})
    it = ListIter(page([1, 2, 3], "p2", total=5), conn)
    assert it.size_hint() == (5, None)
    next(it)
    next(it)
    next(it)
    assert it.size_hint() == (2, None)
    next(it)
    assert it.size_hint() == (1, 1)
    assert it.remaining == 1


def test_size_hint_without_total():
    it = ListIter(page([1, 2], "p2"), FakeConn({}))
    assert it.size_hint() == (2, None)
    last = ListIter(page([1, 2]), FakeConn({}))
    assert last.size_hint() == (2, 2)
    assert last.exhausted is False


def test_warnings_accumulate():
    conn = FakeConn({"p2": page([2], warnings=["second"])})
    it = ListIter(page([1], "p2", warnings=["first"]), conn)
    list(it)
    assert it.warnings == ["first", "second"]


def test_failed_fetch_truncates_and_logs(caplog):
    conn = FakeConn({"p2": TransportError("p2", "connection reset")})
    it = ListIter(page([1, 2], "p2", total=10), conn)
    with caplog.at_level(logging.ERROR, logger="scryfall_tools"):
        assert list(it) == [1, 2]
    assert isinstance(it.last_error, TransportError)
    assert it.size_hint() == (0, 0)
    assert "ending iteration early" in caplog.text
    # no retry
    assert list(it) == []
    assert conn.requested == ["p2"]


def test_api_error_mid_iteration_truncates():
    conn = FakeConn({"p2": ScryfallError("boom", status=500)})
    it = ListIter(page([1], "p2"), conn)
    assert list(it) == [1]
    assert it.last_error.status == 500


def test_inconsistent_first_page_raises():
    with pytest.raises(ConsistencyError):
        ListIter(page([1], has_more=True), FakeConn({}))


def test_inconsistent_later_page_raises():
    conn = FakeConn({"p2": page([2], "p3", has_more=False)})
    it = ListIter(page([1], "p2"), conn)
    assert next(it) == 1
    with pytest.raises(ConsistencyError):
        next(it)
    assert list(it) == []


# === PageIter ===


def test_page_iter_yields_pages_and_fetches_ahead():
    p2 = page([3], "p3")
    p3 = page([4])
    conn = FakeConn({"p2": p2, "p3": p3})
    it = PageIter(page([1, 2], "p2"), conn)
    first = next(it)
    assert first.data == [1, 2]
    assert conn.requested == ["p2"]
    assert [p.data for p in it] == [[3], [4]]
    assert it.pages == 3


def test_page_iter_failure_stops_after_current_page(caplog):
    conn = FakeConn({"p2": TransportError("p2", "timeout")})
    it = PageIter(page([1], "p2"), conn)
    with caplog.at_level(logging.ERROR, logger="scryfall_tools"):
        pages = list(it)
    assert [p.data for p in pages] == [[1]]
    assert isinstance(it.last_error, TransportError)
    assert "no further pages" in caplog.text


def test_page_iter_returns_page_before_consistency_error():
    conn = FakeConn({"p2": page([3], has_more=True)})
    it = PageIter(page([1, 2], "p2"), conn)
    assert next(it).data == [1, 2]
    with pytest.raises(ConsistencyError):
        next(it)
    assert list(it) == []


# === Async iterators ===


@pytest.mark.asyncio
async def test_async_list_iter():
    conn = FakeAsyncConn({"p2": page([3], "p3"), "p3": page([4])})
    it = AsyncListIter(page([1, 2], "p2"), conn)
    assert [x async for x in it] == [1, 2, 3, 4]


@pytest.mark.asyncio
async def test_async_list_iter_truncates_on_failure():
    conn = FakeAsyncConn({"p2": TransportError("p2")})
    it = AsyncListIter(page([1], "p2"), conn)
    assert [x async for x in it] == [1]
    assert isinstance(it.last_error, TransportError)


@pytest.mark.asyncio
async def test_async_page_iter():
    conn = FakeAsyncConn({"p2": page([2])})
    it = AsyncPageIter(page([1], "p2"), conn)
    assert [p.data async for p in it] == [[1], [2]]


@pytest.mark.asyncio
async def test_async_page_iter_returns_page_before_consistency_error():
    conn = FakeAsyncConn({"p2": page([2], "p3", has_more=False)})
    it = AsyncPageIter(page([1], "p2"), conn)
    assert (await it.__anext__()).data == [1]
    with pytest.raises(ConsistencyError):
        await it.__anext__()
    with pytest.raises(StopAsyncIteration):
        await it.__anext__()


@pytest.mark.asyncio
async def test_prefetch_keeps_order():
    conn = FakeAsyncConn(
        {f"p{i}": page([i], f"p{i + 1}" if i < 6 else None) for i in range(2, 7)}
    )
    it = AsyncPageIter(page([1], "p2"), conn)
    got = [p.data[0] async for p in it.prefetch(limit=2)]
    assert got == [1, 2, 3, 4, 5, 6]


@pytest.mark.asyncio
async def test_prefetch_raises_consistency_error():
    conn = FakeAsyncConn({"p2": page([2], has_more=True)})
    it = AsyncPageIter(page([1], "p2"), conn)
    got = []
    with pytest.raises(ConsistencyError):
        async for p in it.prefetch():
            got.append(p.data)
    assert got == [[1]]


@pytest.mark.asyncio
async def test_prefetch_task_finishes_when_consumer_leaves():
    conn = FakeAsyncConn({f"p{i}": page([i], f"p{i + 1}") for i in range(2, 20)})
    it = AsyncPageIter(page([1], "p2"), conn)
    stream = it.prefetch(limit=1)
    assert (await stream.__anext__()).data == [1]
    await stream.aclose()
    assert asyncio.all_tasks() == {asyncio.current_task()}

@pytest.mark.asyncio
async def test_prefetch_rejects_bad_limit():
    it = AsyncPageIter(page([1]), FakeAsyncConn({}))
    with pytest.raises(ValueError):
        async for _ in it.prefetch(limit=0):
            pass
