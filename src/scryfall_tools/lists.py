"""Paginated list objects and the iterators that follow their pages.

A Scryfall list object carries one page of results and, when there is
more, a link to the next page. :class:`ListIter` and
:class:`AsyncListIter` yield individual items and fetch the next page
only once the current one is used up; :class:`PageIter` and
:class:`AsyncPageIter` yield whole pages, fetching the next one as soon
as a page is handed out.

A page fetch that fails mid-iteration ends the iteration early: the
error is logged once, stored on ``last_error``, and no retry is made.
Use ``fetch_all`` on a connection when a failure should raise instead.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections import deque
from collections.abc import AsyncIterator
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from pydantic import BaseModel, Field

from .errors import ConsistencyError, ScryfallToolsError
from .uri import Uri

if TYPE_CHECKING:
    from .connection import AsyncConnection, Connection

logger = logging.getLogger("scryfall_tools")

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """One page of a Scryfall list object.

    Invariant: ``has_more`` is True exactly when ``next_page`` is set.
    The invariant is checked by the iterators, not trusted.
    """

    model_config = {"populate_by_name": True}

    object: str = Field(default="list")
    data: list[T] = Field(default_factory=list)
    has_more: bool = Field(default=False)
    next_page: str | None = Field(default=None)
    total_cards: int | None = Field(default=None)
    warnings: list[str] = Field(default_factory=list)

    @property
    def is_consistent(self) -> bool:
        return self.has_more == (self.next_page is not None)

    @property
    def next_uri(self) -> Uri[Page[T]] | None:
        """Link to the following page, typed like this one."""
        if self.next_page is None:
            return None
        return Uri(self.next_page, type(self))


def check_page(page: Page[Any]) -> None:
    """Raise :class:`ConsistencyError` if *page* contradicts itself."""
    if not page.is_consistent:
        raise ConsistencyError(
            f"List page has has_more={page.has_more} "
            f"but next_page={page.next_page!r}"
        )


class _Cursor(Generic[T]):
    """Page-following state shared by the sync and async item iterators."""

    def __init__(self, page: Page[T]) -> None:
        check_page(page)
        self._items: deque[T] = deque(page.data)
        self._next: Uri[Page[T]] | None = page.next_uri
        self._remaining: int | None = page.total_cards
        self._yielded = 0
        self.pages = 1
        self.warnings: list[str] = list(page.warnings)
        self.last_error: ScryfallToolsError | None = None

    @property
    def remaining(self) -> int | None:
        """Items still to come, if the server reported a total."""
        return self._remaining

    @property
    def exhausted(self) -> bool:
        return not self._items and self._next is None

    def size_hint(self) -> tuple[int, int | None]:
        """Lower and upper bound on the number of items left.

        The upper bound is None while another page may follow, and equal
        to the buffered count once the last page is loaded.
        """
        buffered = len(self._items)
        if self._next is None:
            return buffered, buffered
        if self._remaining is not None:
            return max(self._remaining, buffered), None
        return buffered, None

    def __length_hint__(self) -> int:
        return self.size_hint()[0]

    def _pop(self) -> T:
        item = self._items.popleft()
        self._yielded += 1
        if self._remaining is not None:
            self._remaining = max(self._remaining - 1, 0)
        return item

    def _advance(self, page: Page[T]) -> None:
        if not page.is_consistent:
            self._next = None
            check_page(page)
        self.pages += 1
        self._items = deque(page.data)
        self._next = page.next_uri
        self.warnings.extend(page.warnings)
        if page.total_cards is not None:
            self._remaining = max(page.total_cards - self._yielded, 0)
        logger.debug(
            "Loaded page %d (%d items, more=%s)",
            self.pages,
            len(page.data),
            page.has_more,
        )

    def _fail(self, uri: Uri[Any], exc: ScryfallToolsError) -> None:
        logger.error(
            "Fetching page %d from %s failed, ending iteration early: %s",
            self.pages + 1,
            uri.url,
            exc,
        )
        self.last_error = exc
        self._items.clear()
        self._next = None
        self._remaining = 0


class ListIter(_Cursor[T]):
    """Item iterator over a paginated list, fetching pages on demand.

    Example::

        for card in sdk.cards.search(cmc(4) & name("Yargle")):
            print(card.name)
    """

    def __init__(self, page: Page[T], conn: Connection) -> None:
        super().__init__(page)
        self._conn = conn

    def __iter__(self) -> ListIter[T]:
        return self

    def __next__(self) -> T:
        while not self._items:
            uri = self._next
            if uri is None:
                raise StopIteration
            try:
                page = self._conn.fetch(uri)
            except ScryfallToolsError as e:
                self._fail(uri, e)
                raise StopIteration from None
            self._advance(page)
        return self._pop()


class AsyncListIter(_Cursor[T]):
    """Async item stream over a paginated list.

    Example::

        async for card in await sdk.search("t:goblin"):
            print(card.name)
    """

    def __init__(self, page: Page[T], conn: AsyncConnection) -> None:
        super().__init__(page)
        self._conn = conn

    def __aiter__(self) -> AsyncListIter[T]:
        return self

    async def __anext__(self) -> T:
        while not self._items:
            uri = self._next
            if uri is None:
                raise StopAsyncIteration
            try:
                page = await self._conn.fetch(uri)
            except ScryfallToolsError as e:
                self._fail(uri, e)
                raise StopAsyncIteration from None
            self._advance(page)
        return self._pop()


class _PageCursor(Generic[T]):
    def __init__(self, page: Page[T]) -> None:
        check_page(page)
        self._page: Page[T] | None = page
        self._pending: ConsistencyError | None = None
        self.pages = 0
        self.last_error: ScryfallToolsError | None = None

    def _take(self) -> tuple[Page[T], Uri[Page[T]] | None]:
        page = self._page
        assert page is not None
        self._page = None
        self.pages += 1
        return page, page.next_uri

    def _store(self, page: Page[T]) -> None:
        # A bad page is reported on the call after the current page is returned.
        try:
            check_page(page)
        except ConsistencyError as e:
            self._pending = e
            return
        self._page = page

    def _raise_pending(self) -> None:
        if self._pending is not None:
            exc, self._pending = self._pending, None
            raise exc

    def _fail(self, uri: Uri[Any], exc: ScryfallToolsError) -> None:
        logger.error("Fetching %s failed, no further pages: %s", uri.url, exc)
        self.last_error = exc


class PageIter(_PageCursor[T]):
    """Iterator over whole pages.

    The next page is requested when the current one is handed out, so
    callers can report progress page by page.
    """

    def __init__(self, page: Page[T], conn: Connection) -> None:
        super().__init__(page)
        self._conn = conn

    def __iter__(self) -> PageIter[T]:
        return self

    def __next__(self) -> Page[T]:
        self._raise_pending()
        if self._page is None:
            raise StopIteration
        page, uri = self._take()
        if uri is not None:
            try:
                nxt = self._conn.fetch(uri)
            except ScryfallToolsError as e:
                self._fail(uri, e)
            else:
                self._store(nxt)
        return page


class AsyncPageIter(_PageCursor[T]):
    """Async stream of whole pages."""

    def __init__(self, page: Page[T], conn: AsyncConnection) -> None:
        super().__init__(page)
        self._conn = conn

    def __aiter__(self) -> AsyncPageIter[T]:
        return self

    async def __anext__(self) -> Page[T]:
        self._raise_pending()
        if self._page is None:
            raise StopAsyncIteration
        page, uri = self._take()
        if uri is not None:
            try:
                nxt = await self._conn.fetch(uri)
            except ScryfallToolsError as e:
                self._fail(uri, e)
            else:
                self._store(nxt)
        return page

    async def prefetch(self, limit: int = 2) -> AsyncIterator[Page[T]]:
        """Yield pages while a background task fetches up to *limit* ahead.

        Pages still arrive in next-link order; the task stops when the
        consumer stops iterating.

        Args:
            limit: Maximum number of fetched pages waiting to be consumed.

        Raises:
            ValueError: If *limit* is less than 1.
        """
        if limit < 1:
            raise ValueError("prefetch limit must be at least 1")
        queue: asyncio.Queue[Page[T] | Exception | None] = asyncio.Queue(maxsize=limit)

        async def produce() -> None:
            try:
                async for page in self:
                    await queue.put(page)
            except Exception as e:
                await queue.put(e)
            await queue.put(None)

        task = asyncio.create_task(produce())
        try:
            while True:
                item = await queue.get()
                if item is None:
                    break
                if isinstance(item, Exception):
                    raise item
                yield item
        finally:
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task
