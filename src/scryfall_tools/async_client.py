"""Async client for the Scryfall API.

Searches, typed-link fetches and bulk streams run natively on
``httpx.AsyncClient`` and suspend only while waiting on the network or
on the next decoded bulk element. Anything else the sync client offers
can be run in a thread pool through :meth:`AsyncScryfallTools.run`.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator, Callable
from concurrent.futures import ThreadPoolExecutor
from typing import Any, TypeVar

import httpx

from ._stream import DecoderFactory, JsonArrayDecoder, astream_json_array
from .client import ScryfallTools
from .config import API_BASE, DEFAULT_TIMEOUT
from .connection import AsyncConnection
from .lists import AsyncListIter, AsyncPageIter, Page
from .models.bulk import BulkDataFile
from .models.cards import Card
from .queries.bulk import bulk_file_uri, item_adapter
from .queries.cards import Search
from .uri import Uri

logger = logging.getLogger("scryfall_tools")

T = TypeVar("T")


class AsyncScryfallTools:
    """Async wrapper around :class:`ScryfallTools`.

    Usage::

        async with AsyncScryfallTools() as sdk:
            async for card in await sdk.search(cmc(4) & name("Yargle")):
                print(card.name)

            async for card in sdk.bulk("oracle_cards"):
                ...

            bolt = await sdk.run(sdk.inner.cards.named, "Lightning Bolt")
    """

    def __init__(
        self,
        *,
        max_workers: int = 4,
        base_url: str = API_BASE,
        timeout: float = DEFAULT_TIMEOUT,
        async_client: httpx.AsyncClient | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize the async client.

        Args:
            max_workers: Thread pool size for :meth:`run`.
            base_url: API root, shared with the inner sync client.
            timeout: HTTP request timeout in seconds.
            async_client: Pre-configured ``httpx.AsyncClient``.
            **kwargs: Forwarded to :class:`ScryfallTools` (``client``,
                ``on_progress``).
        """
        self._sdk = ScryfallTools(base_url=base_url, timeout=timeout, **kwargs)
        self._conn = AsyncConnection(
            base_url=base_url, timeout=timeout, client=async_client
        )
        self._executor = ThreadPoolExecutor(max_workers=max_workers)

    @property
    def inner(self) -> ScryfallTools:
        """Access the underlying sync client."""
        return self._sdk

    @property
    def connection(self) -> AsyncConnection:
        return self._conn

    async def run(self, fn: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """Run any sync client method in the thread pool.

        Example::

            card = await sdk.run(sdk.inner.cards.named, "Black Lotus")
            sets = await sdk.run(lambda: list(sdk.inner.sets.all()))
        """
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, lambda: fn(*args, **kwargs))

    async def search(self, search: Search) -> AsyncListIter[Card]:
        """Fetch the first page of *search* and stream the matching cards.

        Later pages are fetched as the stream is consumed.
        """
        return await self._conn.fetch_iter(self._sdk.cards.search_uri(search))

    async def search_pages(self, search: Search) -> AsyncPageIter[Card]:
        """Stream whole result pages. See :meth:`AsyncPageIter.prefetch`."""
        return await self._conn.fetch_pages(self._sdk.cards.search_uri(search))

    async def search_all(self, search: Search) -> list[Card]:
        """Every matching card; raises on any failed page."""
        return await self._conn.fetch_all(self._sdk.cards.search_uri(search))

    async def fetch(self, uri: Uri[T]) -> T:
        return await self._conn.fetch(uri)

    async def fetch_iter(self, uri: Uri[Page[T]]) -> AsyncListIter[T]:
        return await self._conn.fetch_iter(uri)

    async def bulk(
        self, bulk: str | BulkDataFile, decoder_cls: DecoderFactory = JsonArrayDecoder
    ) -> AsyncIterator[Any]:
        """Stream and decode a bulk file.

        Decoding runs in the event loop's default executor; decoded
        elements are buffered without bound, so a slow consumer never
        stalls the download.

        Raises:
            ValueError: Unknown bulk type.
            DecodeError: After the last good element, if the file is
                malformed or cut short.
        """
        if not isinstance(bulk, BulkDataFile):
            bulk = await self._conn.fetch(bulk_file_uri(bulk, self._conn.base_url))
        logger.info("Streaming bulk %s from %s", bulk.type, bulk.download_uri)
        async with self._conn.stream(bulk.download_uri) as chunks:
            async for item in astream_json_array(
                chunks, item_adapter(bulk.type), decoder_cls=decoder_cls
            ):
                yield item

    async def close(self) -> None:
        """Close both HTTP clients and shut down the thread pool."""
        await self._conn.close()
        self._sdk.close()
        self._executor.shutdown(wait=False)

    async def __aenter__(self) -> AsyncScryfallTools:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"AsyncScryfallTools(base_url={self._conn.base_url!r})"
