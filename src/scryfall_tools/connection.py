"""HTTP connections to the Scryfall API.

:class:`Connection` and :class:`AsyncConnection` wrap a lazily created
``httpx`` client and implement the single fetch capability every query
builds on: issue a GET, map failures onto the package's error types, and
validate the body into the requested model.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Callable, Iterator
from contextlib import asynccontextmanager, contextmanager
from pathlib import Path
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from .config import ACCEPT, API_BASE, CHUNK_SIZE, DEFAULT_TIMEOUT, USER_AGENT
from .errors import DecodeError, ErrorBody, ScryfallError, TransportError
from .lists import AsyncListIter, AsyncPageIter, ListIter, Page, PageIter, check_page
from .uri import Uri

logger = logging.getLogger("scryfall_tools")

T = TypeVar("T")

ProgressCallback = Callable[[str, int, "int | None"], Any]


def _raise_for_status(resp: httpx.Response, url: str) -> None:
    """Turn a 4xx/5xx response into :class:`ScryfallError`."""
    if resp.is_success:
        return
    status = resp.status_code
    try:
        body = ErrorBody.model_validate_json(resp.content)
    except (ValidationError, ValueError):
        body = ErrorBody(details=resp.reason_phrase or f"HTTP {status} for {url}")
    if not body.details:
        body.details = resp.reason_phrase or f"HTTP {status} for {url}"
    raise ScryfallError.from_body(body, status)


def _validate(content: bytes, adapter: TypeAdapter[T], url: str) -> T:
    try:
        return adapter.validate_json(content)
    except ValidationError as e:
        raise DecodeError(f"Unexpected response shape from {url}: {e}") from e


def _headers() -> dict[str, str]:
    return {"User-Agent": USER_AGENT, "Accept": ACCEPT}


class Connection:
    """Blocking connection to the Scryfall API.

    Example::

        conn = Connection()
        card = conn.fetch(Uri("https://api.scryfall.com/cards/random", Card))
        conn.close()
    """

    def __init__(
        self,
        *,
        base_url: str = API_BASE,
        timeout: float = DEFAULT_TIMEOUT,
        on_progress: ProgressCallback | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        """Create a connection.

        Args:
            base_url: API root. Override for a mirror or a test server.
            timeout: HTTP request timeout in seconds.
            on_progress: Optional callback
                ``(filename, bytes_downloaded, total_bytes)``
                called during file downloads.
            client: Pre-configured ``httpx.Client`` to use instead of
                creating one. It is not closed by :meth:`close`.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._on_progress = on_progress
        self._client = client
        self._owns_client = client is None

    @property
    def client(self) -> httpx.Client:
        """Lazy HTTP client, created on first use."""
        if self._client is None:
            self._client = httpx.Client(
                timeout=self.timeout, follow_redirects=True, headers=_headers()
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client, if this connection opened it."""
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None

    def get(
        self,
        url: str,
        adapter: TypeAdapter[T],
        params: list[tuple[str, str]] | None = None,
    ) -> T:
        """GET *url* and validate the JSON body with *adapter*.

        Raises:
            TransportError: The request did not complete.
            ScryfallError: The API answered with an error object.
            DecodeError: The body did not match the expected shape.
        """
        logger.debug("GET %s %s", url, params or "")
        try:
            resp = self.client.get(url, params=params)
        except httpx.TransportError as e:
            raise TransportError(url, str(e)) from e
        _raise_for_status(resp, url)
        return _validate(resp.content, adapter, url)

    def fetch(self, uri: Uri[T]) -> T:
        """Fetch the resource behind *uri*."""
        return self.get(uri.url, uri.adapter)

    def fetch_iter(self, uri: Uri[Page[T]]) -> ListIter[T]:
        """Fetch the first page behind *uri* and iterate over its items."""
        return ListIter(self.fetch(uri), self)

    def fetch_pages(self, uri: Uri[Page[T]]) -> PageIter[T]:
        """Fetch the first page behind *uri* and iterate page by page."""
        return PageIter(self.fetch(uri), self)

    def fetch_all(self, uri: Uri[Page[T]]) -> list[T]:
        """Fetch every page behind *uri*, raising on the first failure.

        Unlike :meth:`fetch_iter`, nothing is silently truncated.
        """
        items: list[T] = []
        next_uri: Uri[Page[T]] | None = uri
        while next_uri is not None:
            page = self.fetch(next_uri)
            check_page(page)
            items.extend(page.data)
            next_uri = page.next_uri
        return items

    @contextmanager
    def stream(self, url: str) -> Iterator[Iterator[bytes]]:
        """Open *url* and yield an iterator over its raw body chunks.

        The status is checked before the body is read, so a failing
        request raises here rather than mid-iteration.

        Example::

            with conn.stream(bulk.download_uri) as chunks:
                for value in iter_json_array(chunks):
                    ...
        """
        logger.debug("GET (stream) %s", url)
        try:
            with self.client.stream("GET", url) as resp:
                if not resp.is_success:
                    resp.read()
                    _raise_for_status(resp, url)
                yield _wrap_chunks(resp.iter_bytes(chunk_size=CHUNK_SIZE), url)
        except httpx.TransportError as e:
            raise TransportError(url, str(e)) from e

    def download(self, url: str, dest: Path | str) -> Path:
        """Download *url* to *dest*.

        Downloads to a temp file first and renames on success, so an
        interrupted download never leaves a corrupt partial file behind.
        Calls ``on_progress(filename, bytes_downloaded, total_bytes)``
        after each chunk if a progress callback was provided.

        Returns:
            The destination path.
        """
        dest = Path(dest)
        filename = url.rsplit("/", 1)[-1]
        logger.info("Downloading %s", url)
        dest.parent.mkdir(parents=True, exist_ok=True)
        tmp_dest = dest.with_suffix(dest.suffix + ".tmp")
        try:
            with self.client.stream("GET", url) as resp:
                if not resp.is_success:
                    resp.read()
                    _raise_for_status(resp, url)
                total = int(resp.headers.get("content-length", 0)) or None
                downloaded = 0
                with open(tmp_dest, "wb") as f:
                    for chunk in resp.iter_bytes(chunk_size=CHUNK_SIZE):
                        f.write(chunk)
                        downloaded += len(chunk)
                        if self._on_progress:
                            self._on_progress(filename, downloaded, total)
            tmp_dest.replace(dest)
        except httpx.TransportError as e:
            tmp_dest.unlink(missing_ok=True)
            raise TransportError(url, str(e)) from e
        except BaseException:
            # Clean up partial temp file on any error (including KeyboardInterrupt)
            tmp_dest.unlink(missing_ok=True)
            raise
        return dest

    def __enter__(self) -> Connection:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


def _wrap_chunks(chunks: Iterator[bytes], url: str) -> Iterator[bytes]:
    # transport errors can also surface while the body is being read
    try:
        yield from chunks
    except httpx.TransportError as e:
        raise TransportError(url, str(e)) from e


async def _awrap_chunks(chunks: AsyncIterator[bytes], url: str) -> AsyncIterator[bytes]:
    try:
        async for chunk in chunks:
            yield chunk
    except httpx.TransportError as e:
        raise TransportError(url, str(e)) from e


class AsyncConnection:
    """Non-blocking connection to the Scryfall API over ``httpx.AsyncClient``.

    Suspends only while waiting on the network.
    """

    def __init__(
        self,
        *,
        base_url: str = API_BASE,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client
        self._owns_client = client is None

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy async HTTP client, created on first use."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout, follow_redirects=True, headers=_headers()
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def get(
        self,
        url: str,
        adapter: TypeAdapter[T],
        params: list[tuple[str, str]] | None = None,
    ) -> T:
        """Async counterpart of :meth:`Connection.get`."""
        logger.debug("GET %s %s", url, params or "")
        try:
            resp = await self.client.get(url, params=params)
        except httpx.TransportError as e:
            raise TransportError(url, str(e)) from e
        _raise_for_status(resp, url)
        return _validate(resp.content, adapter, url)

    async def fetch(self, uri: Uri[T]) -> T:
        return await self.get(uri.url, uri.adapter)

    async def fetch_iter(self, uri: Uri[Page[T]]) -> AsyncListIter[T]:
        return AsyncListIter(await self.fetch(uri), self)

    async def fetch_pages(self, uri: Uri[Page[T]]) -> AsyncPageIter[T]:
        return AsyncPageIter(await self.fetch(uri), self)

    async def fetch_all(self, uri: Uri[Page[T]]) -> list[T]:
        """Fetch every page behind *uri*, raising on the first failure."""
        items: list[T] = []
        next_uri: Uri[Page[T]] | None = uri
        while next_uri is not None:
            page = await self.fetch(next_uri)
            check_page(page)
            items.extend(page.data)
            next_uri = page.next_uri
        return items

    @asynccontextmanager
    async def stream(self, url: str) -> AsyncIterator[AsyncIterator[bytes]]:
        """Async counterpart of :meth:`Connection.stream`."""
        logger.debug("GET (stream) %s", url)
        try:
            async with self.client.stream("GET", url) as resp:
                if not resp.is_success:
                    await resp.aread()
                    _raise_for_status(resp, url)
                yield _awrap_chunks(resp.aiter_bytes(chunk_size=CHUNK_SIZE), url)
        except httpx.TransportError as e:
            raise TransportError(url, str(e)) from e

    async def __aenter__(self) -> AsyncConnection:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()
