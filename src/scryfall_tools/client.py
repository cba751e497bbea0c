"""ScryfallTools main entry point."""

from __future__ import annotations

from typing import Any, TypeVar

import httpx

from .config import API_BASE, DEFAULT_TIMEOUT
from .connection import Connection, ProgressCallback
from .lists import ListIter, Page
from .queries.bulk import BulkQuery
from .queries.cards import CardQuery
from .queries.catalogs import CatalogQuery
from .queries.rulings import RulingQuery
from .queries.sets import SetQuery
from .uri import Uri

T = TypeVar("T")


class ScryfallTools:
    """Client for the Scryfall API.

    Query interfaces are created on first use and share one HTTP
    connection.

    Usage::

        sdk = ScryfallTools()

        # Cards
        for card in sdk.cards.search(cmc(4) & name("Yargle")):
            print(card.name)
        bolt = sdk.cards.named("Lightning Bolt")

        # Sets and rulings
        mh3 = sdk.sets.get("MH3")
        rulings = list(sdk.rulings.by_card_id(bolt.id))

        # Bulk data, decoded as it downloads
        for card in sdk.bulk.oracle_cards():
            ...

        # Follow any link a model carries
        prints = sdk.fetch_iter(bolt.prints_uri)

        sdk.close()
    """

    def __init__(
        self,
        *,
        base_url: str = API_BASE,
        timeout: float = DEFAULT_TIMEOUT,
        on_progress: ProgressCallback | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: API root. Override for a mirror or a test server.
            timeout: HTTP request timeout in seconds.
            on_progress: Optional callback ``(filename, bytes_downloaded, total_bytes)``
                called during bulk downloads.
            client: Pre-configured ``httpx.Client`` to send requests with.
        """
        self._conn = Connection(
            base_url=base_url, timeout=timeout, on_progress=on_progress, client=client
        )

        # Query interfaces (lazy)
        self._cards: CardQuery | None = None
        self._sets: SetQuery | None = None
        self._rulings: RulingQuery | None = None
        self._catalogs: CatalogQuery | None = None
        self._bulk: BulkQuery | None = None

    @property
    def connection(self) -> Connection:
        return self._conn

    @property
    def cards(self) -> CardQuery:
        """Search for cards and look up single cards.

        Example::

            card = sdk.cards.named("Black Lotus")
            dragons = sdk.cards.search_all(type_line("dragon") & cmc(gte(6)))
        """
        if self._cards is None:
            self._cards = CardQuery(self._conn)
        return self._cards

    @property
    def sets(self) -> SetQuery:
        """Set metadata and set contents.

        Example::

            mh3 = sdk.sets.get("MH3")
        """
        if self._sets is None:
            self._sets = SetQuery(self._conn)
        return self._sets

    @property
    def rulings(self) -> RulingQuery:
        if self._rulings is None:
            self._rulings = RulingQuery(self._conn)
        return self._rulings

    @property
    def catalogs(self) -> CatalogQuery:
        if self._catalogs is None:
            self._catalogs = CatalogQuery(self._conn)
        return self._catalogs

    @property
    def bulk(self) -> BulkQuery:
        """Daily bulk data exports.

        Example::

            for ruling in sdk.bulk.rulings():
                ...
        """
        if self._bulk is None:
            self._bulk = BulkQuery(self._conn)
        return self._bulk

    def fetch(self, uri: Uri[T]) -> T:
        """Fetch the resource behind a typed link, such as ``card.card_uri``."""
        return self._conn.fetch(uri)

    def fetch_iter(self, uri: Uri[Page[T]]) -> ListIter[T]:
        """Iterate over the paginated list behind a typed link."""
        return self._conn.fetch_iter(uri)

    def close(self) -> None:
        """Close the HTTP client.

        Called automatically when using the client as a context manager.
        """
        self._conn.close()

    def __enter__(self) -> ScryfallTools:
        """Enter context manager.

        Example::

            with ScryfallTools() as sdk:
                card = sdk.cards.random()
        """
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"ScryfallTools(base_url={self._conn.base_url!r})"
