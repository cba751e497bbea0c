"""Card query module."""

from __future__ import annotations

from typing import Any

import httpx

from ..config import CARDS_PATH, api_url
from ..connection import Connection
from ..errors import ScryfallError
from ..lists import ListIter, Page, PageIter
from ..models.cards import Card
from ..search.advanced import SearchOptions, search_params
from ..search.query import Query
from ..uri import Uri

Search = Query | SearchOptions | str


class CardQuery:
    """Look up single cards and run card searches.

    Searches return lazy iterators that fetch further pages as they are
    consumed. Single-card lookups raise :class:`ScryfallError` when the
    card does not exist.

    Example::

        for card in sdk.cards.search(cmc(4) & name("Yargle")):
            print(card.name, card.set)

        bolt = sdk.cards.named("Lightning Bolt")
        card = sdk.cards.get("56ebc372-aabd-4174-a943-c7bf59e5028d")
    """

    def __init__(self, conn: Connection) -> None:
        self._conn = conn

    def _url(self, *parts: Any, params: list[tuple[str, str]] | None = None) -> str:
        url = api_url(CARDS_PATH, *parts, base=self._conn.base_url)
        if params:
            url = str(httpx.URL(url, params=params))
        return url

    def _get(self, *parts: Any, params: list[tuple[str, str]] | None = None) -> Card:
        return self._conn.fetch(Uri(self._url(*parts, params=params), Card))

    def search_uri(self, search: Search) -> Uri[Page[Card]]:
        """The first-page URL for *search*, without fetching it."""
        return Uri(self._url("search", params=search_params(search)), Page[Card])

    def search(self, search: Search) -> ListIter[Card]:
        """Iterate over every card matching *search*.

        Args:
            search: A query, a :class:`SearchOptions`, or raw Scryfall
                query text.

        Raises:
            ScryfallError: The first page was rejected, including when
                nothing matched (Scryfall answers 404).
        """
        return self._conn.fetch_iter(self.search_uri(search))

    def search_pages(self, search: Search) -> PageIter[Card]:
        """Like :meth:`search`, but yields whole result pages."""
        return self._conn.fetch_pages(self.search_uri(search))

    def search_all(self, search: Search) -> list[Card]:
        """Every matching card as a list; raises on any failed page."""
        return self._conn.fetch_all(self.search_uri(search))

    def first(self, search: Search) -> Card | None:
        """The first card matching *search*, or None if nothing matches."""
        try:
            page = self._conn.fetch(self.search_uri(search))
        except ScryfallError as e:
            if e.status == 404:
                return None
            raise
        return page.data[0] if page.data else None

    def random(self, search: Search | None = None) -> Card:
        """A random card, optionally restricted to those matching *search*."""
        params = search_params(search) if search is not None else None
        return self._get("random", params=params)

    def named(self, name: str, *, set_code: str | None = None) -> Card:
        """The card with exactly this name (case-insensitive).

        Args:
            name: Full card name.
            set_code: Prefer the printing from this set.
        """
        params = [("exact", name)]
        if set_code:
            params.append(("set", set_code))
        return self._get("named", params=params)

    def named_fuzzy(self, name: str, *, set_code: str | None = None) -> Card:
        """The card whose name best matches a partial or misspelled *name*.

        Raises:
            ScryfallError: No card matched, or several did equally well
                (``error_type == "ambiguous"``).
        """
        params = [("fuzzy", name)]
        if set_code:
            params.append(("set", set_code))
        return self._get("named", params=params)

    def get(self, card_id: str) -> Card:
        """The printing with this Scryfall ID."""
        return self._get(card_id)

    def multiverse(self, multiverse_id: int | str) -> Card:
        return self._get("multiverse", multiverse_id)

    def mtgo(self, mtgo_id: int | str) -> Card:
        return self._get("mtgo", mtgo_id)

    def arena(self, arena_id: int | str) -> Card:
        return self._get("arena", arena_id)

    def tcgplayer(self, tcgplayer_id: int | str) -> Card:
        return self._get("tcgplayer", tcgplayer_id)

    def set_and_number(self, code: str, number: int | str) -> Card:
        """The printing with this collector number in this set."""
        return self._get(code.lower(), number)
