"""Ruling query module."""

from __future__ import annotations

from typing import Any

from ..config import CARDS_PATH, RULINGS_PATH, api_url
from ..connection import Connection
from ..lists import ListIter, Page
from ..models.rulings import Ruling
from ..uri import Uri


class RulingQuery:
    """Oracle rulings for a card, looked up by any of its identifiers.

    Rulings belong to the card, not the printing, so every printing of a
    card returns the same list.

    Example::

        for ruling in sdk.rulings.by_set_and_number("war", 230):
            print(ruling.published_at, ruling.comment)
    """

    def __init__(self, conn: Connection) -> None:
        self._conn = conn

    def _list(self, *parts: Any) -> ListIter[Ruling]:
        url = api_url(CARDS_PATH, *parts, RULINGS_PATH, base=self._conn.base_url)
        return self._conn.fetch_iter(Uri(url, Page[Ruling]))

    def by_multiverse_id(self, multiverse_id: int) -> ListIter[Ruling]:
        return self._list("multiverse", multiverse_id)

    def by_mtgo_id(self, mtgo_id: int) -> ListIter[Ruling]:
        return self._list("mtgo", mtgo_id)

    def by_arena_id(self, arena_id: int) -> ListIter[Ruling]:
        return self._list("arena", arena_id)

    def by_set_and_number(self, code: str, number: int | str) -> ListIter[Ruling]:
        return self._list(code.lower(), number)

    def by_card_id(self, card_id: str) -> ListIter[Ruling]:
        """Rulings for the card with this Scryfall ID."""
        return self._list(card_id)
