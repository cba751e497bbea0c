"""Set query module."""

from __future__ import annotations

from typing import Any

from ..config import SETS_PATH, api_url
from ..connection import Connection
from ..lists import ListIter, Page
from ..models.cards import Card
from ..models.sets import Set
from ..uri import Uri


class SetQuery:
    """Query interface for Scryfall set metadata.

    Example::

        mh3 = sdk.sets.get("MH3")
        for s in sdk.sets.all():
            print(s.code, s.name)
        for card in sdk.sets.cards(mh3):
            ...
    """

    def __init__(self, conn: Connection) -> None:
        self._conn = conn

    def _url(self, *parts: Any) -> str:
        return api_url(SETS_PATH, *parts, base=self._conn.base_url)

    def all(self) -> ListIter[Set]:
        """Every set Scryfall knows about, newest first."""
        return self._conn.fetch_iter(Uri(self._url(), Page[Set]))

    def get(self, code: str) -> Set:
        """Get a set by its code (e.g. ``"MH3"``). Case-insensitive."""
        return self._conn.fetch(Uri(self._url(code.lower()), Set))

    def tcgplayer(self, tcgplayer_id: int | str) -> Set:
        """Get a set by its TCGplayer group ID."""
        return self._conn.fetch(Uri(self._url("tcgplayer", tcgplayer_id), Set))

    def get_by_id(self, set_id: str) -> Set:
        """Get a set by its Scryfall ID."""
        return self._conn.fetch(Uri(self._url(set_id), Set))

    def cards(self, set_: Set | str) -> ListIter[Card]:
        """Iterate over the cards in a set.

        Args:
            set_: A :class:`Set`, or a set code to look up first.

        Raises:
            ValueError: If the set carries no ``search_uri``.
        """
        if isinstance(set_, str):
            set_ = self.get(set_)
        uri = set_.cards_uri
        if uri is None:
            raise ValueError(f"Set {set_.code!r} has no search_uri")
        return self._conn.fetch_iter(uri)
