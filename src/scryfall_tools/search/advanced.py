"""Full ``/cards/search`` requests: a query plus sorting and inclusion options."""

from __future__ import annotations

from enum import Enum
from typing import Any

import httpx

from .query import EMPTY, Query


class UniqueStrategy(str, Enum):
    """How results that share a card are collapsed."""

    CARDS = "cards"
    ART = "art"
    PRINTS = "prints"

    def __str__(self) -> str:
        return self.value


class SortOrder(str, Enum):
    """Field the results are sorted by."""

    NAME = "name"
    SET = "set"
    RELEASED = "released"
    RARITY = "rarity"
    COLOR = "color"
    USD = "usd"
    TIX = "tix"
    EUR = "eur"
    CMC = "cmc"
    POWER = "power"
    TOUGHNESS = "toughness"
    EDHREC = "edhrec"
    ARTIST = "artist"

    def __str__(self) -> str:
        return self.value


class SortDirection(str, Enum):
    AUTO = "auto"
    ASCENDING = "asc"
    DESCENDING = "desc"

    def __str__(self) -> str:
        return self.value


#: Values a field takes when it is left alone; these are not sent.
_DEFAULTS: dict[str, Any] = {
    "unique": UniqueStrategy.CARDS,
    "order": SortOrder.NAME,
    "dir": SortDirection.AUTO,
    "page": 0,
    "include_extras": False,
    "include_multilingual": False,
    "include_variations": False,
}


class SearchOptions:
    """Builder for a search request.

    Setters overwrite the previous value and return the builder, so calls
    chain. :meth:`query` replaces the whole query; combine fragments with
    ``&``/``|`` first.

    Example::

        opts = (
            SearchOptions.new()
            .query(cmc(gte(5)) & type_line("dragon"))
            .sort(SortOrder.USD, SortDirection.DESCENDING)
            .unique(UniqueStrategy.PRINTS)
        )
        for card in sdk.cards.search(opts):
            ...
    """

    def __init__(self) -> None:
        self._query: Query = EMPTY
        self._unique = UniqueStrategy.CARDS
        self._order = SortOrder.NAME
        self._dir = SortDirection.AUTO
        self._page = 0
        self._include_extras = False
        self._include_multilingual = False
        self._include_variations = False

    @classmethod
    def new(cls) -> SearchOptions:
        """Default options, starting at page 1."""
        return cls().page(1)

    @classmethod
    def with_query(cls, query: Any) -> SearchOptions:
        return cls.new().query(query)

    def query(self, query: Any) -> SearchOptions:
        self._query = Query.coerce(query)
        return self

    def page(self, page: int) -> SearchOptions:
        self._page = page
        return self

    def unique(self, unique: UniqueStrategy | str) -> SearchOptions:
        self._unique = UniqueStrategy(unique)
        return self

    def sort(
        self, order: SortOrder | str, direction: SortDirection | str
    ) -> SearchOptions:
        return self.order(order).direction(direction)

    def order(self, order: SortOrder | str) -> SearchOptions:
        self._order = SortOrder(order)
        return self

    def direction(self, direction: SortDirection | str) -> SearchOptions:
        self._dir = SortDirection(direction)
        return self

    def extras(self, include: bool = True) -> SearchOptions:
        """Include tokens, planes, schemes and other extras."""
        self._include_extras = include
        return self

    def multilingual(self, include: bool = True) -> SearchOptions:
        self._include_multilingual = include
        return self

    def variations(self, include: bool = True) -> SearchOptions:
        self._include_variations = include
        return self

    def to_params(self) -> list[tuple[str, str]]:
        """Request parameters, omitting every field left at its default.

        ``q`` is always last and always present, even when empty.
        """
        fields = {
            "unique": self._unique,
            "order": self._order,
            "dir": self._dir,
            "page": self._page,
            "include_extras": self._include_extras,
            "include_multilingual": self._include_multilingual,
            "include_variations": self._include_variations,
        }
        params = [
            (key, _param_str(value))
            for key, value in fields.items()
            if value != _DEFAULTS[key]
        ]
        params.append(("q", str(self._query)))
        return params

    def to_query_string(self) -> str:
        """URL-encoded form of :meth:`to_params`."""
        return str(httpx.QueryParams(self.to_params()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SearchOptions):
            return NotImplemented
        return self.to_params() == other.to_params()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SearchOptions({self.to_query_string()!r})"


def _param_str(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def search_params(search: Query | SearchOptions | str | Any) -> list[tuple[str, str]]:
    """Parameters for ``/cards/search`` from a query, options or raw query text.

    Raises:
        TypeError: If *search* is none of these.
    """
    if isinstance(search, SearchOptions):
        return search.to_params()
    if isinstance(search, str) and not isinstance(search, Enum):
        return [("q", search)]
    return [("q", str(Query.coerce(search)))]
