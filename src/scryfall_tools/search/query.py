"""Boolean query trees over search parameters.

Queries are immutable. Combining them never fails and applies a few
simplifications as it goes: :data:`EMPTY` disappears from any AND/OR,
nested groups of the same kind are flattened, and a double negation
collapses.

Example::

    from scryfall_tools.search import cmc, name

    q = cmc(4) & name("Yargle")
    str(q)  # '(cmc:4 AND name:"Yargle")'
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import Any


class Query:
    """Base class of every node in a search query tree."""

    __slots__ = ()

    @classmethod
    def coerce(cls, value: Any) -> Query:
        """Return *value* as a query.

        Besides ``Query`` instances this accepts anything with an
        ``as_query()`` method, such as the criteria enums.

        Raises:
            TypeError: If *value* cannot be turned into a query.
        """
        if isinstance(value, Query):
            return value
        as_query = getattr(value, "as_query", None)
        if as_query is None:
            raise TypeError(f"Cannot use {type(value).__name__} as a search query")
        return as_query()

    def and_(self, other: Any) -> Query:
        """Combine with *other* using AND."""
        return _combine(And, self, Query.coerce(other))

    def or_(self, other: Any) -> Query:
        """Combine with *other* using OR."""
        return _combine(Or, self, Query.coerce(other))

    def __and__(self, other: Any) -> Query:
        return self.and_(other)

    def __rand__(self, other: Any) -> Query:
        return Query.coerce(other).and_(self)

    def __or__(self, other: Any) -> Query:
        return self.or_(other)

    def __ror__(self, other: Any) -> Query:
        return Query.coerce(other).or_(self)

    def __invert__(self) -> Query:
        return not_(self)


@dataclass(frozen=True)
class And(Query):
    """All terms must match."""

    terms: tuple[Query, ...]

    def __str__(self) -> str:
        return "(" + " AND ".join(str(t) for t in self.terms) + ")"


@dataclass(frozen=True)
class Or(Query):
    """At least one term must match."""

    terms: tuple[Query, ...]

    def __str__(self) -> str:
        return "(" + " OR ".join(str(t) for t in self.terms) + ")"


@dataclass(frozen=True)
class Not(Query):
    """The inner query must not match."""

    inner: Query

    def __str__(self) -> str:
        return f"-{self.inner}"


@dataclass(frozen=True)
class Empty(Query):
    """The identity for AND and OR. Renders as an empty string.

    Scryfall rejects a blank search, so sending this on its own fails
    on the server side.
    """

    def __str__(self) -> str:
        return ""


@dataclass(frozen=True)
class Custom(Query):
    """A raw query fragment, passed through in parentheses.

    Escape hatch for syntax this package has no function for.
    """

    text: str

    def __str__(self) -> str:
        return f"({self.text})"


EMPTY = Empty()


def _combine(kind: type[And] | type[Or], a: Query, b: Query) -> Query:
    if isinstance(a, Empty):
        return b
    if isinstance(b, Empty):
        return a
    if isinstance(a, kind) and isinstance(b, kind):
        return kind(a.terms + b.terms)
    if isinstance(a, kind):
        return kind(a.terms + (b,))
    if isinstance(b, kind):
        return kind((a,) + b.terms)
    return kind((a, b))


def and_(*queries: Any) -> Query:
    """AND together any number of queries; :data:`EMPTY` for none."""
    return reduce(Query.and_, (Query.coerce(q) for q in queries), EMPTY)


def or_(*queries: Any) -> Query:
    """OR together any number of queries; :data:`EMPTY` for none."""
    return reduce(Query.or_, (Query.coerce(q) for q in queries), EMPTY)


def not_(query: Any) -> Query:
    """Negate *query*. ``not_(not_(q)) == q`` and ``not_(EMPTY) is EMPTY``."""
    query = Query.coerce(query)
    if isinstance(query, Not):
        return query.inner
    if isinstance(query, Empty):
        return query
    return Not(query)
