"""Search functions: one per Scryfall search field.

Each returns a leaf :class:`~scryfall_tools.search.query.Query`. Pass a
plain value for the field's default ``:`` operator, or wrap it with
:func:`~scryfall_tools.search.compare.lt`, :func:`gte
<scryfall_tools.search.compare.gte>` and friends to compare::

    cmc(gte(5)) & color(Colors(Color.RED)) & type_line("dragon")
    # (cmc>=5 AND color:r AND type:"dragon")

Arguments are checked against the field when the query is built; a
date passed to ``color`` raises ``TypeError``.
"""

from __future__ import annotations

from typing import Any

from .compare import Compare
from .query import Query
from .value import Capability as C
from .value import NumProperty, ValueKind, make_param


def exact(name: str) -> Query:
    """The card whose name is exactly *name*: ``!"name"``.

    Raises:
        TypeError: If *name* is not text, or is a comparison.
    """
    if isinstance(name, Compare):
        raise TypeError(f"exact name search does not accept a comparison: {name!r}")
    return make_param(ValueKind.EXACT, name, C.TEXT)


# === Colors and mana ===


def color(value: Any) -> Query:
    """The color of this card, based on indicator or cost."""
    return make_param(ValueKind.COLOR, value, C.COLOR)


def color_count(value: Any) -> Query:
    """The number of colors of this card, based on indicator or cost."""
    return make_param(ValueKind.COLOR, value, C.NUMERIC)


def color_identity(value: Any) -> Query:
    """The color identity of this card, for Commander-like formats."""
    return make_param(ValueKind.IDENTITY, value, C.COLOR)


def color_identity_count(value: Any) -> Query:
    """The number of colors in this card's identity."""
    return make_param(ValueKind.IDENTITY, value, C.NUMERIC)


def mana(value: Any) -> Query:
    """The mana cost of this card."""
    return make_param(ValueKind.MANA, value, C.COLOR)


def devotion(value: Any) -> Query:
    """The devotion granted by this permanent. See :class:`Devotion`."""
    return make_param(ValueKind.DEVOTION, value, C.DEVOTION)


def produces(value: Any) -> Query:
    """The colors of mana produced by this card."""
    return make_param(ValueKind.PRODUCES, value, C.COLOR)


# === Text ===


def type_line(value: Any) -> Query:
    """The type line of this card."""
    return make_param(ValueKind.TYPE, value, C.TEXT_OR_REGEX)


def oracle_text(value: Any) -> Query:
    """The current Oracle text of this card."""
    return make_param(ValueKind.ORACLE, value, C.TEXT_OR_REGEX)


def full_oracle_text(value: Any) -> Query:
    """The current Oracle text of this card, including reminder text."""
    return make_param(ValueKind.FULL_ORACLE, value, C.TEXT_OR_REGEX)


def keyword(value: Any) -> Query:
    """A keyword ability this card has."""
    return make_param(ValueKind.KEYWORD, value, C.TEXT)


def artist(value: Any) -> Query:
    return make_param(ValueKind.ARTIST, value, C.TEXT)


def flavor(value: Any) -> Query:
    """The flavor text of this printing."""
    return make_param(ValueKind.FLAVOR, value, C.TEXT_OR_REGEX)


def watermark(value: Any) -> Query:
    return make_param(ValueKind.WATERMARK, value, C.TEXT)


def name(value: Any) -> Query:
    """The card's name, matched loosely. See :func:`exact` for an exact match."""
    return make_param(ValueKind.NAME, value, C.TEXT_OR_REGEX)


# === Printings and sets ===


def rarity(value: Any) -> Query:
    """The rarity of this printing."""
    return make_param(ValueKind.RARITY, value, C.RARITY)


def in_rarity(value: Any) -> Query:
    """Has the card ever been printed at this rarity?"""
    return make_param(ValueKind.IN_RARITY, value, C.RARITY)


def set(value: Any) -> Query:
    """The set code of this printing."""
    return make_param(ValueKind.SET, value, C.SET)


def in_set(value: Any) -> Query:
    """Was the card ever printed in this set?"""
    return make_param(ValueKind.IN_SET, value, C.SET)


def collector_number(value: Any) -> Query:
    return make_param(ValueKind.NUMBER, value, C.NUMERIC)


def block(value: Any) -> Query:
    """Any set in the same block as the given set code."""
    return make_param(ValueKind.BLOCK, value, C.SET)


def set_type(value: Any) -> Query:
    return make_param(ValueKind.SET_TYPE, value, C.SET_TYPE)


def in_set_type(value: Any) -> Query:
    """Has the card appeared in a set of this type?"""
    return make_param(ValueKind.IN_SET_TYPE, value, C.SET_TYPE)


def cube(value: Any) -> Query:
    """Does the card appear in this cube on MTGO?"""
    return make_param(ValueKind.CUBE, value, C.CUBE)


def border_color(value: Any) -> Query:
    return make_param(ValueKind.BORDER, value, C.BORDER_COLOR)


def frame(value: Any) -> Query:
    """The frame of this printing, or one of its frame effects."""
    return make_param(ValueKind.FRAME, value, C.FRAME)


def date(value: Any) -> Query:
    """The release date of this printing. A set code stands for its release date."""
    return make_param(ValueKind.DATE, value, C.DATE)


def game(value: Any) -> Query:
    """This printing is available in the given game."""
    return make_param(ValueKind.GAME, value, C.GAME)


def in_game(value: Any) -> Query:
    """Some printing of this card is available in the given game."""
    return make_param(ValueKind.IN_GAME, value, C.GAME)


def language(value: Any) -> Query:
    return make_param(ValueKind.LANGUAGE, value, C.LANGUAGE)


def in_language(value: Any) -> Query:
    """Has this card ever been printed in the given language?"""
    return make_param(ValueKind.IN_LANGUAGE, value, C.LANGUAGE)


# === Formats and prices ===


def format(value: Any) -> Query:
    """The card is legal in this format."""
    return make_param(ValueKind.FORMAT, value, C.FORMAT)


def banned(value: Any) -> Query:
    return make_param(ValueKind.BANNED, value, C.FORMAT)


def restricted(value: Any) -> Query:
    return make_param(ValueKind.RESTRICTED, value, C.FORMAT)


def cheapest(value: Any) -> Query:
    """The cheapest printing in the given currency (``usd``, ``eur``, ``tix``)."""
    return make_param(ValueKind.CHEAPEST, value, C.CURRENCY)


# === Numeric properties ===


def _numeric(prop: NumProperty, value: Any) -> Query:
    return make_param(prop, value, C.NUMERIC_COMPARABLE)


def power(value: Any) -> Query:
    """The card's power. ``*`` and ``X`` count as 0."""
    return _numeric(NumProperty.POWER, value)


def toughness(value: Any) -> Query:
    """The card's toughness. ``*`` and ``X`` count as 0."""
    return _numeric(NumProperty.TOUGHNESS, value)


def pow_tou(value: Any) -> Query:
    """The card's power plus its toughness."""
    return _numeric(NumProperty.POW_TOU, value)


def loyalty(value: Any) -> Query:
    return _numeric(NumProperty.LOYALTY, value)


def cmc(value: Any) -> Query:
    """The card's mana value."""
    return _numeric(NumProperty.CMC, value)


def artist_count(value: Any) -> Query:
    return _numeric(NumProperty.ARTIST_COUNT, value)


def usd(value: Any) -> Query:
    """Current market price in US dollars."""
    return _numeric(NumProperty.USD, value)


def usd_foil(value: Any) -> Query:
    return _numeric(NumProperty.USD_FOIL, value)


def eur(value: Any) -> Query:
    return _numeric(NumProperty.EUR, value)


def tix(value: Any) -> Query:
    """Current market price in MTGO tickets."""
    return _numeric(NumProperty.TIX, value)


def illustration_count(value: Any) -> Query:
    return _numeric(NumProperty.ILLUSTRATION_COUNT, value)


def print_count(value: Any) -> Query:
    return _numeric(NumProperty.PRINT_COUNT, value)


def set_count(value: Any) -> Query:
    return _numeric(NumProperty.SET_COUNT, value)


def paper_print_count(value: Any) -> Query:
    return _numeric(NumProperty.PAPER_PRINT_COUNT, value)


def paper_set_count(value: Any) -> Query:
    return _numeric(NumProperty.PAPER_SET_COUNT, value)


def year(value: Any) -> Query:
    """The year this printing was released."""
    return _numeric(NumProperty.YEAR, value)
