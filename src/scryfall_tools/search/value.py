"""Search fields, the values they accept, and how values render.

Every search function targets one field (a :class:`ValueKind` or a
:class:`NumProperty`) and requires one :class:`Capability` of its
argument. Value types declare their capabilities through
:func:`capabilities`, a single-dispatch table, so adding a value type is
one ``register`` call. A value without the required capability is
rejected with ``TypeError`` when the query is built, before any request
is made.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum, auto
from functools import singledispatch
from typing import Any

from ..models.enums import (
    BorderColor,
    Color,
    Colors,
    Format,
    Frame,
    FrameEffect,
    Game,
    Legality,
    Rarity,
    SetType,
)
from .compare import Compare
from .param import Param


class ValueKind(Enum):
    """Non-numeric search fields.

    The ``in:`` members all render as the ``in`` keyword; the suffix only
    keeps the members distinct.
    """

    COLOR = "color"
    IDENTITY = "identity"
    TYPE = "type"
    ORACLE = "oracle"
    FULL_ORACLE = "fulloracle"
    KEYWORD = "keyword"
    MANA = "mana"
    DEVOTION = "devotion"
    PRODUCES = "produces"
    RARITY = "rarity"
    IN_RARITY = "in:rarity"
    SET = "set"
    IN_SET = "in:set"
    NUMBER = "number"
    BLOCK = "block"
    SET_TYPE = "settype"
    IN_SET_TYPE = "in:settype"
    CUBE = "cube"
    FORMAT = "format"
    BANNED = "banned"
    RESTRICTED = "restricted"
    CHEAPEST = "cheapest"
    ARTIST = "artist"
    FLAVOR = "flavor"
    WATERMARK = "watermark"
    BORDER = "border"
    FRAME = "frame"
    DATE = "date"
    GAME = "game"
    IN_GAME = "in:game"
    LANGUAGE = "language"
    IN_LANGUAGE = "in:language"
    NAME = "name"
    EXACT = "exact"

    @property
    def wire_name(self) -> str:
        return self.value.split(":", 1)[0]

    @property
    def is_exact(self) -> bool:
        return self is ValueKind.EXACT

    def __str__(self) -> str:
        return self.wire_name


class NumProperty(str, Enum):
    """Numeric card properties.

    Each is both a searchable field and a value, so properties can be
    compared with each other: ``power(gt(NumProperty.TOUGHNESS))``.
    """

    POWER = "power"
    TOUGHNESS = "toughness"
    POW_TOU = "powtou"
    LOYALTY = "loyalty"
    CMC = "cmc"
    ARTIST_COUNT = "artists"
    USD = "usd"
    USD_FOIL = "usdfoil"
    EUR = "eur"
    TIX = "tix"
    ILLUSTRATION_COUNT = "illustrations"
    PRINT_COUNT = "prints"
    SET_COUNT = "sets"
    PAPER_PRINT_COUNT = "paperprints"
    PAPER_SET_COUNT = "papersets"
    YEAR = "year"

    @property
    def is_exact(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.value


class Capability(Enum):
    """What a value can stand for in a search."""

    NUMERIC = auto()
    NUMERIC_COMPARABLE = auto()
    TEXT = auto()
    TEXT_OR_REGEX = auto()
    COLOR = auto()
    DEVOTION = auto()
    RARITY = auto()
    SET = auto()
    CUBE = auto()
    FORMAT = auto()
    CURRENCY = auto()
    SET_TYPE = auto()
    BORDER_COLOR = auto()
    FRAME = auto()
    DATE = auto()
    GAME = auto()
    LANGUAGE = auto()


@dataclass(frozen=True)
class Regex:
    """A regular expression, for the fields that support ``/.../`` syntax.

    Example::

        oracle_text(Regex(r"^{T}: add"))  # oracle:/^{T}: add/
    """

    pattern: str

    def __str__(self) -> str:
        return "/" + self.pattern.replace("/", "\\/") + "/"


@dataclass(frozen=True)
class Devotion:
    """Devotion to a color, or to a two-color hybrid pair.

    A count of 0 renders as ``0``, which matches nothing but keeps
    ``devotion:`` from turning into a name search. Other counts render
    the mana symbol ``count + 1`` times.
    """

    color: Color
    count: int
    hybrid_with: Color | None = None

    @classmethod
    def monocolor(cls, color: Color | str, count: int) -> Devotion:
        return cls(Color(color), count)

    @classmethod
    def hybrid(cls, color_a: Color | str, color_b: Color | str, count: int) -> Devotion:
        return cls(Color(color_a), count, Color(color_b))

    def __str__(self) -> str:
        if self.count == 0:
            return "0"
        if self.hybrid_with is not None and self.hybrid_with != self.color:
            symbol = f"{{{self.color}/{self.hybrid_with}}}"
        else:
            symbol = f"{{{self.color}}}"
        return symbol * (self.count + 1)


#: Everything a plain string may stand for.
_TEXTUAL = frozenset(
    {
        Capability.TEXT,
        Capability.TEXT_OR_REGEX,
        Capability.COLOR,
        Capability.RARITY,
        Capability.SET,
        Capability.CUBE,
        Capability.FORMAT,
        Capability.CURRENCY,
        Capability.SET_TYPE,
        Capability.BORDER_COLOR,
        Capability.FRAME,
        Capability.DATE,
        Capability.GAME,
        Capability.LANGUAGE,
    }
)
_NUMERIC = frozenset({Capability.NUMERIC, Capability.NUMERIC_COMPARABLE})
_NONE: frozenset[Capability] = frozenset()


@singledispatch
def capabilities(value: Any) -> frozenset[Capability]:
    """Capabilities declared for *value*'s type. Unknown types have none."""
    return _NONE


@capabilities.register
def _(value: str) -> frozenset[Capability]:
    return _TEXTUAL


@capabilities.register
def _(value: bool) -> frozenset[Capability]:
    return _NONE


@capabilities.register(int)
@capabilities.register(float)
def _(value: Any) -> frozenset[Capability]:
    return _NUMERIC


@capabilities.register
def _(value: date) -> frozenset[Capability]:
    return frozenset({Capability.DATE})


@capabilities.register
def _(value: Compare) -> frozenset[Capability]:
    if isinstance(value.value, Compare):
        return _NONE
    return capabilities(value.value)


def declare(cls: type, *caps: Capability) -> None:
    """Declare the capabilities of every value of *cls*.

    Example::

        declare(SetCode, Capability.SET, Capability.DATE)
    """
    declared = frozenset(caps)
    capabilities.register(cls, lambda value: declared)


declare(NumProperty, Capability.NUMERIC_COMPARABLE)
declare(Regex, Capability.TEXT_OR_REGEX)
declare(Devotion, Capability.DEVOTION)
declare(Color, Capability.COLOR)
declare(Colors, Capability.COLOR)
declare(Rarity, Capability.RARITY)
declare(Format, Capability.FORMAT)
declare(SetType, Capability.SET_TYPE)
declare(BorderColor, Capability.BORDER_COLOR)
declare(Frame, Capability.FRAME)
declare(FrameEffect, Capability.FRAME)
declare(Game, Capability.GAME)
declare(Legality)


@singledispatch
def render_value(value: Any) -> str:
    """Render *value* in Scryfall's query syntax."""
    return str(value)


@render_value.register
def _(value: str) -> str:
    # Scryfall has no quote escaping; an embedded '"' ends the value early.
    return f'"{value}"'


@render_value.register
def _(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return repr(value)


@render_value.register
def _(value: date) -> str:
    return value.strftime("%Y-%m-%d")


@render_value.register
def _(value: Color) -> str:
    return value.value.lower()


@render_value.register
def _(value: Enum) -> str:
    return str(value.value)


for _enum in (NumProperty, Rarity, Format, SetType, BorderColor, Frame, FrameEffect, Game):
    # str-based enums would otherwise dispatch to the quoting str renderer
    render_value.register(_enum, render_value.dispatch(Enum))


def make_param(kind: ValueKind | NumProperty, value: Any, capability: Capability) -> Param:
    """Build the :class:`Param` for ``kind`` and ``value``.

    A :class:`Compare` is unwrapped and its operator carried into the
    param.

    Raises:
        TypeError: If *value* does not declare *capability*.
    """
    if capability not in capabilities(value):
        raise TypeError(
            f"'{kind}' search does not accept {type(value).__name__} value {value!r}"
        )
    if isinstance(value, Compare):
        return Param(kind, render_value(value.value), value.op)
    return Param(kind, render_value(value))
