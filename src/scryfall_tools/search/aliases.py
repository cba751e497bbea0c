"""Scryfall's nicknames for color combinations.

The aliases are valid anywhere a color is, and render as their name::

    color_identity(Guild.AZORIUS)   # identity:azorius
    Guild.AZORIUS.colors            # Colors('wu')
"""

from __future__ import annotations

from enum import Enum

from ..models.enums import Color, Colors
from .value import Capability, declare, render_value

W, U, B, R, G = Color.WHITE, Color.BLUE, Color.BLACK, Color.RED, Color.GREEN


class _ColorAlias(str, Enum):
    def __str__(self) -> str:
        return self.value

    @property
    def colors(self) -> Colors:
        return Colors(*_COLORS[self])


class Guild(_ColorAlias):
    """The ten two-color pairs."""

    AZORIUS = "azorius"
    BOROS = "boros"
    DIMIR = "dimir"
    GOLGARI = "golgari"
    GRUUL = "gruul"
    IZZET = "izzet"
    ORZHOV = "orzhov"
    RAKDOS = "rakdos"
    SELESNYA = "selesnya"
    SIMIC = "simic"


class Shard(_ColorAlias):
    """Three-color combinations of a color and its two allies."""

    BANT = "bant"
    ESPER = "esper"
    GRIXIS = "grixis"
    JUND = "jund"
    NAYA = "naya"


class Wedge(_ColorAlias):
    """Three-color combinations of a color and its two enemies."""

    ABZAN = "abzan"
    JESKAI = "jeskai"
    MARDU = "mardu"
    SULTAI = "sultai"
    TEMUR = "temur"


class FourColor(_ColorAlias):
    """Four-color combinations, named for the missing color's opposite."""

    AGGRESSION = "aggression"
    ALTRUISM = "altruism"
    ARTIFICE = "artifice"
    CHAOS = "chaos"
    GROWTH = "growth"


_COLORS: dict[_ColorAlias, tuple[Color, ...]] = {
    Guild.AZORIUS: (W, U),
    Guild.BOROS: (R, W),
    Guild.DIMIR: (U, B),
    Guild.GOLGARI: (B, G),
    Guild.GRUUL: (R, G),
    Guild.IZZET: (U, R),
    Guild.ORZHOV: (W, B),
    Guild.RAKDOS: (B, R),
    Guild.SELESNYA: (G, W),
    Guild.SIMIC: (G, U),
    Shard.BANT: (G, W, U),
    Shard.ESPER: (W, U, B),
    Shard.GRIXIS: (U, B, R),
    Shard.JUND: (B, R, G),
    Shard.NAYA: (R, G, W),
    Wedge.ABZAN: (W, B, G),
    Wedge.JESKAI: (U, R, W),
    Wedge.MARDU: (R, W, B),
    Wedge.SULTAI: (B, G, U),
    Wedge.TEMUR: (G, U, R),
    FourColor.AGGRESSION: (B, R, G, W),
    FourColor.ALTRUISM: (R, G, W, U),
    FourColor.ARTIFICE: (W, U, B, R),
    FourColor.CHAOS: (U, B, R, G),
    FourColor.GROWTH: (G, W, U, B),
}

for _alias in (Guild, Shard, Wedge, FourColor):
    declare(_alias, Capability.COLOR)
    render_value.register(_alias, render_value.dispatch(Enum))
