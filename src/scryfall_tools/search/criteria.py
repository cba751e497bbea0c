"""Yes/no search criteria.

Two disjoint families: :class:`CardIs` for properties of the card itself
(the same for every printing) and :class:`PrintingIs` for properties of a
particular printing. Each member's value is the complete search token.
Members combine with queries directly::

    CardIs.COMMANDER & ~PrintingIs.REPRINT   # (is:commander AND -is:reprint)
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from .param import Flag
from .query import Query


class _Criteria(str, Enum):
    def __str__(self) -> str:
        return self.value

    def as_query(self) -> Query:
        return Flag(self)

    def __and__(self, other: Any) -> Query:
        return self.as_query().and_(other)

    def __rand__(self, other: Any) -> Query:
        return Query.coerce(other).and_(self.as_query())

    def __or__(self, other: Any) -> Query:
        return self.as_query().or_(other)

    def __ror__(self, other: Any) -> Query:
        return Query.coerce(other).or_(self.as_query())

    def __invert__(self) -> Query:
        return ~self.as_query()


class CardIs(_Criteria):
    """Criteria that hold for a card regardless of printing."""

    COLOR_INDICATOR = "has:indicator"
    PHYREXIAN = "is:phyrexian"
    HYBRID = "is:hybrid"
    SPLIT = "is:split"
    FLIP = "is:flip"
    TRANSFORM = "is:transform"
    MELD = "is:meld"
    LEVELER = "is:leveler"
    SPELL = "is:spell"
    PERMANENT = "is:permanent"
    HISTORIC = "is:historic"
    PARTY = "is:party"
    MODAL = "is:modal"
    VANILLA = "is:vanilla"
    FRENCH_VANILLA = "is:french_vanilla"
    FUNNY = "is:funny"
    COMMANDER = "is:commander"
    BRAWLER = "is:brawler"
    COMPANION = "is:companion"
    RESERVED = "is:reserved"

    # Land cycles
    BICYCLE_LAND = "is:bicycle_land"
    TRICYCLE_LAND = "is:tricycle_land"
    BOUNCE_LAND = "is:bounce_land"
    CANOPY_LAND = "is:canopy_land"
    CHECK_LAND = "is:check_land"
    DUAL = "is:dual"
    FAST_LAND = "is:fast_land"
    FETCH_LAND = "is:fetch_land"
    FILTER_LAND = "is:filter_land"
    GAIN_LAND = "is:gain_land"
    PAIN_LAND = "is:pain_land"
    SCRY_LAND = "is:scry_land"
    SHADOW_LAND = "is:shadow_land"
    SHOCK_LAND = "is:shock_land"
    STORAGE_LAND = "is:storage_land"
    CREATURE_LAND = "is:creature_land"
    TRI_LAND = "is:tri_land"
    BATTLE_LAND = "is:battle_land"

    EVEN_CMC = "cmc:even"
    ODD_CMC = "cmc:odd"


class PrintingIs(_Criteria):
    """Criteria that hold for a particular printing."""

    WATERMARK = "has:watermark"
    NEW_CARD = "new:card"
    NEW_RARITY = "new:rarity"
    NEW_ART = "new:art"
    NEW_ARTIST = "new:artist"
    NEW_FLAVOR = "new:flavor"
    NEW_FRAME = "new:frame"
    NEW_LANGUAGE = "new:language"
    FULL = "is:full"
    NONFOIL = "is:nonfoil"
    FOIL = "is:foil"
    HIRES = "is:hires"
    DIGITAL = "is:digital"
    PROMO = "is:promo"
    SPOTLIGHT = "is:spotlight"
    MASTERPIECE = "is:masterpiece"
    UNIQUE = "is:unique"
    FIRST_PRINT = "is:first_print"
    REPRINT = "is:reprint"

    # Where the printing was sold
    BOOSTER = "is:booster"
    PLANESWALKER_DECK = "is:planeswalker_deck"
    LEAGUE = "is:league"
    BUY_A_BOX = "is:buyabox"
    GIFT_BOX = "is:giftbox"
    INTRO_PACK = "is:intro_pack"
    GAME_DAY = "is:gameday"
    PRERELEASE = "is:prerelease"
    RELEASE = "is:release"


def criterion(flag: CardIs | PrintingIs) -> Query:
    """Leaf query for *flag*."""
    return Flag(flag)
