"""Scryfall domain vocabulary: colors, rarities, formats, frames, games."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum


class Color(str, Enum):
    """Magic color symbols."""

    WHITE = "W"
    BLUE = "U"
    BLACK = "B"
    RED = "R"
    GREEN = "G"

    def __str__(self) -> str:
        return self.value


#: WUBRG order, used when rendering a color combination.
_COLOR_ORDER = (Color.WHITE, Color.BLUE, Color.BLACK, Color.RED, Color.GREEN)


class Colors:
    """A set of colors, or the special colorless / multicolored values.

    Renders the way Scryfall's search syntax expects: lowercase symbols
    in WUBRG order, ``c`` for colorless and ``m`` for multicolored.

    Example::

        str(Colors(Color.RED, Color.WHITE))   # "wr"
        str(Colors.colorless())               # "c"
        str(Colors.multicolored())            # "m"
    """

    __slots__ = ("_colors", "_multicolored")

    def __init__(self, *colors: Color | str, multicolored: bool = False) -> None:
        self._colors = frozenset(Color(c) for c in colors)
        self._multicolored = multicolored

    @classmethod
    def colorless(cls) -> Colors:
        return cls()

    @classmethod
    def multicolored(cls) -> Colors:
        return cls(multicolored=True)

    @classmethod
    def from_iterable(cls, colors: Iterable[Color | str]) -> Colors:
        return cls(*colors)

    def __contains__(self, color: object) -> bool:
        return color in self._colors

    def __iter__(self):
        return (c for c in _COLOR_ORDER if c in self._colors)

    def __len__(self) -> int:
        return len(self._colors)

    @property
    def is_colorless(self) -> bool:
        return not self._colors and not self._multicolored

    @property
    def is_multicolored(self) -> bool:
        return self._multicolored

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Colors):
            return NotImplemented
        return (self._colors, self._multicolored) == (
            other._colors,
            other._multicolored,
        )

    def __hash__(self) -> int:
        return hash((self._colors, self._multicolored))

    def __str__(self) -> str:
        if self._multicolored:
            return "m"
        if not self._colors:
            return "c"
        return "".join(c.value.lower() for c in self)

    def __repr__(self) -> str:
        return f"Colors({str(self)!r})"


class Rarity(str, Enum):
    """Printing rarity, ordered lowest to highest."""

    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    SPECIAL = "special"
    MYTHIC = "mythic"
    BONUS = "bonus"

    def __str__(self) -> str:
        return self.value


class Format(str, Enum):
    """Play formats understood by the ``format``/``banned``/``restricted`` fields."""

    STANDARD = "standard"
    FUTURE = "future"
    HISTORIC = "historic"
    PIONEER = "pioneer"
    MODERN = "modern"
    LEGACY = "legacy"
    PAUPER = "pauper"
    VINTAGE = "vintage"
    PENNY = "penny"
    COMMANDER = "commander"
    BRAWL = "brawl"
    FRONTIER = "frontier"
    DUEL = "duel"
    OLDSCHOOL = "oldschool"
    PREMODERN = "premodern"

    def __str__(self) -> str:
        return self.value


class SetType(str, Enum):
    """Computer-readable classification of a set."""

    CORE = "core"
    EXPANSION = "expansion"
    MASTERS = "masters"
    ETERNAL = "eternal"
    ALCHEMY = "alchemy"
    MASTERPIECE = "masterpiece"
    ARSENAL = "arsenal"
    FROM_THE_VAULT = "from_the_vault"
    SPELLBOOK = "spellbook"
    PREMIUM_DECK = "premium_deck"
    DUEL_DECK = "duel_deck"
    DRAFT_INNOVATION = "draft_innovation"
    TREASURE_CHEST = "treasure_chest"
    COMMANDER = "commander"
    PLANECHASE = "planechase"
    ARCHENEMY = "archenemy"
    VANGUARD = "vanguard"
    FUNNY = "funny"
    STARTER = "starter"
    BOX = "box"
    PROMO = "promo"
    TOKEN = "token"
    MEMORABILIA = "memorabilia"
    MINIGAME = "minigame"

    def __str__(self) -> str:
        return self.value


class BorderColor(str, Enum):
    """Physical card border colors."""

    BLACK = "black"
    BORDERLESS = "borderless"
    GOLD = "gold"
    WHITE = "white"
    SILVER = "silver"

    def __str__(self) -> str:
        return self.value


class Frame(str, Enum):
    """Card frame versions by year of introduction."""

    FRAME_1993 = "1993"
    FRAME_1997 = "1997"
    FRAME_2003 = "2003"
    FRAME_2015 = "2015"
    FUTURE = "future"

    def __str__(self) -> str:
        return self.value


class FrameEffect(str, Enum):
    """Frame effects; searchable through the ``frame`` field as well."""

    LEGENDARY = "legendary"
    MIRACLE = "miracle"
    NYXTOUCHED = "nyxtouched"
    DRAFT = "draft"
    DEVOID = "devoid"
    TOMBSTONE = "tombstone"
    COLORSHIFTED = "colorshifted"
    INVERTED = "inverted"
    SUNMOONDFC = "sunmoondfc"
    COMPASSLANDDFC = "compasslanddfc"
    ORIGINPWDFC = "originpwdfc"
    MOONELDRAZIDFC = "mooneldrazidfc"
    WAXINGANDWANINGMOONDFC = "waxingandwaningmoondfc"
    SHOWCASE = "showcase"
    EXTENDEDART = "extendedart"
    COMPANION = "companion"
    ETCHED = "etched"
    SNOW = "snow"
    LESSON = "lesson"

    def __str__(self) -> str:
        return self.value


class Game(str, Enum):
    """Game platforms where a printing exists."""

    PAPER = "paper"
    ARENA = "arena"
    MTGO = "mtgo"

    def __str__(self) -> str:
        return self.value


class Legality(str, Enum):
    """Format legality status values."""

    LEGAL = "legal"
    NOT_LEGAL = "not_legal"
    RESTRICTED = "restricted"
    BANNED = "banned"
