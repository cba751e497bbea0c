"""Pydantic models for Scryfall API objects."""

from .bulk import BulkDataFile
from .cards import Card, CardFace, RelatedCard
from .catalog import Catalog
from .enums import (
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
from .rulings import Ruling
from .sets import Set

__all__ = [
    "BorderColor",
    "BulkDataFile",
    "Card",
    "CardFace",
    "Catalog",
    "Color",
    "Colors",
    "Format",
    "Frame",
    "FrameEffect",
    "Game",
    "Legality",
    "Rarity",
    "RelatedCard",
    "Ruling",
    "Set",
    "SetType",
]
