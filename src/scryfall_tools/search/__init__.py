"""Build Scryfall search queries.

Everything needed to write a query is importable from here::

    from scryfall_tools.search import *

    q = (cmc(lte(3)) | CardIs.COMMANDER) & ~rarity(Rarity.MYTHIC)
"""

from ..models.enums import (
    BorderColor,
    Color,
    Colors,
    Format,
    Frame,
    FrameEffect,
    Game,
    Rarity,
    SetType,
)
from .advanced import (
    SearchOptions,
    SortDirection,
    SortOrder,
    UniqueStrategy,
    search_params,
)
from .aliases import FourColor, Guild, Shard, Wedge
from .compare import Compare, CompareOp, eq, gt, gte, lt, lte, neq
from .criteria import CardIs, PrintingIs, criterion
from .functions import (
    artist,
    artist_count,
    banned,
    block,
    border_color,
    cheapest,
    cmc,
    collector_number,
    color,
    color_count,
    color_identity,
    color_identity_count,
    cube,
    date,
    devotion,
    eur,
    exact,
    flavor,
    format,
    frame,
    full_oracle_text,
    game,
    illustration_count,
    in_game,
    in_language,
    in_rarity,
    in_set,
    in_set_type,
    keyword,
    language,
    loyalty,
    mana,
    name,
    oracle_text,
    paper_print_count,
    paper_set_count,
    pow_tou,
    power,
    print_count,
    produces,
    rarity,
    restricted,
    set,
    set_count,
    set_type,
    tix,
    toughness,
    type_line,
    usd,
    usd_foil,
    watermark,
    year,
)
from .param import Flag, Param
from .query import EMPTY, And, Custom, Empty, Not, Or, Query, and_, not_, or_
from .value import Capability, Devotion, NumProperty, Regex, ValueKind

__all__ = [
    # Query tree
    "Query",
    "And",
    "Or",
    "Not",
    "Empty",
    "EMPTY",
    "Custom",
    "Param",
    "Flag",
    "and_",
    "or_",
    "not_",
    # Values
    "Capability",
    "ValueKind",
    "NumProperty",
    "Regex",
    "Devotion",
    "Compare",
    "CompareOp",
    "lt",
    "lte",
    "gt",
    "gte",
    "eq",
    "neq",
    "Color",
    "Colors",
    "Rarity",
    "Format",
    "SetType",
    "BorderColor",
    "Frame",
    "FrameEffect",
    "Game",
    "Guild",
    "Shard",
    "Wedge",
    "FourColor",
    # Criteria
    "CardIs",
    "PrintingIs",
    "criterion",
    # Options
    "SearchOptions",
    "UniqueStrategy",
    "SortOrder",
    "SortDirection",
    "search_params",
    # Functions
    "exact",
    "color",
    "color_count",
    "color_identity",
    "color_identity_count",
    "mana",
    "devotion",
    "produces",
    "type_line",
    "oracle_text",
    "full_oracle_text",
    "keyword",
    "artist",
    "flavor",
    "watermark",
    "name",
    "rarity",
    "in_rarity",
    "set",
    "in_set",
    "collector_number",
    "block",
    "set_type",
    "in_set_type",
    "cube",
    "border_color",
    "frame",
    "date",
    "game",
    "in_game",
    "language",
    "in_language",
    "format",
    "banned",
    "restricted",
    "cheapest",
    "power",
    "toughness",
    "pow_tou",
    "loyalty",
    "cmc",
    "artist_count",
    "usd",
    "usd_foil",
    "eur",
    "tix",
    "illustration_count",
    "print_count",
    "set_count",
    "paper_print_count",
    "paper_set_count",
    "year",
]
