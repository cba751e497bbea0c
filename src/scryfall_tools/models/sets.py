"""Scryfall set model."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field

from ..lists import Page
from ..uri import Uri
from .cards import Card


class Set(BaseModel):
    """A group of related cards. Every card belongs to exactly one set.

    Official sets have three-letter codes such as ``zen``; Scryfall's
    promo and token groupings usually start with ``p`` or ``t``.
    """

    model_config = {"populate_by_name": True}

    id: str = Field(description="Scryfall's unique ID for this set.")
    code: str = Field(description="The unique three to five-letter set code.")
    name: str = Field(description="The English name of the set.")
    set_type: str = Field(description="A computer-readable classification.")
    mtgo_code: str | None = Field(default=None)
    arena_code: str | None = Field(default=None)
    tcgplayer_id: int | None = Field(default=None)
    released_at: date | None = Field(default=None)
    block_code: str | None = Field(default=None)
    block: str | None = Field(default=None)
    parent_set_code: str | None = Field(default=None)
    card_count: int = Field(default=0)
    printed_size: int | None = Field(default=None)
    digital: bool = Field(default=False)
    foil_only: bool = Field(default=False)
    nonfoil_only: bool = Field(default=False)
    scryfall_uri: str | None = Field(default=None)
    uri: str | None = Field(default=None)
    icon_svg_uri: str | None = Field(default=None)
    search_uri: str | None = Field(default=None)

    @property
    def cards_uri(self) -> Uri[Page[Card]] | None:
        """Paginated search over the cards of this set."""
        return Uri(self.search_uri, Page[Card]) if self.search_uri else None
