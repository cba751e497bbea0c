"""Scryfall card models (partial: the commonly used fields)."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field

from ..lists import Page
from ..uri import Uri
from .rulings import Ruling
from .submodels import ImageUris, Legalities, Prices, PurchaseUris, RelatedUris


class CardFace(BaseModel):
    """A single face of a multiface card."""

    model_config = {"populate_by_name": True}

    name: str = Field(description="The name of this particular face.")
    mana_cost: str = Field(default="", description="The mana cost for this face.")
    type_line: str | None = Field(default=None)
    oracle_text: str | None = Field(default=None)
    colors: list[str] | None = Field(default=None)
    color_indicator: list[str] | None = Field(default=None)
    power: str | None = Field(default=None)
    toughness: str | None = Field(default=None)
    loyalty: str | None = Field(default=None)
    flavor_text: str | None = Field(default=None)
    artist: str | None = Field(default=None)
    illustration_id: str | None = Field(default=None)
    image_uris: ImageUris | None = Field(default=None)
    watermark: str | None = Field(default=None)
    printed_name: str | None = Field(default=None)
    printed_text: str | None = Field(default=None)
    printed_type_line: str | None = Field(default=None)


class RelatedCard(BaseModel):
    """A card closely related to another card (token, meld part, ...)."""

    model_config = {"populate_by_name": True}

    id: str
    component: str = Field(description="Role of this card in the relationship.")
    name: str
    type_line: str = Field(default="")
    uri: str

    @property
    def card_uri(self) -> Uri[Card]:
        return Uri(self.uri, Card)


class Card(BaseModel):
    """Scryfall card object.

    Only the commonly used core, gameplay and print fields are modelled;
    anything else in the payload is ignored. Link fields are kept as
    plain strings, with typed :class:`~scryfall_tools.uri.Uri` accessors
    for the ones that point back into the API.
    """

    model_config = {"populate_by_name": True}

    # Core fields
    id: str = Field(description="Scryfall's unique ID for this printing.")
    oracle_id: str | None = Field(default=None)
    lang: str = Field(default="en")
    object: str = Field(default="card")
    arena_id: int | None = Field(default=None)
    mtgo_id: int | None = Field(default=None)
    mtgo_foil_id: int | None = Field(default=None)
    multiverse_ids: list[int] = Field(default_factory=list)
    tcgplayer_id: int | None = Field(default=None)
    cardmarket_id: int | None = Field(default=None)
    uri: str | None = Field(default=None)
    scryfall_uri: str | None = Field(default=None)
    prints_search_uri: str | None = Field(default=None)
    rulings_uri: str | None = Field(default=None)

    # Gameplay fields
    name: str
    layout: str = Field(default="normal")
    mana_cost: str | None = Field(default=None)
    cmc: float = Field(default=0.0, description="The card's mana value.")
    type_line: str = Field(default="")
    oracle_text: str | None = Field(default=None)
    power: str | None = Field(default=None)
    toughness: str | None = Field(default=None)
    loyalty: str | None = Field(default=None)
    colors: list[str] | None = Field(default=None)
    color_identity: list[str] = Field(default_factory=list)
    color_indicator: list[str] | None = Field(default=None)
    produced_mana: list[str] | None = Field(default=None)
    keywords: list[str] = Field(default_factory=list)
    legalities: Legalities = Field(default_factory=dict)  # type: ignore[assignment]
    reserved: bool = Field(default=False)
    edhrec_rank: int | None = Field(default=None)
    card_faces: list[CardFace] | None = Field(default=None)
    all_parts: list[RelatedCard] | None = Field(default=None)

    # Print fields
    set: str = Field(default="", description="This printing's set code.")
    set_name: str = Field(default="")
    set_type: str | None = Field(default=None)
    set_id: str | None = Field(default=None)
    set_uri: str | None = Field(default=None)
    set_search_uri: str | None = Field(default=None)
    collector_number: str = Field(default="")
    rarity: str = Field(default="common")
    released_at: date | None = Field(default=None)
    artist: str | None = Field(default=None)
    flavor_text: str | None = Field(default=None)
    watermark: str | None = Field(default=None)
    border_color: str = Field(default="black")
    frame: str = Field(default="2015")
    frame_effects: list[str] | None = Field(default=None)
    full_art: bool = Field(default=False)
    textless: bool = Field(default=False)
    games: list[str] = Field(default_factory=list)
    finishes: list[str] = Field(default_factory=list)
    foil: bool | None = Field(default=None)
    nonfoil: bool | None = Field(default=None)
    oversized: bool = Field(default=False)
    promo: bool = Field(default=False)
    reprint: bool = Field(default=False)
    variation: bool = Field(default=False)
    digital: bool = Field(default=False)
    booster: bool = Field(default=True)
    story_spotlight: bool = Field(default=False)
    highres_image: bool = Field(default=False)
    illustration_id: str | None = Field(default=None)
    image_uris: ImageUris | None = Field(default=None)
    printed_name: str | None = Field(default=None)
    printed_text: str | None = Field(default=None)
    printed_type_line: str | None = Field(default=None)
    prices: Prices = Field(default_factory=dict)  # type: ignore[assignment]
    related_uris: RelatedUris = Field(default_factory=dict)  # type: ignore[assignment]
    purchase_uris: PurchaseUris | None = Field(default=None)

    @property
    def card_uri(self) -> Uri[Card] | None:
        """This card on the API, or None if the payload carried no ``uri``."""
        return Uri(self.uri, Card) if self.uri else None

    @property
    def prints_uri(self) -> Uri[Page[Card]] | None:
        """Every printing of this card, as a paginated search."""
        return Uri(self.prints_search_uri, Page[Card]) if self.prints_search_uri else None

    @property
    def rulings_list_uri(self) -> Uri[Page[Ruling]] | None:
        """Rulings for this card, as a list object."""
        return Uri(self.rulings_uri, Page[Ruling]) if self.rulings_uri else None

    @property
    def set_cards_uri(self) -> Uri[Page[Card]] | None:
        """Every card in this printing's set, as a paginated search."""
        return Uri(self.set_search_uri, Page[Card]) if self.set_search_uri else None
