"""Scryfall TypedDict sub-models for the nested card objects."""

from __future__ import annotations

from typing_extensions import TypedDict

# === Card imagery and links ===


class ImageUris(TypedDict, total=False):
    small: str
    normal: str
    large: str
    png: str
    art_crop: str
    border_crop: str


class RelatedUris(TypedDict, total=False):
    gatherer: str
    tcgplayer_infinite_articles: str
    tcgplayer_infinite_decks: str
    edhrec: str


class PurchaseUris(TypedDict, total=False):
    tcgplayer: str
    cardmarket: str
    cardhoarder: str


# === Prices and legalities ===


class Prices(TypedDict, total=False):
    """Daily prices as decimal strings; ``None`` when unknown."""

    usd: str | None
    usd_foil: str | None
    usd_etched: str | None
    eur: str | None
    eur_foil: str | None
    tix: str | None


class Legalities(TypedDict, total=False):
    """Legality per format: ``legal``, ``not_legal``, ``restricted`` or ``banned``."""

    standard: str
    future: str
    historic: str
    pioneer: str
    modern: str
    legacy: str
    pauper: str
    vintage: str
    penny: str
    commander: str
    brawl: str
    duel: str
    oldschool: str
    premodern: str
