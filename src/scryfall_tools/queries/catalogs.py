"""Catalog query module."""

from __future__ import annotations

from ..config import CATALOG_PATH, CATALOGS, api_url
from ..connection import Connection
from ..models.catalog import Catalog
from ..uri import Uri


class CatalogQuery:
    """Scryfall's catalogs: flat lists of names and values used on cards.

    Example::

        names = sdk.catalogs.card_names().data
        sdk.catalogs.get("creature-types")
    """

    def __init__(self, conn: Connection) -> None:
        self._conn = conn

    def get(self, name: str) -> Catalog:
        """Fetch a catalog by its endpoint name (e.g. ``"word-bank"``)."""
        url = api_url(CATALOG_PATH, name, base=self._conn.base_url)
        return self._conn.fetch(Uri(url, Catalog))

    def card_names(self) -> Catalog:
        """Every English card name, including split and flip halves."""
        return self.get(CATALOGS["card_names"])

    def artist_names(self) -> Catalog:
        return self.get(CATALOGS["artist_names"])

    def word_bank(self) -> Catalog:
        """Every English word of length 2 or more on any card name."""
        return self.get(CATALOGS["word_bank"])

    def creature_types(self) -> Catalog:
        return self.get(CATALOGS["creature_types"])

    def planeswalker_types(self) -> Catalog:
        return self.get(CATALOGS["planeswalker_types"])

    def land_types(self) -> Catalog:
        return self.get(CATALOGS["land_types"])

    def artifact_types(self) -> Catalog:
        return self.get(CATALOGS["artifact_types"])

    def enchantment_types(self) -> Catalog:
        return self.get(CATALOGS["enchantment_types"])

    def spell_types(self) -> Catalog:
        return self.get(CATALOGS["spell_types"])

    def powers(self) -> Catalog:
        """Every value printed in the power slot, e.g. ``"*"`` and ``"1+*"``."""
        return self.get(CATALOGS["powers"])

    def toughnesses(self) -> Catalog:
        return self.get(CATALOGS["toughnesses"])

    def loyalties(self) -> Catalog:
        return self.get(CATALOGS["loyalties"])

    def watermarks(self) -> Catalog:
        return self.get(CATALOGS["watermarks"])

    def keyword_abilities(self) -> Catalog:
        return self.get(CATALOGS["keyword_abilities"])

    def keyword_actions(self) -> Catalog:
        return self.get(CATALOGS["keyword_actions"])

    def ability_words(self) -> Catalog:
        return self.get(CATALOGS["ability_words"])
