"""API URLs, endpoint names, and client defaults.

This module defines the Scryfall API endpoints, bulk data and catalog
names, and the HTTP and streaming defaults used by the client.
"""

from __future__ import annotations

#: Base URL for the Scryfall REST API.
API_BASE = "https://api.scryfall.com"

#: Endpoint path prefixes, relative to :data:`API_BASE`.
CARDS_PATH = "cards"
SETS_PATH = "sets"
CATALOG_PATH = "catalog"
BULK_DATA_PATH = "bulk-data"
RULINGS_PATH = "rulings"

#: Bulk data files published daily by Scryfall.
BULK_TYPES: tuple[str, ...] = (
    "oracle_cards",
    "unique_artwork",
    "default_cards",
    "all_cards",
    "rulings",
)

#: Catalog endpoints, keyed by the method name used on the catalog query.
CATALOGS: dict[str, str] = {
    "card_names": "card-names",
    "artist_names": "artist-names",
    "word_bank": "word-bank",
    "creature_types": "creature-types",
    "planeswalker_types": "planeswalker-types",
    "land_types": "land-types",
    "artifact_types": "artifact-types",
    "enchantment_types": "enchantment-types",
    "spell_types": "spell-types",
    "powers": "powers",
    "toughnesses": "toughnesses",
    "loyalties": "loyalties",
    "watermarks": "watermarks",
    "keyword_abilities": "keyword-abilities",
    "keyword_actions": "keyword-actions",
    "ability_words": "ability-words",
}

#: Default HTTP timeout in seconds. Bulk downloads use the same client.
DEFAULT_TIMEOUT = 60.0

#: Chunk size used when streaming response bodies.
CHUNK_SIZE = 65536

#: Headers sent with every request. Scryfall asks clients to identify themselves.
USER_AGENT = "scryfall-tools/0.1.0"
ACCEPT = "application/json;q=0.9,*/*;q=0.8"

#: Hand-off queue size for the threaded bulk decoder (1 = rendezvous).
SYNC_HANDOFF_SIZE = 1

#: Hand-off queue size for the async bulk decoder (0 = unbounded).
ASYNC_HANDOFF_SIZE = 0

#: Seconds a closed threaded bulk stream waits for its decoder thread to exit.
WORKER_JOIN_TIMEOUT = 2.0


def api_url(*parts: object, base: str = API_BASE) -> str:
    """Join path segments onto the API base URL.

    Example::

        api_url("cards", "named")  # "https://api.scryfall.com/cards/named"
    """
    path = "/".join(str(p).strip("/") for p in parts)
    return f"{base.rstrip('/')}/{path}"
