"""Shared fixtures: sample Scryfall payloads and clients."""

from __future__ import annotations

import pytest

from scryfall_tools import ScryfallTools
from scryfall_tools.config import API_BASE

SAMPLE_CARDS = [
    {
        "object": "card",
        "id": "card-id-001",
        "oracle_id": "oracle-001",
        "name": "Lightning Bolt",
        "lang": "en",
        "uri": f"{API_BASE}/cards/card-id-001",
        "prints_search_uri": f"{API_BASE}/cards/search?q=oracleid%3Aoracle-001&unique=prints",
        "rulings_uri": f"{API_BASE}/cards/card-id-001/rulings",
        "layout": "normal",
        "mana_cost": "{R}",
        "cmc": 1.0,
        "type_line": "Instant",
        "oracle_text": "Lightning Bolt deals 3 damage to any target.",
        "colors": ["R"],
        "color_identity": ["R"],
        "keywords": [],
        "legalities": {"modern": "legal", "standard": "not_legal"},
        "set": "lea",
        "set_name": "Limited Edition Alpha",
        "collector_number": "161",
        "rarity": "common",
        "released_at": "1993-08-05",
        "artist": "Christopher Rush",
        "prices": {"usd": "450.00", "usd_foil": None, "eur": None, "tix": None},
        "some_future_field": {"ignored": True},
    },
    {
        "object": "card",
        "id": "card-id-002",
        "name": "Yargle, Glutton of Urborg",
        "mana_cost": "{4}{B}",
        "cmc": 5.0,
        "type_line": "Legendary Creature — Frog Spirit",
        "power": "9",
        "toughness": "3",
        "colors": ["B"],
        "set": "dom",
        "collector_number": "113",
        "rarity": "uncommon",
    },
    {
        "object": "card",
        "id": "card-id-003",
        "name": "Counterspell",
        "mana_cost": "{U}{U}",
        "cmc": 2.0,
        "type_line": "Instant",
        "colors": ["U"],
        "set": "lea",
        "collector_number": "54",
        "rarity": "uncommon",
    },
]

SAMPLE_RULING = {
    "object": "ruling",
    "oracle_id": "oracle-001",
    "source": "wotc",
    "published_at": "2004-10-04",
    "comment": "The damage is dealt by Lightning Bolt.",
}

SAMPLE_SET = {
    "object": "set",
    "id": "set-id-lea",
    "code": "lea",
    "name": "Limited Edition Alpha",
    "set_type": "core",
    "released_at": "1993-08-05",
    "card_count": 295,
    "search_uri": f"{API_BASE}/cards/search?order=set&q=e%3Alea&unique=prints",
}

SAMPLE_BULK = {
    "object": "bulk_data",
    "id": "bulk-id-oracle",
    "type": "oracle_cards",
    "name": "Oracle Cards",
    "description": "One card per Oracle ID.",
    "uri": f"{API_BASE}/bulk-data/bulk-id-oracle",
    "download_uri": "https://data.scryfall.io/oracle-cards/oracle-cards-20250101.json",
    "updated_at": "2025-01-01T10:00:00+00:00",
    "size": 1234,
    "content_type": "application/json",
    "content_encoding": "gzip",
}

NOT_FOUND = {
    "object": "error",
    "code": "not_found",
    "status": 404,
    "details": "Your query didn't match any cards.",
    "warnings": ["Invalid expression \"xyz:1\" was ignored."],
}


def list_payload(data, *, next_page=None, total_cards=None, has_more=None):
    """A Scryfall list object wrapping *data*."""
    payload = {
        "object": "list",
        "data": data,
        "has_more": next_page is not None if has_more is None else has_more,
    }
    if next_page is not None:
        payload["next_page"] = next_page
    if total_cards is not None:
        payload["total_cards"] = total_cards
    return payload


@pytest.fixture
def sample_cards():
    return [dict(c) for c in SAMPLE_CARDS]


@pytest.fixture
def make_list():
    return list_payload


@pytest.fixture
def sdk():
    """Sync client against the default API base; mock it with respx."""
    client = ScryfallTools()
    yield client
    client.close()


@pytest.fixture
def sample_ruling():
    return dict(SAMPLE_RULING)


@pytest.fixture
def sample_set():
    return dict(SAMPLE_SET)


@pytest.fixture
def sample_bulk():
    return dict(SAMPLE_BULK)


@pytest.fixture
def not_found():
    return dict(NOT_FOUND)
