"""Tests for the pydantic models and typed links."""

from datetime import date

from scryfall_tools import Page, Uri
from scryfall_tools.models import BulkDataFile, Card, Colors, Ruling, Set


def test_card_ignores_unknown_fields(sample_cards):
    card = Card.model_validate(sample_cards[0])
    assert card.name == "Lightning Bolt"
    assert not hasattr(card, "some_future_field")
    assert card.legalities["modern"] == "legal"
    assert card.prices["usd"] == "450.00"
    assert card.released_at == date(1993, 8, 5)


def test_card_defaults(sample_cards):
    card = Card.model_validate(sample_cards[1])
    assert card.power == "9"
    assert card.oracle_id is None
    assert card.keywords == []
    assert card.card_uri is None
    assert card.prints_uri is None


def test_card_links_are_typed(sample_cards):
    card = Card.model_validate(sample_cards[0])
    assert card.card_uri == Uri(card.uri)
    assert card.card_uri.target is Card
    assert card.prints_uri.target is Page[Card]
    assert card.rulings_list_uri.url.endswith("/rulings")
    assert card.rulings_list_uri.target is Page[Ruling]


def test_uri_adapter_validates_target(sample_cards):
    uri = Uri("https://api.scryfall.com/cards/x", Card)
    assert uri.adapter.validate_python(sample_cards[2]).name == "Counterspell"
    assert uri.adapter is uri.adapter
    assert uri.with_target(dict).target is dict
    assert str(uri) == uri.url


def test_set_cards_uri(sample_set):
    s = Set.model_validate(sample_set)
    assert s.cards_uri.url == sample_set["search_uri"]
    assert s.released_at == date(1993, 8, 5)


def test_ruling(sample_ruling):
    r = Ruling.model_validate(sample_ruling)
    assert r.published_at == date(2004, 10, 4)


def test_bulk_data_file(sample_bulk):
    b = BulkDataFile.model_validate(sample_bulk)
    assert b.type == "oracle_cards"
    assert b.updated_at.year == 2025
    assert b.compressed_size is None


def test_page_of_cards(sample_cards, make_list):
    page = Page[Card].model_validate(make_list(sample_cards, total_cards=3))
    assert page.total_cards == 3
    assert [c.id for c in page.data] == ["card-id-001", "card-id-002", "card-id-003"]
    assert page.is_consistent


def test_colors():
    assert str(Colors("R", "W")) == "wr"
    assert list(Colors("G", "U")) == ["U", "G"]
    assert Colors("W") == Colors("W")
    assert Colors.colorless().is_colorless
    assert Colors.multicolored().is_multicolored
    assert len({Colors("W"), Colors("W")}) == 1
    assert repr(Colors("B")) == "Colors('b')"
