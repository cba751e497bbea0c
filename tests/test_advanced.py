"""Tests for SearchOptions and request parameter building."""

import httpx
import pytest

from scryfall_tools.search import (
    CardIs,
    SearchOptions,
    SortDirection,
    SortOrder,
    UniqueStrategy,
    cmc,
    gte,
    name,
    search_params,
    type_line,
)


# === Defaults ===


def test_new_sends_only_page_and_query():
    assert SearchOptions.new().to_params() == [("page", "1"), ("q", "")]


def test_bare_options_send_only_query():
    assert SearchOptions().to_params() == [("q", "")]


def test_with_query():
    opts = SearchOptions.with_query(cmc(3))
    assert opts.to_params() == [("page", "1"), ("q", "cmc:3")]


# === Setters ===


def test_all_fields_in_key_order():
    opts = (
        SearchOptions.new()
        .query(type_line("dragon"))
        .unique(UniqueStrategy.PRINTS)
        .sort(SortOrder.USD, SortDirection.DESCENDING)
        .extras()
        .multilingual()
        .variations()
    )
    assert opts.to_params() == [
        ("unique", "prints"),
        ("order", "usd"),
        ("dir", "desc"),
        ("page", "1"),
        ("include_extras", "true"),
        ("include_multilingual", "true"),
        ("include_variations", "true"),
        ("q", 'type:"dragon"'),
    ]


def test_setters_overwrite():
    opts = SearchOptions.new().page(3).page(2).order("cmc").order(SortOrder.NAME)
    assert opts.to_params() == [("page", "2"), ("q", "")]


def test_query_replaces_previous_query():
    opts = SearchOptions.new().query(cmc(1)).query(name("Yargle"))
    assert opts.to_params()[-1] == ("q", 'name:"Yargle"')


def test_setting_back_to_default_omits_field():
    opts = SearchOptions.new().extras().extras(False).unique("art")
    assert opts.to_params() == [("unique", "art"), ("page", "1"), ("q", "")]


def test_string_values_are_validated():
    with pytest.raises(ValueError):
        SearchOptions.new().order("popularity")


def test_query_accepts_criteria():
    opts = SearchOptions.new().query(CardIs.COMMANDER)
    assert opts.to_params()[-1] == ("q", "is:commander")


def test_query_rejects_plain_text():
    with pytest.raises(TypeError):
        SearchOptions.new().query(42)


# === Encoding ===


def test_query_string_round_trips_through_httpx():
    opts = SearchOptions.with_query(cmc(gte(5)) & type_line("elf")).order("set")
    parsed = httpx.QueryParams(opts.to_query_string())
    assert parsed.multi_items() == opts.to_params()
    assert parsed["q"] == '(cmc>=5 AND type:"elf")'


def test_equality_follows_params():
    a = SearchOptions.new().page(2)
    b = SearchOptions().page(2)
    assert a == b
    assert a != SearchOptions.new()
    with pytest.raises(TypeError):
        hash(a)


def test_repr_shows_query_string():
    assert repr(SearchOptions.new()) == "SearchOptions('page=1&q=')"


# === search_params ===


def test_search_params_from_query():
    assert search_params(cmc(3)) == [("q", "cmc:3")]


def test_search_params_from_raw_text():
    assert search_params("t:goblin o:haste") == [("q", "t:goblin o:haste")]


def test_search_params_from_criteria():
    assert search_params(CardIs.RESERVED) == [("q", "is:reserved")]


def test_search_params_from_options():
    opts = SearchOptions.new().page(4)
    assert search_params(opts) == opts.to_params()


def test_search_params_rejects_other_types():
    with pytest.raises(TypeError):
        search_params(3.5)
