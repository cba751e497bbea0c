"""Tests for yes/no search criteria."""

import pytest

from scryfall_tools.search import CardIs, Flag, PrintingIs, criterion


@pytest.mark.parametrize("flag", list(CardIs) + list(PrintingIs))
def test_criteria_are_complete_tokens(flag):
    prefix, _, rest = flag.value.partition(":")
    assert prefix in {"is", "has", "new", "cmc"}
    assert rest
    assert str(flag) == flag.value


def test_families_are_disjoint():
    card = {c.value for c in CardIs}
    printing = {p.value for p in PrintingIs}
    assert not card & printing


def test_criterion_builds_flag():
    q = criterion(PrintingIs.FOIL)
    assert q == Flag(PrintingIs.FOIL)
    assert str(q) == "is:foil"
    assert CardIs.EVEN_CMC.as_query() == criterion(CardIs.EVEN_CMC)


def test_has_and_new_prefixes():
    assert str(criterion(CardIs.COLOR_INDICATOR)) == "has:indicator"
    assert str(criterion(PrintingIs.WATERMARK)) == "has:watermark"
    assert str(criterion(PrintingIs.NEW_ART)) == "new:art"


def test_criteria_negate_and_combine():
    assert str(~CardIs.FUNNY) == "-is:funny"
    assert str(CardIs.FETCH_LAND | CardIs.SHOCK_LAND) == "(is:fetch_land OR is:shock_land)"
