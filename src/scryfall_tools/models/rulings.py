"""Scryfall ruling model."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field


class Ruling(BaseModel):
    """An Oracle ruling, WotC release note, or Scryfall note for a card.

    Cards sharing a name share the same rulings.
    """

    model_config = {"populate_by_name": True}

    oracle_id: str
    source: str = Field(description="Either ``wotc`` or ``scryfall``.")
    published_at: date
    comment: str
