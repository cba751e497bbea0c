"""Scryfall catalog model."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Catalog(BaseModel):
    """A list of Magic datapoints (card names, creature types, powers, ...)."""

    model_config = {"populate_by_name": True}

    uri: str | None = Field(default=None)
    total_values: int = Field(default=0)
    data: list[str] = Field(default_factory=list)
