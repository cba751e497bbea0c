"""Scryfall bulk data file model."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class BulkDataFile(BaseModel):
    """Metadata for one of Scryfall's daily bulk exports.

    The ``download_uri`` changes with every export. Prices inside bulk
    card data go stale within a day; gameplay data changes far less
    often.
    """

    model_config = {"populate_by_name": True}

    id: str = Field(description="A unique ID for this bulk item.")
    uri: str | None = Field(default=None, description="This file's API URI.")
    type: str = Field(description="Computer-readable kind, e.g. ``oracle_cards``.")
    name: str = Field(default="")
    description: str = Field(default="")
    download_uri: str = Field(description="Where the file itself is hosted.")
    updated_at: datetime | None = Field(default=None)
    size: int | None = Field(default=None, description="Byte size of the file.")
    compressed_size: int | None = Field(default=None)
    content_type: str = Field(default="application/json")
    content_encoding: str = Field(default="gzip")
