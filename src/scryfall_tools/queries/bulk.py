"""Bulk data query module.

Scryfall publishes its whole database daily as a handful of large JSON
files. :class:`BulkQuery` finds them and decodes them incrementally, so
even ``all_cards`` (several gigabytes) is processed one card at a time.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter

from .._stream import DecoderFactory, JsonArrayDecoder, stream_json_array
from ..config import BULK_DATA_PATH, BULK_TYPES, CHUNK_SIZE, api_url
from ..connection import Connection
from ..lists import Page
from ..models.bulk import BulkDataFile
from ..models.cards import Card
from ..models.rulings import Ruling
from ..uri import Uri

logger = logging.getLogger("scryfall_tools")

_CARD_ADAPTER = TypeAdapter(Card)
_RULING_ADAPTER = TypeAdapter(Ruling)


def item_adapter(bulk_type: str) -> TypeAdapter[Any]:
    """Validator for the elements of a bulk file of *bulk_type*."""
    return _RULING_ADAPTER if bulk_type == "rulings" else _CARD_ADAPTER


def bulk_file_uri(bulk_type: str, base: str) -> Uri[BulkDataFile]:
    """Link to the metadata of the bulk file of *bulk_type*.

    Raises:
        ValueError: If *bulk_type* is not one of :data:`BULK_TYPES`.
    """
    if bulk_type not in BULK_TYPES:
        raise ValueError(
            f"Unknown bulk type {bulk_type!r}. Expected one of {', '.join(BULK_TYPES)}"
        )
    return Uri(api_url(BULK_DATA_PATH, bulk_type, base=base), BulkDataFile)


def read_chunks(path: Path | str, chunk_size: int = CHUNK_SIZE) -> Iterator[bytes]:
    """Read a file in fixed-size chunks."""
    with open(path, "rb") as f:
        while chunk := f.read(chunk_size):
            yield chunk


class BulkQuery:
    """Access Scryfall's bulk data exports.

    Example::

        for card in sdk.bulk.oracle_cards():
            print(card.name)

        path = sdk.bulk.download("default_cards", "data/default-cards.json")
        for card in sdk.bulk.iter_file(path):
            ...
    """

    def __init__(self, conn: Connection) -> None:
        self._conn = conn

    def _url(self, *parts: Any) -> str:
        return api_url(BULK_DATA_PATH, *parts, base=self._conn.base_url)

    def list(self) -> list[BulkDataFile]:
        """Metadata for every bulk file currently published."""
        return self._conn.fetch_all(Uri(self._url(), Page[BulkDataFile]))

    def get(self, bulk_type: str) -> BulkDataFile:
        """Metadata for the bulk file of *bulk_type*.

        Raises:
            ValueError: If *bulk_type* is not one of :data:`BULK_TYPES`.
        """
        return self._conn.fetch(bulk_file_uri(bulk_type, self._conn.base_url))

    def get_by_id(self, bulk_id: str) -> BulkDataFile:
        return self._conn.fetch(Uri(self._url(bulk_id), BulkDataFile))

    def _resolve(self, bulk: str | BulkDataFile) -> BulkDataFile:
        return bulk if isinstance(bulk, BulkDataFile) else self.get(bulk)

    def iter(
        self, bulk: str | BulkDataFile, decoder_cls: DecoderFactory = JsonArrayDecoder
    ) -> Iterator[Any]:
        """Stream and decode a bulk file, one element at a time.

        The download is decoded on a background thread as it arrives.
        Elements are :class:`Card` models, or :class:`Ruling` models for
        the ``rulings`` file. Stopping early closes the download.

        Args:
            bulk: Bulk type name or its metadata.
            decoder_cls: Decode pass to run, e.g. :class:`IjsonArrayDecoder`.

        Raises:
            DecodeError: After the last good element, if the file is
                malformed or cut short.
        """
        info = self._resolve(bulk)
        return self._stream(info, decoder_cls)

    def _stream(self, info: BulkDataFile, decoder_cls: DecoderFactory) -> Iterator[Any]:
        logger.info("Streaming bulk %s from %s", info.type, info.download_uri)
        with self._conn.stream(info.download_uri) as chunks:
            yield from stream_json_array(
                chunks, item_adapter(info.type), decoder_cls=decoder_cls
            )

    def load(
        self, bulk: str | BulkDataFile, decoder_cls: DecoderFactory = JsonArrayDecoder
    ) -> list[Any]:
        """Decode a whole bulk file into a list. Mind the memory."""
        return list(self.iter(bulk, decoder_cls))

    def download(self, bulk: str | BulkDataFile, dest: Path | str) -> Path:
        """Save a bulk file to *dest* (decompressed), returning the path."""
        info = self._resolve(bulk)
        return self._conn.download(info.download_uri, dest)

    def iter_file(
        self,
        path: Path | str,
        bulk_type: str = "default_cards",
        decoder_cls: DecoderFactory = JsonArrayDecoder,
    ) -> Iterator[Any]:
        """Decode a previously downloaded bulk file from disk.

        Args:
            path: File written by :meth:`download`.
            bulk_type: The file's bulk type; selects the element model.
            decoder_cls: Decode pass to run.
        """
        return stream_json_array(
            read_chunks(path), item_adapter(bulk_type), decoder_cls=decoder_cls
        )

    def oracle_cards(self) -> Iterator[Card]:
        """One card per Oracle ID, in its most up-to-date printing."""
        return self.iter("oracle_cards")

    def unique_artwork(self) -> Iterator[Card]:
        return self.iter("unique_artwork")

    def default_cards(self) -> Iterator[Card]:
        """Every card object, in English or the only available language."""
        return self.iter("default_cards")

    def all_cards(self) -> Iterator[Card]:
        """Every card object in every language."""
        return self.iter("all_cards")

    def rulings(self) -> Iterator[Ruling]:
        return self.iter("rulings")
