"""scryfall-tools: typed client for the Scryfall Magic: The Gathering API."""

from ._stream import (
    ArrayStreamReader,
    IjsonArrayDecoder,
    JsonArrayDecoder,
    astream_json_array,
    iter_json_array,
    stream_json_array,
)
from .async_client import AsyncScryfallTools
from .client import ScryfallTools
from .errors import (
    ConsistencyError,
    DecodeError,
    ScryfallError,
    ScryfallToolsError,
    TransportError,
    TruncatedStreamError,
)
from .lists import AsyncListIter, AsyncPageIter, ListIter, Page, PageIter
from .uri import Uri

__all__ = [
    "ArrayStreamReader",
    "AsyncListIter",
    "AsyncPageIter",
    "AsyncScryfallTools",
    "ConsistencyError",
    "DecodeError",
    "JsonArrayDecoder",
    "IjsonArrayDecoder",
    "ListIter",
    "Page",
    "PageIter",
    "ScryfallError",
    "ScryfallTools",
    "ScryfallToolsError",
    "TransportError",
    "TruncatedStreamError",
    "Uri",
    "astream_json_array",
    "iter_json_array",
    "stream_json_array",
]
__version__ = "0.1.0"
