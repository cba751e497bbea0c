"""Incremental decoding of a byte stream holding one large JSON array.

Scryfall's bulk files are a single top-level array, often gigabytes
long. Nothing here materializes the array: :class:`ArrayStreamReader`
strips the enclosing brackets and the top-level commas as bytes arrive,
:class:`JsonArrayDecoder` parses the complete elements out of what the
reader produced, and the stream functions run that decode pass on a
worker so the consumer can handle element 1 while element N is still
being parsed.

:class:`IjsonArrayDecoder` is the alternative decode pass: it hands the
raw bytes to ijson, which parses the array itself and reports each
element as it completes. Pass it as ``decoder_cls`` to any of the
stream functions.

A malformed or truncated stream raises :class:`DecodeError` after every
element that decoded cleanly before the fault has been yielded.
"""

from __future__ import annotations

import asyncio
import contextlib
import json
import logging
import queue
import re
import threading
from collections.abc import AsyncIterable, AsyncIterator, Callable, Iterable, Iterator
from typing import Any

import ijson
from pydantic import TypeAdapter, ValidationError

from .config import ASYNC_HANDOFF_SIZE, SYNC_HANDOFF_SIZE, WORKER_JOIN_TIMEOUT
from .errors import DecodeError, TruncatedStreamError

logger = logging.getLogger("scryfall_tools")

_WHITESPACE = frozenset(b" \t\r\n")
_LBRACKET, _RBRACKET = ord("["), ord("]")
_LBRACE, _RBRACE = ord("{"), ord("}")
_QUOTE, _BACKSLASH = ord('"'), ord("\\")
_COMMA, _NEWLINE, _NUL = ord(","), ord("\n"), 0

_SKIP_WS = re.compile(r"[ \t\n\r]*")

#: Seconds between checks for a departed consumer while the hand-off is full.
_POLL_INTERVAL = 0.1


class ArrayStreamReader:
    """Byte transformer that unwraps a top-level JSON array.

    Feed it raw chunks; it returns the bytes of the array's elements with
    the outer ``[``/``]`` removed and every top-level ``,`` replaced by a
    newline, leaving a whitespace-separated run of JSON values. Depth,
    string and escape state are carried across chunks, so brackets and
    commas inside strings or nested values are passed through untouched.

    Before the array starts, whitespace is skipped and a NUL byte is a
    clean end of input. A second array following the first is unwrapped
    the same way.

    A structural fault ends the output at the fault; the error is raised
    by the next call to :meth:`feed` or :meth:`finish`, so whatever came
    before it can still be decoded.
    """

    def __init__(self) -> None:
        self._depth: int | None = None
        self._in_string = False
        self._escaped = False
        self._element = False
        self._separators = 0
        self._open = 0
        self._finished = False
        self._error: DecodeError | None = None
        self._emitted = 0
        self._ends: list[int] = []
        self.completed = 0
        self.arrays = 0

    @property
    def open_bytes(self) -> int:
        """Trailing output bytes that belong to a not yet terminated element."""
        return self._open

    @property
    def finished(self) -> bool:
        """True once a NUL byte ended the input between arrays."""
        return self._finished

    @property
    def in_array(self) -> bool:
        return self._depth is not None

    def take_ends(self) -> list[int]:
        """Output offsets just past each element completed since the last call.

        Offsets count from the first byte :meth:`feed` ever returned.
        """
        ends, self._ends = self._ends, []
        return ends

    def feed(self, chunk: bytes) -> bytes:
        """Transform *chunk*, returning the bytes to hand to a JSON decoder.

        Raises:
            DecodeError: If an earlier chunk held a byte other than ``[``
                before the array, an empty element, or a ``}`` that
                closes nothing.
        """
        if self._error is not None:
            raise self._error
        out = bytearray()
        boundary = -1
        for byte in chunk:
            if self._finished:
                break
            depth = self._depth
            if depth is None:
                if byte in _WHITESPACE:
                    continue
                if byte == _NUL:
                    self._finished = True
                    break
                if byte != _LBRACKET:
                    self._error = DecodeError(
                        f"Expected '[' at the start of the stream, found {chr(byte)!r}"
                    )
                    break
                self._depth = 0
                self._element = False
                self._separators = 0
                continue

            if self._in_string:
                out.append(byte)
                if self._escaped:
                    self._escaped = False
                elif byte == _BACKSLASH:
                    self._escaped = True
                elif byte == _QUOTE:
                    self._in_string = False
                continue

            if depth == 0:
                if byte == _COMMA:
                    if not self._element:
                        self._error = DecodeError("Empty element in top-level array")
                        break
                    out.append(_NEWLINE)
                    boundary = len(out)
                    self._ends.append(self._emitted + boundary)
                    self._element = False
                    self._separators += 1
                    self.completed += 1
                    continue
                if byte == _RBRACKET:
                    if self._element:
                        out.append(_NEWLINE)
                        self._ends.append(self._emitted + len(out))
                        self.completed += 1
                    elif self._separators:
                        self._error = DecodeError("Trailing comma in top-level array")
                        break
                    boundary = len(out)
                    self._depth = None
                    self.arrays += 1
                    continue
                if byte == _RBRACE:
                    self._error = DecodeError(
                        "Unmatched '}' at the top level of the array"
                    )
                    break

            out.append(byte)
            if byte in _WHITESPACE:
                continue
            self._element = True
            if byte == _QUOTE:
                self._in_string = True
            elif byte == _LBRACKET or byte == _LBRACE:
                self._depth = depth + 1
            elif byte == _RBRACKET or byte == _RBRACE:
                self._depth = depth - 1

        if boundary >= 0:
            self._open = len(out) - boundary
        else:
            self._open += len(out)
        self._emitted += len(out)
        return bytes(out)

    def finish(self) -> None:
        """Signal end of input.

        Raises:
            DecodeError: A structural fault was found earlier.
            TruncatedStreamError: The input ended inside an array.
        """
        if self._error is not None:
            raise self._error
        if self._depth is not None:
            raise TruncatedStreamError(
                "Stream ended before the top-level array was closed"
            )


class JsonArrayDecoder:
    """Incremental decoder yielding the elements of a top-level JSON array.

    Only the part of the reader's output that is known to hold complete
    elements is parsed, so a chunk boundary may fall anywhere, including
    inside a string, an escape sequence or a multi-byte character.

    Errors are deferred like the reader's: :meth:`feed` returns the
    elements decoded before a fault and the next :meth:`feed` or
    :meth:`close` raises.

    Example::

        decoder = JsonArrayDecoder()
        for chunk in chunks:
            for value in decoder.feed(chunk):
                handle(value)
        for value in decoder.close():
            handle(value)
    """

    def __init__(self) -> None:
        self._reader = ArrayStreamReader()
        self._decoder = json.JSONDecoder()
        self._buffer = bytearray()
        self._offset = 0
        self._error: DecodeError | None = None
        self.count = 0

    @property
    def finished(self) -> bool:
        return self._reader.finished

    def feed(self, chunk: bytes) -> list[Any]:
        """Consume *chunk* and return the elements it completed."""
        if self._error is not None:
            raise self._error
        self._buffer += self._reader.feed(chunk)
        ends = self._reader.take_ends()
        if not ends:
            return []
        start = self._offset
        ready = ends[-1] - start
        segment = bytes(self._buffer[:ready])
        del self._buffer[:ready]
        self._offset = ends[-1]
        return self._decode(segment, [end - start for end in ends])

    def close(self) -> list[Any]:
        """Finish decoding; raises if the stream was malformed or cut short."""
        if self._error is not None:
            raise self._error
        self._reader.finish()
        if self._buffer.strip():
            raise TruncatedStreamError("Stream ended inside an array element")
        return []

    def _decode(self, segment: bytes, ends: list[int]) -> list[Any]:
        # Each span between two ends holds exactly one element.
        values = []
        start = 0
        for end in ends:
            try:
                text = segment[start:end].decode("utf-8")
            except UnicodeDecodeError as e:
                self._error = DecodeError(f"Array element is not valid UTF-8: {e}")
                break
            start = end
            try:
                value, idx = self._decoder.raw_decode(text, _SKIP_WS.match(text).end())
            except json.JSONDecodeError as e:
                self._error = DecodeError(
                    f"Invalid JSON in array element {self.count}: {e.msg}"
                )
                break
            values.append(value)
            self.count += 1
            if _SKIP_WS.match(text, idx).end() != len(text):
                self._error = DecodeError(
                    f"Expected ',' or ']' after array element {self.count - 1}"
                )
                break
        return values


class IjsonArrayDecoder:
    """Incremental decoder that lets ijson parse the array itself.

    The bytes go straight to an ``ijson.items_coro`` pipeline, and each
    element is collected as soon as its last token has been parsed. Same
    interface as :class:`JsonArrayDecoder`, and errors are deferred the
    same way.

    Only one top-level array is read. Whitespace before it is skipped
    and a NUL byte in its place is a clean end of input; anything after
    the closing ``]`` is an error.
    """

    def __init__(self) -> None:
        self._items = ijson.sendable_list()
        self._coro = ijson.items_coro(self._items, "item", use_float=True)
        self._started = False
        self._finished = False
        self._error: DecodeError | None = None
        self.count = 0

    @property
    def finished(self) -> bool:
        """True once a NUL byte ended the input before the array."""
        return self._finished

    def feed(self, chunk: bytes) -> list[Any]:
        """Consume *chunk* and return the elements it completed."""
        if self._error is not None:
            raise self._error
        if self._finished:
            return []
        if not self._started:
            chunk = chunk.lstrip(b" \t\r\n")
            if not chunk:
                return []
            if chunk[0] == _NUL:
                self._finished = True
                return []
            if chunk[0] != _LBRACKET:
                self._error = DecodeError(
                    f"Expected '[' at the start of the stream, found {chr(chunk[0])!r}"
                )
                return []
            self._started = True
        try:
            self._coro.send(chunk)
        except ijson.JSONError as e:
            self._error = DecodeError(
                f"Invalid JSON after array element {self.count + len(self._items) - 1}: {e}"
            )
        return self._drain()

    def close(self) -> list[Any]:
        """Finish decoding; raises if the stream was malformed or cut short."""
        if self._error is not None:
            raise self._error
        if not self._started:
            return []
        try:
            self._coro.close()
        except ijson.IncompleteJSONError as e:
            raise TruncatedStreamError(
                f"Stream ended before the top-level array was closed: {e}"
            ) from e
        except ijson.JSONError as e:
            raise DecodeError(f"Invalid JSON at the end of the stream: {e}") from e
        return self._drain()

    def _drain(self) -> list[Any]:
        values = list(self._items)
        del self._items[:]
        self.count += len(values)
        return values


#: Anything that builds a fresh decoder: :class:`JsonArrayDecoder` or
#: :class:`IjsonArrayDecoder`.
DecoderFactory = Callable[[], JsonArrayDecoder | IjsonArrayDecoder]


def iter_json_array(
    chunks: Iterable[bytes], decoder_cls: DecoderFactory = JsonArrayDecoder
) -> Iterator[Any]:
    """Decode the elements of a JSON array from an iterable of byte chunks.

    Runs in the caller's thread. See :func:`stream_json_array` for the
    variant that decodes on a worker thread.

    Args:
        chunks: Raw byte chunks of the array.
        decoder_cls: Decoder class to use, :class:`JsonArrayDecoder` by default.
    """
    decoder = decoder_cls()
    for chunk in chunks:
        yield from decoder.feed(chunk)
        if decoder.finished:
            break
    yield from decoder.close()


class _Failure:
    """Wraps the producer's terminal exception for the hand-off queue."""

    __slots__ = ("exc",)

    def __init__(self, exc: BaseException) -> None:
        self.exc = exc


_DONE = object()


def _validator(adapter: TypeAdapter[Any] | None):
    if adapter is None:
        return lambda value: value

    def validate(value: Any) -> Any:
        try:
            return adapter.validate_python(value)
        except ValidationError as e:
            raise DecodeError(f"Bulk element does not match the model: {e}") from e

    return validate


def stream_json_array(
    chunks: Iterable[bytes],
    adapter: TypeAdapter[Any] | None = None,
    *,
    maxsize: int = SYNC_HANDOFF_SIZE,
    decoder_cls: DecoderFactory = JsonArrayDecoder,
) -> Iterator[Any]:
    """Decode a JSON array on a background thread, yielding elements in order.

    The worker blocks until the consumer has taken the previous element
    (a one-slot hand-off by default). When the consumer stops iterating,
    the worker notices and exits without reading further.

    Args:
        chunks: Raw byte chunks of the array.
        adapter: Optional pydantic ``TypeAdapter`` each element is
            validated with, on the consumer side.
        maxsize: Hand-off queue size.
        decoder_cls: Decoder class run by the worker.

    Raises:
        DecodeError: After all cleanly decoded elements, if the stream is
            malformed, truncated, or an element fails validation.
    """
    handoff: queue.Queue[Any] = queue.Queue(maxsize=maxsize)
    stop = threading.Event()
    validate = _validator(adapter)

    def send(item: Any) -> bool:
        while not stop.is_set():
            try:
                handoff.put(item, timeout=_POLL_INTERVAL)
                return True
            except queue.Full:
                continue
        return False

    def produce() -> None:
        try:
            for value in iter_json_array(chunks, decoder_cls):
                if not send(value):
                    logger.debug("Bulk consumer went away, stopping decoder")
                    return
        except Exception as e:
            if not stop.is_set():
                send(_Failure(e))
            return
        send(_DONE)

    worker = threading.Thread(target=produce, name="scryfall-array-decoder", daemon=True)
    worker.start()
    try:
        while True:
            item = handoff.get()
            if item is _DONE:
                break
            if isinstance(item, _Failure):
                raise item.exc
            yield validate(item)
    finally:
        stop.set()
        # The worker must be off the chunk source before the caller closes it.
        worker.join(WORKER_JOIN_TIMEOUT)


async def astream_json_array(
    chunks: AsyncIterable[bytes],
    adapter: TypeAdapter[Any] | None = None,
    *,
    maxsize: int = ASYNC_HANDOFF_SIZE,
    decoder_cls: DecoderFactory = JsonArrayDecoder,
) -> AsyncIterator[Any]:
    """Async variant of :func:`stream_json_array`.

    A producer task reads the chunks and runs the decoding in the loop's
    default executor; decoded elements go through an unbounded
    ``asyncio.Queue`` so a slow consumer never stalls the download. The
    price is that a slow consumer lets the queue grow. The task is
    cancelled when the consumer stops iterating.
    """
    loop = asyncio.get_running_loop()
    handoff: asyncio.Queue[Any] = asyncio.Queue(maxsize=maxsize)
    decoder = decoder_cls()
    validate = _validator(adapter)

    async def produce() -> None:
        try:
            async for chunk in chunks:
                for value in await loop.run_in_executor(None, decoder.feed, chunk):
                    await handoff.put(value)
                if decoder.finished:
                    break
            for value in decoder.close():
                await handoff.put(value)
        except Exception as e:
            await handoff.put(_Failure(e))
            return
        await handoff.put(_DONE)

    task = asyncio.create_task(produce())
    try:
        while True:
            item = await handoff.get()
            if item is _DONE:
                break
            if isinstance(item, _Failure):
                raise item.exc
            yield validate(item)
    finally:
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
