"""
Slide record extraction from line-oriented language-model output.

The model is asked to emit one JSON object per line, but real output is
noisy: code fences, prose, half-written objects. Every line is parsed on its
own and anything that is not a slide record with a known type is skipped.

Two delivery modes share the same line rules:

- batch: ``extract_records(text)`` on a complete payload;
- incremental: ``RecordStream`` (or ``aiter_records`` / ``iter_records_incremental``)
  over chunks arriving from an open connection, terminated by ``END_OF_STREAM``.
"""
import codecs
import json
import logging
from typing import AsyncIterable, AsyncIterator, Iterable, Iterator, Optional, Union

from aippt.models.slide import SlideRecord, parse_slide_record

logger = logging.getLogger(__name__)

END_OF_STREAM = "[DONE]"
CODE_FENCE = "```"

Chunk = Union[str, bytes]


def parse_line(line: str) -> Optional[SlideRecord]:
    """
    Parse one line of model output into a slide record.

    Returns None for blank lines, code fences, invalid JSON and JSON values
    without a recognized slide type.
    """
    line = line.strip()
    if not line or line.startswith(CODE_FENCE):
        return None
    try:
        obj = json.loads(line)
    except ValueError:
        logger.debug(f"Skipping unparseable line: {line[:80]}")
        return None
    record = parse_slide_record(obj)
    if record is None:
        logger.debug(f"Skipping line without a known slide type: {line[:80]}")
    return record


def iter_records(lines: Iterable[str]) -> Iterator[SlideRecord]:
    """Lazily yield slide records from an iterable of lines."""
    for line in lines:
        record = parse_line(line)
        if record is not None:
            yield record


def extract_records(text: str) -> list[SlideRecord]:
    """Extract all slide records from a complete text payload, in order."""
    return list(iter_records(text.split("\n")))


class LineSplitter:
    """
    Reassembles lines from arbitrarily split text or byte chunks.

    Complete lines are returned as soon as their newline arrives; the partial
    trailing line is carried until the next chunk or ``flush()``.
    """

    def __init__(self, encoding: str = "utf-8"):
        self._decoder = codecs.getincrementaldecoder(encoding)(errors="replace")
        self._buffer = ""

    def feed(self, chunk: Chunk) -> list[str]:
        if isinstance(chunk, bytes):
            chunk = self._decoder.decode(chunk)
        self._buffer += chunk
        if "\n" not in self._buffer:
            return []
        *lines, self._buffer = self._buffer.split("\n")
        return [line.rstrip("\r") for line in lines]

    def flush(self) -> list[str]:
        tail = self._buffer + self._decoder.decode(b"", final=True)
        self._buffer = ""
        return [tail.rstrip("\r")] if tail else []


class RecordStream:
    """
    Incremental record extraction over chunked input.

    ``feed`` returns the records completed by each chunk. The stream closes
    when the sentinel arrives, either as a chunk of its own or as a line, or
    when ``close`` is called; further input is ignored.
    """

    def __init__(self, sentinel: str = END_OF_STREAM):
        self.sentinel = sentinel
        self._lines = LineSplitter()
        self.closed = False

    def feed(self, chunk: Chunk) -> list[SlideRecord]:
        if self.closed:
            return []
        if chunk == self.sentinel:
            return self.close()
        return self._extract(self._lines.feed(chunk))

    def close(self) -> list[SlideRecord]:
        if self.closed:
            return []
        records = self._extract(self._lines.flush())
        self.closed = True
        return records

    def _extract(self, lines: list[str]) -> list[SlideRecord]:
        records = []
        for line in lines:
            if self.closed:
                break
            if line.strip() == self.sentinel:
                self.closed = True
                break
            record = parse_line(line)
            if record is not None:
                records.append(record)
        return records


def iter_records_incremental(chunks: Iterable[Chunk]) -> Iterator[SlideRecord]:
    """Yield records from a synchronous chunk source, stopping at the sentinel."""
    stream = RecordStream()
    for chunk in chunks:
        yield from stream.feed(chunk)
        if stream.closed:
            return
    yield from stream.close()


async def aiter_records(chunks: AsyncIterable[Chunk]) -> AsyncIterator[SlideRecord]:
    """
    Yield records from an asynchronous chunk source as soon as each line completes.

    Stops pulling from ``chunks`` at the sentinel. If the source is an async
    generator it is closed on exit, including cancellation by the consumer.
    """
    stream = RecordStream()
    try:
        async for chunk in chunks:
            for record in stream.feed(chunk):
                yield record
            if stream.closed:
                return
        for record in stream.close():
            yield record
    finally:
        aclose = getattr(chunks, "aclose", None)
        if aclose is not None:
            await aclose()
