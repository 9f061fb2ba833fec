"""
Stream handling for format detection.

Provides:
- gzip detection on binary input, without consuming the stream
- A rewindable view over text streams (mark before read-ahead, reset after)
- The header window: a bounded, independently re-readable copy of the
  leading characters of a stream

Detection only ever looks at the header window. The source stream is
returned to the position it had when the caller handed it over, so the
reader that is eventually selected sees the whole content.
"""

import gzip
import io
import logging
import re
from contextlib import contextmanager
from dataclasses import dataclass
from typing import BinaryIO, Iterator, TextIO

from packages.chemio.exceptions import (
    ChemIOErrorCode,
    InvalidInputError,
    UnsupportedStreamError,
)

logger = logging.getLogger(__name__)

GZIP_MAGIC = b"\x1f\x8b"

# Bytes inspected for a compression signature
MAGIC_PEEK_SIZE = 4

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


# =============================================================================
# Binary input
# =============================================================================


def is_binary_stream(stream) -> bool:
    """Check whether a stream yields bytes rather than text."""
    if isinstance(stream, io.TextIOBase):
        return False
    if isinstance(stream, (io.BufferedIOBase, io.RawIOBase)):
        return True
    return "b" in getattr(stream, "mode", "")


def peek_bytes(raw: BinaryIO, size: int = MAGIC_PEEK_SIZE) -> bytes:
    """
    Return up to `size` leading bytes without moving the stream position.

    Buffered readers are peeked directly; other streams must be seekable.
    A stream offering neither yields no bytes.
    """
    peek = getattr(raw, "peek", None)
    if peek is not None:
        return peek(size)[:size]

    if raw.seekable():
        offset = raw.tell()
        try:
            return raw.read(size)
        finally:
            raw.seek(offset)

    logger.debug("Stream supports neither peek nor seek; skipping magic check")
    return b""


def is_gzip_stream(raw: BinaryIO) -> bool:
    """Check for the gzip signature at the current stream position."""
    magic = peek_bytes(raw, MAGIC_PEEK_SIZE)
    return len(magic) == MAGIC_PEEK_SIZE and magic[:2] == GZIP_MAGIC


def open_decompressed(raw: BinaryIO) -> BinaryIO:
    """
    Wrap a binary stream in a gzip decompressor when it is compressed.

    I/O errors while peeking are logged and the stream is treated as
    uncompressed. Either way the returned stream starts where `raw` did.

    Args:
        raw: Binary stream positioned at the start of the content.

    Returns:
        A `gzip.GzipFile` over `raw`, or `raw` itself.
    """
    try:
        compressed = is_gzip_stream(raw)
    except OSError as e:
        logger.error(f"Could not read compression signature: {e}")
        logger.debug("Signature peek failed", exc_info=True)
        compressed = False

    if compressed:
        logger.info("gzip compressed input detected")
        return gzip.GzipFile(fileobj=raw, mode="rb")
    return raw


def open_text(
    raw: BinaryIO,
    encoding: str = "utf-8",
    errors: str = "replace",
) -> io.TextIOWrapper:
    """Decode a (possibly compressed) binary stream as text."""
    return io.TextIOWrapper(open_decompressed(raw), encoding=encoding, errors=errors)


# =============================================================================
# Rewindable text
# =============================================================================


class RewindableText:
    """
    A text stream that can read ahead and then return to where it was.

    Only seekable streams qualify. Wrapping fails before anything is
    read when the stream cannot be rewound.
    """

    def __init__(self, stream: TextIO):
        if stream is None:
            raise InvalidInputError(
                message="input cannot be None",
                code=ChemIOErrorCode.NULL_INPUT,
            )

        seekable = getattr(stream, "seekable", None)
        if seekable is None or not seekable():
            logger.error("Mark not supported")
            raise UnsupportedStreamError(
                message="input must support rewinding (seekable stream)",
                code=ChemIOErrorCode.STREAM_NOT_REWINDABLE,
                details={"stream_type": type(stream).__name__},
            )

        self._stream = stream

    @property
    def stream(self) -> TextIO:
        """The wrapped stream."""
        return self._stream

    @contextmanager
    def marked(self) -> Iterator[TextIO]:
        """Yield the stream and restore its position on exit, errors included."""
        mark = self._stream.tell()
        try:
            yield self._stream
        finally:
            self._stream.seek(mark)

    def read_ahead(self, size: int) -> str:
        """Read up to `size` characters, leaving the position unchanged."""
        chunks = []
        remaining = size
        with self.marked() as stream:
            while remaining > 0:
                chunk = stream.read(remaining)
                if not chunk:
                    break
                chunks.append(chunk)
                remaining -= len(chunk)
        return "".join(chunks)


# =============================================================================
# Header window
# =============================================================================


@dataclass(frozen=True)
class HeaderWindow:
    """Bounded copy of the leading characters of a stream."""

    text: str

    def __len__(self) -> int:
        return len(self.text)

    def open(self) -> io.StringIO:
        """Return a fresh, independent reader over the window."""
        return io.StringIO(self.text)

    def lines(self) -> Iterator[tuple[int, str]]:
        """Yield (line_number, line) pairs, 1-based, without terminators."""
        with self.open() as reader:
            text = reader.read()
        if not text:
            return
        parts = _LINE_BREAK.split(text)
        if parts[-1] == "":
            parts.pop()
        yield from enumerate(parts, start=1)

    def first_line(self) -> str | None:
        """Return line one, or None for an empty window."""
        for _, line in self.lines():
            return line
        return None


def capture_header(stream: "TextIO | RewindableText", header_length: int) -> HeaderWindow:
    """
    Capture up to `header_length` characters from a text stream.

    The stream position is restored afterwards, so whoever reads the
    stream next sees the captured characters again.

    Raises:
        InvalidInputError: If stream is None.
        UnsupportedStreamError: If the stream cannot be rewound.
    """
    source = stream if isinstance(stream, RewindableText) else RewindableText(stream)
    text = source.read_ahead(header_length)
    logger.debug(f"Captured header window of {len(text)} characters")
    return HeaderWindow(text=text)
