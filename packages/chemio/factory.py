"""
Reader factory: detect the format of a stream and build its reader.

Detection runs in a fixed order:
1. Binary input is checked for gzip and decoded to text
2. Up to `header_length` characters are captured; the stream is rewound
3. Line rules are applied to the captured header
4. If no rule fires, the XYZ and SMILES probes look at line one
5. The reader registered for the detected format is built over the
   original stream, which still starts at the caller's position

Usage:
    >>> from packages.chemio import ReaderFactory
    >>> factory = ReaderFactory()
    >>> with open("ethanol.sdf.gz", "rb") as handle:
    ...     reader = factory.create_reader(handle)
    ...     molecules = reader.read()

    >>> factory.detect_text("CCO").format
    <ChemFormat.SMILES: 'smiles'>
"""

import io
import logging
from pathlib import Path
from typing import BinaryIO, TextIO

from packages.chemio.config import get_settings
from packages.chemio.exceptions import ChemIOErrorCode, InvalidInputError
from packages.chemio.probes import DEFAULT_PROBES, Probe, run_probes
from packages.chemio.readers.base import ChemObjectReader
from packages.chemio.registry import create_reader_for, get_reader_class
from packages.chemio.rules import DEFAULT_RULES, FormatRule, classify_window
from packages.chemio.schemas import (
    UNDETERMINED,
    DetectionResult,
    DetectionStage,
)
from packages.chemio.stream import capture_header, is_binary_stream, open_text

logger = logging.getLogger(__name__)


class ReaderFactory:
    """Creates chemical file readers from the content of their input."""

    def __init__(
        self,
        header_length: int | None = None,
        encoding: str | None = None,
        encoding_errors: str | None = None,
        rules: tuple[FormatRule, ...] = DEFAULT_RULES,
        probes: tuple[tuple[DetectionStage, Probe], ...] = DEFAULT_PROBES,
    ):
        """
        Initialize reader factory.

        Args:
            header_length: Characters inspected for detection. Defaults to
                the configured value (65536).
            encoding: Encoding used to decode binary input.
            encoding_errors: Decoding error policy for binary input.
            rules: Line rules in priority order.
            probes: Fallback probes in the order they are tried.

        Raises:
            InvalidInputError: If header_length is less than 1.
        """
        settings = get_settings()
        if header_length is None:
            header_length = settings.header_length
        if header_length < 1:
            raise InvalidInputError(
                message=f"header_length must be positive, got {header_length}",
                code=ChemIOErrorCode.INVALID_HEADER_LENGTH,
            )

        self._header_length = header_length
        self._encoding = encoding or settings.encoding
        self._encoding_errors = encoding_errors or settings.encoding_errors
        self._rules = tuple(rules)
        self._probes = tuple(probes)

    @property
    def header_length(self) -> int:
        return self._header_length

    # =========================================================================
    # Detection
    # =========================================================================

    def detect(self, stream: BinaryIO | TextIO) -> DetectionResult | None:
        """
        Detect the format of a binary or text stream.

        The stream is left at the position it had on entry.

        Returns:
            DetectionResult, or None when the format is undetermined.

        Raises:
            InvalidInputError: If stream is None.
            UnsupportedStreamError: If the (decoded) stream cannot be rewound.
        """
        if stream is None:
            raise InvalidInputError(
                message="input cannot be None",
                code=ChemIOErrorCode.NULL_INPUT,
            )

        if not is_binary_stream(stream):
            return self._detect_text_stream(stream)

        origin = stream.tell() if stream.seekable() else None
        wrapper = open_text(stream, self._encoding, self._encoding_errors)
        try:
            return self._detect_text_stream(wrapper)
        finally:
            # Keep garbage collection of the wrapper from closing the caller's stream
            wrapper.detach()
            if origin is not None:
                stream.seek(origin)

    def detect_text(self, text: str) -> DetectionResult | None:
        """Detect the format of in-memory text."""
        if text is None:
            raise InvalidInputError(
                message="input cannot be None",
                code=ChemIOErrorCode.NULL_INPUT,
            )
        return self._detect_text_stream(io.StringIO(text))

    def guess_format(self, stream: BinaryIO | TextIO) -> str:
        """
        Name the reader class for a stream's format.

        Returns:
            The reader's qualified class name, or "Format undetermined".
        """
        result = self.detect(stream)
        if result is None:
            return UNDETERMINED
        return get_reader_class(result.format).qualified_name()

    def _detect_text_stream(self, stream: TextIO) -> DetectionResult | None:
        window = capture_header(stream, self._header_length)

        match = classify_window(window, self._rules)
        if match is not None:
            return DetectionResult(
                format=match.format,
                stage=DetectionStage.RULE,
                line_number=match.line_number,
                rule=match.rule.describe(),
            )

        logger.warning("No line rule matched; trying fallback probes")
        result = run_probes(window, self._probes)
        if result is None:
            logger.warning("File format undetermined")
        return result

    # =========================================================================
    # Reader construction
    # =========================================================================

    def create_reader(self, stream: BinaryIO | TextIO) -> ChemObjectReader | None:
        """
        Detect the format of a stream and build the matching reader.

        The reader is handed the caller's stream (decoded and, if needed,
        decompressed), positioned where the caller left it. For
        recognized formats without a parser, the reader is a placeholder
        with `implemented` set to False.

        Returns:
            The reader, or None when the format is undetermined.

        Raises:
            InvalidInputError: If stream is None.
            UnsupportedStreamError: If the (decoded) stream cannot be rewound.
        """
        if stream is None:
            raise InvalidInputError(
                message="input cannot be None",
                code=ChemIOErrorCode.NULL_INPUT,
            )

        if not is_binary_stream(stream):
            result = self._detect_text_stream(stream)
            return create_reader_for(result.format, stream) if result else None

        # The decompressor rewinds to absolute offset 0, so detection runs on
        # its own wrapper and the reader gets a fresh one from the caller's position
        result = self.detect(stream)
        if result is None:
            return None
        wrapper = open_text(stream, self._encoding, self._encoding_errors)
        return create_reader_for(result.format, wrapper)

    def open_reader(self, path: str | Path) -> ChemObjectReader | None:
        """
        Open a file (gzip compressed or not) and build its reader.

        The reader owns the file handle; close the reader when done.
        Returns None, with the file closed, when the format is undetermined.
        """
        handle = open(path, "rb")
        try:
            reader = self.create_reader(handle)
        except Exception:
            handle.close()
            raise

        if reader is None:
            handle.close()
            return None
        reader.own(handle)
        return reader


def detect_format(
    stream: BinaryIO | TextIO, header_length: int | None = None
) -> DetectionResult | None:
    """
    Convenience function to detect the format of a stream.

    Args:
        stream: Binary or text stream; left at its original position.
        header_length: Characters inspected for detection.

    Returns:
        DetectionResult, or None when the format is undetermined.
    """
    return ReaderFactory(header_length=header_length).detect(stream)


def guess_format(stream: BinaryIO | TextIO, header_length: int | None = None) -> str:
    """Convenience function returning the reader class name or "Format undetermined"."""
    return ReaderFactory(header_length=header_length).guess_format(stream)


def create_reader(
    stream: BinaryIO | TextIO, header_length: int | None = None
) -> ChemObjectReader | None:
    """Convenience function to build the reader for a stream."""
    return ReaderFactory(header_length=header_length).create_reader(stream)


def open_reader(
    path: str | Path, header_length: int | None = None
) -> ChemObjectReader | None:
    """Convenience function to build the reader for a file on disk."""
    return ReaderFactory(header_length=header_length).open_reader(path)
