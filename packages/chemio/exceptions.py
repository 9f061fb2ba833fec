"""
Chemical I/O exceptions.

Provides structured error handling for format detection and readers.
Heuristic non-matches are never reported through these classes; only
caller contract violations and reader failures are.
"""

from enum import Enum


class ChemIOErrorCode(str, Enum):
    """Error codes for chemical format detection and reading."""

    # Caller contract
    NULL_INPUT = "NULL_INPUT"
    INVALID_HEADER_LENGTH = "INVALID_HEADER_LENGTH"
    STREAM_NOT_REWINDABLE = "STREAM_NOT_REWINDABLE"

    # Readers
    EMPTY_INPUT = "EMPTY_INPUT"
    INVALID_MOLFILE = "INVALID_MOLFILE"
    INVALID_RXN = "INVALID_RXN"
    INVALID_PDB = "INVALID_PDB"
    INVALID_MOL2 = "INVALID_MOL2"
    INVALID_XYZ = "INVALID_XYZ"
    READER_NOT_IMPLEMENTED = "READER_NOT_IMPLEMENTED"

    # General
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class ChemIOError(Exception):
    """Base exception for chemical I/O."""

    def __init__(
        self,
        message: str,
        code: ChemIOErrorCode = ChemIOErrorCode.UNKNOWN_ERROR,
        details: dict | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


class InvalidInputError(ChemIOError):
    """Raised when the caller passes no input or an invalid option."""

    pass


class UnsupportedStreamError(ChemIOError):
    """Raised when a stream cannot be rewound after the header is read."""

    pass


class ReaderError(ChemIOError):
    """Raised when a format reader cannot build chemical objects."""

    pass


class ReaderNotImplementedError(ReaderError):
    """Raised by placeholder readers for recognized formats without a parser."""

    pass
