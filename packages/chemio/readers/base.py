"""
Base classes for chemical file readers.

Every reader is built from a single text stream and exposes `read()`,
which returns the chemical objects found in the stream. Formats that are
recognized but have no parser yet use `PlaceholderReader`, so callers can
tell "known format, no reader" apart from "unknown format".
"""

from abc import ABC, abstractmethod
from contextlib import ExitStack
from typing import ClassVar, TextIO

from packages.chemio.exceptions import (
    ChemIOErrorCode,
    ReaderError,
    ReaderNotImplementedError,
)
from packages.chemio.schemas import ChemFormat

# Lazy import for RDKit
_rdkit_available: bool | None = None


def _check_rdkit() -> bool:
    """Check if RDKit is available."""
    global _rdkit_available
    if _rdkit_available is None:
        try:
            from rdkit import Chem  # noqa: F401

            _rdkit_available = True
        except ImportError:
            _rdkit_available = False
    return _rdkit_available


def get_chem():
    """Get RDKit Chem module or raise ImportError."""
    if not _check_rdkit():
        raise ImportError(
            "RDKit is required for parsing molecules. "
            "Install with: pip install rdkit"
        )
    from rdkit import Chem

    return Chem


def get_rdbase():
    """Get RDKit rdBase module or raise ImportError."""
    get_chem()
    from rdkit import rdBase

    return rdBase


def get_reactions():
    """Get RDKit rdChemReactions module or raise ImportError."""
    get_chem()
    from rdkit.Chem import rdChemReactions

    return rdChemReactions


class ChemObjectReader(ABC):
    """A reader for one chemical file format."""

    format: ClassVar[ChemFormat]
    implemented: ClassVar[bool] = True

    def __init__(self, stream: TextIO):
        """
        Initialize reader.

        Args:
            stream: Text stream positioned at the start of the content.
        """
        self._stream = stream
        self._resources = ExitStack()

    @property
    def stream(self) -> TextIO:
        return self._stream

    @classmethod
    def qualified_name(cls) -> str:
        return f"{cls.__module__}.{cls.__qualname__}"

    @abstractmethod
    def read(self) -> list:
        """
        Read all chemical objects from the stream.

        Raises:
            ReaderError: If the content cannot be parsed.
        """

    def read_text(self) -> str:
        """Read the remaining content, failing on empty input."""
        content = self._stream.read()
        if not content or not content.strip():
            raise ReaderError(
                message=f"Empty {self.format.value} input",
                code=ChemIOErrorCode.EMPTY_INPUT,
            )
        return content

    def own(self, resource) -> None:
        """Close `resource` together with this reader."""
        self._resources.callback(resource.close)

    def close(self) -> None:
        try:
            self._stream.close()
        finally:
            self._resources.close()

    def __enter__(self) -> "ChemObjectReader":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(format={self.format.value!r})"


class PlaceholderReader(ChemObjectReader):
    """Reader for a recognized format that has no parser."""

    implemented: ClassVar[bool] = False

    def read(self) -> list:
        raise ReaderNotImplementedError(
            message=f"No reader implemented for {self.format.value} files",
            code=ChemIOErrorCode.READER_NOT_IMPLEMENTED,
            details={"format": self.format.value},
        )
