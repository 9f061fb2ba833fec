"""
Chemical file format detection.

This package works out which chemical file format a stream holds and
builds a reader for it:
- Transparent gzip decompression of binary input
- A bounded header window; the input is rewound after inspection
- Ordered line rules for ~30 formats
- XYZ and SMILES fallback probes for headers no rule recognizes
- A reader registry that separates unknown formats from recognized
  formats without a parser

Quick Start:
    >>> from packages.chemio import detect_format
    >>> import io
    >>> detect_format(io.StringIO("$RXN\\n\\n  ISIS\\n")).format
    <ChemFormat.MDL_RXN: 'mdl_rxn'>

Readers:
    >>> from packages.chemio import open_reader
    >>> reader = open_reader("compounds.sdf.gz")
    >>> molecules = reader.read()
    >>> reader.close()
"""

# Exceptions
from packages.chemio.exceptions import (
    ChemIOError,
    ChemIOErrorCode,
    InvalidInputError,
    ReaderError,
    ReaderNotImplementedError,
    UnsupportedStreamError,
)

# Schemas
from packages.chemio.schemas import (
    UNDETERMINED,
    ChemFormat,
    DetectionResult,
    DetectionStage,
)

# Configuration
from packages.chemio.config import ChemIOSettings, get_settings

# Detection building blocks
from packages.chemio.stream import HeaderWindow, RewindableText, capture_header
from packages.chemio.rules import DEFAULT_RULES, FormatRule, classify_window
from packages.chemio.probes import probe_smiles, probe_xyz, run_probes

# Readers
from packages.chemio.readers import ChemObjectReader, PlaceholderReader
from packages.chemio.registry import (
    get_reader_class,
    is_implemented,
    register_reader,
    registered_formats,
)

# Factory
from packages.chemio.factory import (
    ReaderFactory,
    create_reader,
    detect_format,
    guess_format,
    open_reader,
)

__all__ = [
    # Exceptions
    "ChemIOError",
    "ChemIOErrorCode",
    "InvalidInputError",
    "UnsupportedStreamError",
    "ReaderError",
    "ReaderNotImplementedError",
    # Schemas
    "UNDETERMINED",
    "ChemFormat",
    "DetectionResult",
    "DetectionStage",
    # Configuration
    "ChemIOSettings",
    "get_settings",
    # Detection
    "HeaderWindow",
    "RewindableText",
    "capture_header",
    "DEFAULT_RULES",
    "FormatRule",
    "classify_window",
    "probe_xyz",
    "probe_smiles",
    "run_probes",
    # Readers
    "ChemObjectReader",
    "PlaceholderReader",
    "get_reader_class",
    "is_implemented",
    "register_reader",
    "registered_formats",
    # Factory
    "ReaderFactory",
    "create_reader",
    "detect_format",
    "guess_format",
    "open_reader",
]
