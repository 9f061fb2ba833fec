"""
Reader registry.

Maps each ChemFormat to the reader class that handles it. Reader modules
register themselves with the `register_reader` decorator:

    from packages.chemio.registry import register_reader

    @register_reader(ChemFormat.PDB)
    class PDBReader(ChemObjectReader):
        def read(self) -> list:
            ...

The decorator sets the class's `format` attribute, so reader classes do
not repeat it.
"""

import logging
from typing import TYPE_CHECKING, TextIO

from packages.chemio.schemas import ChemFormat

if TYPE_CHECKING:
    from packages.chemio.readers.base import ChemObjectReader

logger = logging.getLogger(__name__)

# Global reader registry: format -> reader class
REGISTRY: dict[ChemFormat, type["ChemObjectReader"]] = {}


def register_reader(fmt: ChemFormat):
    """
    Decorator to register a reader class for a format.

    Args:
        fmt: The format the class reads. Registering a second class for
            the same format replaces the first.
    """

    def decorator(cls):
        if fmt in REGISTRY and REGISTRY[fmt] is not cls:
            logger.debug(f"Replacing reader for {fmt.value}: {REGISTRY[fmt].__name__}")
        cls.format = fmt
        REGISTRY[fmt] = cls
        return cls

    return decorator


def _ensure_loaded() -> None:
    """Import the bundled readers so they register themselves."""
    import packages.chemio.readers  # noqa: F401  local import to avoid cycles


def get_reader_class(fmt: ChemFormat) -> type["ChemObjectReader"]:
    """
    Look up the reader class for a format.

    Raises:
        KeyError: If no reader, not even a placeholder, is registered.
    """
    _ensure_loaded()
    return REGISTRY[fmt]


def is_implemented(fmt: ChemFormat) -> bool:
    """Check whether a format has a working reader rather than a placeholder."""
    return get_reader_class(fmt).implemented


def registered_formats() -> list[ChemFormat]:
    """Formats with a registered reader, in catalogue order."""
    _ensure_loaded()
    return [fmt for fmt in ChemFormat if fmt in REGISTRY]


def create_reader_for(fmt: ChemFormat, stream: TextIO) -> "ChemObjectReader":
    """Construct the reader for a format over the given stream."""
    reader_cls = get_reader_class(fmt)
    if not reader_cls.implemented:
        logger.info(f"{fmt.value} is recognized but has no reader implementation")
    return reader_cls(stream)
