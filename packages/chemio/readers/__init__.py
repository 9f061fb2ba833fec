"""
Chemical file readers.

Importing this package registers a reader for every ChemFormat: RDKit
backed readers for MOL/SDF, RXN, PDB, MOL2, XYZ and SMILES, and
placeholders for the remaining formats.
"""

from packages.chemio.readers.base import ChemObjectReader, PlaceholderReader
from packages.chemio.readers.mdl import (
    MDLReader,
    MDLRXNReader,
    MDLRXNV3000Reader,
    MDLV3000Reader,
)
from packages.chemio.readers.smiles import SMILESReader
from packages.chemio.readers.structures import Mol2Reader, PDBReader, XYZReader
from packages.chemio.readers import placeholders  # noqa: F401

__all__ = [
    # Base
    "ChemObjectReader",
    "PlaceholderReader",
    # MDL
    "MDLReader",
    "MDLV3000Reader",
    "MDLRXNReader",
    "MDLRXNV3000Reader",
    # Structures
    "PDBReader",
    "Mol2Reader",
    "XYZReader",
    # SMILES
    "SMILESReader",
]
