"""
Single-structure readers using RDKit.

Supports:
- PDB entries
- Tripos MOL2 (first molecule in the file)
- XYZ coordinate lists
"""

from typing import TYPE_CHECKING, TextIO

from packages.chemio.exceptions import ChemIOErrorCode, ReaderError
from packages.chemio.readers.base import ChemObjectReader, get_chem
from packages.chemio.registry import register_reader
from packages.chemio.schemas import ChemFormat

if TYPE_CHECKING:
    from rdkit.Chem import Mol


@register_reader(ChemFormat.PDB)
class PDBReader(ChemObjectReader):
    """Reader for Protein Data Bank entries."""

    def __init__(self, stream: TextIO, sanitize: bool = True, remove_hs: bool = True):
        super().__init__(stream)
        self.sanitize = sanitize
        self.remove_hs = remove_hs

    def read(self) -> list["Mol"]:
        content = self.read_text()
        mol = get_chem().MolFromPDBBlock(
            content, sanitize=self.sanitize, removeHs=self.remove_hs
        )
        if mol is None or mol.GetNumAtoms() == 0:
            raise ReaderError(
                message="Invalid PDB content",
                code=ChemIOErrorCode.INVALID_PDB,
                details={"content_length": len(content)},
            )
        return [mol]


@register_reader(ChemFormat.MOL2)
class Mol2Reader(ChemObjectReader):
    """Reader for Tripos MOL2 files."""

    def __init__(self, stream: TextIO, sanitize: bool = True, remove_hs: bool = True):
        super().__init__(stream)
        self.sanitize = sanitize
        self.remove_hs = remove_hs

    def read(self) -> list["Mol"]:
        content = self.read_text()
        mol = get_chem().MolFromMol2Block(
            content, sanitize=self.sanitize, removeHs=self.remove_hs
        )
        if mol is None:
            raise ReaderError(
                message="Invalid MOL2 content",
                code=ChemIOErrorCode.INVALID_MOL2,
            )
        return [mol]


@register_reader(ChemFormat.XYZ)
class XYZReader(ChemObjectReader):
    """
    Reader for XYZ files.

    Atoms and coordinates only; bonds are not perceived.
    """

    def read(self) -> list["Mol"]:
        content = self.read_text()
        mol = get_chem().MolFromXYZBlock(content)
        if mol is None:
            raise ReaderError(
                message="Invalid XYZ content",
                code=ChemIOErrorCode.INVALID_XYZ,
            )
        return [mol]
