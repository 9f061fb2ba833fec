"""
SMILES file reader using RDKit.

One molecule per line; anything after the first whitespace is the
molecule name.
"""

import logging
from typing import TYPE_CHECKING, TextIO

from packages.chemio.exceptions import ChemIOErrorCode, ReaderError
from packages.chemio.readers.base import ChemObjectReader, get_chem
from packages.chemio.registry import register_reader
from packages.chemio.schemas import ChemFormat

if TYPE_CHECKING:
    from rdkit.Chem import Mol

logger = logging.getLogger(__name__)


@register_reader(ChemFormat.SMILES)
class SMILESReader(ChemObjectReader):
    """Reader for SMILES files."""

    def __init__(self, stream: TextIO, sanitize: bool = True):
        """
        Initialize SMILES reader.

        Args:
            stream: Text stream with one SMILES per line.
            sanitize: Whether to sanitize molecules after parsing.
        """
        super().__init__(stream)
        self.sanitize = sanitize

    def read(self) -> list["Mol"]:
        """
        Parse every non-blank line. Invalid lines are skipped with a warning.

        Raises:
            ReaderError: If no line holds a valid SMILES.
        """
        content = self.read_text()
        Chem = get_chem()

        molecules = []
        for line_number, line in enumerate(content.splitlines(), start=1):
            fields = line.split(None, 1)
            if not fields:
                continue
            smiles = fields[0]
            mol = Chem.MolFromSmiles(smiles, sanitize=self.sanitize)
            if mol is None:
                logger.warning(f"Invalid SMILES on line {line_number}: {smiles!r}")
                continue
            if len(fields) > 1:
                mol.SetProp("_Name", fields[1].strip())
            molecules.append(mol)

        if not molecules:
            raise ReaderError(
                message="No valid SMILES found",
                code=ChemIOErrorCode.EMPTY_INPUT,
            )
        return molecules
