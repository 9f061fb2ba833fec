"""
MDL molfile, SD file and RXN readers using RDKit.

Supports:
- MDL MOL / SDF (V2000 and V3000 connection tables)
- MDL RXN reaction files (V2000 and V3000)
"""

import logging
from typing import TYPE_CHECKING, TextIO

from packages.chemio.exceptions import ChemIOErrorCode, ReaderError
from packages.chemio.readers.base import ChemObjectReader, get_chem, get_reactions
from packages.chemio.registry import register_reader
from packages.chemio.schemas import ChemFormat

if TYPE_CHECKING:
    from rdkit.Chem import Mol
    from rdkit.Chem.rdChemReactions import ChemicalReaction

logger = logging.getLogger(__name__)


@register_reader(ChemFormat.MDL_MOL)
class MDLReader(ChemObjectReader):
    """Reader for MDL molfiles and SD files."""

    def __init__(self, stream: TextIO, sanitize: bool = True, remove_hs: bool = False):
        """
        Initialize MOL/SDF reader.

        Args:
            stream: Text stream with one or more MOL records.
            sanitize: Whether to sanitize molecules after parsing.
            remove_hs: Whether to remove explicit hydrogens.
        """
        super().__init__(stream)
        self.sanitize = sanitize
        self.remove_hs = remove_hs

    def read(self) -> list["Mol"]:
        """
        Read every parsable record. Bad records are skipped.

        Raises:
            ReaderError: If the content is empty or no record parses.
        """
        content = self.read_text()
        Chem = get_chem()

        supplier = Chem.SDMolSupplier()
        supplier.SetData(content, sanitize=self.sanitize, removeHs=self.remove_hs)

        molecules = []
        for idx, mol in enumerate(supplier):
            if mol is None:
                logger.warning(f"Skipping unparsable record {idx}")
                continue
            molecules.append(mol)

        if not molecules:
            raise ReaderError(
                message="No valid molecules found in MOL/SDF content",
                code=ChemIOErrorCode.INVALID_MOLFILE,
                details={"content_length": len(content)},
            )
        return molecules


@register_reader(ChemFormat.MDL_MOL_V3000)
class MDLV3000Reader(MDLReader):
    """Reader for V3000 extended connection tables."""


@register_reader(ChemFormat.MDL_RXN)
class MDLRXNReader(ChemObjectReader):
    """Reader for MDL RXN reaction files."""

    def read(self) -> list["ChemicalReaction"]:
        content = self.read_text()
        rdChemReactions = get_reactions()

        try:
            reaction = rdChemReactions.ReactionFromRxnBlock(content)
        except (ValueError, RuntimeError) as e:
            raise ReaderError(
                message=f"Invalid RXN block: {e}",
                code=ChemIOErrorCode.INVALID_RXN,
            ) from e

        if reaction is None:
            raise ReaderError(
                message="Invalid RXN block",
                code=ChemIOErrorCode.INVALID_RXN,
            )
        return [reaction]


@register_reader(ChemFormat.MDL_RXN_V3000)
class MDLRXNV3000Reader(MDLRXNReader):
    """Reader for V3000 RXN files."""
