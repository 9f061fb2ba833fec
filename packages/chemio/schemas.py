"""
Pydantic schemas for chemical format detection.

Defines:
- The catalogue of recognized file formats
- How a format was detected
- The detection result returned to callers
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

UNDETERMINED = "Format undetermined"


class ChemFormat(str, Enum):
    """Recognized chemical file formats."""

    # Quantum chemistry program output
    GAUSSIAN90 = "gaussian90"
    GAUSSIAN92 = "gaussian92"
    GAUSSIAN94 = "gaussian94"
    GAUSSIAN95 = "gaussian95"
    GAUSSIAN98 = "gaussian98"
    GAUSSIAN03 = "gaussian03"
    GAMESS = "gamess"
    ACES2 = "aces2"
    ADF = "adf"  # Amsterdam Density Functional
    DALTON = "dalton"
    JAGUAR = "jaguar"
    MOPAC7 = "mopac7"
    MOPAC97 = "mopac97"  # MOPAC 97 and MOPAC2002
    ABINIT = "abinit"
    VASP = "vasp"

    # Connection tables and reactions
    MDL_MOL = "mdl_mol"  # MDL MOL/SDF V2000
    MDL_MOL_V3000 = "mdl_mol_v3000"
    MDL_RXN = "mdl_rxn"
    MDL_RXN_V3000 = "mdl_rxn_v3000"
    MACIE = "macie"  # MACiE RDF files
    MOL2 = "mol2"  # Tripos Sybyl
    CACHE = "cache"  # CAChe MolStruct
    GHEMICAL_MM = "ghemical_mm"
    HIN = "hin"  # HyperChem
    ZMATRIX = "zmatrix"

    # Crystallography and biomolecules
    PDB = "pdb"
    CIF = "cif"
    SHELX = "shelx"
    PMP = "pmp"  # PolyMorph Predictor

    # XML
    CML = "cml"
    INCHI_XML = "inchi_xml"

    # Detected by fallback probes
    XYZ = "xyz"
    SMILES = "smiles"


class DetectionStage(str, Enum):
    """Which part of the detector produced a result."""

    RULE = "rule"
    XYZ_PROBE = "xyz_probe"
    SMILES_PROBE = "smiles_probe"


class DetectionResult(BaseModel):
    """Outcome of a successful format detection."""

    model_config = ConfigDict(frozen=True)

    format: ChemFormat = Field(..., description="Detected format")
    stage: DetectionStage = Field(..., description="Rule engine or fallback probe")
    line_number: int = Field(
        ...,
        ge=1,
        description="1-based header line that triggered the detection",
    )
    rule: str | None = Field(
        default=None,
        description="Description of the matching rule, for rule detections",
    )
