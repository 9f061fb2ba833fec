"""
Fallback probes for headers no line rule recognizes.

Only line one of the header window is examined, in this order:
1. XYZ: a bare atom count, optionally followed by the unit "Bohr"
2. SMILES: the line is handed to RDKit; a successful parse wins

A probe that does not match returns None; nothing here raises for
content that simply is not of the probed format.
"""

import logging
from collections.abc import Callable

from packages.chemio.readers.base import get_chem, get_rdbase
from packages.chemio.schemas import ChemFormat, DetectionResult, DetectionStage
from packages.chemio.stream import HeaderWindow
from packages.chemio.utils import try_parse_int

logger = logging.getLogger(__name__)

XYZ_UNIT_MARKER = "bohr"


def probe_xyz(line: str) -> ChemFormat | None:
    """
    Recognize the first line of an XYZ file.

    Accepts "<count>" or "<count> Bohr" (unit compared case-insensitively).
    """
    tokens = line.split()

    if len(tokens) == 1 and try_parse_int(tokens[0]) is not None:
        return ChemFormat.XYZ

    if (
        len(tokens) == 2
        and try_parse_int(tokens[0]) is not None
        and tokens[1].lower() == XYZ_UNIT_MARKER
    ):
        return ChemFormat.XYZ

    logger.info("No, it's not an XYZ file")
    return None


def probe_smiles(line: str) -> ChemFormat | None:
    """
    Trial-parse a line as SMILES.

    The molecule is not sanitized, so chemically odd but syntactically
    valid SMILES still count. Blank lines never match.
    """
    smiles = line.strip()
    if not smiles:
        return None

    Chem = get_chem()
    rdBase = get_rdbase()

    # Parse failures are expected here; keep RDKit from logging them
    blocker = rdBase.BlockLogs()
    try:
        mol = Chem.MolFromSmiles(smiles, sanitize=False)
    finally:
        del blocker

    if mol is None:
        logger.info("No, it's not a SMILES file")
        return None
    return ChemFormat.SMILES


Probe = Callable[[str], "ChemFormat | None"]

DEFAULT_PROBES: tuple[tuple[DetectionStage, Probe], ...] = (
    (DetectionStage.XYZ_PROBE, probe_xyz),
    (DetectionStage.SMILES_PROBE, probe_smiles),
)


def run_probes(
    window: HeaderWindow,
    probes: tuple[tuple[DetectionStage, Probe], ...] = DEFAULT_PROBES,
) -> DetectionResult | None:
    """
    Apply the fallback probes to line one of the window.

    Returns:
        DetectionResult from the first probe that matches, or None.
    """
    line = window.first_line()
    if line is None:
        logger.info("Empty header; nothing to probe")
        return None

    for stage, probe in probes:
        fmt = probe(line)
        if fmt is not None:
            logger.info(f"{fmt.value} format detected by {stage.value}")
            return DetectionResult(format=fmt, stage=stage, line_number=1)
    return None
