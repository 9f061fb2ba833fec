"""
Readers for formats that are recognized but not parsed.

Each class only records which format it stands for; `read()` raises
ReaderNotImplementedError.
"""

from packages.chemio.readers.base import PlaceholderReader
from packages.chemio.registry import register_reader
from packages.chemio.schemas import ChemFormat


# =============================================================================
# Quantum chemistry output
# =============================================================================


@register_reader(ChemFormat.GAUSSIAN90)
class Gaussian90Reader(PlaceholderReader):
    pass


@register_reader(ChemFormat.GAUSSIAN92)
class Gaussian92Reader(PlaceholderReader):
    pass


@register_reader(ChemFormat.GAUSSIAN94)
class Gaussian94Reader(PlaceholderReader):
    pass


@register_reader(ChemFormat.GAUSSIAN95)
class Gaussian95Reader(PlaceholderReader):
    pass


@register_reader(ChemFormat.GAUSSIAN98)
class Gaussian98Reader(PlaceholderReader):
    pass


@register_reader(ChemFormat.GAUSSIAN03)
class Gaussian03Reader(PlaceholderReader):
    pass


@register_reader(ChemFormat.GAMESS)
class GamessReader(PlaceholderReader):
    pass


@register_reader(ChemFormat.ACES2)
class Aces2Reader(PlaceholderReader):
    pass


@register_reader(ChemFormat.ADF)
class ADFReader(PlaceholderReader):
    """Amsterdam Density Functional output."""


@register_reader(ChemFormat.DALTON)
class DaltonReader(PlaceholderReader):
    pass


@register_reader(ChemFormat.JAGUAR)
class JaguarReader(PlaceholderReader):
    pass


@register_reader(ChemFormat.MOPAC7)
class MOPAC7Reader(PlaceholderReader):
    pass


@register_reader(ChemFormat.MOPAC97)
class MOPAC97Reader(PlaceholderReader):
    """MOPAC 97 and MOPAC2002 output."""


@register_reader(ChemFormat.ABINIT)
class ABINITReader(PlaceholderReader):
    pass


@register_reader(ChemFormat.VASP)
class VASPReader(PlaceholderReader):
    pass


# =============================================================================
# Connection tables
# =============================================================================


@register_reader(ChemFormat.MACIE)
class MACiEReader(PlaceholderReader):
    """MACiE enzyme mechanism RDF files."""


@register_reader(ChemFormat.CACHE)
class CACheReader(PlaceholderReader):
    pass


@register_reader(ChemFormat.GHEMICAL_MM)
class GhemicalMMReader(PlaceholderReader):
    pass


@register_reader(ChemFormat.HIN)
class HINReader(PlaceholderReader):
    """HyperChem HIN files."""


@register_reader(ChemFormat.ZMATRIX)
class ZMatrixReader(PlaceholderReader):
    pass


# =============================================================================
# Crystallography and XML
# =============================================================================


@register_reader(ChemFormat.CIF)
class CIFReader(PlaceholderReader):
    pass


@register_reader(ChemFormat.SHELX)
class ShelXReader(PlaceholderReader):
    pass


@register_reader(ChemFormat.PMP)
class PMPReader(PlaceholderReader):
    """PolyMorph Predictor output."""


@register_reader(ChemFormat.CML)
class CMLReader(PlaceholderReader):
    pass


@register_reader(ChemFormat.INCHI_XML)
class IChIReader(PlaceholderReader):
    """IChI XML output."""
