"""
Line rules for chemical format detection.

Each rule pairs a predicate over a single line with the format it
identifies, optionally restricted to one line number. Rules are checked
first-match: the header is scanned line by line, every rule is tried
against a line in table order, and the first hit ends the scan.

Predicates overlap (a line starting with "loop_" is CIF, but a line
starting with "mol" is HIN and one starting with "molstruct" is CAChe),
so the order of DEFAULT_RULES is part of the behaviour, not an
implementation detail.

Line 4 is the counts line of an MDL connection table, which is why the
MDL and Z-matrix rules are pinned to it.
"""

import logging
from dataclasses import dataclass

from packages.chemio.schemas import ChemFormat
from packages.chemio.stream import HeaderWindow
from packages.chemio.utils import is_digits_and_whitespace, try_parse_int

logger = logging.getLogger(__name__)

MDL_COUNTS_LINE = 4


# =============================================================================
# Predicates
# =============================================================================


@dataclass(frozen=True)
class Contains:
    """Line contains any of the given substrings."""

    needles: tuple[str, ...]

    def matches(self, line: str) -> bool:
        return any(needle in line for needle in self.needles)

    def __str__(self) -> str:
        return "contains " + " or ".join(repr(n) for n in self.needles)


@dataclass(frozen=True)
class StartsWith:
    """Line starts with any of the given prefixes."""

    prefixes: tuple[str, ...]

    def matches(self, line: str) -> bool:
        return line.startswith(self.prefixes)

    def __str__(self) -> str:
        return "starts with " + " or ".join(repr(p) for p in self.prefixes)


@dataclass(frozen=True)
class CountsLine:
    """
    Line looks like an MDL V2000 counts line.

    The atom and bond counts occupy columns 1-3 and 4-6; everything after
    them must be digits or whitespace.
    """

    min_length: int = 8

    def matches(self, line: str) -> bool:
        if len(line) < self.min_length:
            return False

        atom_count = try_parse_int(line[0:3].strip())
        bond_count = try_parse_int(line[3:6].strip())
        if atom_count is None or bond_count is None:
            return False

        return is_digits_and_whitespace(line[6:])

    def __str__(self) -> str:
        return "is an MDL counts line"


LinePredicate = Contains | StartsWith | CountsLine


def contains(*needles: str) -> Contains:
    return Contains(needles)


def starts_with(*prefixes: str) -> StartsWith:
    return StartsWith(prefixes)


# =============================================================================
# Rules
# =============================================================================


@dataclass(frozen=True)
class FormatRule:
    """A line predicate, an optional line number and the format it implies."""

    predicate: LinePredicate
    format: ChemFormat
    line_number: int | None = None

    def applies_to(self, line: str, line_number: int) -> bool:
        """Check the line-number constraint, then the predicate."""
        if self.line_number is not None and self.line_number != line_number:
            return False
        return self.predicate.matches(line)

    def describe(self) -> str:
        scope = f"line {self.line_number} " if self.line_number is not None else ""
        return f"{scope}{self.predicate} -> {self.format.value}"


@dataclass(frozen=True)
class RuleMatch:
    """The rule that fired and where."""

    rule: FormatRule
    line_number: int
    line: str

    @property
    def format(self) -> ChemFormat:
        return self.rule.format


DEFAULT_RULES: tuple[FormatRule, ...] = (
    FormatRule(contains("Gaussian(R) 98", "Gaussian 98"), ChemFormat.GAUSSIAN98),
    FormatRule(contains("Gaussian(R) 03"), ChemFormat.GAUSSIAN03),
    FormatRule(contains("Gaussian 95"), ChemFormat.GAUSSIAN95),
    FormatRule(contains("Gaussian 94"), ChemFormat.GAUSSIAN94),
    FormatRule(contains("Gaussian 92"), ChemFormat.GAUSSIAN92),
    FormatRule(contains("Gaussian G90"), ChemFormat.GAUSSIAN90),
    FormatRule(contains("GAMESS"), ChemFormat.GAMESS),
    FormatRule(contains("v2000", "V2000"), ChemFormat.MDL_MOL, MDL_COUNTS_LINE),
    FormatRule(contains("v3000", "V3000"), ChemFormat.MDL_MOL_V3000, MDL_COUNTS_LINE),
    FormatRule(starts_with("M  END"), ChemFormat.MDL_MOL),
    FormatRule(starts_with("$RXN V3000"), ChemFormat.MDL_RXN_V3000),
    FormatRule(starts_with("$RXN"), ChemFormat.MDL_RXN),
    FormatRule(starts_with("$RDFILE "), ChemFormat.MACIE),
    FormatRule(contains("ACES2"), ChemFormat.ACES2),
    FormatRule(contains("<TRIPOS>"), ChemFormat.MOL2),
    FormatRule(contains("Amsterdam Density Functional"), ChemFormat.ADF),
    FormatRule(contains("DALTON"), ChemFormat.DALTON),
    FormatRule(contains("Jaguar"), ChemFormat.JAGUAR),
    FormatRule(contains("MOPAC:  VERSION  7.00"), ChemFormat.MOPAC7),
    FormatRule(contains("MOPAC  97.00", "MOPAC2002"), ChemFormat.MOPAC97),
    FormatRule(starts_with("molstruct"), ChemFormat.CACHE),
    FormatRule(contains("NCLASS="), ChemFormat.VASP),
    FormatRule(contains("mm1gp"), ChemFormat.GHEMICAL_MM),
    FormatRule(contains("natom", "ABINIT"), ChemFormat.ABINIT),
    FormatRule(starts_with("HEADER", "HETATM ", "ATOM  "), ChemFormat.PDB),
    FormatRule(
        contains("<atom", "<molecule", "<reaction", "<cml", "<bond"),
        ChemFormat.CML,
    ),
    FormatRule(contains("<identifier"), ChemFormat.INCHI_XML),
    FormatRule(starts_with("%%Header Start"), ChemFormat.PMP),
    FormatRule(starts_with("ZERR ", "TITL "), ChemFormat.SHELX),
    FormatRule(
        starts_with("_cell_length_a", "_audit_creation_date", "loop_"),
        ChemFormat.CIF,
    ),
    FormatRule(
        starts_with(";", "forcefield", "sys", "view", "mol", "endmol"),
        ChemFormat.HIN,
    ),
    FormatRule(contains("Z Matrix"), ChemFormat.ZMATRIX, MDL_COUNTS_LINE),
    FormatRule(CountsLine(), ChemFormat.MDL_MOL, MDL_COUNTS_LINE),
)


def classify_line(
    line: str,
    line_number: int,
    rules: tuple[FormatRule, ...] = DEFAULT_RULES,
) -> FormatRule | None:
    """Return the first rule that fires for one line, if any."""
    for rule in rules:
        if rule.applies_to(line, line_number):
            return rule
    return None


def classify_window(
    window: HeaderWindow,
    rules: tuple[FormatRule, ...] = DEFAULT_RULES,
) -> RuleMatch | None:
    """
    Scan the header window for the first matching rule.

    Args:
        window: Captured header.
        rules: Rules in priority order.

    Returns:
        The first match, or None when no line of the window matches.
    """
    for line_number, line in window.lines():
        logger.debug(f"Line {line_number}: {line[:80]!r}")
        rule = classify_line(line, line_number, rules)
        if rule is not None:
            logger.info(f"{rule.format.value} format detected at line {line_number}")
            return RuleMatch(rule=rule, line_number=line_number, line=line)
    return None
