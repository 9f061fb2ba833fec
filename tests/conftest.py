"""
Pytest configuration and fixtures.

Provides reusable fixtures for format detection tests:
- reset_settings: Clear cached settings around every test
- factory: ReaderFactory with default configuration
- Sample file contents for the formats exercised across test modules
- Stream doubles that cannot be rewound or that fail on read
"""

import io
from collections.abc import Generator

import pytest

from packages.chemio.config import get_settings
from packages.chemio.factory import ReaderFactory

# =============================================================================
# Sample content
# =============================================================================

# Valid ethanol MOL block
ETHANOL_MOL = """ethanol
     RDKit          2D

  3  2  0  0  0  0  0  0  0  0999 V2000
    0.0000    0.0000    0.0000 C   0  0  0  0  0  0  0  0  0  0  0  0
    1.2990    0.7500    0.0000 C   0  0  0  0  0  0  0  0  0  0  0  0
    2.5981    0.0000    0.0000 O   0  0  0  0  0  0  0  0  0  0  0  0
  1  2  1  0
  2  3  1  0
M  END
"""

WATER_XYZ = """3
water
O    0.000000    0.000000    0.117300
H    0.000000    0.757200   -0.469200
H    0.000000   -0.757200   -0.469200
"""

PDB_HEADER = "HEADER    TEST\nATOM      1  N   ALA A   1      11.104   6.134  -6.504  1.00  0.00           N\n"

GAMESS_OUTPUT = """
 ----- GAMESS VERSION = 11 APR 2008 (R1) -----
 RUN TITLE
"""


def make_sdf(*mol_blocks: str) -> str:
    """Create SDF content from MOL blocks."""
    return "$$$$\n".join(mol_blocks) + "$$$$\n"


# =============================================================================
# Stream doubles
# =============================================================================


class NonSeekableText(io.StringIO):
    """Text stream that refuses to rewind and counts reads."""

    def __init__(self, initial_value: str = ""):
        super().__init__(initial_value)
        self.read_calls = 0

    def seekable(self) -> bool:
        return False

    def read(self, size: int | None = -1) -> str:
        self.read_calls += 1
        return super().read(size)


class NonSeekableBytes(io.BytesIO):
    """Binary stream without seek or peek support."""

    def seekable(self) -> bool:
        return False


class FailingText(io.StringIO):
    """Text stream whose reads raise OSError."""

    def read(self, size: int | None = -1) -> str:
        raise OSError("device not ready")


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings() -> Generator[None, None, None]:
    """Clear the settings cache so environment overrides take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def factory() -> ReaderFactory:
    """ReaderFactory with default configuration."""
    return ReaderFactory()
