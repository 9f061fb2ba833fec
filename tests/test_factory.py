"""
Tests for the reader factory.

Tests cover:
- Detection scenarios for rule-based and probe-based formats
- Transparent gzip decompression
- Stream position after detection and reader construction
- Contract violations: None input, non-rewindable streams, bad header length
- Placeholder readers for recognized formats without a parser
- guess_format and the module-level convenience functions
"""

import gzip
import io

import pytest

from packages.chemio import (
    UNDETERMINED,
    ChemFormat,
    DetectionStage,
    InvalidInputError,
    ReaderFactory,
    ReaderNotImplementedError,
    UnsupportedStreamError,
    create_reader,
    detect_format,
    guess_format,
    open_reader,
)
from packages.chemio.exceptions import ChemIOErrorCode
from packages.chemio.readers import MDLReader, PlaceholderReader, SMILESReader
from packages.chemio.readers.placeholders import GamessReader
from tests.conftest import (
    ETHANOL_MOL,
    GAMESS_OUTPUT,
    PDB_HEADER,
    NonSeekableBytes,
    NonSeekableText,
    make_sdf,
)


# =============================================================================
# Test: Detection scenarios
# =============================================================================


class TestDetectScenarios:
    """End-to-end detection on text input."""

    def test_xyz_atom_count(self, factory):
        """A bare atom count on line one is XYZ."""
        result = factory.detect(io.StringIO("3\nmethane\nC 0 0 0\n..."))
        assert result.format == ChemFormat.XYZ
        assert result.stage == DetectionStage.XYZ_PROBE

    def test_mdl_counts_line(self, factory):
        """A V2000 counts line on line four is an MDL molfile."""
        text = "\n\n\n 5  4  0  0  0  0  0  0  0  0999 V2000\n"
        result = factory.detect(io.StringIO(text))
        assert result.format == ChemFormat.MDL_MOL
        assert result.stage == DetectionStage.RULE
        assert result.line_number == 4

    def test_rxn(self, factory):
        result = factory.detect(io.StringIO("$RXN\n\n  ISIS\n\n  1  1\n"))
        assert result.format == ChemFormat.MDL_RXN

    def test_pdb(self, factory):
        result = factory.detect(io.StringIO(PDB_HEADER))
        assert result.format == ChemFormat.PDB
        assert result.line_number == 1

    def test_smiles_by_trial_parse(self, factory):
        result = factory.detect(io.StringIO("CCO"))
        assert result.format == ChemFormat.SMILES
        assert result.stage == DetectionStage.SMILES_PROBE

    @pytest.mark.parametrize("text", ["", "   ", "  \n\t\n   \n"])
    def test_empty_or_whitespace_undetermined(self, factory, text):
        assert factory.detect(io.StringIO(text)) is None

    def test_unrecognizable_text_undetermined(self, factory):
        assert factory.detect(io.StringIO("!!! nothing to see\n")) is None

    def test_sdf(self, factory):
        result = factory.detect(io.StringIO(make_sdf(ETHANOL_MOL, ETHANOL_MOL)))
        assert result.format == ChemFormat.MDL_MOL

    def test_rule_result_describes_rule(self, factory):
        result = factory.detect_text(ETHANOL_MOL)
        assert result.rule == "line 4 contains 'v2000' or 'V2000' -> mdl_mol"

    def test_probes_not_reached_when_rule_matches(self):
        """Fallback probes only run after the rules fail."""
        calls = []

        def recording_probe(line):
            calls.append(line)
            return None

        factory = ReaderFactory(probes=((DetectionStage.XYZ_PROBE, recording_probe),))
        assert factory.detect(io.StringIO(PDB_HEADER)).format == ChemFormat.PDB
        assert calls == []

        assert factory.detect(io.StringIO("7\n")) is None
        assert calls == ["7"]

    def test_smiles_line_after_marker_uses_rule(self, factory):
        """Rules anywhere in the header win over a SMILES-looking line one."""
        result = factory.detect_text("CCO\nloop_\n")
        assert result.format == ChemFormat.CIF


# =============================================================================
# Test: Header window bounds
# =============================================================================


class TestHeaderLength:
    """Only header_length characters take part in detection."""

    def test_marker_beyond_header_ignored(self):
        text = "!!!\n" * 50 + "loop_\n"
        assert ReaderFactory(header_length=40).detect_text(text) is None

    def test_marker_within_header_found(self):
        text = "!!!\n" * 50 + "loop_\n"
        assert ReaderFactory(header_length=1000).detect_text(text).format == ChemFormat.CIF

    def test_default_header_length(self, factory):
        assert factory.header_length == 65536

    @pytest.mark.parametrize("length", [0, -1])
    def test_invalid_header_length(self, length):
        with pytest.raises(InvalidInputError) as exc_info:
            ReaderFactory(header_length=length)
        assert exc_info.value.code == ChemIOErrorCode.INVALID_HEADER_LENGTH


# =============================================================================
# Test: Stream position
# =============================================================================


class TestStreamPosition:
    """The caller's stream reads the same before and after detection."""

    def test_text_stream_restored(self):
        content = ETHANOL_MOL * 100
        stream = io.StringIO(content)
        ReaderFactory(header_length=128).detect(stream)
        assert stream.read() == content

    def test_text_stream_restored_when_undetermined(self, factory):
        stream = io.StringIO("!!!\n")
        assert factory.detect(stream) is None
        assert stream.read() == "!!!\n"

    def test_text_stream_mid_position(self, factory):
        """Detection starts at, and returns to, the caller's position."""
        stream = io.StringIO("ignored prefix\n" + PDB_HEADER)
        stream.readline()
        assert factory.detect(stream).format == ChemFormat.PDB
        assert stream.read() == PDB_HEADER

    def test_binary_stream_restored(self, factory):
        data = ETHANOL_MOL.encode()
        stream = io.BytesIO(data)
        factory.detect(stream)
        assert not stream.closed
        assert stream.read() == data

    def test_gzip_stream_restored(self, factory):
        data = gzip.compress(ETHANOL_MOL.encode())
        stream = io.BytesIO(data)
        factory.detect(stream)
        assert stream.read() == data

    def test_reader_sees_full_content(self, factory):
        stream = io.StringIO(ETHANOL_MOL)
        reader = factory.create_reader(stream)
        assert reader.stream.read() == ETHANOL_MOL


# =============================================================================
# Test: gzip
# =============================================================================


class TestGzip:
    """Compressed input classifies like its decompressed content."""

    @pytest.mark.parametrize(
        "content",
        [ETHANOL_MOL, PDB_HEADER, GAMESS_OUTPUT, "$RXN\n", "3\nwater\n", "CCO\n", "!!!\n"],
    )
    def test_same_classification(self, factory, content):
        plain = factory.detect(io.StringIO(content))
        compressed = factory.detect(io.BytesIO(gzip.compress(content.encode())))
        assert compressed == plain

    def test_reader_gets_decompressed_stream(self, factory):
        reader = factory.create_reader(io.BytesIO(gzip.compress(ETHANOL_MOL.encode())))
        assert isinstance(reader, MDLReader)
        assert reader.stream.read() == ETHANOL_MOL

    def test_reader_for_gzip_after_prefix(self, factory):
        """Compressed content starting part way into a stream reads in full."""
        raw = io.BytesIO(b"PREFIX" + gzip.compress(ETHANOL_MOL.encode()))
        raw.seek(6)
        reader = factory.create_reader(raw)
        assert isinstance(reader, MDLReader)
        assert reader.stream.read() == ETHANOL_MOL

    def test_detect_gzip_after_prefix_restores_position(self, factory):
        raw = io.BytesIO(b"PREFIX" + gzip.compress(ETHANOL_MOL.encode()))
        raw.seek(6)
        assert factory.detect(raw).format == ChemFormat.MDL_MOL
        assert raw.tell() == 6

    def test_reader_for_plain_binary_after_prefix(self, factory):
        raw = io.BytesIO(b"junk\n" + ETHANOL_MOL.encode())
        raw.seek(5)
        reader = factory.create_reader(raw)
        assert reader.stream.read() == ETHANOL_MOL

    def test_gzip_file_on_disk(self, tmp_path):
        path = tmp_path / "ethanol.sdf.gz"
        path.write_bytes(gzip.compress(make_sdf(ETHANOL_MOL).encode()))
        with path.open("rb") as handle:
            assert detect_format(handle).format == ChemFormat.MDL_MOL


# =============================================================================
# Test: Contract violations
# =============================================================================


class TestContractViolations:
    """Caller errors fail fast."""

    def test_none_detect(self, factory):
        with pytest.raises(InvalidInputError) as exc_info:
            factory.detect(None)  # type: ignore
        assert exc_info.value.code == ChemIOErrorCode.NULL_INPUT

    def test_none_create_reader(self, factory):
        with pytest.raises(InvalidInputError):
            factory.create_reader(None)  # type: ignore

    def test_none_text(self, factory):
        with pytest.raises(InvalidInputError):
            factory.detect_text(None)  # type: ignore

    def test_non_seekable_text_rejected_before_reading(self, factory):
        stream = NonSeekableText("CCO\n")
        with pytest.raises(UnsupportedStreamError):
            factory.detect(stream)
        assert stream.read_calls == 0

    def test_non_seekable_text_rejected_by_create_reader(self, factory):
        stream = NonSeekableText(PDB_HEADER)
        with pytest.raises(UnsupportedStreamError):
            factory.create_reader(stream)
        assert stream.read_calls == 0

    def test_non_seekable_binary_rejected(self, factory):
        stream = NonSeekableBytes(b"CCO\n")
        with pytest.raises(UnsupportedStreamError):
            factory.detect(stream)
        assert stream.tell() == 0
        assert not stream.closed


# =============================================================================
# Test: Reader construction
# =============================================================================


class TestCreateReader:
    """Readers are built for detected formats."""

    def test_implemented_reader(self, factory):
        reader = factory.create_reader(io.StringIO(ETHANOL_MOL))
        assert isinstance(reader, MDLReader)
        assert reader.implemented is True
        assert reader.format == ChemFormat.MDL_MOL

    def test_smiles_reader(self, factory):
        reader = factory.create_reader(io.StringIO("CCO\nc1ccccc1\n"))
        assert isinstance(reader, SMILESReader)

    def test_placeholder_for_known_format(self, factory):
        """Recognized formats without a parser are not 'unknown'."""
        reader = factory.create_reader(io.StringIO(GAMESS_OUTPUT))
        assert isinstance(reader, GamessReader)
        assert isinstance(reader, PlaceholderReader)
        assert reader.implemented is False
        with pytest.raises(ReaderNotImplementedError) as exc_info:
            reader.read()
        assert exc_info.value.code == ChemIOErrorCode.READER_NOT_IMPLEMENTED
        assert exc_info.value.details == {"format": "gamess"}

    def test_unknown_format_returns_none(self, factory):
        assert factory.create_reader(io.StringIO("!!!\n")) is None

    def test_unknown_binary_leaves_stream_open(self, factory):
        stream = io.BytesIO(b"!!!\n")
        assert factory.create_reader(stream) is None
        assert not stream.closed

    def test_reader_gets_original_stream(self, factory):
        stream = io.StringIO(PDB_HEADER)
        reader = factory.create_reader(stream)
        assert reader.stream is stream


# =============================================================================
# Test: guess_format
# =============================================================================


class TestGuessFormat:
    """Reader class names as strings."""

    def test_known_format(self, factory):
        name = factory.guess_format(io.StringIO("CCO"))
        assert name == "packages.chemio.readers.smiles.SMILESReader"

    def test_placeholder_format(self, factory):
        name = factory.guess_format(io.StringIO(GAMESS_OUTPUT))
        assert name == "packages.chemio.readers.placeholders.GamessReader"

    def test_undetermined(self, factory):
        assert factory.guess_format(io.StringIO("")) == UNDETERMINED
        assert UNDETERMINED == "Format undetermined"

    def test_binary_input(self, factory):
        name = factory.guess_format(io.BytesIO(gzip.compress(PDB_HEADER.encode())))
        assert name == "packages.chemio.readers.structures.PDBReader"


# =============================================================================
# Test: Convenience functions
# =============================================================================


class TestConvenienceFunctions:
    """Module-level helpers."""

    def test_detect_format(self):
        assert detect_format(io.StringIO("$RXN\n")).format == ChemFormat.MDL_RXN

    def test_detect_format_header_length(self):
        text = "!!!\n" * 50 + "$RXN\n"
        assert detect_format(io.StringIO(text), header_length=20) is None

    def test_guess_format(self):
        assert guess_format(io.StringIO("")) == UNDETERMINED

    def test_create_reader(self):
        assert isinstance(create_reader(io.StringIO(ETHANOL_MOL)), MDLReader)

    def test_open_reader(self, tmp_path):
        path = tmp_path / "ethanol.mol"
        path.write_text(ETHANOL_MOL)
        with open_reader(path) as reader:
            assert isinstance(reader, MDLReader)
            assert reader.stream.read() == ETHANOL_MOL
        assert reader.stream.closed

    def test_open_reader_gzip(self, tmp_path):
        path = tmp_path / "ethanol.mol.gz"
        path.write_bytes(gzip.compress(ETHANOL_MOL.encode()))
        reader = open_reader(path)
        try:
            assert isinstance(reader, MDLReader)
        finally:
            reader.close()

    def test_open_reader_undetermined(self, tmp_path):
        path = tmp_path / "unknown.txt"
        path.write_text("!!!\n")
        assert open_reader(path) is None
