"""Tests for sequence classification and sequence data values."""

from __future__ import annotations

import os

import pytest

from fasta_kit.errors import FastaFormatError, InvalidArgumentError, LineLengthError, NullInputError
from fasta_kit.sequences import (
    AminoAcidSequence,
    NucleicAcidSequence,
    SequenceType,
    classify,
    classify_lines,
    parse_amino_acid,
    parse_nucleic_acid,
    split_by,
    try_parse_amino_acid,
    try_parse_nucleic_acid,
)


def test_nucleic_acid_constructor_cleans_and_uppercases() -> None:
    data = NucleicAcidSequence("acg t\nu-n")
    assert data.characters == "ACGTU-N"
    assert data.sequence_type is SequenceType.NUCLEIC_ACID


def test_nucleic_acid_constructor_rejects_invalid_characters() -> None:
    with pytest.raises(InvalidArgumentError):
        NucleicAcidSequence("ACGZ")


def test_constructor_rejects_none() -> None:
    with pytest.raises(NullInputError):
        AminoAcidSequence(None)


def test_parse_nucleic_acid_accepts_empty_text() -> None:
    assert parse_nucleic_acid("").characters == ""


def test_parse_nucleic_acid_raises_format_error() -> None:
    with pytest.raises(FastaFormatError):
        parse_nucleic_acid("ACGE")


def test_try_parse_nucleic_acid_returns_none_on_failure() -> None:
    assert try_parse_nucleic_acid("ACGE") is None
    assert try_parse_nucleic_acid(None) is None
    assert try_parse_nucleic_acid("acgt").characters == "ACGT"


def test_amino_acid_allows_stop_and_gap() -> None:
    data = parse_amino_acid("mdsk*-\tg")
    assert data.characters == "MDSK*-G"
    assert isinstance(data, AminoAcidSequence)


def test_try_parse_amino_acid_rejects_digits() -> None:
    assert try_parse_amino_acid("MDS1") is None
    assert try_parse_amino_acid(None) is None


def test_classify_prefers_nucleic_acid() -> None:
    assert isinstance(classify("ABCD"), NucleicAcidSequence)
    assert isinstance(classify("ACGT"), NucleicAcidSequence)


def test_classify_protein_looking_text_within_nucleic_alphabet_is_nucleic() -> None:
    # Known quirk: M, D, S, K and G are all IUPAC nucleic acid codes.
    assert isinstance(classify("MDSKG"), NucleicAcidSequence)
    assert isinstance(classify("MDSKGSSQ"), AminoAcidSequence)


def test_classify_falls_back_to_amino_acid() -> None:
    data = classify("ABCZ")
    assert isinstance(data, AminoAcidSequence)
    assert data.characters == "ABCZ"


def test_classify_stop_character_is_amino_acid() -> None:
    assert isinstance(classify("ACGT*"), AminoAcidSequence)


def test_classify_strips_whitespace() -> None:
    assert classify("ATG\nCAT").characters == "ATGCAT"


@pytest.mark.parametrize("text", ["acgtn", "MdSkG", "abcz*"])
def test_classify_case_normalisation(text: str) -> None:
    assert classify(text).characters == classify(text.upper()).characters


def test_classify_rejects_none() -> None:
    with pytest.raises(NullInputError):
        classify(None)


@pytest.mark.parametrize("text", ["", "   ", "\n\t"])
def test_classify_rejects_blank_text(text: str) -> None:
    with pytest.raises(FastaFormatError):
        classify(text)


def test_classify_rejects_invalid_sequence() -> None:
    with pytest.raises(FastaFormatError, match="not a valid FASTA amino or nucleic acid sequence"):
        classify("ACGT123")


def test_classify_lines_wraps_failure() -> None:
    assert classify_lines(["ACGT", "TTAA"]).characters == "ACGTTTAA"
    with pytest.raises(FastaFormatError) as excinfo:
        classify_lines(["ACGT", "12"])
    assert isinstance(excinfo.value.cause, FastaFormatError)


def test_to_lines_chunks_in_order() -> None:
    data = NucleicAcidSequence("ACGTACGTAC")
    assert data.to_lines(4) == ["ACGT", "ACGT", "AC"]
    assert data.to_lines() == ["ACGTACGTAC"]


@pytest.mark.parametrize("line_length", [1, 3, 7, 10, 25])
def test_to_lines_join_restores_characters(line_length: int) -> None:
    data = AminoAcidSequence("MDSKGSSQKGSRLLLLLVVSNLLLCQGVVS")
    lines = data.to_lines(line_length)
    assert "".join(lines) == data.characters
    assert all(len(line) == line_length for line in lines[:-1])
    assert 0 < len(lines[-1]) <= line_length


@pytest.mark.parametrize("line_length", [0, -1])
def test_line_wrapping_rejects_small_line_length(line_length: int) -> None:
    for data in (NucleicAcidSequence("ACGT"), AminoAcidSequence("MDSK")):
        with pytest.raises(LineLengthError):
            data.to_lines(line_length)
        with pytest.raises(LineLengthError):
            data.to_multiline_string(line_length)


def test_to_multiline_string() -> None:
    data = NucleicAcidSequence("ACGTACGTAC")
    assert data.to_multiline_string(4) == os.linesep.join(["ACGT", "ACGT", "AC"])
    assert data.to_multiline_string(1) == "ACGTACGTAC"
    assert str(data) == "ACGTACGTAC"


def test_split_by_empty_text() -> None:
    assert split_by("", 5) == []


def test_sequence_types_are_not_equal() -> None:
    assert NucleicAcidSequence("ACGT") == NucleicAcidSequence("acgt")
    assert NucleicAcidSequence("ACGT") != AminoAcidSequence("ACGT")
