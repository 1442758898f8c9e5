"""Tests for identifier variants and the identifier parser."""

from __future__ import annotations

import pytest

from fasta_kit.errors import FastaFormatError, InvalidArgumentError, NullInputError, UnsupportedCodeError
from fasta_kit.identifiers import (
    IDENTIFIER_CODES,
    BackboneMolTypeIdentifier,
    BackboneSeqIdIdentifier,
    DDBJIdentifier,
    Description,
    EMBLIdentifier,
    GenBankIdentifier,
    GeneralDatabaseReferenceIdentifier,
    ImportIdIdentifier,
    IntegratedDatabaseIdentifier,
    LocalIdentifier,
    PDBIdentifier,
    PIRIdentifier,
    PRFIdentifier,
    PatentIdentifier,
    PreGrantPatentIdentifier,
    RefSeqIdentifier,
    SwissProtIdentifier,
    ThirdPartyDDBJIdentifier,
    ThirdPartyEMBLIdentifier,
    ThirdPartyGenBankIdentifier,
    TrEMBLIdentifier,
    identifier_from_parts,
    is_identifier_code,
    parse_identifier,
)

IDENTIFIERS = [
    (BackboneMolTypeIdentifier(3), "bbm|3"),
    (BackboneSeqIdIdentifier(12), "bbs|12"),
    (IntegratedDatabaseIdentifier(1234), "gi|1234"),
    (ImportIdIdentifier(-7), "gim|-7"),
    (LocalIdentifier("123"), "lcl|123"),
    (GenBankIdentifier("M73307", "AGMA13GT"), "gb|M73307|AGMA13GT"),
    (EMBLIdentifier("CAM43271.1", "locus"), "emb|CAM43271.1|locus"),
    (DDBJIdentifier("BAC85684.1", "locus"), "dbj|BAC85684.1|locus"),
    (PIRIdentifier("G36364", "name"), "pir|G36364|name"),
    (PRFIdentifier("0806162C", "name"), "prf|0806162C|name"),
    (RefSeqIdentifier("NP_002437.2", "name"), "ref|NP_002437.2|name"),
    (SwissProtIdentifier("P01013", "OVAX_CHICK"), "sp|P01013|OVAX_CHICK"),
    (ThirdPartyDDBJIdentifier("BAB69455.1", "name"), "tpd|BAB69455.1|name"),
    (ThirdPartyEMBLIdentifier("CAD70714.1", "name"), "tpe|CAD70714.1|name"),
    (ThirdPartyGenBankIdentifier("DAA00061.1", "name"), "tpg|DAA00061.1|name"),
    (TrEMBLIdentifier("Q90RT2", "Q90RT2_9HIV1"), "tr|Q90RT2|Q90RT2_9HIV1"),
    (PDBIdentifier("1I4L", "D"), "pdb|1I4L|D"),
    (GeneralDatabaseReferenceIdentifier("taxon", "9606"), "gnl|taxon|9606"),
    (PatentIdentifier("US", "RE33188", "1"), "pat|US|RE33188|1"),
    (PreGrantPatentIdentifier("EP", "0238993", "7"), "pgp|EP|0238993|7"),
]


def test_code_table_covers_every_convention() -> None:
    expected = {
        "bbm": 2, "bbs": 2, "gi": 2, "gim": 2, "lcl": 2,
        "gb": 3, "emb": 3, "dbj": 3, "pir": 3, "prf": 3, "ref": 3, "sp": 3,
        "tpd": 3, "tpe": 3, "tpg": 3, "tr": 3, "pdb": 3, "gnl": 3,
        "pat": 4, "pgp": 4,
    }
    assert {code: spec.arity for code, spec in IDENTIFIER_CODES.items()} == expected


def test_is_identifier_code() -> None:
    assert all(is_identifier_code(code) for code in IDENTIFIER_CODES)
    assert not is_identifier_code("GB")
    assert not is_identifier_code("plain text")


@pytest.mark.parametrize("identifier,text", IDENTIFIERS)
def test_to_string_renders_code_and_fields(identifier, text: str) -> None:
    assert str(identifier) == text


@pytest.mark.parametrize("identifier,text", IDENTIFIERS)
def test_parse_round_trip(identifier, text: str) -> None:
    parsed = parse_identifier(str(identifier))
    assert parsed == identifier
    assert type(parsed) is type(identifier)


def test_parse_trims_parts() -> None:
    assert parse_identifier(" gb | M73307 | AGMA13GT ") == GenBankIdentifier("M73307", "AGMA13GT")


def test_pdb_fields() -> None:
    identifier = parse_identifier("pdb|1I4L|D")
    assert identifier.entry == "1I4L"
    assert identifier.chain == "D"
    assert identifier.code == "pdb"


def test_parse_rejects_none() -> None:
    with pytest.raises(NullInputError):
        parse_identifier(None)


@pytest.mark.parametrize("text", ["", "   "])
def test_parse_rejects_blank_text(text: str) -> None:
    with pytest.raises(InvalidArgumentError):
        parse_identifier(text)


def test_parse_arity_mismatch_is_wrapped() -> None:
    with pytest.raises(FastaFormatError) as excinfo:
        parse_identifier("gb|123")
    cause = excinfo.value.cause
    assert isinstance(cause, InvalidArgumentError)
    assert '"gb"' in str(cause)
    assert "expected 3, got 2" in str(cause)


def test_parse_unknown_code_is_wrapped() -> None:
    with pytest.raises(FastaFormatError) as excinfo:
        parse_identifier("xyz|123")
    assert isinstance(excinfo.value.cause, UnsupportedCodeError)
    assert excinfo.value.cause.code == "xyz"


@pytest.mark.parametrize("text", ["gi|abc", "bbm|1.5", "gim|1_000", "bbs|"])
def test_parse_invalid_integer_is_wrapped(text: str) -> None:
    with pytest.raises(FastaFormatError) as excinfo:
        parse_identifier(text)
    assert isinstance(excinfo.value.cause, InvalidArgumentError)


def test_parse_oversized_integer_is_wrapped() -> None:
    with pytest.raises(FastaFormatError) as excinfo:
        parse_identifier("gi|" + "1" * 5000)
    assert isinstance(excinfo.value.cause, InvalidArgumentError)
    assert isinstance(excinfo.value.cause.__cause__, ValueError)


def test_parse_blank_field_is_wrapped() -> None:
    with pytest.raises(FastaFormatError):
        parse_identifier("lcl| ")


def test_identifier_from_parts_raises_unwrapped_errors() -> None:
    with pytest.raises(UnsupportedCodeError):
        identifier_from_parts(["nope", "1"])
    with pytest.raises(InvalidArgumentError):
        identifier_from_parts(["pat", "US", "1"])


@pytest.mark.parametrize(
    "factory,args",
    [
        (LocalIdentifier, ("",)),
        (LocalIdentifier, ("   ",)),
        (GenBankIdentifier, ("M73307", " ")),
        (PatentIdentifier, ("US", "", "1")),
        (PreGrantPatentIdentifier, ("\t", "1", "1")),
        (GeneralDatabaseReferenceIdentifier, ("db", "a|b")),
    ],
)
def test_constructor_rejects_blank_or_piped_strings(factory, args) -> None:
    with pytest.raises(InvalidArgumentError):
        factory(*args)


@pytest.mark.parametrize(
    "factory,args",
    [
        (LocalIdentifier, (" 123",)),
        (LocalIdentifier, ("123\t",)),
        (GenBankIdentifier, ("M73307", "AGMA13GT ")),
        (PDBIdentifier, (" 1I4L", "D")),
        (PatentIdentifier, ("US", "RE33188", "1\n")),
    ],
)
def test_constructor_rejects_padded_strings(factory, args) -> None:
    # Parsing trims every part, so padded fields could never survive a round trip.
    with pytest.raises(InvalidArgumentError):
        factory(*args)


def test_inner_whitespace_round_trips() -> None:
    identifier = GeneralDatabaseReferenceIdentifier("my db", "value 1")
    assert parse_identifier(str(identifier)) == identifier


def test_constructor_rejects_none_fields() -> None:
    with pytest.raises(NullInputError):
        SwissProtIdentifier(None, "name")
    with pytest.raises(NullInputError):
        IntegratedDatabaseIdentifier(None)


def test_integer_identifier_rejects_non_integers() -> None:
    with pytest.raises(InvalidArgumentError):
        BackboneMolTypeIdentifier("12")
    with pytest.raises(InvalidArgumentError):
        ImportIdIdentifier(True)


def test_description_rejects_pipe() -> None:
    with pytest.raises(InvalidArgumentError):
        Description("left|right")


def test_description_rejects_none() -> None:
    with pytest.raises(NullInputError):
        Description(None)


def test_description_to_string() -> None:
    assert str(Description("free text")) == "free text"
    assert str(Description("")) == ""


def test_identifiers_are_immutable() -> None:
    identifier = LocalIdentifier("123")
    with pytest.raises(AttributeError):
        identifier.value = "456"
