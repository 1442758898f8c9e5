"""fasta_kit - parse, classify and write FASTA sequence files."""

from .errors import (
    FastaError,
    FastaFormatError,
    InvalidArgumentError,
    LineLengthError,
    NullInputError,
    UnsupportedCodeError,
)
from .header import Header
from .identifiers import IDENTIFIER_CODES, Description, HeaderItem, Identifier, parse_identifier
from .record import Record, RecordCollection
from .sequences import (
    AminoAcidSequence,
    NucleicAcidSequence,
    SequenceData,
    SequenceType,
    classify,
    parse_amino_acid,
    parse_nucleic_acid,
    try_parse_amino_acid,
    try_parse_nucleic_acid,
)

__version__ = "0.1.0"

__all__ = [
    "AminoAcidSequence",
    "Description",
    "FastaError",
    "FastaFormatError",
    "Header",
    "HeaderItem",
    "IDENTIFIER_CODES",
    "Identifier",
    "InvalidArgumentError",
    "LineLengthError",
    "NucleicAcidSequence",
    "NullInputError",
    "Record",
    "RecordCollection",
    "SequenceData",
    "SequenceType",
    "UnsupportedCodeError",
    "classify",
    "parse_amino_acid",
    "parse_identifier",
    "parse_nucleic_acid",
    "try_parse_amino_acid",
    "try_parse_nucleic_acid",
]
