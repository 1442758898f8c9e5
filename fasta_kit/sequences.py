"""Sequence classification and validated sequence data values.

Two alphabets are recognised:

- nucleic acid: ``ACGTURYKMSWBDHVN`` plus ``-`` (gap)
- amino acid: ``A``-``Z`` plus ``*`` (translation stop) and ``-`` (gap)

Input is case-insensitive and may contain any whitespace, including line
breaks; stored characters are whitespace-free and uppercase.

Text that fits both alphabets is always classified as nucleic acid.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Iterable, List, Optional

from .config import DEFAULT_LINE_LENGTH
from .errors import FastaFormatError, InvalidArgumentError, NullInputError, check_line_length

WHITESPACE_PATTERN = re.compile(r"\s+")
NUCLEIC_ACID_PATTERN = re.compile(r"[ACGTURYKMSWBDHVN-]*", re.IGNORECASE | re.ASCII)
AMINO_ACID_PATTERN = re.compile(r"[A-Z*-]*", re.IGNORECASE | re.ASCII)


class SequenceType(str, Enum):
    NUCLEIC_ACID = "nucleic_acid"
    AMINO_ACID = "amino_acid"


def remove_whitespace(text: str) -> str:
    return WHITESPACE_PATTERN.sub("", text)


def split_by(text: str, length: int) -> List[str]:
    """Split ``text`` into consecutive chunks of at most ``length`` characters."""

    check_line_length(length)
    return [text[idx : idx + length] for idx in range(0, len(text), length)]


@dataclass(frozen=True)
class SequenceData:
    """Validated sequence characters; use one of the concrete subclasses."""

    characters: str

    sequence_type: ClassVar[SequenceType]
    pattern: ClassVar[re.Pattern[str]]

    def __post_init__(self) -> None:
        if self.characters is None:
            raise NullInputError("characters", f"The characters string for the {self.label()} sequence data cannot be None.")
        if not isinstance(self.characters, str):
            raise InvalidArgumentError(f"Sequence characters must be a string, not {type(self.characters).__name__}.")
        cleaned = remove_whitespace(self.characters)
        if not self.pattern.fullmatch(cleaned):
            raise InvalidArgumentError(f"The supplied characters are not a valid {self.label()} sequence.")
        object.__setattr__(self, "characters", cleaned.upper())

    @classmethod
    def label(cls) -> str:
        return cls.sequence_type.value.replace("_", " ")

    @classmethod
    def is_valid(cls, text: str) -> bool:
        return bool(cls.pattern.fullmatch(remove_whitespace(text)))

    def to_lines(self, line_length: int = DEFAULT_LINE_LENGTH) -> List[str]:
        return split_by(self.characters, line_length)

    def to_multiline_string(self, line_length: int = DEFAULT_LINE_LENGTH) -> str:
        check_line_length(line_length)
        if line_length == 1:
            return str(self)
        return os.linesep.join(split_by(self.characters, line_length))

    def __str__(self) -> str:
        return self.characters

    def __len__(self) -> int:
        return len(self.characters)


@dataclass(frozen=True)
class NucleicAcidSequence(SequenceData):
    sequence_type: ClassVar[SequenceType] = SequenceType.NUCLEIC_ACID
    pattern: ClassVar[re.Pattern[str]] = NUCLEIC_ACID_PATTERN


@dataclass(frozen=True)
class AminoAcidSequence(SequenceData):
    sequence_type: ClassVar[SequenceType] = SequenceType.AMINO_ACID
    pattern: ClassVar[re.Pattern[str]] = AMINO_ACID_PATTERN


def _parse(cls, text: str) -> SequenceData:
    if text is None:
        raise NullInputError("text", f"The characters string for the {cls.label()} sequence data cannot be None.")
    if not cls.is_valid(text):
        raise FastaFormatError(f"The supplied characters are not a valid {cls.label()} sequence.")
    return cls(text)


def _try_parse(cls, text: Optional[str]) -> Optional[SequenceData]:
    if text is None or not isinstance(text, str) or not cls.is_valid(text):
        return None
    return cls(text)


def parse_nucleic_acid(text: str) -> NucleicAcidSequence:
    return _parse(NucleicAcidSequence, text)


def try_parse_nucleic_acid(text: Optional[str]) -> Optional[NucleicAcidSequence]:
    return _try_parse(NucleicAcidSequence, text)


def parse_amino_acid(text: str) -> AminoAcidSequence:
    return _parse(AminoAcidSequence, text)


def try_parse_amino_acid(text: Optional[str]) -> Optional[AminoAcidSequence]:
    return _try_parse(AminoAcidSequence, text)


def classify(text: str) -> SequenceData:
    """Parse ``text`` as nucleic acid if possible, otherwise as amino acid.

    Raises
    ------
    NullInputError
        ``text`` is None.
    FastaFormatError
        ``text`` is blank or fits neither alphabet.
    """

    if text is None:
        raise NullInputError("text", "The sequence data to parse cannot be None.")
    if not text.strip():
        raise FastaFormatError("The sequence data to parse cannot be empty or all whitespace.")

    nucleic = try_parse_nucleic_acid(text)
    if nucleic is not None:
        return nucleic
    amino = try_parse_amino_acid(text)
    if amino is not None:
        return amino
    raise FastaFormatError("The provided string is not a valid FASTA amino or nucleic acid sequence.")


def classify_lines(lines: Iterable[str]) -> SequenceData:
    """Classify a sequence body spread over several lines."""

    if lines is None:
        raise NullInputError("lines", "The collection of sequence data lines to parse cannot be None.")
    try:
        return classify("\n".join(lines))
    except FastaFormatError as exc:
        raise FastaFormatError(str(exc)) from exc


__all__ = [
    "AminoAcidSequence",
    "NucleicAcidSequence",
    "SequenceData",
    "SequenceType",
    "classify",
    "classify_lines",
    "parse_amino_acid",
    "parse_nucleic_acid",
    "remove_whitespace",
    "split_by",
    "try_parse_amino_acid",
    "try_parse_nucleic_acid",
]
