"""FASTA records (header + sequence) and multi-record parsing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple, Type, Union

from .config import DEFAULT_LINE_LENGTH
from .errors import FastaFormatError, InvalidArgumentError, NullInputError, check_line_length
from .header import Header, is_header_line
from .sequences import AminoAcidSequence, NucleicAcidSequence, SequenceData, classify_lines

LinesOrText = Union[str, Iterable[str]]

INCORRECT_FORMAT_MESSAGE = "The collection of sequence lines are not in the correct format."


def split_into_non_blank_lines(text: str) -> List[str]:
    return [line for line in text.splitlines() if line.strip()]


def _non_blank(source: LinesOrText) -> List[str]:
    if isinstance(source, str):
        return split_into_non_blank_lines(source)
    return [line for line in source if line and line.strip()]


def split_by_header_lines(lines: Iterable[str]) -> Iterator[List[str]]:
    """Group lines into records, starting a new group at each header line.

    A header line only closes the current group when that group already
    holds something, so the first line always opens the first group and
    each of several consecutive header lines ends up in its own group.
    """

    group: List[str] = []
    for line in lines:
        if is_header_line(line) and group:
            yield group
            group = [line]
        else:
            group.append(line)
    if group:
        yield group


@dataclass(frozen=True)
class Record:
    """One FASTA entry: a header and its sequence data."""

    header: Header
    data: SequenceData

    def __post_init__(self) -> None:
        if self.header is None:
            raise NullInputError("header", "The header cannot be None.")
        if self.data is None:
            raise NullInputError("data", "The sequence data cannot be None.")
        if not isinstance(self.header, Header):
            raise InvalidArgumentError(f"header must be a Header, not {type(self.header).__name__}.")
        if not isinstance(self.data, SequenceData):
            raise InvalidArgumentError(f"data must be sequence data, not {type(self.data).__name__}.")

    @property
    def sequence_type(self):
        return self.data.sequence_type

    @classmethod
    def parse(cls, source: LinesOrText) -> "Record":
        """Parse a single record from a string or from an iterable of lines."""

        if source is None:
            raise NullInputError("source", "The sequence lines to parse cannot be None.")
        try:
            return cls._parse_lines(_non_blank(source))
        except FastaFormatError as exc:
            raise FastaFormatError(INCORRECT_FORMAT_MESSAGE) from exc

    @classmethod
    def _parse_lines(cls, lines: List[str]) -> "Record":
        if not lines:
            raise FastaFormatError("No header line was found.")
        header = Header.parse(lines[0])
        body = lines[1:]
        if not body:
            raise FastaFormatError("No sequence data was found after the header line.")
        return cls(header, classify_lines(body))

    @classmethod
    def parse_multiple(cls, source: LinesOrText) -> Iterator["Record"]:
        """Lazily parse every record in a multi-record text.

        A malformed record raises :class:`FastaFormatError` naming its
        1-based position only when iteration reaches it.
        """

        if source is None:
            raise NullInputError("source", "The collection of lines to parse cannot be None.")
        return _iter_records(cls, source)

    def to_interleaved_lines(self, line_length: int = DEFAULT_LINE_LENGTH) -> List[str]:
        check_line_length(line_length)
        return [str(self.header), *self.data.to_lines(line_length)]

    def to_sequential_lines(self) -> List[str]:
        return [str(self.header), str(self.data)]


def _iter_records(record_type: Type[Record], source: LinesOrText) -> Iterator[Record]:
    for number, group in enumerate(split_by_header_lines(_non_blank(source)), start=1):
        try:
            record = record_type.parse(group)
        except FastaFormatError as exc:
            raise FastaFormatError(f"Sequence {number:,} is in an incorrect format.") from exc
        yield record


@dataclass(frozen=True, init=False)
class RecordCollection:
    """Ordered records that were read from one multi-record text."""

    records: Tuple[Record, ...]

    def __init__(self, records: Union[Record, Iterable[Record]]) -> None:
        if records is None:
            raise NullInputError("records", "The collection of sequences cannot be None.")
        if isinstance(records, Record):
            records = (records,)
        records = tuple(records)
        for record in records:
            if not isinstance(record, Record):
                raise InvalidArgumentError(f"Expected Record instances, got {type(record).__name__}.")
        object.__setattr__(self, "records", records)

    @classmethod
    def parse(cls, source: LinesOrText) -> "RecordCollection":
        if source is None:
            raise NullInputError("source", "The collection of lines to parse cannot be None.")
        try:
            return cls(Record.parse_multiple(source))
        except FastaFormatError as exc:
            raise FastaFormatError(INCORRECT_FORMAT_MESSAGE) from exc

    def contains_only_amino_acid(self) -> bool:
        return self._all_of_type(AminoAcidSequence)

    def contains_only_nucleic_acid(self) -> bool:
        return self._all_of_type(NucleicAcidSequence)

    def _all_of_type(self, data_type: Type[SequenceData]) -> bool:
        return all(type(record.data) is data_type for record in self.records)

    def to_interleaved_lines(self, line_length: int = DEFAULT_LINE_LENGTH) -> List[str]:
        check_line_length(line_length)
        lines: List[str] = []
        for record in self.records:
            lines.extend(record.to_interleaved_lines(line_length))
        return lines

    def to_sequential_lines(self) -> List[str]:
        lines: List[str] = []
        for record in self.records:
            lines.extend(record.to_sequential_lines())
        return lines

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def __getitem__(self, index: int) -> Record:
        return self.records[index]


__all__ = [
    "Record",
    "RecordCollection",
    "split_by_header_lines",
    "split_into_non_blank_lines",
]
