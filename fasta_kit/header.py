"""FASTA header lines (``>`` followed by ``|``-separated items)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

from .config import FORMAT_DEFAULTS
from .errors import FastaError, FastaFormatError, InvalidArgumentError, NullInputError
from .identifiers import (
    IDENTIFIER_CODES,
    ITEM_SEPARATOR,
    Description,
    HeaderItem,
    Identifier,
    identifier_from_parts,
    is_identifier_code,
    split_parts,
)

HEADER_START = FORMAT_DEFAULTS.header_start


def is_header_line(line: str) -> bool:
    return line.startswith(HEADER_START)


@dataclass(frozen=True, init=False)
class Header:
    """Ordered, non-empty sequence of header items."""

    items: Tuple[HeaderItem, ...]

    def __init__(self, items: Union[HeaderItem, Iterable[HeaderItem]]) -> None:
        if items is None:
            raise NullInputError("items", "The collection of header items cannot be None.")
        if isinstance(items, HeaderItem):
            items = (items,)
        items = tuple(items)
        if not items:
            raise InvalidArgumentError("A header must contain at least one item.")
        for item in items:
            if item is None:
                raise NullInputError("items", "The header item cannot be None.")
            if not isinstance(item, HeaderItem):
                raise InvalidArgumentError(f"Header items must be identifiers or descriptions, not {type(item).__name__}.")
        object.__setattr__(self, "items", items)

    @property
    def identifiers(self) -> Tuple[Identifier, ...]:
        return tuple(item for item in self.items if isinstance(item, Identifier))

    @property
    def descriptions(self) -> Tuple[Description, ...]:
        return tuple(item for item in self.items if isinstance(item, Description))

    @property
    def identifier(self) -> Optional[Identifier]:
        """First identifier in the header, if any."""

        identifiers = self.identifiers
        return identifiers[0] if identifiers else None

    @classmethod
    def parse(cls, header_line: str) -> "Header":
        """Parse a header line such as ``">lcl|123|free text"``.

        Any part equal to a known identifier code starts an identifier and
        consumes the following parts that code needs; every other part is a
        :class:`Description`. A description that happens to read ``gb`` is
        therefore taken as the start of a GenBank identifier.
        """

        if header_line is None:
            raise NullInputError("header_line", "The header line to parse cannot be None.")
        if not header_line.strip():
            raise FastaFormatError("The header line to parse cannot be empty or all whitespace.")
        if not is_header_line(header_line):
            raise FastaFormatError("The header line to parse does not start with the required start character.")

        parts = split_parts(header_line.lstrip(HEADER_START).strip())
        return cls(_parse_items(parts))

    def __str__(self) -> str:
        return HEADER_START + ITEM_SEPARATOR.join(str(item) for item in self.items)


def _parse_items(parts: List[str]) -> List[HeaderItem]:
    items: List[HeaderItem] = []
    index = 0
    while index < len(parts):
        part = parts[index]
        if not is_identifier_code(part):
            items.append(Description(part))
            index += 1
            continue

        spec = IDENTIFIER_CODES[part]
        consumed = parts[index : index + spec.arity]
        try:
            items.append(identifier_from_parts(consumed))
        except FastaError as exc:
            raise FastaFormatError(
                f'Header item {len(items) + 1} ("{ITEM_SEPARATOR.join(consumed)}") is not a valid identifier.'
            ) from exc
        index += spec.arity
    return items


__all__ = ["HEADER_START", "Header", "is_header_line"]
