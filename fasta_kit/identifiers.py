"""Header items: structured identifiers and free-text descriptions.

Every identifier convention has a short code (``gb``, ``lcl``, ``sp`` ...)
followed by a fixed number of ``|``-separated fields::

    gb|M73307|AGMA13GT
    pat|US|RE33188|1
    gi|1234

``IDENTIFIER_CODES`` maps each code to its arity (including the code
itself) and the class that builds it. Both :func:`parse_identifier` and the
header parser dispatch through that table.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, fields
from typing import ClassVar, Dict, NamedTuple, Sequence, Tuple, Type

from .config import FORMAT_DEFAULTS
from .errors import FastaFormatError, FastaError, InvalidArgumentError, NullInputError, UnsupportedCodeError

ITEM_SEPARATOR = FORMAT_DEFAULTS.item_separator
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+", re.ASCII)


class HeaderItem:
    """Common base for everything that can appear in a header line."""

    __slots__ = ()


@dataclass(frozen=True)
class Description(HeaderItem):
    """Free text inside a header line; the ``|`` separator is not allowed."""

    text: str

    def __post_init__(self) -> None:
        if self.text is None:
            raise NullInputError("text", "The description text cannot be None.")
        if not isinstance(self.text, str):
            raise InvalidArgumentError(f"The description text must be a string, not {type(self.text).__name__}.")
        if ITEM_SEPARATOR in self.text:
            raise InvalidArgumentError('The pipe ("|") character is not permitted in the description.')

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Identifier(HeaderItem):
    """Base class for identifier conventions.

    Subclasses declare ``code`` and their fields; string fields must be
    non-blank, free of surrounding whitespace and may not contain ``|``;
    integer fields must be ``int``.
    """

    code: ClassVar[str]
    integer_fields: ClassVar[Tuple[str, ...]] = ()

    def __post_init__(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            label = field.name.replace("_", " ")
            if value is None:
                raise NullInputError(field.name, f"The {label} cannot be None.")
            if field.name in self.integer_fields:
                if isinstance(value, bool) or not isinstance(value, int):
                    raise InvalidArgumentError(f"The {label} must be an integer, not {type(value).__name__}.")
                continue
            if not isinstance(value, str):
                raise InvalidArgumentError(f"The {label} must be a string, not {type(value).__name__}.")
            if not value.strip():
                raise InvalidArgumentError(f"The {label} cannot be empty or all whitespace.")
            if value != value.strip():
                raise InvalidArgumentError(f"The {label} cannot start or end with whitespace.")
            if ITEM_SEPARATOR in value:
                raise InvalidArgumentError(f'The pipe ("|") character is not permitted in the {label}.')

    @classmethod
    def arity(cls) -> int:
        """Number of ``|``-separated parts, counting the code."""

        return 1 + len(fields(cls))

    @classmethod
    def from_parts(cls, values: Sequence[str]):
        """Build an instance from the textual field values following the code."""

        converted = []
        for field, value in zip(fields(cls), values):
            if field.name in cls.integer_fields:
                converted.append(_parse_int(value, field.name))
            else:
                converted.append(value)
        return cls(*converted)

    def values(self) -> tuple:
        return tuple(getattr(self, field.name) for field in fields(self))

    def __str__(self) -> str:
        return ITEM_SEPARATOR.join([self.code, *(str(value) for value in self.values())])


def _parse_int(text: str, name: str) -> int:
    label = name.replace("_", " ")
    if text is None or not _INTEGER_PATTERN.fullmatch(text.strip()):
        raise InvalidArgumentError(f"The {label} {text!r} is not a base-10 integer.")
    try:
        return int(text)
    except ValueError as exc:
        raise InvalidArgumentError(f"The {label} ({len(text):,} characters) cannot be converted to an integer.") from exc


# GenInfo identifiers carry a single integer.


@dataclass(frozen=True)
class _IntegerIdentifier(Identifier):
    value: int

    integer_fields: ClassVar[Tuple[str, ...]] = ("value",)


@dataclass(frozen=True)
class BackboneMolTypeIdentifier(_IntegerIdentifier):
    code: ClassVar[str] = "bbm"


@dataclass(frozen=True)
class BackboneSeqIdIdentifier(_IntegerIdentifier):
    code: ClassVar[str] = "bbs"


@dataclass(frozen=True)
class IntegratedDatabaseIdentifier(_IntegerIdentifier):
    code: ClassVar[str] = "gi"


@dataclass(frozen=True)
class ImportIdIdentifier(_IntegerIdentifier):
    code: ClassVar[str] = "gim"


@dataclass(frozen=True)
class LocalIdentifier(Identifier):
    value: str

    code: ClassVar[str] = "lcl"


@dataclass(frozen=True)
class _AccessionLocusIdentifier(Identifier):
    accession: str
    locus: str


@dataclass(frozen=True)
class GenBankIdentifier(_AccessionLocusIdentifier):
    code: ClassVar[str] = "gb"


@dataclass(frozen=True)
class EMBLIdentifier(_AccessionLocusIdentifier):
    code: ClassVar[str] = "emb"


@dataclass(frozen=True)
class DDBJIdentifier(_AccessionLocusIdentifier):
    code: ClassVar[str] = "dbj"


@dataclass(frozen=True)
class _AccessionNameIdentifier(Identifier):
    accession: str
    name: str


@dataclass(frozen=True)
class PIRIdentifier(_AccessionNameIdentifier):
    code: ClassVar[str] = "pir"


@dataclass(frozen=True)
class PRFIdentifier(_AccessionNameIdentifier):
    code: ClassVar[str] = "prf"


@dataclass(frozen=True)
class RefSeqIdentifier(_AccessionNameIdentifier):
    code: ClassVar[str] = "ref"


@dataclass(frozen=True)
class SwissProtIdentifier(_AccessionNameIdentifier):
    code: ClassVar[str] = "sp"


@dataclass(frozen=True)
class ThirdPartyDDBJIdentifier(_AccessionNameIdentifier):
    code: ClassVar[str] = "tpd"


@dataclass(frozen=True)
class ThirdPartyEMBLIdentifier(_AccessionNameIdentifier):
    code: ClassVar[str] = "tpe"


@dataclass(frozen=True)
class ThirdPartyGenBankIdentifier(_AccessionNameIdentifier):
    code: ClassVar[str] = "tpg"


@dataclass(frozen=True)
class TrEMBLIdentifier(_AccessionNameIdentifier):
    code: ClassVar[str] = "tr"


@dataclass(frozen=True)
class PDBIdentifier(Identifier):
    entry: str
    chain: str

    code: ClassVar[str] = "pdb"


@dataclass(frozen=True)
class GeneralDatabaseReferenceIdentifier(Identifier):
    database: str
    value: str

    code: ClassVar[str] = "gnl"


@dataclass(frozen=True)
class PatentIdentifier(Identifier):
    country: str
    patent: str
    sequence_number: str

    code: ClassVar[str] = "pat"


@dataclass(frozen=True)
class PreGrantPatentIdentifier(Identifier):
    country: str
    application_number: str
    sequence_number: str

    code: ClassVar[str] = "pgp"


class IdentifierSpec(NamedTuple):
    arity: int
    factory: Type[Identifier]


IDENTIFIER_TYPES: Tuple[Type[Identifier], ...] = (
    BackboneMolTypeIdentifier,
    BackboneSeqIdIdentifier,
    IntegratedDatabaseIdentifier,
    ImportIdIdentifier,
    LocalIdentifier,
    GenBankIdentifier,
    EMBLIdentifier,
    DDBJIdentifier,
    PIRIdentifier,
    PRFIdentifier,
    RefSeqIdentifier,
    SwissProtIdentifier,
    ThirdPartyDDBJIdentifier,
    ThirdPartyEMBLIdentifier,
    ThirdPartyGenBankIdentifier,
    TrEMBLIdentifier,
    PDBIdentifier,
    GeneralDatabaseReferenceIdentifier,
    PatentIdentifier,
    PreGrantPatentIdentifier,
)

IDENTIFIER_CODES: Dict[str, IdentifierSpec] = {
    cls.code: IdentifierSpec(arity=cls.arity(), factory=cls) for cls in IDENTIFIER_TYPES
}


def is_identifier_code(text: str) -> bool:
    return text in IDENTIFIER_CODES


def split_parts(text: str) -> list[str]:
    return [part.strip() for part in text.split(ITEM_SEPARATOR)]


def identifier_from_parts(parts: Sequence[str]) -> Identifier:
    """Build an identifier from already-split parts, ``parts[0]`` being the code.

    Raises :class:`UnsupportedCodeError` for unknown codes and
    :class:`InvalidArgumentError` when the part count does not match.
    """

    if len(parts) < 1:
        raise InvalidArgumentError("There must be at least one identifier part supplied (the identifier code).")
    code = parts[0]
    spec = IDENTIFIER_CODES.get(code)
    if spec is None:
        raise UnsupportedCodeError(code)
    if len(parts) != spec.arity:
        raise InvalidArgumentError(
            "The number of identifier parts supplied does not match what is needed for the provided "
            f'identifier code "{code}" (expected {spec.arity}, got {len(parts)}).'
        )
    return spec.factory.from_parts(parts[1:])


def parse_identifier(text: str) -> Identifier:
    """Parse a single identifier such as ``"gb|M73307|AGMA13GT"``.

    Raises
    ------
    NullInputError
        ``text`` is None.
    InvalidArgumentError
        ``text`` is empty or all whitespace.
    FastaFormatError
        Unknown code, wrong number of parts or an invalid field value; the
        underlying error is available as ``exc.cause``.
    """

    if text is None:
        raise NullInputError("text", "The identifier string to parse cannot be None.")
    if not text.strip():
        raise InvalidArgumentError("The identifier string to parse cannot be empty or all whitespace.")

    parts = split_parts(text)
    try:
        return identifier_from_parts(parts)
    except FastaError as exc:
        raise FastaFormatError("The supplied string could not be parsed as a valid FASTA identifier.") from exc


__all__ = [
    "BackboneMolTypeIdentifier",
    "BackboneSeqIdIdentifier",
    "DDBJIdentifier",
    "Description",
    "EMBLIdentifier",
    "GenBankIdentifier",
    "GeneralDatabaseReferenceIdentifier",
    "HeaderItem",
    "IDENTIFIER_CODES",
    "IDENTIFIER_TYPES",
    "Identifier",
    "IdentifierSpec",
    "ImportIdIdentifier",
    "IntegratedDatabaseIdentifier",
    "LocalIdentifier",
    "PDBIdentifier",
    "PIRIdentifier",
    "PRFIdentifier",
    "PatentIdentifier",
    "PreGrantPatentIdentifier",
    "RefSeqIdentifier",
    "SwissProtIdentifier",
    "ThirdPartyDDBJIdentifier",
    "ThirdPartyEMBLIdentifier",
    "ThirdPartyGenBankIdentifier",
    "TrEMBLIdentifier",
    "identifier_from_parts",
    "is_identifier_code",
    "parse_identifier",
    "split_parts",
]
