"""Format defaults and filename conventions for FASTA files."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DEFAULT_LINE_LENGTH = 80


@dataclass(frozen=True, slots=True)
class FormatDefaults:
    line_length: int = DEFAULT_LINE_LENGTH
    header_start: str = ">"
    item_separator: str = "|"
    encoding: str = "utf-8"
    newline: str = "\n"


FORMAT_DEFAULTS = FormatDefaults()


class FilenameExtension(str, Enum):
    """Conventional suffixes for FASTA files."""

    GENERIC_LONG = ".fasta"
    GENERIC_SHORT = ".fa"
    AMINO_ACID = ".faa"
    NUCLEIC_ACID = ".fna"
    NUCLEOTIDE_OF_GENE_REGIONS = ".ffn"
    NON_CODING_RNA = ".frn"
    MULTIPLE_PROTEIN = ".mpfa"


FASTA_EXTENSIONS = frozenset(ext.value for ext in FilenameExtension)
