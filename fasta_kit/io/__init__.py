"""IO helpers for fasta_kit."""

from .fasta import (
    read_collection,
    read_collection_async,
    read_collection_from_stream,
    read_record,
    read_record_async,
    read_record_from_stream,
    read_records,
    read_records_from_stream,
    write_interleaved,
    write_interleaved_async,
    write_interleaved_to_stream,
    write_sequential,
    write_sequential_async,
    write_sequential_to_stream,
)
from .paths import ensure_dir, has_fasta_extension, read_lines, write_lines

__all__ = [
    "ensure_dir",
    "has_fasta_extension",
    "read_lines",
    "write_lines",
    "read_record",
    "read_records",
    "read_collection",
    "read_record_from_stream",
    "read_records_from_stream",
    "read_collection_from_stream",
    "write_interleaved",
    "write_sequential",
    "write_interleaved_to_stream",
    "write_sequential_to_stream",
    "read_record_async",
    "read_collection_async",
    "write_interleaved_async",
    "write_sequential_async",
]
