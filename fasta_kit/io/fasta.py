"""FASTA readers and writers for files and text streams.

These wrap the parsing core with file handling, logging and async
variants. The async helpers validate their arguments first and then run
the blocking work in a worker thread.
"""

from __future__ import annotations

import asyncio
from itertools import chain
from pathlib import Path
from typing import Iterable, Iterator, List, TextIO, Union

from ..config import DEFAULT_LINE_LENGTH, FORMAT_DEFAULTS
from ..errors import NullInputError, check_line_length
from ..logging_utils import get_logger
from ..record import Record, RecordCollection
from .paths import PathLike, has_fasta_extension, read_lines, write_lines

logger = get_logger(__name__)

RecordsLike = Union[Record, RecordCollection, Iterable[Record]]


def _require_path(path: PathLike) -> Path:
    if path is None:
        raise NullInputError("path", "The path to the FASTA file cannot be None.")
    path = Path(path)
    if not has_fasta_extension(path):
        logger.debug("File %s does not use a conventional FASTA extension", path.name)
    return path


def _require_stream(handle: TextIO) -> TextIO:
    if handle is None:
        raise NullInputError("handle", "The stream cannot be None.")
    return handle


def _as_records(records: RecordsLike) -> List[Record]:
    if records is None:
        raise NullInputError("records", "The FASTA data to write cannot be None.")
    if isinstance(records, Record):
        return [records]
    return list(records)


def _stream_lines(handle: TextIO) -> Iterator[str]:
    for line in handle:
        yield line.rstrip("\r\n")


def read_record(path: PathLike) -> Record:
    """Read a single-record FASTA file."""

    path = _require_path(path)
    logger.info("Reading FASTA record from %s", path)
    return Record.parse(read_lines(path))


def read_records(path: PathLike) -> Iterator[Record]:
    """Lazily read every record of a multi-record FASTA file.

    The file stays open while the returned generator is being iterated. It
    is closed once the generator is exhausted, raises or is closed, so a
    caller that stops early should call ``close()`` (or wrap the generator
    in :func:`contextlib.closing`).
    """

    path = _require_path(path)
    logger.info("Reading FASTA records from %s", path)
    return _iter_file_records(path)


def _iter_file_records(path: Path) -> Iterator[Record]:
    with path.open("r", encoding=FORMAT_DEFAULTS.encoding) as handle:
        yield from Record.parse_multiple(_stream_lines(handle))


def read_collection(path: PathLike) -> RecordCollection:
    path = _require_path(path)
    logger.info("Reading FASTA records from %s", path)
    collection = RecordCollection.parse(read_lines(path))
    logger.debug("Parsed %d records from %s", len(collection), path.name)
    return collection


def read_record_from_stream(handle: TextIO) -> Record:
    return Record.parse(_stream_lines(_require_stream(handle)))


def read_records_from_stream(handle: TextIO) -> Iterator[Record]:
    return Record.parse_multiple(_stream_lines(_require_stream(handle)))


def read_collection_from_stream(handle: TextIO) -> RecordCollection:
    return RecordCollection.parse(_stream_lines(_require_stream(handle)))


def _interleaved(records: List[Record], line_length: int) -> Iterable[str]:
    return chain.from_iterable(record.to_interleaved_lines(line_length) for record in records)


def _sequential(records: List[Record]) -> Iterable[str]:
    return chain.from_iterable(record.to_sequential_lines() for record in records)


def write_interleaved(path: PathLike, records: RecordsLike, line_length: int = DEFAULT_LINE_LENGTH) -> Path:
    """Write records with their sequences wrapped at ``line_length`` columns."""

    check_line_length(line_length)
    path = _require_path(path)
    records = _as_records(records)
    write_lines(path, _interleaved(records, line_length))
    logger.info("Wrote %d interleaved records -> %s", len(records), path)
    return path


def write_sequential(path: PathLike, records: RecordsLike) -> Path:
    """Write records with each sequence on a single line."""

    path = _require_path(path)
    records = _as_records(records)
    write_lines(path, _sequential(records))
    logger.info("Wrote %d sequential records -> %s", len(records), path)
    return path


def _write_to_stream(handle: TextIO, lines: Iterable[str]) -> None:
    for line in lines:
        handle.write(f"{line}{FORMAT_DEFAULTS.newline}")


def write_interleaved_to_stream(handle: TextIO, records: RecordsLike, line_length: int = DEFAULT_LINE_LENGTH) -> None:
    check_line_length(line_length)
    _write_to_stream(_require_stream(handle), _interleaved(_as_records(records), line_length))


def write_sequential_to_stream(handle: TextIO, records: RecordsLike) -> None:
    _write_to_stream(_require_stream(handle), _sequential(_as_records(records)))


async def read_record_async(path: PathLike) -> Record:
    path = _require_path(path)
    return await asyncio.to_thread(read_record, path)


async def read_collection_async(path: PathLike) -> RecordCollection:
    path = _require_path(path)
    return await asyncio.to_thread(read_collection, path)


async def write_interleaved_async(
    path: PathLike,
    records: RecordsLike,
    line_length: int = DEFAULT_LINE_LENGTH,
) -> Path:
    check_line_length(line_length)
    path = _require_path(path)
    records = _as_records(records)
    return await asyncio.to_thread(write_interleaved, path, records, line_length)


async def write_sequential_async(path: PathLike, records: RecordsLike) -> Path:
    path = _require_path(path)
    records = _as_records(records)
    return await asyncio.to_thread(write_sequential, path, records)


__all__ = [
    "read_collection",
    "read_collection_async",
    "read_collection_from_stream",
    "read_record",
    "read_record_async",
    "read_record_from_stream",
    "read_records",
    "read_records_from_stream",
    "write_interleaved",
    "write_interleaved_async",
    "write_interleaved_to_stream",
    "write_sequential",
    "write_sequential_async",
    "write_sequential_to_stream",
]
