"""Utility helpers for interacting with the filesystem."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, Union

from ..config import FASTA_EXTENSIONS, FORMAT_DEFAULTS

PathLike = Union[str, Path]


def ensure_dir(path: Path) -> Path:
    """Create the directory if it does not exist and return it."""

    path.mkdir(parents=True, exist_ok=True)
    return path


def read_lines(path: PathLike, encoding: str = FORMAT_DEFAULTS.encoding) -> Iterator[str]:
    """Yield the lines of a text file without their line terminators."""

    with Path(path).open("r", encoding=encoding) as handle:
        for line in handle:
            yield line.rstrip("\r\n")


def write_lines(path: PathLike, lines: Iterable[str], encoding: str = FORMAT_DEFAULTS.encoding) -> Path:
    """Write an iterable of strings as newline-delimited text."""

    path = Path(path)
    ensure_dir(path.parent)
    with path.open("w", encoding=encoding) as handle:
        for line in lines:
            handle.write(f"{line}{FORMAT_DEFAULTS.newline}")
    return path


def has_fasta_extension(path: PathLike) -> bool:
    """Return True when the file name ends in a conventional FASTA suffix."""

    return Path(path).suffix.lower() in FASTA_EXTENSIONS
