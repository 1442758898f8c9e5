"""Exception types raised by the FASTA parsing and formatting layer."""

from __future__ import annotations


class FastaError(Exception):
    """Base class for all fasta_kit errors."""


class NullInputError(FastaError, TypeError):
    """Raised when a required argument is ``None``."""

    def __init__(self, name: str, message: str | None = None) -> None:
        self.name = name
        super().__init__(message or f"{name} cannot be None.")


class InvalidArgumentError(FastaError, ValueError):
    """Raised when a value fails field-level validation."""


class FastaFormatError(FastaError, ValueError):
    """Raised when text is not in the expected FASTA shape.

    Lower-level failures are attached with ``raise ... from exc`` and are
    available through :attr:`cause`.
    """

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__


class LineLengthError(FastaError, ValueError):
    """Raised when a line-wrapping width is less than one."""

    def __init__(self, line_length: int) -> None:
        self.line_length = line_length
        super().__init__(f"The length of each line cannot be less than one (got {line_length}).")


class UnsupportedCodeError(FastaError, ValueError):
    """Raised when an identifier code is not in the dispatch table."""

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f'"{code}" is not a recognized identifier code.')


def check_line_length(line_length: int) -> int:
    if line_length < 1:
        raise LineLengthError(line_length)
    return line_length


__all__ = [
    "FastaError",
    "FastaFormatError",
    "InvalidArgumentError",
    "LineLengthError",
    "NullInputError",
    "UnsupportedCodeError",
    "check_line_length",
]
