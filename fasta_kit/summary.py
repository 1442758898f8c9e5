"""Tabular summaries of parsed records."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import pandas as pd

from .logging_utils import get_logger
from .record import Record

logger = get_logger(__name__)

SUMMARY_COLUMNS = [
    "index",
    "header",
    "identifier_code",
    "identifier",
    "description",
    "sequence_type",
    "length",
]


def records_to_frame(records: Iterable[Record]) -> pd.DataFrame:
    """Return one row per record with its header fields and sequence stats."""

    rows = []
    for index, record in enumerate(records, start=1):
        identifier = record.header.identifier
        rows.append(
            {
                "index": index,
                "header": str(record.header),
                "identifier_code": identifier.code if identifier is not None else None,
                "identifier": str(identifier) if identifier is not None else None,
                "description": " ".join(item.text for item in record.header.descriptions if item.text) or None,
                "sequence_type": record.sequence_type.value,
                "length": len(record.data),
            }
        )
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def write_summary_csv(path: Path, records: Iterable[Record]) -> Path:
    """Write :func:`records_to_frame` output as CSV and return the path."""

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    frame = records_to_frame(records)
    frame.to_csv(path, index=False)
    logger.info("Wrote summary of %d records -> %s", len(frame), path)
    return path


__all__ = ["SUMMARY_COLUMNS", "records_to_frame", "write_summary_csv"]
