"""Load and save student collections as CSV files."""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

import pandas as pd

from studentsearch.core.records import RECORD_FIELDS, StudentRecord
from studentsearch.utils.logging import get_logger

logger = get_logger(__name__)


def load_records_csv(path: str | Path, **pandas_kwargs) -> List[StudentRecord]:
    """Load a student collection from a CSV file.

    The file needs the columns ``id, name, address, school, subject, grade``;
    extra columns are ignored. Row order is kept as storage order.

    Args:
        path: CSV file path
        **pandas_kwargs: Additional arguments passed to pd.read_csv()

    Returns:
        List of StudentRecord

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If columns are missing, ids repeat, or a row is invalid
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Records file not found: {path}")

    logger.info(f"Loading student records from {path}")
    df = pd.read_csv(path, dtype=str, keep_default_na=False, **pandas_kwargs)

    missing = [column for column in RECORD_FIELDS if column not in df.columns]
    if missing:
        raise ValueError(f"Records file {path} is missing columns: {missing}")

    records = []
    seen_ids = set()
    for line, row in enumerate(df[list(RECORD_FIELDS)].to_dict("records"), start=2):
        try:
            record = StudentRecord.from_dict(row)
        except ValueError as e:
            raise ValueError(f"{path}:{line}: {e}") from e

        if record.id in seen_ids:
            raise ValueError(f"{path}:{line}: duplicate record id {record.id}")
        seen_ids.add(record.id)
        records.append(record)

    logger.debug(f"  Loaded {len(records)} records")
    return records


def save_records_csv(records: Sequence[StudentRecord], path: str | Path) -> Path:
    """Write records to CSV in the column order load_records_csv expects.

    Args:
        records: Records to write
        path: Destination file (parent directories are created)

    Returns:
        Path written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    df = pd.DataFrame(
        [record.to_dict() for record in records], columns=list(RECORD_FIELDS)
    )
    df.to_csv(path, index=False)
    logger.info(f"Saved {len(records)} records to {path}")
    return path
