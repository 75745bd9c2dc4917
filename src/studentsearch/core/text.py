"""Text canonicalization and tokenization shared by fit and query time."""

from __future__ import annotations

import re
from typing import List

from studentsearch.core.records import StudentRecord

# Runs of Unicode letters or digits; everything else separates tokens
_TOKEN_PATTERN = re.compile(r"[^\W_]+")


def canonicalize(record: StudentRecord) -> str:
    """Build the lowercase search text for a record.

    The grade is appended as a single ``grade<letter>`` token so it can be
    matched as a unit rather than as a stray letter.

    Example:
        >>> canonicalize(StudentRecord(1, "Alice", "Delhi", "DPS", "Physics", "A"))
        'alice delhi dps physics gradea'
    """
    return (
        f"{record.name} {record.address} {record.school} "
        f"{record.subject} grade{record.grade}"
    ).lower()


def tokenize(text: str) -> List[str]:
    """Split text into lowercase alphanumeric tokens, in order of appearance."""
    return _TOKEN_PATTERN.findall(text.lower())
