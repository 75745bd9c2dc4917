"""Tests for the student record entity and text canonicalization."""

import pytest

from studentsearch.core.records import StudentRecord
from studentsearch.core.text import canonicalize, tokenize


def test_canonicalize_matches_expected_text(three_students):
    """Canonical text joins fields and appends a grade token, lowercased."""
    assert [canonicalize(s) for s in three_students] == [
        "alice delhi dps physics gradea",
        "bob mumbai xyz history gradec",
        "carol delhi dps biology gradeb",
    ]


def test_tokenize_splits_on_non_alphanumerics():
    """Punctuation and whitespace separate tokens; case is folded."""
    assert tokenize("12 Main Street, Delhi") == ["12", "main", "street", "delhi"]
    assert tokenize("St. Stephen's School") == ["st", "stephen", "s", "school"]
    assert tokenize("snake_case--and   spaces") == ["snake", "case", "and", "spaces"]
    assert tokenize("   ") == []


def test_tokenize_keeps_unicode_letters():
    assert tokenize("La Martinière for Girls") == ["la", "martinière", "for", "girls"]


@pytest.mark.parametrize(
    "grade,passed",
    [("A", True), ("B", True), ("C", False), ("D", False), ("F", False)],
)
def test_is_passed(grade, passed):
    record = StudentRecord(1, "Name", "Address", "School", "Art", grade)
    assert record.is_passed() is passed


@pytest.mark.parametrize(
    "subject,science",
    [
        ("Physics", True),
        ("CHEMISTRY", True),
        ("Biology", True),
        ("Computer Science", True),
        ("Political Science", True),
        ("History", False),
        ("Physical Education", False),
    ],
)
def test_has_science(subject, science):
    record = StudentRecord(1, "Name", "Address", "School", subject, "A")
    assert record.has_science() is science


def test_grade_is_normalized_and_validated():
    """Lowercase grades are accepted; unknown letters are rejected."""
    assert StudentRecord(1, "n", "a", "s", "x", "b").grade == "B"
    with pytest.raises(ValueError):
        StudentRecord(1, "n", "a", "s", "x", "E")


def test_record_is_immutable(three_students):
    with pytest.raises(AttributeError):
        three_students[0].grade = "F"


def test_dict_round_trip(three_students):
    record = three_students[0]
    assert StudentRecord.from_dict(record.to_dict()) == record
    assert StudentRecord.from_dict({**record.to_dict(), "id": "7"}).id == 7
