"""Tests for record collection providers."""

import pandas as pd
import pytest

from studentsearch.core.records import GRADES
from studentsearch.data import generate_sample_students, load_records_csv, save_records_csv
from studentsearch.data.sample_generator import SCHOOLS, SUBJECTS


def test_sample_generator_is_reproducible():
    assert generate_sample_students(50, seed=7) == generate_sample_students(50, seed=7)
    assert generate_sample_students(50, seed=7) != generate_sample_students(50, seed=8)


def test_sample_generator_shape(sample_students):
    assert [s.id for s in sample_students] == list(range(1, 101))
    for student in sample_students:
        assert student.grade in GRADES
        assert student.school in SCHOOLS
        assert student.subject in SUBJECTS
        house, rest = student.address.split(" ", 1)
        assert 1 <= int(house) <= 998
        assert ", " in rest


def test_sample_generator_grade_mix():
    """Large samples follow the 30/40/20/5/5 grade distribution roughly."""
    students = generate_sample_students(5000, seed=1)
    share = {g: sum(s.grade == g for s in students) / len(students) for g in GRADES}

    assert share["A"] == pytest.approx(0.30, abs=0.03)
    assert share["B"] == pytest.approx(0.40, abs=0.03)
    assert share["C"] == pytest.approx(0.20, abs=0.03)


def test_sample_generator_zero_and_negative():
    assert generate_sample_students(0) == []
    with pytest.raises(ValueError):
        generate_sample_students(-1)


def test_csv_round_trip(tmp_path, sample_students):
    path = save_records_csv(sample_students, tmp_path / "nested" / "students.csv")

    assert path.exists()
    assert load_records_csv(path) == sample_students


def test_csv_ignores_extra_columns(tmp_path):
    path = tmp_path / "students.csv"
    pd.DataFrame(
        [
            {"id": 2, "name": "Bob", "address": "Mumbai", "school": "XYZ",
             "subject": "History", "grade": "c", "notes": "late"},
        ]
    ).to_csv(path, index=False)

    [record] = load_records_csv(path)
    assert record.id == 2
    assert record.grade == "C"


def test_csv_missing_columns(tmp_path):
    path = tmp_path / "students.csv"
    pd.DataFrame([{"id": 1, "name": "Alice"}]).to_csv(path, index=False)

    with pytest.raises(ValueError, match="missing columns"):
        load_records_csv(path)


def test_csv_duplicate_ids(tmp_path, three_students):
    path = save_records_csv(three_students + [three_students[0]], tmp_path / "dup.csv")

    with pytest.raises(ValueError, match="duplicate record id 1"):
        load_records_csv(path)


def test_csv_invalid_grade(tmp_path, three_students):
    path = save_records_csv(three_students, tmp_path / "students.csv")
    df = pd.read_csv(path)
    df.loc[0, "grade"] = "Z"
    df.to_csv(path, index=False)

    with pytest.raises(ValueError, match="Invalid grade"):
        load_records_csv(path)


def test_csv_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_records_csv(tmp_path / "nope.csv")
