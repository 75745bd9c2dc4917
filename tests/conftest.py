"""Shared fixtures for StudentSearch tests."""

import pytest

from studentsearch.core.engine import StudentSearchEngine
from studentsearch.core.records import StudentRecord
from studentsearch.data import generate_sample_students, save_records_csv
from studentsearch.utils.config import set_config
from studentsearch.utils.timing import get_latency_tracker


@pytest.fixture(autouse=True)
def reset_globals(monkeypatch):
    """Keep tests independent of any config.yml and of earlier timings."""
    monkeypatch.delenv("STUDENTSEARCH_CONFIG", raising=False)
    set_config(None)
    get_latency_tracker().reset()
    yield
    set_config(None)


@pytest.fixture
def three_students():
    """Canonical texts: 'alice delhi dps physics gradea',
    'bob mumbai xyz history gradec', 'carol delhi dps biology gradeb'."""
    return [
        StudentRecord(1, "Alice", "Delhi", "DPS", "Physics", "A"),
        StudentRecord(2, "Bob", "Mumbai", "XYZ", "History", "C"),
        StudentRecord(3, "Carol", "Delhi", "DPS", "Biology", "B"),
    ]


@pytest.fixture
def engine(three_students):
    engine = StudentSearchEngine()
    engine.initialize(three_students)
    return engine


@pytest.fixture
def sample_students():
    return generate_sample_students(100, seed=42)


@pytest.fixture
def sample_engine(sample_students):
    engine = StudentSearchEngine()
    engine.initialize(sample_students)
    return engine


@pytest.fixture
def students_csv(tmp_path, three_students):
    return save_records_csv(three_students, tmp_path / "students.csv")
