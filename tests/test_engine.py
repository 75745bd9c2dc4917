"""Tests for the search engine."""

import numpy as np
import pytest

from studentsearch.core.engine import StudentSearchEngine
from studentsearch.core.exceptions import EmptyCorpusError, UninitializedEngineError
from studentsearch.core.records import StudentRecord


def _ids(records):
    return [r.id for r in records]


def test_semantic_search_ranks_by_shared_terms(engine):
    """id 1 shares two query terms, id 3 one, id 2 none."""
    results = engine.semantic_search("delhi physics", top_k=3)

    assert [r.record.id for r in results] == [1, 3, 2]
    assert [r.rank for r in results] == [1, 2, 3]
    assert results[0].score > results[1].score > results[2].score == 0.0


def test_semantic_search_respects_top_k(sample_engine):
    for k in (0, 1, 5, 20):
        assert len(sample_engine.semantic_search("physics delhi", top_k=k)) == k
    assert len(sample_engine.semantic_search("physics", top_k=1000)) == 100


def test_semantic_search_order_is_total(sample_engine):
    """Scores never increase; equal scores come in ascending id order."""
    results = sample_engine.semantic_search("delhi public school physics", top_k=100)

    for prev, cur in zip(results, results[1:]):
        assert prev.score >= cur.score
        if prev.score == cur.score:
            assert prev.record.id < cur.record.id


def test_scores_are_never_nan(sample_engine):
    for query in ("", "   ", "zzz unknown", "grade a", "delhi"):
        scores = [r.score for r in sample_engine.semantic_search(query, top_k=100)]
        assert not np.isnan(scores).any()
        assert all(0.0 <= s <= 1.0 for s in scores)


def test_query_matching_nothing_ranks_by_id(engine):
    results = engine.semantic_search("quantum", top_k=3)

    assert [r.record.id for r in results] == [1, 2, 3]
    assert all(r.score == 0.0 for r in results)


def test_grade_token_is_searchable(engine):
    assert engine.semantic_search("gradeb", top_k=1)[0].record.id == 3


def test_corpus_vectors_match_vocabulary_size(sample_engine):
    index = sample_engine._state.index
    for position in range(len(index)):
        assert len(index.vector(position)) == sample_engine.vocabulary.size


def test_search_passed_and_failed_partition_corpus(sample_engine, sample_students):
    passed = sample_engine.search_passed(max_results=1000)
    failed = sample_engine.search_failed(max_results=1000)

    assert all(r.grade in ("A", "B") for r in passed)
    assert all(r.grade in ("C", "D", "F") for r in failed)
    assert sorted(_ids(passed) + _ids(failed)) == _ids(sample_students)


def test_scan_filters_keep_storage_order_and_limit(sample_engine, sample_students):
    expected = [r for r in sample_students if r.is_passed()][:5]
    assert sample_engine.search_passed(5) == expected
    assert sample_engine.search_passed(0) == []


def test_search_science_selects_keyword_subjects(sample_engine, sample_students):
    science = sample_engine.search_science(max_results=1000)
    keywords = ("physics", "chemistry", "biology", "science")

    assert science == [
        r for r in sample_students if any(k in r.subject.lower() for k in keywords)
    ]


def test_filters_without_predicates_equal_semantic_search(sample_engine):
    for query, k in (("delhi physics", 5), ("mumbai", 20), ("gradea chemistry", 50)):
        expected = [r.record for r in sample_engine.semantic_search(query, top_k=k)]
        assert sample_engine.search_with_filters(query, max_results=k) == expected


def test_blank_query_filters_whole_collection(engine):
    """Blank query + passed + science keeps id 1 and id 3 in storage order."""
    results = engine.search_with_filters("", passed_filter=True, category_filter=True, max_results=50)
    assert _ids(results) == [1, 3]


def test_blank_query_without_filters_returns_storage_order(engine):
    assert _ids(engine.search_with_filters("   ", max_results=2)) == [1, 2]


def test_failed_filter(engine):
    assert _ids(engine.search_with_filters("delhi", passed_filter=False, max_results=10)) == [2]


def test_false_category_filter_applies_no_restriction(engine):
    assert _ids(engine.search_with_filters("", category_filter=False, max_results=10)) == [1, 2, 3]


def test_filtered_results_keep_rank_order(engine):
    results = engine.search_with_filters("delhi physics", passed_filter=True, max_results=10)
    assert _ids(results) == [1, 3]


def _oversampling_corpus():
    """Three failed physics students rank above seven passed biology students."""
    failed = [StudentRecord(i, f"F{i}", "Pune", "S", "Physics", "C") for i in (1, 2, 3)]
    passed = [StudentRecord(i, f"P{i}", "Pune", "S", "Biology", "A") for i in range(4, 11)]
    return failed + passed


def test_oversampling_is_bounded():
    """Only max_results * 3 ranked candidates are filtered; no adaptive retry."""
    engine = StudentSearchEngine()
    engine.initialize(_oversampling_corpus())

    assert engine.search_with_filters("physics", passed_filter=True, max_results=1) == []
    assert _ids(engine.search_with_filters("physics", passed_filter=True, max_results=2)) == [4, 5]


def test_custom_oversample_factor():
    engine = StudentSearchEngine(oversample_factor=4)
    engine.initialize(_oversampling_corpus())

    assert _ids(engine.search_with_filters("physics", passed_filter=True, max_results=1)) == [4]


def test_uninitialized_engine_raises():
    engine = StudentSearchEngine()

    assert engine.record_count() == 0
    assert not engine.is_initialized
    with pytest.raises(UninitializedEngineError):
        engine.semantic_search("delhi")
    with pytest.raises(UninitializedEngineError):
        engine.search_with_filters("", passed_filter=True)
    with pytest.raises(UninitializedEngineError):
        engine.search_passed()


def test_empty_corpus_leaves_engine_unusable():
    engine = StudentSearchEngine()

    with pytest.raises(EmptyCorpusError):
        engine.initialize([])
    with pytest.raises(UninitializedEngineError):
        engine.search_failed()


def test_failed_reinitialize_keeps_previous_state(engine):
    with pytest.raises(EmptyCorpusError):
        engine.initialize([])

    assert engine.record_count() == 3
    assert engine.semantic_search("delhi physics", top_k=1)[0].record.id == 1


def test_duplicate_ids_are_rejected(three_students):
    engine = StudentSearchEngine()
    with pytest.raises(ValueError):
        engine.initialize(three_students + [three_students[0]])


def test_negative_limits_are_rejected(engine):
    with pytest.raises(ValueError):
        engine.semantic_search("delhi", top_k=-1)
    with pytest.raises(ValueError):
        engine.search_with_filters("delhi", max_results=-1)
    with pytest.raises(ValueError):
        engine.search_science(-5)


def test_initialization_is_deterministic(sample_students):
    first, second = StudentSearchEngine(), StudentSearchEngine(workers=4)
    first.initialize(sample_students)
    second.initialize(list(sample_students))

    assert first.vocabulary.term_mapping() == second.vocabulary.term_mapping()
    for position in range(len(sample_students)):
        np.testing.assert_array_equal(
            first._state.index.vector(position).values,
            second._state.index.vector(position).values,
        )


def test_get_all_and_stats(engine, three_students):
    assert engine.get_all() == three_students
    assert engine.get_all(2) == three_students[:2]

    stats = engine.get_stats()
    assert stats["initialized"] is True
    assert stats["total_records"] == 3
    assert stats["vocabulary_size"] == 13
    assert stats["passed_records"] == 2
    assert stats["science_records"] == 2
    assert "engine.initialize" in stats["latency"]
