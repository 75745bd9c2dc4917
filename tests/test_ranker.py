"""Tests for cosine similarity and top-K ranking."""

import itertools

import pytest

from studentsearch.core.exceptions import VocabularyMismatchError
from studentsearch.core.ranker import CorpusIndex, cosine_similarity, rank
from studentsearch.core.vectorizer import Vectorizer
from studentsearch.core.vocabulary import Vocabulary

CORPUS = [
    "alice delhi dps physics gradea",
    "bob mumbai xyz history gradec",
    "carol delhi dps biology gradeb",
]


@pytest.fixture
def vectorizer():
    return Vectorizer(Vocabulary.fit(CORPUS))


@pytest.fixture
def corpus_vectors(vectorizer):
    return vectorizer.transform_many(CORPUS)


def test_similarity_is_symmetric(vectorizer, corpus_vectors):
    vectors = corpus_vectors + [vectorizer.transform("delhi physics")]
    for a, b in itertools.product(vectors, repeat=2):
        assert cosine_similarity(a, b) == pytest.approx(cosine_similarity(b, a))


def test_self_similarity_is_one(corpus_vectors):
    for vector in corpus_vectors:
        assert cosine_similarity(vector, vector) == pytest.approx(1.0)


def test_zero_vector_similarity_is_exactly_zero(vectorizer, corpus_vectors):
    zero = vectorizer.transform("nothing matches here")

    assert cosine_similarity(zero, corpus_vectors[0]) == 0.0
    assert cosine_similarity(corpus_vectors[0], zero) == 0.0
    assert cosine_similarity(zero, zero) == 0.0


def test_scores_are_within_unit_interval(vectorizer, corpus_vectors):
    query = vectorizer.transform("delhi physics gradea")
    for vector in corpus_vectors:
        assert 0.0 <= cosine_similarity(query, vector) <= 1.0


def test_vectors_from_different_fits_cannot_be_compared(corpus_vectors):
    other = Vectorizer(Vocabulary.fit(CORPUS)).transform("delhi")

    with pytest.raises(VocabularyMismatchError):
        cosine_similarity(corpus_vectors[0], other)
    with pytest.raises(VocabularyMismatchError):
        CorpusIndex(corpus_vectors, [1, 2, 3]).rank(other, 3)


def test_rank_orders_by_score(vectorizer, corpus_vectors):
    ranked = rank(vectorizer.transform("delhi physics"), corpus_vectors, [1, 2, 3], 3)

    assert [position for position, _ in ranked] == [0, 2, 1]
    scores = [score for _, score in ranked]
    assert scores == sorted(scores, reverse=True)
    assert scores[-1] == 0.0


def test_rank_breaks_ties_by_ascending_id(vectorizer):
    texts = ["delhi physics", "mumbai history", "delhi physics"]
    vectors = [vectorizer.transform(t) for t in texts]
    index = CorpusIndex(vectors, [9, 4, 2])

    ranked = index.rank(vectorizer.transform("physics"), 3)

    # positions 0 and 2 tie; id 2 (position 2) comes first
    assert [position for position, _ in ranked] == [2, 0, 1]


def test_zero_query_ranks_everything_by_id(vectorizer, corpus_vectors):
    index = CorpusIndex(corpus_vectors, [30, 10, 20])
    ranked = index.rank(vectorizer.transform(""), 3)

    assert [position for position, _ in ranked] == [1, 2, 0]
    assert all(score == 0.0 for _, score in ranked)


def test_top_k_bounds(vectorizer, corpus_vectors):
    index = CorpusIndex(corpus_vectors, [1, 2, 3])
    query = vectorizer.transform("delhi")

    assert len(index.rank(query, 1)) == 1
    assert len(index.rank(query, 100)) == 3
    assert index.rank(query, 0) == []
    with pytest.raises(ValueError):
        index.rank(query, -1)


def test_index_requires_matching_ids(corpus_vectors):
    with pytest.raises(ValueError):
        CorpusIndex(corpus_vectors, [1, 2])
    with pytest.raises(ValueError):
        CorpusIndex([], [])
