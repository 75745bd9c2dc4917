"""Tests for TF-IDF vectorization."""

import numpy as np
import pytest

from studentsearch.core.vectorizer import FeatureVector, Vectorizer, transform
from studentsearch.core.vocabulary import Vocabulary

CORPUS = [
    "alice delhi dps physics gradea",
    "bob mumbai xyz history gradec",
    "carol delhi dps biology gradeb",
]


@pytest.fixture
def vocab():
    return Vocabulary.fit(CORPUS)


def test_vector_length_matches_vocabulary(vocab):
    vectorizer = Vectorizer(vocab)
    for text in CORPUS + ["", "completely unknown words"]:
        assert len(vectorizer.transform(text)) == vocab.size


def test_weights_are_term_frequency_times_idf(vocab):
    vector = transform("Physics physics DELHI", vocab)

    assert vector.values[vocab.index_of("physics")] == pytest.approx(2 * vocab.idf("physics"))
    assert vector.values[vocab.index_of("delhi")] == pytest.approx(vocab.idf("delhi"))
    assert np.count_nonzero(vector.values) == 2


def test_out_of_vocabulary_tokens_are_ignored(vocab):
    vector = transform("chennai pune", vocab)

    assert vector.is_zero
    assert vector.norm == 0.0
    assert not np.any(vector.values)


def test_vector_is_scoped_and_read_only(vocab):
    vector = transform("delhi", vocab)

    assert vector.vocabulary is vocab
    with pytest.raises(ValueError):
        vector.values[0] = 1.0


def test_wrong_length_is_rejected(vocab):
    with pytest.raises(ValueError):
        FeatureVector(np.zeros(vocab.size + 1), vocab)


def test_transform_is_deterministic(vocab):
    first = transform("dps delhi physics", vocab)
    second = transform("physics delhi dps", vocab)
    np.testing.assert_array_equal(first.values, second.values)


def test_transform_many_preserves_order_with_threads(vocab):
    vectorizer = Vectorizer(vocab)
    texts = CORPUS * 10

    serial = vectorizer.transform_many(texts)
    parallel = vectorizer.transform_many(texts, workers=4)

    assert len(parallel) == len(texts)
    for a, b in zip(serial, parallel):
        np.testing.assert_array_equal(a.values, b.values)
