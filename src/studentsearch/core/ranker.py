"""Cosine similarity and deterministic top-K ranking."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

from studentsearch.core.exceptions import (
    DimensionMismatchError,
    VocabularyMismatchError,
)
from studentsearch.core.records import StudentRecord
from studentsearch.core.vectorizer import FeatureVector
from studentsearch.core.vocabulary import Vocabulary


@dataclass(frozen=True)
class SearchResult:
    """Ranked search hit.

    Attributes:
        record: Matched student record
        score: Cosine similarity in [0, 1]
        rank: Result rank (1-indexed)
    """

    record: StudentRecord
    score: float
    rank: int

    def __repr__(self) -> str:
        return f"SearchResult(rank={self.rank}, id={self.record.id}, score={self.score:.4f})"


def _check_compatible(a: FeatureVector, b: FeatureVector) -> None:
    if a.vocabulary is not b.vocabulary:
        raise VocabularyMismatchError(
            "Cannot compare feature vectors produced by different vocabularies"
        )
    if len(a) != len(b):
        raise DimensionMismatchError(len(a), len(b))


def cosine_similarity(a: FeatureVector, b: FeatureVector) -> float:
    """Cosine similarity of two vectors from the same vocabulary.

    Returns 0.0 when either vector has zero magnitude.

    Raises:
        VocabularyMismatchError: If the vectors come from different vocabularies
        DimensionMismatchError: If the vectors differ in length
    """
    _check_compatible(a, b)

    if a.norm == 0.0 or b.norm == 0.0:
        return 0.0

    similarity = float(np.dot(a.values, b.values)) / (a.norm * b.norm)
    return min(1.0, max(-1.0, similarity))


class CorpusIndex:
    """Cached corpus vectors stacked into a matrix for ranking.

    Positions in the index follow the order of the vectors it was built
    from; ``ids`` carries the record id at each position for tie-breaks.
    """

    def __init__(self, vectors: Sequence[FeatureVector], ids: Sequence[int]):
        """Build the index.

        Args:
            vectors: Corpus vectors, all from one vocabulary
            ids: Record id for each vector

        Raises:
            ValueError: If vectors and ids differ in length or vectors is empty
            VocabularyMismatchError: If vectors come from different vocabularies
        """
        if len(vectors) != len(ids):
            raise ValueError(f"Got {len(vectors)} vectors but {len(ids)} ids")
        if not vectors:
            raise ValueError("Cannot build a corpus index without vectors")

        self.vocabulary: Vocabulary = vectors[0].vocabulary
        for vector in vectors:
            if vector.vocabulary is not self.vocabulary:
                raise VocabularyMismatchError(
                    "All corpus vectors must come from the same vocabulary"
                )

        self._vectors = tuple(vectors)
        self._ids = np.asarray(ids, dtype=np.int64)
        self._matrix = np.vstack([vector.values for vector in vectors])
        self._norms = np.array([vector.norm for vector in vectors], dtype=np.float64)
        for array in (self._ids, self._matrix, self._norms):
            array.setflags(write=False)

    @property
    def dimension(self) -> int:
        return self.vocabulary.size

    def vector(self, position: int) -> FeatureVector:
        return self._vectors[position]

    def similarities(self, query: FeatureVector) -> np.ndarray:
        """Cosine similarity of the query against every corpus vector.

        Raises:
            VocabularyMismatchError: If the query comes from another vocabulary
        """
        if query.vocabulary is not self.vocabulary:
            raise VocabularyMismatchError(
                "Query vector was produced by a different vocabulary than the corpus"
            )
        if len(query) != self.dimension:
            raise DimensionMismatchError(len(query), self.dimension)

        scores = np.zeros(len(self._vectors), dtype=np.float64)
        if query.norm == 0.0:
            return scores

        denominators = self._norms * query.norm
        np.divide(
            self._matrix @ query.values,
            denominators,
            out=scores,
            where=denominators > 0,
        )
        return np.clip(scores, -1.0, 1.0)

    def rank(self, query: FeatureVector, top_k: int) -> List[Tuple[int, float]]:
        """Top-K corpus positions by descending similarity.

        Equal scores are ordered by ascending record id. ``top_k`` larger
        than the corpus returns every position.

        Args:
            query: Query vector from this index's vocabulary
            top_k: Maximum number of results

        Returns:
            List of (position, score) pairs
        """
        if top_k < 0:
            raise ValueError(f"top_k must be non-negative, got {top_k}")
        if top_k == 0:
            return []

        scores = self.similarities(query)
        # lexsort sorts by the last key first
        order = np.lexsort((self._ids, -scores))[:top_k]
        return [(int(position), float(scores[position])) for position in order]

    def __len__(self) -> int:
        return len(self._vectors)

    def __repr__(self) -> str:
        return f"CorpusIndex(documents={len(self)}, dimension={self.dimension})"


def rank(
    query: FeatureVector,
    corpus_vectors: Sequence[FeatureVector],
    ids: Sequence[int],
    top_k: int,
) -> List[Tuple[int, float]]:
    """Rank corpus vectors against a query without keeping an index around."""
    return CorpusIndex(corpus_vectors, ids).rank(query, top_k)
