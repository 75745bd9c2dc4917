"""Vocabulary model: term indices and smoothed inverse document frequencies."""

from __future__ import annotations

import math
from collections import Counter
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Sequence

import numpy as np

from studentsearch.core.exceptions import EmptyCorpusError
from studentsearch.core.text import tokenize
from studentsearch.utils.logging import get_logger

logger = get_logger(__name__)


class Vocabulary:
    """Fitted term -> (index, idf) model.

    Terms are indexed in lexicographic order, so two fits over the same
    corpus always yield the same assignment regardless of document order.
    A Vocabulary is read-only once built; use :meth:`fit` to create one.

    Attributes:
        document_count: Number of corpus documents seen during the fit
        size: Number of distinct terms
    """

    def __init__(
        self,
        terms: Sequence[str],
        document_frequencies: Mapping[str, int],
        document_count: int,
    ):
        """Build a vocabulary from precomputed statistics.

        Args:
            terms: Distinct terms, already sorted
            document_frequencies: Number of documents containing each term
            document_count: Corpus size N
        """
        if document_count <= 0:
            raise EmptyCorpusError()

        self._terms: tuple = tuple(terms)
        self._index: Dict[str, int] = {term: i for i, term in enumerate(self._terms)}
        self._document_frequencies: Dict[str, int] = {
            term: int(document_frequencies[term]) for term in self._terms
        }
        self.document_count = document_count

        idf = np.empty(len(self._terms), dtype=np.float64)
        for i, term in enumerate(self._terms):
            df = self._document_frequencies[term]
            idf[i] = math.log((1 + document_count) / (1 + df)) + 1.0
        idf.setflags(write=False)
        self._idf = idf

    @classmethod
    def fit(cls, corpus_texts: Iterable[str]) -> Vocabulary:
        """Fit a vocabulary over a corpus of texts.

        Args:
            corpus_texts: One text per document

        Returns:
            Fitted Vocabulary

        Raises:
            EmptyCorpusError: If the corpus holds no documents

        Example:
            >>> vocab = Vocabulary.fit(["alice delhi physics", "bob mumbai history"])
            >>> vocab.index_of("delhi")
            2
        """
        document_frequencies: Counter = Counter()
        document_count = 0

        for text in corpus_texts:
            document_count += 1
            document_frequencies.update(set(tokenize(text)))

        if document_count == 0:
            raise EmptyCorpusError()

        terms = sorted(document_frequencies)
        logger.debug(f"Fitted vocabulary: {len(terms)} terms over {document_count} documents")
        return cls(terms, document_frequencies, document_count)

    @property
    def size(self) -> int:
        return len(self._terms)

    @property
    def terms(self) -> tuple:
        """All terms, in index order."""
        return self._terms

    @property
    def idf_weights(self) -> np.ndarray:
        """Read-only idf array aligned with term indices."""
        return self._idf

    def index_of(self, term: str) -> Optional[int]:
        """Index of a term, or None if it is out of vocabulary."""
        return self._index.get(term)

    def idf(self, term: str) -> float:
        """Inverse document frequency of a term.

        Raises:
            KeyError: If the term is not in the vocabulary
        """
        return float(self._idf[self._index[term]])

    def document_frequency(self, term: str) -> int:
        return self._document_frequencies[term]

    def term_mapping(self) -> Dict[str, int]:
        """Copy of the term -> index mapping."""
        return dict(self._index)

    def most_common(self, n: int = 10) -> List[tuple]:
        """Terms with the highest document frequency, ties broken by term."""
        ranked = sorted(
            self._document_frequencies.items(), key=lambda item: (-item[1], item[0])
        )
        return ranked[:n]

    def __contains__(self, term: object) -> bool:
        return term in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __repr__(self) -> str:
        return f"Vocabulary(size={self.size}, documents={self.document_count})"
