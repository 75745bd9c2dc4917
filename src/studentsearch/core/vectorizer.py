"""TF-IDF vectorization of texts against a fitted vocabulary."""

from __future__ import annotations

from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import List, Sequence

import numpy as np
from tqdm import tqdm

from studentsearch.core.text import tokenize
from studentsearch.core.vocabulary import Vocabulary
from studentsearch.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, eq=False)
class FeatureVector:
    """Weighted term vector scoped to the vocabulary that produced it.

    Attributes:
        values: Read-only float64 array of length ``vocabulary.size``
        vocabulary: Vocabulary instance the vector was computed with
        norm: Euclidean magnitude of ``values``
    """

    values: np.ndarray
    vocabulary: Vocabulary
    norm: float = field(init=False)

    def __post_init__(self) -> None:
        values = np.asarray(self.values, dtype=np.float64)
        if values.ndim != 1 or values.shape[0] != self.vocabulary.size:
            raise ValueError(
                f"Feature vector length {values.shape} does not match vocabulary size {self.vocabulary.size}"
            )
        values.setflags(write=False)
        object.__setattr__(self, "values", values)
        object.__setattr__(self, "norm", float(np.linalg.norm(values)))

    @property
    def is_zero(self) -> bool:
        """True when no in-vocabulary term contributed any weight."""
        return self.norm == 0.0

    def __len__(self) -> int:
        return self.values.shape[0]

    def __repr__(self) -> str:
        return f"FeatureVector(size={len(self)}, nonzero={int(np.count_nonzero(self.values))}, norm={self.norm:.4f})"


class Vectorizer:
    """Stateless transform from text to FeatureVector for one vocabulary."""

    def __init__(self, vocabulary: Vocabulary):
        self.vocabulary = vocabulary

    def transform(self, text: str) -> FeatureVector:
        """Vectorize a text with raw term frequency times idf.

        Out-of-vocabulary tokens are ignored.

        Args:
            text: Corpus text or free-text query

        Returns:
            FeatureVector of length ``vocabulary.size``
        """
        values = np.zeros(self.vocabulary.size, dtype=np.float64)
        idf = self.vocabulary.idf_weights

        for term, count in Counter(tokenize(text)).items():
            index = self.vocabulary.index_of(term)
            if index is not None:
                values[index] = count * idf[index]

        return FeatureVector(values, self.vocabulary)

    def transform_many(
        self,
        texts: Sequence[str],
        workers: int = 1,
        show_progress: bool = False,
    ) -> List[FeatureVector]:
        """Vectorize many texts, preserving input order.

        Args:
            texts: Texts to vectorize
            workers: Thread count; values above 1 transform in parallel
            show_progress: Show a tqdm progress bar

        Returns:
            One FeatureVector per text, in input order
        """
        progress = tqdm(
            total=len(texts), desc="Featurizing", unit="doc", disable=not show_progress
        )
        try:
            if workers > 1:
                logger.debug(f"Featurizing {len(texts)} texts on {workers} threads")
                with ThreadPoolExecutor(max_workers=workers) as pool:
                    vectors = []
                    for vector in pool.map(self.transform, texts):
                        vectors.append(vector)
                        progress.update(1)
                    return vectors

            vectors = []
            for text in texts:
                vectors.append(self.transform(text))
                progress.update(1)
            return vectors
        finally:
            progress.close()


def transform(text: str, vocabulary: Vocabulary) -> FeatureVector:
    """Vectorize a single text against ``vocabulary``."""
    return Vectorizer(vocabulary).transform(text)
