"""Core search modules for StudentSearch."""

from studentsearch.core.context import SearchContext
from studentsearch.core.engine import StudentSearchEngine
from studentsearch.core.exceptions import (
    DimensionMismatchError,
    EmptyCorpusError,
    StudentSearchError,
    UninitializedEngineError,
    VocabularyMismatchError,
)
from studentsearch.core.ranker import CorpusIndex, SearchResult, cosine_similarity, rank
from studentsearch.core.records import (
    GRADES,
    SCIENCE_KEYWORDS,
    StudentRecord,
)
from studentsearch.core.text import canonicalize, tokenize
from studentsearch.core.vectorizer import FeatureVector, Vectorizer, transform
from studentsearch.core.vocabulary import Vocabulary

__all__ = [
    # Records
    "GRADES",
    "SCIENCE_KEYWORDS",
    "StudentRecord",
    # Featurization
    "canonicalize",
    "tokenize",
    "Vocabulary",
    "FeatureVector",
    "Vectorizer",
    "transform",
    # Ranking
    "CorpusIndex",
    "SearchResult",
    "cosine_similarity",
    "rank",
    # Engine
    "SearchContext",
    "StudentSearchEngine",
    # Errors
    "StudentSearchError",
    "EmptyCorpusError",
    "UninitializedEngineError",
    "VocabularyMismatchError",
    "DimensionMismatchError",
]
