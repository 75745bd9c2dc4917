"""StudentSearch - TF-IDF relevance search over student records."""

__version__ = "0.1.0"

# Core modules
from studentsearch.core import (
    CorpusIndex,
    EmptyCorpusError,
    FeatureVector,
    SearchContext,
    SearchResult,
    StudentRecord,
    StudentSearchEngine,
    StudentSearchError,
    UninitializedEngineError,
    Vectorizer,
    Vocabulary,
    canonicalize,
    cosine_similarity,
)

# Record providers
from studentsearch.data import (
    generate_sample_students,
    load_records_csv,
    save_records_csv,
)

# Utils
from studentsearch.utils.config import Config, get_config, load_config

__all__ = [
    # Version
    "__version__",
    # Core
    "StudentRecord",
    "StudentSearchEngine",
    "SearchContext",
    "SearchResult",
    "Vocabulary",
    "Vectorizer",
    "FeatureVector",
    "CorpusIndex",
    "canonicalize",
    "cosine_similarity",
    # Errors
    "StudentSearchError",
    "EmptyCorpusError",
    "UninitializedEngineError",
    # Data
    "generate_sample_students",
    "load_records_csv",
    "save_records_csv",
    # Config
    "Config",
    "get_config",
    "load_config",
]
