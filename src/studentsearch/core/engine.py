"""Student search engine: TF-IDF relevance ranking with categorical filters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence

from studentsearch.core.exceptions import EmptyCorpusError, UninitializedEngineError
from studentsearch.core.ranker import CorpusIndex, SearchResult
from studentsearch.core.records import StudentRecord
from studentsearch.core.text import canonicalize
from studentsearch.core.vectorizer import Vectorizer
from studentsearch.core.vocabulary import Vocabulary
from studentsearch.utils.logging import get_logger
from studentsearch.utils.timing import TimingContext, get_latency_tracker, timed

logger = get_logger(__name__)

DEFAULT_OVERSAMPLE_FACTOR = 3


@dataclass(frozen=True)
class _EngineState:
    """Everything a search reads; replaced as a whole on initialize."""

    records: tuple
    vectorizer: Vectorizer
    index: CorpusIndex


def _check_limit(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


class StudentSearchEngine:
    """Search engine over an in-memory student collection.

    The vocabulary and all corpus vectors are built once by
    :meth:`initialize` and never mutated afterwards, so searches may run
    concurrently from several threads.

    Example:
        >>> engine = StudentSearchEngine()
        >>> engine.initialize(records)
        >>> for hit in engine.semantic_search("physics delhi", top_k=5):
        ...     print(hit.record.name, hit.score)
    """

    def __init__(
        self,
        oversample_factor: int = DEFAULT_OVERSAMPLE_FACTOR,
        workers: int = 1,
        show_progress: bool = False,
    ):
        """Initialize engine settings; no corpus is loaded yet.

        Args:
            oversample_factor: Ranked candidates requested per wanted result
                in filtered search
            workers: Threads used to featurize the corpus
            show_progress: Show a progress bar while featurizing
        """
        if oversample_factor < 1:
            raise ValueError(f"oversample_factor must be >= 1, got {oversample_factor}")

        self.oversample_factor = oversample_factor
        self.workers = max(1, workers)
        self.show_progress = show_progress
        self._state: Optional[_EngineState] = None

    @timed("engine.initialize", log_level="info")
    def initialize(self, records: Sequence[StudentRecord]) -> None:
        """Fit the vocabulary and featurize every record.

        The previous state, if any, stays in place until the new one is
        completely built.

        Args:
            records: Collection in stable storage order, with unique ids

        Raises:
            EmptyCorpusError: If ``records`` is empty
            ValueError: If record ids are not unique
        """
        records = tuple(records)
        if not records:
            raise EmptyCorpusError("Cannot initialize search engine with no records")

        seen = set()
        for record in records:
            if record.id in seen:
                raise ValueError(f"Duplicate record id: {record.id}")
            seen.add(record.id)

        logger.info(f"Initializing search engine with {len(records)} records")
        texts = [canonicalize(record) for record in records]

        with TimingContext("engine.fit_vocabulary"):
            vocabulary = Vocabulary.fit(texts)

        vectorizer = Vectorizer(vocabulary)
        with TimingContext("engine.featurize_corpus"):
            vectors = vectorizer.transform_many(
                texts, workers=self.workers, show_progress=self.show_progress
            )

        index = CorpusIndex(vectors, [record.id for record in records])
        self._state = _EngineState(records=records, vectorizer=vectorizer, index=index)
        logger.info(
            f"Search engine ready: {len(records)} records, vocabulary size {vocabulary.size}"
        )

    @property
    def is_initialized(self) -> bool:
        return self._state is not None

    @property
    def vocabulary(self) -> Vocabulary:
        return self._require_state().vectorizer.vocabulary

    def _require_state(self) -> _EngineState:
        state = self._state
        if state is None:
            raise UninitializedEngineError()
        return state

    @timed("engine.semantic_search")
    def semantic_search(self, query: str, top_k: int = 10) -> List[SearchResult]:
        """Rank records by TF-IDF cosine similarity to a free-text query.

        Args:
            query: Free-text query
            top_k: Maximum number of results

        Returns:
            SearchResult list, best first; ties ordered by ascending id
        """
        _check_limit("top_k", top_k)
        state = self._require_state()
        logger.debug(f"Semantic search for: '{query}' (top_k={top_k})")

        return self._rank(state, query, top_k)

    @staticmethod
    def _rank(state: _EngineState, query: str, top_k: int) -> List[SearchResult]:
        query_vector = state.vectorizer.transform(query)
        ranked = state.index.rank(query_vector, min(top_k, len(state.records)))
        return [
            SearchResult(record=state.records[position], score=score, rank=rank)
            for rank, (position, score) in enumerate(ranked, start=1)
        ]

    @timed("engine.search_with_filters")
    def search_with_filters(
        self,
        query: str,
        passed_filter: Optional[bool] = None,
        category_filter: Optional[bool] = None,
        max_results: int = 20,
    ) -> List[StudentRecord]:
        """Relevance search narrowed by grade outcome and science subjects.

        A blank query skips ranking and uses every record in storage order.
        Otherwise ``max_results * oversample_factor`` ranked candidates are
        filtered, so a selective filter may return fewer than
        ``max_results`` records even if more matches exist further down.

        Args:
            query: Free-text query, may be blank
            passed_filter: True keeps grades A/B, False keeps C/D/F, None keeps all
            category_filter: True keeps science subjects only
            max_results: Maximum number of records returned

        Returns:
            Matching records in rank order
        """
        _check_limit("max_results", max_results)
        state = self._require_state()

        if not query or not query.strip():
            candidates = list(state.records)
        else:
            width = min(max_results * self.oversample_factor, len(state.records))
            candidates = [hit.record for hit in self._rank(state, query, width)]

        if passed_filter is not None:
            candidates = [r for r in candidates if r.is_passed() == passed_filter]

        if category_filter:
            candidates = [r for r in candidates if r.has_science()]

        logger.debug(
            f"Filtered search '{query}' (passed={passed_filter}, science={category_filter}) "
            f"kept {len(candidates)} candidates"
        )
        return candidates[:max_results]

    def _scan(
        self, predicate: Callable[[StudentRecord], bool], max_results: int
    ) -> List[StudentRecord]:
        _check_limit("max_results", max_results)
        results = []
        if max_results == 0:
            return results
        for record in self._require_state().records:
            if predicate(record):
                results.append(record)
                if len(results) >= max_results:
                    break
        return results

    @timed("engine.search_passed")
    def search_passed(self, max_results: int = 20) -> List[StudentRecord]:
        """First ``max_results`` records with grade A or B, in storage order."""
        return self._scan(lambda r: r.is_passed(), max_results)

    @timed("engine.search_failed")
    def search_failed(self, max_results: int = 20) -> List[StudentRecord]:
        """First ``max_results`` records with grade C, D or F, in storage order."""
        return self._scan(lambda r: not r.is_passed(), max_results)

    @timed("engine.search_science")
    def search_science(self, max_results: int = 20) -> List[StudentRecord]:
        """First ``max_results`` records studying a science subject, in storage order."""
        return self._scan(lambda r: r.has_science(), max_results)

    def get_all(self, max_results: Optional[int] = None) -> List[StudentRecord]:
        """Records in storage order, optionally truncated."""
        records = self._require_state().records
        if max_results is None:
            return list(records)
        _check_limit("max_results", max_results)
        return list(records[:max_results])

    def record_count(self) -> int:
        """Number of records in the collection (0 before initialization)."""
        state = self._state
        return len(state.records) if state is not None else 0

    def get_stats(self) -> Dict[str, Any]:
        """Engine statistics.

        Returns:
            Dict with record count, vocabulary size and latency figures
        """
        state = self._state
        stats: Dict[str, Any] = {
            "initialized": state is not None,
            "total_records": self.record_count(),
            "vocabulary_size": state.vectorizer.vocabulary.size if state else 0,
            "oversample_factor": self.oversample_factor,
        }
        if state is not None:
            stats["passed_records"] = sum(1 for r in state.records if r.is_passed())
            stats["science_records"] = sum(1 for r in state.records if r.has_science())
        stats["latency"] = get_latency_tracker().get_stats()
        return stats

    def __repr__(self) -> str:
        if self._state is None:
            return "StudentSearchEngine(uninitialized)"
        return (
            f"StudentSearchEngine(records={self.record_count()}, "
            f"vocabulary={self._state.vectorizer.vocabulary.size})"
        )
