"""Latency tracking for engine operations."""

import functools
import time
from collections import defaultdict
from contextlib import contextmanager
from dataclasses import dataclass, field
from threading import Lock
from typing import Any, Callable, Dict, List, Optional

from studentsearch.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class TimingStat:
    """Running statistics for one named operation."""

    count: int = 0
    total_ms: float = 0.0
    min_ms: float = float("inf")
    max_ms: float = 0.0
    samples: List[float] = field(default_factory=list)

    def add(self, duration_ms: float) -> None:
        self.count += 1
        self.total_ms += duration_ms
        self.min_ms = min(self.min_ms, duration_ms)
        self.max_ms = max(self.max_ms, duration_ms)
        self.samples.append(duration_ms)

    @property
    def mean_ms(self) -> float:
        return self.total_ms / self.count if self.count > 0 else 0.0

    def percentile(self, p: float) -> float:
        """Nearest-rank percentile over the retained samples (p in [0, 100])."""
        if not self.samples:
            return 0.0
        ordered = sorted(self.samples)
        idx = min(int(len(ordered) * p / 100), len(ordered) - 1)
        return ordered[idx]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "count": self.count,
            "mean_ms": round(self.mean_ms, 3),
            "min_ms": round(self.min_ms, 3) if self.count else 0.0,
            "max_ms": round(self.max_ms, 3),
            "p50_ms": round(self.percentile(50), 3),
            "p95_ms": round(self.percentile(95), 3),
        }


class LatencyTracker:
    """Thread-safe collection of TimingStat keyed by operation name."""

    def __init__(self, window_size: Optional[int] = None):
        """
        Args:
            window_size: Maximum samples kept per operation (None keeps all)
        """
        self._stats: Dict[str, TimingStat] = defaultdict(TimingStat)
        self._lock = Lock()
        self._window_size = window_size

    def record(self, operation: str, duration_ms: float) -> None:
        with self._lock:
            stat = self._stats[operation]
            stat.add(duration_ms)
            if self._window_size and len(stat.samples) > self._window_size:
                stat.samples = stat.samples[-self._window_size :]

    def get_stats(self, operation: Optional[str] = None) -> Dict[str, Any]:
        with self._lock:
            if operation:
                stat = self._stats.get(operation)
                return {operation: stat.to_dict()} if stat else {}
            return {op: stat.to_dict() for op, stat in self._stats.items()}

    def reset(self) -> None:
        with self._lock:
            self._stats.clear()


_global_tracker = LatencyTracker(window_size=10000)


def get_latency_tracker() -> LatencyTracker:
    """Get the process-wide latency tracker."""
    return _global_tracker


def _finish(operation: str, start: float, log_level: str) -> None:
    duration_ms = (time.perf_counter() - start) * 1000
    _global_tracker.record(operation, duration_ms)
    log_fn = getattr(logger, log_level, logger.debug)
    log_fn(f"{operation} completed in {duration_ms:.3f}ms")


@contextmanager
def TimingContext(operation: str, log_level: str = "debug"):
    """Time a block of code.

    Example:
        with TimingContext("corpus_featurization"):
            vectors = vectorizer.transform_many(texts)
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        _finish(operation, start, log_level)


def timed(operation: Optional[str] = None, log_level: str = "debug"):
    """Decorator recording the wall time of every call.

    Example:
        @timed("engine.semantic_search")
        def semantic_search(self, query, top_k=10):
            ...
    """

    def decorator(func: Callable) -> Callable:
        op_name = operation or f"{func.__module__}.{func.__qualname__}"

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                _finish(op_name, start, log_level)

        return wrapper

    return decorator
