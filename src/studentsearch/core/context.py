"""Explicit holder for a record collection and the engine built over it."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from studentsearch.core.engine import DEFAULT_OVERSAMPLE_FACTOR, StudentSearchEngine
from studentsearch.core.records import StudentRecord
from studentsearch.utils.config import Config, get_config
from studentsearch.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class SearchContext:
    """A ready-to-query collection.

    Built once by the caller (CLI, API, tests) and passed to whatever needs
    to search; there is no module-level engine.
    """

    records: tuple
    engine: StudentSearchEngine
    source: str = "memory"

    @classmethod
    def from_records(
        cls,
        records: Sequence[StudentRecord],
        oversample_factor: int = DEFAULT_OVERSAMPLE_FACTOR,
        workers: int = 1,
        show_progress: bool = False,
        source: str = "memory",
    ) -> SearchContext:
        """Initialize an engine over ``records``.

        Raises:
            EmptyCorpusError: If ``records`` is empty
        """
        records = tuple(records)
        engine = StudentSearchEngine(
            oversample_factor=oversample_factor,
            workers=workers,
            show_progress=show_progress,
        )
        engine.initialize(records)
        return cls(records=records, engine=engine, source=source)

    @classmethod
    def from_config(
        cls,
        config: Optional[Config] = None,
        records_path: Optional[str | Path] = None,
    ) -> SearchContext:
        """Build a context from configuration.

        Records come from ``records_path`` or ``data.records_path`` (CSV) when
        set, otherwise from the deterministic sample generator.

        Args:
            config: Configuration (uses global config if None)
            records_path: CSV file overriding the configured one

        Returns:
            SearchContext instance
        """
        from studentsearch.data import generate_sample_students, load_records_csv

        if config is None:
            config = get_config()

        records_path = records_path or config.get("data.records_path")
        if records_path:
            records = load_records_csv(records_path)
            source = str(records_path)
        else:
            size = int(config.get("data.sample_size", 100))
            seed = int(config.get("data.sample_seed", 42))
            logger.info(f"No records file configured, generating {size} sample students")
            records = generate_sample_students(size, seed=seed)
            source = f"sample(size={size}, seed={seed})"

        return cls.from_records(
            records,
            oversample_factor=int(
                config.get("search.oversample_factor", DEFAULT_OVERSAMPLE_FACTOR)
            ),
            workers=int(config.get("search.workers", 1)),
            show_progress=bool(config.get("search.show_progress", False)),
            source=source,
        )

    def record_count(self) -> int:
        return self.engine.record_count()
