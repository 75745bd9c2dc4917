"""Output formatting utilities for CLI."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Sequence

import click

from studentsearch.core.ranker import SearchResult
from studentsearch.core.records import StudentRecord
from studentsearch.utils.display import relevance_percent


class OutputFormatter:
    """Format output for CLI display.

    Example:
        >>> out = OutputFormatter()
        >>> out.success("Loaded 100 students")
        >>> out.records(engine.search_passed(10))
    """

    @staticmethod
    def success(message: str) -> None:
        click.echo(f"✓ {message}")

    @staticmethod
    def error(message: str, abort: bool = False) -> None:
        """Display error message, optionally aborting the command."""
        click.echo(f"❌ {message}", err=True)
        if abort:
            raise click.Abort()

    @staticmethod
    def warning(message: str) -> None:
        click.echo(f"⚠️  {message}")

    @staticmethod
    def info(message: str) -> None:
        click.echo(f"ℹ️  {message}")

    @staticmethod
    def section(title: str) -> None:
        click.echo(f"\n{title}")

    @staticmethod
    def stats(stats_dict: Dict[str, Any], indent: str = "   ") -> None:
        """Display a dictionary in key: value lines, nesting one level deep."""
        for key, value in stats_dict.items():
            if isinstance(value, dict):
                click.echo(f"{indent}{key}:")
                OutputFormatter.stats(value, indent=indent + "   ")
            else:
                click.echo(f"{indent}{key}: {value}")

    @staticmethod
    def records(
        records: Sequence[StudentRecord],
        scores: Optional[Sequence[float]] = None,
    ) -> None:
        """Display records as a fixed-width table.

        Args:
            records: Records to display
            scores: Optional similarity per record, shown as a Relevance column
        """
        header = f"{'ID':>5}  {'Name':<24} {'School':<32} {'Subject':<24} {'Grade':<5}"
        if scores is not None:
            header += f" {'Relevance':>9}"
        click.echo(header)
        click.echo("-" * len(header))

        for i, record in enumerate(records):
            line = (
                f"{record.id:>5}  {record.name[:24]:<24} {record.school[:32]:<32} "
                f"{record.subject[:24]:<24} {record.grade:<5}"
            )
            if scores is not None:
                line += f" {relevance_percent(scores[i]):>9}"
            click.echo(line)

    @staticmethod
    def search_results(results: Sequence[SearchResult]) -> None:
        OutputFormatter.records(
            [r.record for r in results], scores=[r.score for r in results]
        )

    @staticmethod
    def json_records(records: Sequence[StudentRecord], **extra: Any) -> None:
        """Echo records as a JSON document with optional top-level fields."""
        payload = {**extra, "count": len(records), "results": [r.to_dict() for r in records]}
        click.echo(json.dumps(payload, indent=2, ensure_ascii=False))

    @staticmethod
    def json_search_results(results: Sequence[SearchResult], **extra: Any) -> None:
        items: List[Dict[str, Any]] = [
            {"rank": r.rank, "score": r.score, **r.record.to_dict()} for r in results
        ]
        payload = {**extra, "count": len(items), "results": items}
        click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
