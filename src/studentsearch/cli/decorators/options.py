"""Common CLI option decorators."""

from __future__ import annotations

import click


def with_records_file(f):
    """Add --records option (CSV collection; default from config or sample data)."""
    return click.option(
        "--records",
        "-r",
        "records_path",
        type=click.Path(exists=True, dir_okay=False),
        help="CSV file with id,name,address,school,subject,grade columns",
    )(f)


def with_output_format(f):
    """Add --format option."""
    return click.option(
        "--format",
        "-f",
        "output_format",
        type=click.Choice(["text", "json"], case_sensitive=False),
        default="text",
        help="Output format",
    )(f)


def with_max_results(f):
    """Add --max-results option (default from config search.max_results)."""
    return click.option(
        "--max-results",
        "-n",
        type=click.IntRange(min=0),
        default=None,
        help="Maximum number of records to return (default: from config or 50)",
    )(f)
