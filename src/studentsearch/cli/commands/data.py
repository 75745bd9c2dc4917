"""Collection commands: sample generation and statistics."""

from __future__ import annotations

import json

import click

from studentsearch.cli.decorators import handle_errors, with_output_format, with_records_file
from studentsearch.cli.loaders import load_context
from studentsearch.cli.output import OutputFormatter
from studentsearch.data import generate_sample_students, save_records_csv

out = OutputFormatter()


@click.command(name="generate")
@click.option(
    "--count",
    "-c",
    type=click.IntRange(min=1),
    default=100,
    show_default=True,
    help="Number of students to generate",
)
@click.option("--seed", type=int, default=42, show_default=True, help="Random seed")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    required=True,
    help="CSV file to write",
)
@handle_errors
def generate_cmd(count, seed, output):
    """Write a reproducible sample collection to a CSV file.

    \b
    Examples:
        studentsearch generate -o data/students.csv
        studentsearch generate --count 500 --seed 7 -o data/students.csv
    """
    students = generate_sample_students(count, seed=seed)
    path = save_records_csv(students, output)
    out.success(f"Wrote {len(students)} students to {path}")


@click.command(name="stats")
@with_records_file
@with_output_format
@handle_errors
@click.pass_context
def stats_cmd(ctx, records_path, output_format):
    """Show collection, vocabulary and latency statistics."""
    search_context = load_context(ctx, records_path)
    stats = {"source": search_context.source, **search_context.engine.get_stats()}

    if output_format == "json":
        click.echo(json.dumps(stats, indent=2))
        return

    out.section("Search engine statistics:")
    out.stats(stats)
