"""Non-ranked listing commands: all, passed, failed and science students."""

from __future__ import annotations

import click

from studentsearch.cli.decorators import (
    handle_errors,
    with_max_results,
    with_output_format,
    with_records_file,
)
from studentsearch.cli.loaders import config_default, load_context
from studentsearch.cli.output import OutputFormatter

out = OutputFormatter()


def _show(records, output_format, summary, **extra):
    if output_format == "json":
        out.json_records(records, **extra)
        return
    if not records:
        out.warning("No students found")
        return
    out.records(records)
    out.success(summary.format(count=len(records)))


@click.command(name="list")
@with_max_results
@with_records_file
@with_output_format
@handle_errors
@click.pass_context
def list_cmd(ctx, max_results, records_path, output_format):
    """Show students in storage order (all of them unless --max-results)."""
    search_context = load_context(ctx, records_path)
    records = search_context.engine.get_all(max_results)
    _show(records, output_format, "Showing {count} students", filter="all")


@click.command(name="passed")
@with_max_results
@with_records_file
@with_output_format
@handle_errors
@click.pass_context
def passed_cmd(ctx, max_results, records_path, output_format):
    """Show students with passing grades (A or B)."""
    if max_results is None:
        max_results = config_default(ctx, "search.max_results", 50)
    records = load_context(ctx, records_path).engine.search_passed(max_results)
    _show(
        records,
        output_format,
        "Found {count} students with passing grades (A or B)",
        filter="passed",
    )


@click.command(name="failed")
@with_max_results
@with_records_file
@with_output_format
@handle_errors
@click.pass_context
def failed_cmd(ctx, max_results, records_path, output_format):
    """Show students with failing grades (C, D or F)."""
    if max_results is None:
        max_results = config_default(ctx, "search.max_results", 50)
    records = load_context(ctx, records_path).engine.search_failed(max_results)
    _show(
        records,
        output_format,
        "Found {count} students with failing grades (C, D, or F)",
        filter="failed",
    )


@click.command(name="science")
@with_max_results
@with_records_file
@with_output_format
@handle_errors
@click.pass_context
def science_cmd(ctx, max_results, records_path, output_format):
    """Show students studying a science subject."""
    if max_results is None:
        max_results = config_default(ctx, "search.max_results", 50)
    records = load_context(ctx, records_path).engine.search_science(max_results)
    _show(
        records,
        output_format,
        "Found {count} students with science subjects",
        filter="science",
    )
