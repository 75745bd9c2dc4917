"""Relevance search commands."""

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
from studentsearch.utils.logging import get_logger

logger = get_logger(__name__)
out = OutputFormatter()


@click.command(name="search")
@click.argument("query")
@click.option(
    "--top-k",
    "-k",
    type=click.IntRange(min=0),
    default=None,
    help="Number of results to return (default: from config or 20)",
)
@with_records_file
@with_output_format
@handle_errors
@click.pass_context
def search_cmd(ctx, query, top_k, records_path, output_format):
    """Rank students by relevance to QUERY.

    \b
    Examples:
        studentsearch search "physics delhi"
        studentsearch search "gradea chemistry" --top-k 5 --format json
    """
    if not query.strip():
        out.error("Please enter a search query", abort=True)

    if top_k is None:
        top_k = config_default(ctx, "search.top_k", 20)

    search_context = load_context(ctx, records_path)
    results = search_context.engine.semantic_search(query, top_k=top_k)

    if output_format == "json":
        out.json_search_results(results, query=query, top_k=top_k)
        return

    if not results:
        out.warning("No results found for your query")
        return

    out.search_results(results)
    out.success(f"Found {len(results)} results for '{query}' (sorted by relevance)")


@click.command(name="filter")
@click.argument("query", required=False, default="")
@click.option("--passed", "passed_only", is_flag=True, help="Keep only passed (A/B) students")
@click.option("--failed", "failed_only", is_flag=True, help="Keep only failed (C/D/F) students")
@click.option(
    "--science",
    is_flag=True,
    default=False,
    help="Keep only students with a science subject",
)
@with_max_results
@with_records_file
@with_output_format
@handle_errors
@click.pass_context
def filter_cmd(
    ctx, query, passed_only, failed_only, science, max_results, records_path, output_format
):
    """Relevance search narrowed by grade outcome and subject.

    QUERY may be omitted to filter the whole collection in storage order.

    \b
    Examples:
        studentsearch filter --passed --science
        studentsearch filter "delhi" --failed -n 10
    """
    if passed_only and failed_only:
        raise click.UsageError("--passed and --failed are mutually exclusive")
    passed = True if passed_only else (False if failed_only else None)

    if max_results is None:
        max_results = config_default(ctx, "search.max_results", 50)

    search_context = load_context(ctx, records_path)
    results = search_context.engine.search_with_filters(
        query,
        passed_filter=passed,
        category_filter=science or None,
        max_results=max_results,
    )

    filters = []
    if query.strip():
        filters.append(f"Query: '{query}'")
    if passed is True:
        filters.append("Passed students only")
    elif passed is False:
        filters.append("Failed students only")
    if science:
        filters.append("Science subjects only")
    description = ", ".join(filters) if filters else "No filters"

    if output_format == "json":
        out.json_records(
            results,
            query=query,
            passed=passed,
            science=science,
            max_results=max_results,
        )
        return

    if not results:
        out.warning("No results found matching your filters")
        return

    out.records(results)
    out.success(f"Found {len(results)} results matching: {description}")
