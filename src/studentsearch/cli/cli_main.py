"""CLI entry point for StudentSearch."""

from __future__ import annotations

import click

from studentsearch import __version__
from studentsearch.cli.commands import browse, data, search, serve
from studentsearch.utils.config import load_config
from studentsearch.utils.logging import setup_logging


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config",
    type=click.Path(exists=True),
    help="Path to config.yml file",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    help="Logging level",
)
@click.pass_context
def cli(ctx, config, log_level):
    """StudentSearch - relevance search over student records.

    \b
    Examples:
        # Rank students by relevance
        studentsearch search "physics delhi"

        # Passed science students
        studentsearch filter --passed --science

        # Use your own collection
        studentsearch generate -o students.csv
        studentsearch search "chemistry" --records students.csv
    """
    ctx.ensure_object(dict)

    setup_logging(level=log_level)

    if config:
        ctx.obj["config"] = load_config(config)


cli.add_command(search.search_cmd)
cli.add_command(search.filter_cmd)
cli.add_command(browse.list_cmd)
cli.add_command(browse.passed_cmd)
cli.add_command(browse.failed_cmd)
cli.add_command(browse.science_cmd)
cli.add_command(data.generate_cmd)
cli.add_command(data.stats_cmd)
cli.add_command(serve.serve_cmd)


def main():
    """Main entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
