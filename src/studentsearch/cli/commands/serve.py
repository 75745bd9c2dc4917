"""Serve command for starting the API server."""

from __future__ import annotations

import click

from studentsearch.cli.decorators import handle_errors, with_records_file
from studentsearch.cli.loaders import load_context
from studentsearch.utils.config import get_config


@click.command(name="serve")
@click.option("--host", default=None, help="Host to bind to (default: from config)")
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (default: from config or 8000)",
)
@with_records_file
@handle_errors
@click.pass_context
def serve_cmd(ctx, host, port, records_path):
    """Start the HTTP API over the loaded collection.

    \b
    Examples:
        studentsearch serve
        studentsearch serve --records data/students.csv --port 8080
    """
    import uvicorn

    from studentsearch.api.server import create_app

    config = ctx.ensure_object(dict).get("config") or get_config()
    host = host or config.get("api.host", "127.0.0.1")
    port = port or int(config.get("api.port", 8000))

    search_context = load_context(ctx, records_path)
    click.echo("🚀 Starting StudentSearch API server...")
    click.echo(f"   Host: {host}")
    click.echo(f"   Port: {port}")
    click.echo(f"   Records: {search_context.record_count()} ({search_context.source})")

    uvicorn.run(create_app(search_context), host=host, port=port, log_level="info")
