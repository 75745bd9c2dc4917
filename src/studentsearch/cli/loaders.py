"""Context loading shared by CLI commands."""

from __future__ import annotations

from typing import Optional

import click

from studentsearch.core.context import SearchContext
from studentsearch.utils.config import Config, get_config
from studentsearch.utils.logging import get_logger

logger = get_logger(__name__)


def load_context(ctx: click.Context, records_path: Optional[str] = None) -> SearchContext:
    """Build (or reuse) the search context for this CLI invocation.

    Args:
        ctx: Click context; the built SearchContext is cached on ``ctx.obj``
        records_path: Optional CSV file overriding ``data.records_path``

    Returns:
        SearchContext
    """
    obj = ctx.ensure_object(dict)
    cached = obj.get("search_context")
    if cached is not None and obj.get("records_path") == records_path:
        return cached

    config: Config = obj.get("config") or get_config()
    search_context = SearchContext.from_config(config, records_path=records_path)
    logger.debug(f"Loaded {search_context.record_count()} records from {search_context.source}")

    obj["search_context"] = search_context
    obj["records_path"] = records_path
    return search_context


def config_default(ctx: click.Context, key: str, default: int) -> int:
    """Read an integer default from the active config."""
    config: Config = ctx.ensure_object(dict).get("config") or get_config()
    return int(config.get(key, default))
