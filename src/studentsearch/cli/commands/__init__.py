"""CLI command modules."""

from . import browse, data, search, serve

__all__ = ["browse", "data", "search", "serve"]
