"""API routers."""

from . import health, records, search

__all__ = ["health", "records", "search"]
