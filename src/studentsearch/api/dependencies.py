"""Request-scoped access to the application's search engine."""

from __future__ import annotations

from fastapi import Request

from studentsearch.core.engine import StudentSearchEngine
from studentsearch.core.exceptions import UninitializedEngineError


def get_engine(request: Request) -> StudentSearchEngine:
    """Engine held by the app's SearchContext.

    Raises:
        UninitializedEngineError: If the app has no loaded collection
    """
    search_context = getattr(request.app.state, "search_context", None)
    if search_context is None:
        raise UninitializedEngineError("No student collection is loaded")
    return search_context.engine
