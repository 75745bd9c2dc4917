"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Request

from studentsearch import __version__
from studentsearch.api.models import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Service status and collection size."""
    search_context = getattr(request.app.state, "search_context", None)

    if search_context is not None and search_context.engine.is_initialized:
        return HealthResponse(
            status="healthy",
            version=__version__,
            engine_ready=True,
            total_records=search_context.record_count(),
        )
    return HealthResponse(status="degraded", version=__version__, engine_ready=False)
