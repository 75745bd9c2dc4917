"""FastAPI server for StudentSearch."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from studentsearch import __version__
from studentsearch.api.routes import health, records, search
from studentsearch.core.context import SearchContext
from studentsearch.core.exceptions import StudentSearchError, UninitializedEngineError
from studentsearch.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the student collection on startup unless one was supplied."""
    if app.state.search_context is None:
        setup_logging(level="INFO")
        logger.info("Starting StudentSearch API server")
        try:
            app.state.search_context = SearchContext.from_config()
            logger.info(
                f"Loaded {app.state.search_context.record_count()} records "
                f"from {app.state.search_context.source}"
            )
        except (StudentSearchError, OSError, ValueError) as e:
            logger.error(f"Failed to load student collection: {e}", exc_info=True)
            app.state.search_context = None

    yield

    logger.info("Shutting down StudentSearch API server")


def create_app(search_context: Optional[SearchContext] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        search_context: Collection to serve; when None it is built from
            configuration at startup

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="StudentSearch API",
        description="Relevance search over student records",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.search_context = search_context

    @app.exception_handler(UninitializedEngineError)
    async def uninitialized_handler(request: Request, exc: UninitializedEngineError):
        return JSONResponse(
            status_code=503,
            content={"error": "engine_not_ready", "message": str(exc)},
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        return JSONResponse(
            status_code=422,
            content={"error": "invalid_value", "message": str(exc)},
        )

    @app.exception_handler(StudentSearchError)
    async def search_error_handler(request: Request, exc: StudentSearchError):
        logger.error(f"Search error: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": "search_error", "message": str(exc)},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred",
                "detail": str(exc),
            },
        )

    @app.get("/")
    async def root():
        """API information."""
        return {
            "name": "StudentSearch API",
            "version": __version__,
            "endpoints": {
                "health": "/health",
                "search": "/api/v1/search",
                "filtered_search": "/api/v1/search/filtered",
                "records": "/api/v1/records",
                "stats": "/api/v1/stats",
                "docs": "/docs",
            },
        }

    app.include_router(health.router)
    app.include_router(search.router)
    app.include_router(records.router)

    return app
