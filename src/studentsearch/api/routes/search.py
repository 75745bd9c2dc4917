"""Search endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Request

from studentsearch.api.dependencies import get_engine
from studentsearch.api.models import (
    ErrorResponse,
    FilteredSearchRequest,
    RecordListResponse,
    SearchRequest,
    SearchResponse,
    SearchResultItem,
    StudentItem,
)
from studentsearch.utils.display import relevance_percent
from studentsearch.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1", tags=["search"])


@router.post(
    "/search",
    response_model=SearchResponse,
    responses={503: {"model": ErrorResponse}},
)
def search(request: Request, search_request: SearchRequest) -> SearchResponse:
    """Rank students by relevance to a free-text query."""
    engine = get_engine(request)
    logger.info(f"Search query: '{search_request.query}' (top_k={search_request.top_k})")

    results = engine.semantic_search(search_request.query, top_k=search_request.top_k)

    return SearchResponse(
        query=search_request.query,
        top_k=search_request.top_k,
        results=[
            SearchResultItem(
                rank=r.rank,
                score=r.score,
                relevance=relevance_percent(r.score),
                student=StudentItem.from_record(r.record),
            )
            for r in results
        ],
        total_records=engine.record_count(),
    )


@router.post(
    "/search/filtered",
    response_model=RecordListResponse,
    responses={503: {"model": ErrorResponse}},
)
def filtered_search(
    request: Request, filter_request: FilteredSearchRequest
) -> RecordListResponse:
    """Relevance search narrowed by grade outcome and science subjects."""
    engine = get_engine(request)

    records = engine.search_with_filters(
        filter_request.query,
        passed_filter=filter_request.passed,
        category_filter=filter_request.science,
        max_results=filter_request.max_results,
    )

    return RecordListResponse(
        count=len(records),
        results=[StudentItem.from_record(r) for r in records],
        filters={
            "query": filter_request.query,
            "passed": filter_request.passed,
            "science": filter_request.science,
        },
    )


@router.get("/stats")
def stats(request: Request) -> dict:
    """Engine statistics, including latency figures."""
    engine = get_engine(request)
    return {"source": request.app.state.search_context.source, **engine.get_stats()}
