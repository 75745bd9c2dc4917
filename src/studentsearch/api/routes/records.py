"""Record listing endpoints (no relevance ranking)."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Query, Request

from studentsearch.api.dependencies import get_engine
from studentsearch.api.models import RecordListResponse, StudentItem

router = APIRouter(prefix="/api/v1/records", tags=["records"])


def _response(records, **filters) -> RecordListResponse:
    return RecordListResponse(
        count=len(records),
        results=[StudentItem.from_record(r) for r in records],
        filters=filters,
    )


@router.get("", response_model=RecordListResponse)
def list_records(
    request: Request, max_results: Optional[int] = Query(None, ge=0)
) -> RecordListResponse:
    """All students in storage order."""
    return _response(get_engine(request).get_all(max_results))


@router.get("/passed", response_model=RecordListResponse)
def passed_records(
    request: Request, max_results: int = Query(50, ge=0)
) -> RecordListResponse:
    """Students with grade A or B."""
    return _response(get_engine(request).search_passed(max_results), passed=True)


@router.get("/failed", response_model=RecordListResponse)
def failed_records(
    request: Request, max_results: int = Query(50, ge=0)
) -> RecordListResponse:
    """Students with grade C, D or F."""
    return _response(get_engine(request).search_failed(max_results), passed=False)


@router.get("/science", response_model=RecordListResponse)
def science_records(
    request: Request, max_results: int = Query(50, ge=0)
) -> RecordListResponse:
    """Students studying a science subject."""
    return _response(get_engine(request).search_science(max_results), science=True)
