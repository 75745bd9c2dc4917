"""Pydantic models for API requests and responses."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from studentsearch.core.records import StudentRecord


class StudentItem(BaseModel):
    """Student record as returned by the API."""

    id: int = Field(..., description="Record identifier")
    name: str
    address: str
    school: str
    subject: str
    grade: str = Field(..., description="Grade letter (A, B, C, D or F)")

    @classmethod
    def from_record(cls, record: StudentRecord) -> StudentItem:
        return cls(**record.to_dict())


class SearchRequest(BaseModel):
    """Semantic search request."""

    query: str = Field(..., description="Free-text search query")
    top_k: int = Field(20, description="Number of results to return", ge=0, le=1000)

    model_config = {"json_schema_extra": {"examples": [{"query": "physics delhi", "top_k": 10}]}}


class SearchResultItem(BaseModel):
    """Ranked search hit."""

    rank: int = Field(..., description="Result rank (1-indexed)")
    score: float = Field(..., description="Cosine similarity in [0, 1]")
    relevance: str = Field(..., description="Score as a whole percentage, e.g. '73%'")
    student: StudentItem


class SearchResponse(BaseModel):
    """Semantic search response."""

    query: str
    top_k: int
    results: List[SearchResultItem]
    total_records: int = Field(..., description="Records in the collection")


class FilteredSearchRequest(BaseModel):
    """Relevance search narrowed by grade and subject filters."""

    query: str = Field("", description="Free-text query; blank filters the whole collection")
    passed: Optional[bool] = Field(
        None, description="True keeps grades A/B, False keeps C/D/F, null keeps all"
    )
    science: Optional[bool] = Field(None, description="True keeps science subjects only")
    max_results: int = Field(50, description="Maximum results", ge=0, le=1000)

    model_config = {
        "json_schema_extra": {
            "examples": [{"query": "", "passed": True, "science": True, "max_results": 50}]
        }
    }


class RecordListResponse(BaseModel):
    """A list of student records."""

    count: int
    results: List[StudentItem]
    filters: Dict[str, Any] = Field(default_factory=dict)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="'healthy' or 'degraded'")
    version: str
    engine_ready: bool
    total_records: Optional[int] = None


class ErrorResponse(BaseModel):
    """Error response."""

    error: str
    message: str
    detail: Optional[str] = None
