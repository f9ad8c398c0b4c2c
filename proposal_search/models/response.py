"""Response models for the search core and API endpoints."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .document import Document, ProposalMetadata


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MatchDetail(BaseModel):
    """Where a query matched inside one indexed field."""
    
    field: str = Field(..., description="Indexed field path, e.g. metadata.program_title")
    score: float = Field(..., ge=0.0, le=1.0, description="Field score, 0.0 is a perfect match")
    start: int = Field(..., ge=0, description="Start offset of the aligned span")
    end: int = Field(..., ge=0, description="End offset (exclusive) of the aligned span")


class SearchHit(BaseModel):
    """A ranked fuzzy search result."""
    
    document: Document = Field(..., description="The matched document")
    score: float = Field(..., ge=0.0, le=1.0, description="Relevance score, lower is closer")
    matches: List[MatchDetail] = Field(default_factory=list, description="Per-field match detail")


class SearchResponse(BaseModel):
    """Response for a single fuzzy search."""
    
    query: str = Field(..., description="Original search query")
    execution_time_ms: float = Field(..., description="Query execution time in milliseconds")
    total_results: int = Field(..., description="Total number of results")
    results: List[SearchHit] = Field(..., description="Ranked search hits")
    timestamp: datetime = Field(default_factory=_utcnow, description="Response timestamp")


class CrossMatchRow(BaseModel):
    """Match sets for a single cross-match term."""
    
    term: str = Field(..., description="The input term")
    fuzzy: List[str] = Field(default_factory=list, description="Program ids from fuzzy search")
    contains: List[str] = Field(default_factory=list, description="Program ids with a substring hit")
    exact: List[str] = Field(default_factory=list, description="Program ids with a whole-word hit")


class CrossMatchResponse(BaseModel):
    """Response for a batch cross-match."""
    
    terms: List[str] = Field(..., description="Parsed terms, in input order")
    rows: List[CrossMatchRow] = Field(..., description="One row per term")
    execution_time_ms: float = Field(..., description="Batch execution time in milliseconds")
    timestamp: datetime = Field(default_factory=_utcnow, description="Response timestamp")


class MetadataPage(BaseModel):
    """One page of the filtered and sorted metadata listing."""
    
    items: List[ProposalMetadata] = Field(..., description="Metadata records on this page")
    total: int = Field(..., description="Number of records after filtering")
    page: int = Field(..., description="Current page, 1-based")
    page_size: int = Field(..., description="Records per page")
    total_pages: int = Field(..., description="Number of pages, at least 1")
    start_index: int = Field(..., description="1-based index of the first record shown, 0 if none")
    end_index: int = Field(..., description="1-based index of the last record shown, 0 if none")


class ErrorResponse(BaseModel):
    """Error response model."""
    
    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=_utcnow, description="Error timestamp")


class HealthResponse(BaseModel):
    """Health check response."""
    
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    uptime: float = Field(..., description="Service uptime in seconds")
    documents: int = Field(..., description="Number of documents in the corpus")
    timestamp: datetime = Field(default_factory=_utcnow, description="Check timestamp")
