"""Data models for the proposal search service."""

from .document import Document, ProposalMetadata, UNTITLED
from .response import (
    MatchDetail,
    SearchHit,
    SearchResponse,
    CrossMatchRow,
    CrossMatchResponse,
    MetadataPage,
    ErrorResponse,
    HealthResponse,
)
from .request import CrossMatchRequest

__all__ = [
    "Document",
    "ProposalMetadata",
    "UNTITLED",
    "MatchDetail",
    "SearchHit",
    "SearchResponse",
    "CrossMatchRow",
    "CrossMatchResponse",
    "MetadataPage",
    "ErrorResponse",
    "HealthResponse",
    "CrossMatchRequest",
]
