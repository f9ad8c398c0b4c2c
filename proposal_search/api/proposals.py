"""Proposal lookup and metadata listing endpoints."""

from typing import Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Request
from pydantic import ValidationError

from ..config import get_settings
from ..core.engine import SearchEngine
from ..core.listing import MetadataQuery
from ..engine_instance import get_search_engine
from ..models.document import Document
from ..models.response import MetadataPage

router = APIRouter(prefix="/api/v1", tags=["proposals"])
settings = get_settings()

FILTER_PREFIX = "filter_"


@router.get(
    "/proposals",
    response_model=MetadataPage,
    summary="List proposal metadata",
    description="Filter, sort and paginate the metadata of every proposal. "
                "Filter a column with a filter_<column> query parameter."
)
async def list_proposals(
    request: Request,
    sort: Optional[str] = Query(None, description="Column to sort by"),
    direction: Literal["asc", "desc"] = Query("asc", description="Sort direction"),
    page: int = Query(1, description="Page number, clamped to the available pages"),
    page_size: Optional[int] = Query(None, ge=1, le=500, description="Records per page"),
    engine: SearchEngine = Depends(get_search_engine),
) -> MetadataPage:
    """List proposal metadata one page at a time."""
    filters = {
        key[len(FILTER_PREFIX):]: value
        for key, value in request.query_params.items()
        if key.startswith(FILTER_PREFIX)
    }
    
    try:
        query = MetadataQuery(
            filters=filters,
            sort_key=sort,
            direction=direction,
            page=page,
            page_size=page_size or settings.page_size,
        )
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.errors(include_url=False, include_context=False))
    
    return engine.list_metadata(query)


@router.get(
    "/proposals/{proposal_id}",
    response_model=Document,
    summary="Get a proposal",
    description="Get the full document of a proposal by its program id"
)
async def get_proposal(
    proposal_id: str = Path(..., description="Program id"),
    engine: SearchEngine = Depends(get_search_engine),
) -> Document:
    """Get one proposal, 404 when the id is unknown."""
    document = engine.get_document(proposal_id)
    if document is None:
        raise HTTPException(status_code=404, detail=f"Proposal {proposal_id} not found")
    return document
