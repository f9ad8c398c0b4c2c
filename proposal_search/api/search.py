"""Search API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query

from ..config import get_settings
from ..core.engine import SearchEngine
from ..engine_instance import get_search_engine
from ..models.response import SearchResponse

router = APIRouter(prefix="/api/v1", tags=["search"])
settings = get_settings()


@router.get(
    "/search",
    response_model=SearchResponse,
    summary="Fuzzy search proposals",
    description="Search proposals across id, title, abstract, instrument, investigators, type and cycle"
)
async def search_proposals(
    q: str = Query("", description="Search query; a blank query returns no results"),
    engine: SearchEngine = Depends(get_search_engine),
) -> SearchResponse:
    """
    Fuzzy search the corpus.
    
    Returns every matching proposal ranked by relevance, with per-field
    match offsets for highlighting. Paging is left to the client.
    """
    if len(q) > settings.max_query_length:
        raise HTTPException(
            status_code=400,
            detail=f"Query too long. Maximum length is {settings.max_query_length} characters"
        )
    
    return engine.search(q)
