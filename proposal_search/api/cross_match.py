"""Cross-match API endpoints."""

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from ..core.engine import SearchEngine
from ..engine_instance import get_search_engine
from ..models.request import CrossMatchRequest
from ..models.response import CrossMatchResponse

router = APIRouter(prefix="/api/v1", tags=["cross-match"])

CSV_FILENAME = "cross_match.csv"


@router.post(
    "/cross-match",
    response_model=CrossMatchResponse,
    summary="Cross-match a list of terms",
    description="Fuzzy, contains and exact whole-word matches for each term of a batch"
)
def cross_match(
    request: CrossMatchRequest,
    engine: SearchEngine = Depends(get_search_engine),
) -> CrossMatchResponse:
    """
    Cross-match a batch of terms.
    
    The batch runs to completion before the response is sent; large batches
    take proportionally longer.
    """
    return engine.cross_match(request.terms, request.delimiter)


@router.post(
    "/cross-match/csv",
    summary="Cross-match and download CSV",
    description="Same as /cross-match, rendered as a CSV attachment",
    response_class=Response,
)
def cross_match_csv(
    request: CrossMatchRequest,
    engine: SearchEngine = Depends(get_search_engine),
) -> Response:
    """Cross-match a batch of terms and return the rows as CSV."""
    result = engine.cross_match(request.terms, request.delimiter)
    return Response(
        content=engine.export_csv(result.rows),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{CSV_FILENAME}"'},
    )
