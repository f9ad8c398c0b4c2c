"""Health check and monitoring API endpoints."""

import time
from typing import Any, Dict

from fastapi import APIRouter, Depends

from ..config import get_settings
from ..core.engine import SearchEngine
from ..engine_instance import get_search_engine
from ..models.response import HealthResponse

router = APIRouter(prefix="/api/v1", tags=["health"])
settings = get_settings()

# Track application start time
app_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check the health status of the search service"
)
async def health_check(engine: SearchEngine = Depends(get_search_engine)) -> HealthResponse:
    """
    Report service status and corpus size.
    
    An empty corpus is reported as degraded: the service answers, but every
    search comes back empty.
    """
    documents = len(engine.store)
    
    return HealthResponse(
        status="healthy" if documents else "degraded",
        version=settings.app_version,
        uptime=time.time() - app_start_time,
        documents=documents,
    )


@router.get(
    "/stats",
    summary="Engine statistics",
    description="Query counters and timings of the search engine"
)
async def engine_stats(engine: SearchEngine = Depends(get_search_engine)) -> Dict[str, Any]:
    """Get engine statistics."""
    return engine.get_stats()
