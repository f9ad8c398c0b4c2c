"""API endpoints for the proposal search service."""

from .search import router as search_router
from .proposals import router as proposals_router
from .cross_match import router as cross_match_router
from .health import router as health_router

__all__ = [
    "search_router",
    "proposals_router",
    "cross_match_router",
    "health_router",
]
