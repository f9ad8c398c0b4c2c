"""Main FastAPI application for the proposal search service."""

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
import structlog

from .api import (
    search_router,
    proposals_router,
    cross_match_router,
    health_router,
)
from .config import get_settings
from .engine_instance import get_search_engine
from .models.response import ErrorResponse

settings = get_settings()

# Configure structured logging
logging.basicConfig(format="%(message)s", level=settings.log_level.upper())
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting Proposal Search service", version=settings.app_version)

    # Build the shared index before the first request arrives
    engine = app.dependency_overrides.get(get_search_engine, get_search_engine)()
    logger.info(
        "Search engine ready",
        documents=len(engine.store),
        fuzzy_threshold=engine.fuzzy_threshold,
    )

    yield

    logger.info("Shutting down Proposal Search service")


app = FastAPI(
    title=settings.app_name,
    description="Fuzzy, substring and whole-word search over proposal records",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(GZipMiddleware, minimum_size=1000)


@app.middleware("http")
async def log_requests(request: Request, call_next) -> Response:
    """Log all HTTP requests."""
    start_time = time.time()

    response = await call_next(request)

    process_time = time.time() - start_time
    logger.info(
        "Request completed",
        method=request.method,
        url=str(request.url),
        status_code=response.status_code,
        process_time_ms=round(process_time * 1000, 2)
    )

    return response


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle global exceptions."""
    logger.error(
        "Unhandled exception",
        method=request.method,
        url=str(request.url),
        error=str(exc),
        exc_info=True
    )

    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="Internal Server Error",
            message="An unexpected error occurred",
            details={"exception": str(exc)} if settings.debug else None
        ).model_dump(mode="json")
    )


app.include_router(search_router)
app.include_router(proposals_router)
app.include_router(cross_match_router)
app.include_router(health_router)


@app.get("/", summary="Root endpoint", description="Get basic information about the API")
async def root() -> dict:
    """Root endpoint with basic API information."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "Fuzzy, substring and whole-word search over proposal records",
        "docs_url": "/docs",
        "health_url": "/api/v1/health",
        "endpoints": {
            "search": "/api/v1/search?q=...",
            "proposals": "/api/v1/proposals",
            "proposal": "/api/v1/proposals/{proposal_id}",
            "cross_match": "/api/v1/cross-match",
            "cross_match_csv": "/api/v1/cross-match/csv",
            "stats": "/api/v1/stats",
        },
        "status": "running"
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "proposal_search.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower()
    )
