# src/neta_promise/main.py
"""Main entry point for the Neta Promise application."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from neta_promise.api.v1 import (
    admin_router,
    auth_router,
    feed_router,
    parties_router,
    politicians_router,
    posts_router,
    submissions_router,
    votes_router,
)
from neta_promise.api.v1.dependencies import SessionDep
from neta_promise.core.settings import settings
from neta_promise.services.votes import StoreUnavailable

logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Neta Promise API",
    description="Public promise tracking with anonymous daily voting",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add GZip middleware for compression
app.add_middleware(GZipMiddleware)

# Include API routers
app.include_router(feed_router, prefix="/api/v1")
app.include_router(votes_router, prefix="/api/v1")
app.include_router(posts_router, prefix="/api/v1")
app.include_router(politicians_router, prefix="/api/v1")
app.include_router(parties_router, prefix="/api/v1")
app.include_router(submissions_router, prefix="/api/v1")
app.include_router(auth_router, prefix="/api/v1")
app.include_router(admin_router, prefix="/api/v1")


@app.exception_handler(StoreUnavailable)
@app.exception_handler(SQLAlchemyError)
async def store_unavailable_handler(request: Request, exc: Exception) -> JSONResponse:
    """Map persistence failures to a retryable 503."""
    logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Service temporarily unavailable"},
    )


@app.on_event("startup")
async def on_startup() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("%s %s starting", settings.app_name, settings.app_version)


@app.get("/health")
async def health_check(db: SessionDep) -> JSONResponse:
    """Health check endpoint verifying the database answers."""
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.warning("Health check failed: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"ok": False, "error": "database unavailable"},
        )
    return JSONResponse(content={"ok": True})


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
        "redoc": "/redoc"
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("neta_promise.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
