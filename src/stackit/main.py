# src/stackit/main.py
"""Main entry point for the StackIt application."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from stackit.api import (
    answers_router,
    auth_router,
    questions_router,
    users_router,
    votes_router,
)
from stackit.core.errors import StackItError
from stackit.core.settings import settings

logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="StackIt API",
    description="Question and answer platform API",
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
app.include_router(auth_router, prefix=settings.api_prefix)
app.include_router(questions_router, prefix=settings.api_prefix)
app.include_router(answers_router, prefix=settings.api_prefix)
app.include_router(votes_router, prefix=settings.api_prefix)
app.include_router(users_router, prefix=settings.api_prefix)


@app.exception_handler(StackItError)
async def handle_domain_error(request: Request, exc: StackItError) -> JSONResponse:
    """Translate a service-layer error into its HTTP response."""
    logger.debug("%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


def configure_logging() -> None:
    """Configure the root logger from settings."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@app.on_event("startup")
async def on_startup() -> None:
    configure_logging()
    logger.info("%s %s starting", settings.app_name, settings.app_version)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": "StackIt API",
        "version": settings.app_version,
        "description": "Question and answer platform API",
        "docs": "/docs",
        "redoc": "/redoc"
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("stackit.main:app", host="0.0.0.0", port=5000, reload=settings.debug)
