"""
Movie Catalog - FastAPI Application

Main entry point for the API server.
Configuration reads from settings (environment and optional .env file).
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from movie_catalog.logging_setup import setup_logging
from movie_catalog.settings import get_settings
from api.dependencies import AppState, lifespan_handler
from api.repositories.base import BaseMovieRepository
from api.routers import movies

# Get settings
cfg = get_settings()

# Configure logging
setup_logging(cfg.log_level)
logger = logging.getLogger(__name__)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    """Render HTTP errors as plain text with the matching status."""
    return PlainTextResponse(
        str(exc.detail),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None)
    )


def create_app(repository: Optional[BaseMovieRepository] = None) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        repository: Movie repository to serve. When omitted, a fresh in-memory
            repository with the seed catalog is created at startup.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="Movie Catalog API",
        description="In-memory CRUD service for movie records",
        version="0.1.0",
        lifespan=lifespan_handler  # Handles startup/shutdown
    )
    app.state.movies = AppState(repository)

    # CORS configuration from settings
    logger.info(f"Configuring CORS with origins: {cfg.cors_origins}")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_error_handler)

    # Mount routers
    app.include_router(movies.router, tags=["movies"])

    logger.info(f"FastAPI application created (env={cfg.env})")

    return app


# Create app instance
app = create_app()


def main() -> None:
    import uvicorn

    logger.info(f"Server starting on port {cfg.port}")
    logger.info(f"Environment: {cfg.env}")

    # uvicorn logs the cause and exits non-zero if the port cannot be bound
    uvicorn.run(
        app,
        host=cfg.host,
        port=cfg.port,
        log_level=cfg.log_level.lower()
    )


if __name__ == "__main__":
    main()
