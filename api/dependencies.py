"""
API Dependencies - Application state and FastAPI dependency injection

Each FastAPI app owns one AppState (stored on app.state), created by the
lifespan handler at startup and dropped at shutdown. Routers reach the
repository through the get_repository dependency, never through a module global.
"""

import logging
import threading
from typing import Optional
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from movie_catalog.features.seed_movies import build_seed_movies
from movie_catalog.settings import env_file_present
from api.repositories.base import BaseMovieRepository
from api.repositories.memory import InMemoryMovieRepository

logger = logging.getLogger(__name__)


class AppState:
    """
    Application state - holds the movie repository.

    One instance per app, shared across all requests of that app.
    """

    def __init__(self, repository: Optional[BaseMovieRepository] = None):
        self.repository: Optional[BaseMovieRepository] = repository
        self._initialization_lock = threading.Lock()

    def initialize(self) -> None:
        """Create the repository and load the seed catalog, unless a repository was supplied."""
        with self._initialization_lock:
            if self.repository is not None:
                logger.debug("AppState already initialized")
                return

            logger.info("Seeding movie repository...")
            self.repository = InMemoryMovieRepository(build_seed_movies())
            logger.info(f"Movie repository ready: {len(self.repository)} movies")

    def is_ready(self) -> bool:
        """Check if app is ready to serve requests"""
        return self.repository is not None


def get_app_state(request: Request) -> AppState:
    """
    FastAPI dependency to access app state.

    Usage in routers:
        @router.get("/example")
        async def example(state: AppState = Depends(get_app_state)):
            repo = state.repository
            ...
    """
    state: AppState = request.app.state.movies
    if not state.is_ready():
        logger.warning("AppState not initialized, initializing synchronously...")
        state.initialize()
    return state


def get_repository(request: Request) -> BaseMovieRepository:
    """
    FastAPI dependency to access the movie repository.

    Usage in routers:
        @router.get("/example")
        async def example(repo: BaseMovieRepository = Depends(get_repository)):
            movies = repo.list()
            ...
    """
    return get_app_state(request).repository


@asynccontextmanager
async def lifespan_handler(app: FastAPI):
    """
    FastAPI lifespan context manager for startup/shutdown.

    Usage in main.py:
        app = FastAPI(lifespan=lifespan_handler)
    """
    logger.info("FastAPI starting up...")
    if not env_file_present():
        logger.warning("Warning: No .env file found")

    app.state.movies.initialize()

    yield  # App is now running

    # In-memory records are discarded with the process
    logger.info("FastAPI shutting down...")
    app.state.movies.repository = None
    logger.info("Shutdown complete")
