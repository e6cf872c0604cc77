"""
In-Memory Repository - Process-local movie storage

Records live in a plain list for the lifetime of the process; nothing is persisted.
Lookups are linear scans over the list.

All access goes through a single lock, so the repository stays consistent when
used from several threads. The async endpoints all run on one event loop;
test code and sync callers outside the loop do not.
"""

import copy
import logging
import threading
from typing import Iterable, List, Optional

from movie_catalog.errors import MovieNotFoundError
from movie_catalog.features.schemas import Movie
from movie_catalog.preprocessing.patching import MoviePatch, apply_patch
from api.repositories.base import BaseMovieRepository

logger = logging.getLogger(__name__)


class InMemoryMovieRepository(BaseMovieRepository):
    """Repository implementation backed by an in-process list"""

    def __init__(self, movies: Optional[Iterable[Movie]] = None):
        self._movies: List[Movie] = []
        self._lock = threading.RLock()

        for movie in movies or []:
            self.append(movie)

        logger.info(f"InMemoryMovieRepository initialized with {len(self._movies)} movies")

    def _find(self, movie_id: str) -> Movie:
        for movie in self._movies:
            if movie.id == movie_id:
                return movie
        raise MovieNotFoundError(movie_id)

    def list(self) -> List[Movie]:
        with self._lock:
            return [copy.deepcopy(movie) for movie in self._movies]

    def get(self, movie_id: str) -> Movie:
        with self._lock:
            return copy.deepcopy(self._find(movie_id))

    def append(self, movie: Movie) -> None:
        if not movie.id:
            raise ValueError("Movie must have an id before it is stored")

        with self._lock:
            self._movies.append(movie)
        logger.debug(f"Stored movie {movie.id}")

    def apply(self, movie_id: str, patch: MoviePatch) -> Movie:
        with self._lock:
            movie = apply_patch(self._find(movie_id), patch)
            return copy.deepcopy(movie)

    def remove_by_id(self, movie_id: str) -> bool:
        with self._lock:
            for index, movie in enumerate(self._movies):
                if movie.id == movie_id:
                    del self._movies[index]
                    logger.debug(f"Removed movie {movie_id}")
                    return True
        return False

    def __len__(self) -> int:
        with self._lock:
            return len(self._movies)
