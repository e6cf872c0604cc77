"""
Base Repository - Abstract interface for movie record storage

This defines the contract that all repository implementations must follow.
Records are kept in insertion order, which is also the display order.
"""

from abc import ABC, abstractmethod
from typing import List

from movie_catalog.features.schemas import Movie
from movie_catalog.preprocessing.patching import MoviePatch


class BaseMovieRepository(ABC):
    """Abstract base class for movie repositories"""

    @abstractmethod
    def list(self) -> List[Movie]:
        """
        Get all movies.

        Returns:
            Snapshot of all records in insertion order
        """
        pass

    @abstractmethod
    def get(self, movie_id: str) -> Movie:
        """
        Find a movie by id.

        Raises:
            MovieNotFoundError: If no record has this id
        """
        pass

    @abstractmethod
    def append(self, movie: Movie) -> None:
        """
        Add a movie at the end of the collection.

        The caller must have assigned a unique, non-empty id.
        """
        pass

    @abstractmethod
    def apply(self, movie_id: str, patch: MoviePatch) -> Movie:
        """
        Merge a partial update into the stored movie.

        Returns:
            The updated record

        Raises:
            MovieNotFoundError: If no record has this id
        """
        pass

    @abstractmethod
    def remove_by_id(self, movie_id: str) -> bool:
        """
        Remove the movie with this id.

        Returns:
            True if a record was removed, False if none matched
        """
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass
