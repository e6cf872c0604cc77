"""
Partial updates of movie records.

A patch is built from an arbitrary decoded JSON object. Only non-empty strings
are kept: absent keys, unknown keys, wrong types and empty strings all leave the
corresponding field untouched, so a patch can never clear a field and building
one never fails.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from movie_catalog.features.schemas import Director, Movie

logger = logging.getLogger(__name__)


def _non_empty_str(fields: Mapping[str, Any], key: str) -> Optional[str]:
    value = fields.get(key)
    if isinstance(value, str) and value != "":
        return value
    return None


@dataclass
class DirectorPatch:
    """Fields to overwrite on a director (None = leave unchanged)"""
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    @classmethod
    def from_mapping(cls, fields: Mapping[str, Any]) -> "DirectorPatch":
        return cls(
            first_name=_non_empty_str(fields, "firstName"),
            last_name=_non_empty_str(fields, "lastName"),
        )

    def is_empty(self) -> bool:
        return self.first_name is None and self.last_name is None


@dataclass
class MoviePatch:
    """Fields to overwrite on a movie (None = leave unchanged)"""
    isbn: Optional[str] = None
    title: Optional[str] = None
    overview: Optional[str] = None
    director: Optional[DirectorPatch] = None

    @classmethod
    def from_mapping(cls, fields: Mapping[str, Any]) -> "MoviePatch":
        """Build a patch from a decoded JSON object, dropping anything not applicable."""
        director_fields = fields.get("director")
        director = None
        if isinstance(director_fields, Mapping):
            director = DirectorPatch.from_mapping(director_fields)

        return cls(
            isbn=_non_empty_str(fields, "isbn"),
            title=_non_empty_str(fields, "title"),
            overview=_non_empty_str(fields, "overview"),
            director=director,
        )

    def is_empty(self) -> bool:
        return (
            self.isbn is None
            and self.title is None
            and self.overview is None
            and (self.director is None or self.director.is_empty())
        )


def apply_patch(movie: Movie, patch: MoviePatch) -> Movie:
    """
    Merge a patch into a movie in place.

    If the movie has no director, one is attached only when the patch supplies
    both names; a partial director patch is ignored in that case.

    Returns:
        The same Movie instance, updated
    """
    if patch.isbn is not None:
        movie.isbn = patch.isbn
    if patch.title is not None:
        movie.title = patch.title
    if patch.overview is not None:
        movie.overview = patch.overview

    director_patch = patch.director
    if director_patch is None or director_patch.is_empty():
        return movie

    if movie.director is None:
        if director_patch.first_name is None or director_patch.last_name is None:
            logger.warning(f"Movie {movie.id} has no director; ignoring partial director update")
            return movie
        movie.director = Director(
            first_name=director_patch.first_name,
            last_name=director_patch.last_name,
        )
        return movie

    if director_patch.first_name is not None:
        movie.director.first_name = director_patch.first_name
    if director_patch.last_name is not None:
        movie.director.last_name = director_patch.last_name
    return movie
