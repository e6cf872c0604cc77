"""
Presence checks run on a candidate movie before it is accepted into the catalog.
"""

from movie_catalog.errors import InvalidMovieError
from movie_catalog.features.schemas import Movie


def validate_movie(movie: Movie) -> None:
    """
    Check that the required fields are present and non-empty.

    Args:
        movie: Candidate record (its id is not checked)

    Raises:
        InvalidMovieError: If isbn, title or overview is empty, or if the director
            is missing or has an empty first or last name
    """
    if movie.isbn == "" or movie.title == "" or movie.overview == "":
        raise InvalidMovieError("isbn, title, and overview are required fields")
    if movie.director is None or movie.director.first_name == "" or movie.director.last_name == "":
        raise InvalidMovieError("director's first and last name are required")
