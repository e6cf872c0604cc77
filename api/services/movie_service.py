"""
Movie Service - Business logic behind the movie endpoints

Bridges the API layer with the repository: assigns ids, runs validation,
builds patches and converts records into response models.
"""

import json
import logging
from typing import Any, Dict, List

from pydantic import ValidationError

from movie_catalog.errors import InvalidMovieError, MovieEncodingError
from movie_catalog.features.schemas import Movie
from movie_catalog.preprocessing.patching import MoviePatch
from movie_catalog.preprocessing.validation import validate_movie
from movie_catalog.utils.ids import generate_id

from api.repositories.base import BaseMovieRepository
from api.schemas.movies import MovieCreateRequest, MovieResponse

logger = logging.getLogger(__name__)

INVALID_CREATE_BODY = "Invalid input, please provide a valid movie object"
INVALID_UPDATE_BODY = "Invalid input, unable to parse JSON"


def parse_create_body(body: bytes) -> MovieCreateRequest:
    """
    Decode a create request body as JSON, whatever its Content-Type.

    Raises:
        InvalidMovieError: If the body is not a JSON object of the movie shape
    """
    try:
        return MovieCreateRequest.model_validate_json(body)
    except ValidationError as e:
        logger.warning(f"Undecodable movie body: {e.errors()}")
        raise InvalidMovieError(INVALID_CREATE_BODY) from e


def parse_update_body(body: bytes) -> Dict[str, Any]:
    """
    Decode an update request body as a JSON object, whatever its Content-Type.

    Raises:
        InvalidMovieError: If the body is not valid JSON or not an object
    """
    try:
        fields = json.loads(body)
    except ValueError as e:
        logger.warning(f"Undecodable update body: {e}")
        raise InvalidMovieError(INVALID_UPDATE_BODY) from e

    if not isinstance(fields, dict):
        logger.warning(f"Update body is a {type(fields).__name__}, not an object")
        raise InvalidMovieError(INVALID_UPDATE_BODY)
    return fields


def to_response(movie: Movie, error_message: str = "Failed to encode movie") -> MovieResponse:
    """
    Convert a stored record into its response model.

    Raises:
        MovieEncodingError: If the record cannot be represented on the wire
    """
    try:
        return MovieResponse.from_domain(movie)
    except Exception as e:
        logger.error(f"Failed to encode movie {movie.id}: {e}", exc_info=True)
        raise MovieEncodingError(error_message) from e


def list_movies(repo: BaseMovieRepository) -> List[MovieResponse]:
    movies = repo.list()
    return [to_response(movie, "Failed to encode movies") for movie in movies]


def get_movie(repo: BaseMovieRepository, movie_id: str) -> MovieResponse:
    return to_response(repo.get(movie_id))


def create_movie(repo: BaseMovieRepository, request: MovieCreateRequest) -> MovieResponse:
    """
    Validate a new movie, give it a fresh id and store it.

    Any id supplied by the client is ignored.

    Raises:
        InvalidMovieError: If a required field is missing or empty
    """
    movie = request.to_domain()
    validate_movie(movie)

    movie.id = generate_id()
    repo.append(movie)
    logger.info(f"Created movie {movie.id} ({movie.title})")

    return to_response(movie)


def update_movie(repo: BaseMovieRepository, movie_id: str, fields: Dict[str, Any]) -> MovieResponse:
    """
    Apply a partial update to an existing movie.

    Only non-empty string values for known fields are applied; everything
    else in the body is ignored.

    Raises:
        MovieNotFoundError: If no movie has this id
    """
    patch = MoviePatch.from_mapping(fields)
    if patch.is_empty():
        logger.debug(f"Update for movie {movie_id} carries no applicable fields")

    movie = repo.apply(movie_id, patch)
    logger.info(f"Updated movie {movie_id}")

    return to_response(movie, "Failed to encode updated movie")


def delete_movie(repo: BaseMovieRepository, movie_id: str) -> bool:
    """Remove a movie; returns False when no movie has this id."""
    removed = repo.remove_by_id(movie_id)
    if removed:
        logger.info(f"Deleted movie {movie_id}")
    return removed
