"""
Movies Router - CRUD endpoints for movie records
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response

from movie_catalog.errors import InvalidMovieError, MovieEncodingError, MovieNotFoundError
from api.schemas.movies import MovieResponse
from api.services import movie_service
from api.dependencies import get_repository
from api.repositories.base import BaseMovieRepository

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/movies", response_model=List[MovieResponse])
async def list_movies(
    repo: BaseMovieRepository = Depends(get_repository)
) -> List[MovieResponse]:
    """Return every movie in insertion order."""
    try:
        return movie_service.list_movies(repo)
    except MovieEncodingError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/movie/{movie_id}", response_model=MovieResponse)
async def get_movie(
    movie_id: str,
    repo: BaseMovieRepository = Depends(get_repository)
) -> MovieResponse:
    """Return a single movie by id."""
    try:
        return movie_service.get_movie(repo, movie_id)
    except MovieNotFoundError as e:
        logger.warning(f"Movie {movie_id} not found")
        raise HTTPException(status_code=404, detail=str(e))
    except MovieEncodingError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/movies", response_model=MovieResponse)
async def create_movie(
    request: Request,
    repo: BaseMovieRepository = Depends(get_repository)
) -> MovieResponse:
    """
    Create a movie.

    The body is decoded as JSON whatever its Content-Type, and must carry isbn,
    title, overview and a director with both names.
    A new id is always generated; any id in the body is ignored.
    """
    try:
        payload = movie_service.parse_create_body(await request.body())
        return movie_service.create_movie(repo, payload)
    except InvalidMovieError as e:
        logger.warning(f"Rejected movie: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except MovieEncodingError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.put("/movie/{movie_id}", response_model=MovieResponse)
async def update_movie(
    movie_id: str,
    request: Request,
    repo: BaseMovieRepository = Depends(get_repository)
) -> MovieResponse:
    """
    Partially update a movie.

    Only non-empty string values for isbn, title, overview and
    director.firstName / director.lastName are applied. Anything else in
    the body is ignored, so fields can never be cleared.

    An unknown id is reported before the body is decoded.
    """
    try:
        repo.get(movie_id)
        fields = movie_service.parse_update_body(await request.body())
        return movie_service.update_movie(repo, movie_id, fields)
    except MovieNotFoundError as e:
        logger.warning(f"Movie {movie_id} not found")
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidMovieError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except MovieEncodingError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.delete("/movie/{movie_id}", status_code=204)
async def delete_movie(
    movie_id: str,
    repo: BaseMovieRepository = Depends(get_repository)
) -> Response:
    """Delete a movie; responds 204 with an empty body."""
    if not movie_service.delete_movie(repo, movie_id):
        logger.warning(f"Movie {movie_id} not found")
        raise HTTPException(status_code=404, detail="Movie not found")
    return Response(status_code=204)
