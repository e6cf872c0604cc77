from dataclasses import dataclass
from typing import Optional

from movie_catalog.utils.ids import generate_id


@dataclass
class Director:
    """Director of a movie, owned by its Movie record"""
    first_name: str = ""
    last_name: str = ""


@dataclass
class Movie:
    """A movie record as held by the repository"""
    isbn: str = ""
    title: str = ""
    overview: str = ""
    director: Optional[Director] = None
    id: str = ""  # assigned by the service on creation, never changed afterwards


def new_movie(isbn: str, title: str, overview: str, first_name: str, last_name: str) -> Movie:
    """Build a Movie with a freshly generated id."""
    return Movie(
        id=generate_id(),
        isbn=isbn,
        title=title,
        overview=overview,
        director=Director(first_name=first_name, last_name=last_name),
    )
