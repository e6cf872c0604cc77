"""
Domain errors raised by the movie catalog.

Routers translate these into HTTP status codes:
- MovieNotFoundError -> 404
- InvalidMovieError -> 400
- MovieEncodingError -> 500
"""


class MovieCatalogError(Exception):
    """Base class for movie catalog errors"""


class MovieNotFoundError(MovieCatalogError):
    """No record with the requested id"""

    def __init__(self, movie_id: str, message: str = "movie not found"):
        super().__init__(message)
        self.movie_id = movie_id


class InvalidMovieError(MovieCatalogError):
    """Malformed body or missing required field"""


class MovieEncodingError(MovieCatalogError):
    """A record could not be serialized for the response"""
