"""
Movie API Schemas - Request/response models for the movie endpoints

Wire field names are camelCase for the director (firstName, lastName).
"""

from typing import Optional
from pydantic import BaseModel, Field

from movie_catalog.features.schemas import Director, Movie


class DirectorSchema(BaseModel):
    """Director of a movie"""

    first_name: str = Field("", alias="firstName", description="Director's first name")
    last_name: str = Field("", alias="lastName", description="Director's last name")

    def to_domain(self) -> Director:
        return Director(first_name=self.first_name, last_name=self.last_name)

    @classmethod
    def from_domain(cls, director: Director) -> "DirectorSchema":
        return cls(firstName=director.first_name, lastName=director.last_name)


class MovieCreateRequest(BaseModel):
    """
    Body of POST /movies.

    Missing keys decode to empty values and unknown keys (including "id") are
    ignored; required fields are enforced afterwards by validate_movie().
    """

    isbn: str = Field("", description="ISBN-like catalog number")
    title: str = Field("", description="Movie title")
    overview: str = Field("", description="Short synopsis")
    director: Optional[DirectorSchema] = Field(None, description="Director")

    def to_domain(self) -> Movie:
        return Movie(
            isbn=self.isbn,
            title=self.title,
            overview=self.overview,
            director=self.director.to_domain() if self.director is not None else None,
        )


class MovieResponse(BaseModel):
    """A movie record as returned by the API"""

    id: str = Field(..., description="Unique movie identifier")
    isbn: str = Field(..., description="ISBN-like catalog number")
    title: str = Field(..., description="Movie title")
    overview: str = Field(..., description="Short synopsis")
    director: Optional[DirectorSchema] = Field(None, description="Director")

    @classmethod
    def from_domain(cls, movie: Movie) -> "MovieResponse":
        return cls(
            id=movie.id,
            isbn=movie.isbn,
            title=movie.title,
            overview=movie.overview,
            director=DirectorSchema.from_domain(movie.director) if movie.director is not None else None,
        )
