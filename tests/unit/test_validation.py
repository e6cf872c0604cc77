"""Unit tests for movie presence validation."""
import pytest

from movie_catalog.errors import InvalidMovieError
from movie_catalog.features.schemas import Director, Movie
from movie_catalog.preprocessing.validation import validate_movie


def make_movie(**overrides) -> Movie:
    fields = dict(
        isbn="1",
        title="T",
        overview="O",
        director=Director(first_name="A", last_name="B"),
    )
    fields.update(overrides)
    return Movie(**fields)


class TestValidateMovie:
    """Test suite for validate_movie."""

    def test_complete_movie_passes(self):
        validate_movie(make_movie())

    def test_id_is_not_required(self):
        validate_movie(make_movie(id=""))

    @pytest.mark.parametrize("field", ["isbn", "title", "overview"])
    def test_empty_required_field_fails(self, field):
        with pytest.raises(InvalidMovieError, match="isbn, title, and overview are required fields"):
            validate_movie(make_movie(**{field: ""}))

    def test_missing_director_fails(self):
        with pytest.raises(InvalidMovieError, match="director's first and last name are required"):
            validate_movie(make_movie(director=None))

    @pytest.mark.parametrize("director", [
        Director(first_name="", last_name="B"),
        Director(first_name="A", last_name=""),
    ])
    def test_empty_director_name_fails(self, director):
        with pytest.raises(InvalidMovieError, match="director's first and last name are required"):
            validate_movie(make_movie(director=director))

    def test_movie_fields_checked_before_director(self):
        """An empty title is reported even when the director is also missing."""
        with pytest.raises(InvalidMovieError, match="isbn, title, and overview"):
            validate_movie(make_movie(title="", director=None))
