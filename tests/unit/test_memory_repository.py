"""Unit tests for the in-memory movie repository."""
import threading

import pytest

from movie_catalog.errors import MovieNotFoundError
from movie_catalog.features.schemas import Director, Movie, new_movie
from movie_catalog.features.seed_movies import SEED_MOVIES, build_seed_movies
from movie_catalog.preprocessing.patching import MoviePatch
from api.repositories.memory import InMemoryMovieRepository


@pytest.fixture
def repo():
    """Repository holding the seed catalog."""
    return InMemoryMovieRepository(build_seed_movies())


class TestInMemoryMovieRepository:
    """Test suite for InMemoryMovieRepository."""

    def test_seeded_in_insertion_order(self, repo):
        titles = [movie.title for movie in repo.list()]
        assert titles == [row[1] for row in SEED_MOVIES]
        assert len(repo) == 5

    def test_seed_ids_are_unique_and_non_empty(self, repo):
        ids = [movie.id for movie in repo.list()]
        assert all(ids)
        assert len(set(ids)) == len(ids)

    def test_get_by_id(self, repo):
        first = repo.list()[0]
        assert repo.get(first.id) == first

    def test_get_unknown_id_raises(self, repo):
        with pytest.raises(MovieNotFoundError) as exc_info:
            repo.get("missing")
        assert exc_info.value.movie_id == "missing"

    def test_append_adds_at_end(self, repo):
        movie = new_movie("1", "T", "O", "A", "B")
        repo.append(movie)

        assert len(repo) == 6
        assert repo.list()[-1] == movie

    def test_append_requires_id(self, repo):
        with pytest.raises(ValueError):
            repo.append(Movie(isbn="1", title="T", overview="O", director=Director("A", "B")))

    def test_remove_by_id(self, repo):
        second = repo.list()[1]

        assert repo.remove_by_id(second.id) is True
        assert len(repo) == 4
        with pytest.raises(MovieNotFoundError):
            repo.get(second.id)

    def test_remove_unknown_id(self, repo):
        assert repo.remove_by_id("missing") is False
        assert len(repo) == 5

    def test_apply_updates_stored_record(self, repo):
        first = repo.list()[0]
        updated = repo.apply(first.id, MoviePatch(title="Renamed"))

        assert updated.title == "Renamed"
        assert repo.get(first.id).title == "Renamed"
        assert repo.get(first.id).isbn == first.isbn

    def test_apply_unknown_id_raises(self, repo):
        with pytest.raises(MovieNotFoundError):
            repo.apply("missing", MoviePatch(title="Renamed"))

    def test_returned_records_are_copies(self, repo):
        first = repo.list()[0]
        first.title = "Changed outside"
        first.director.first_name = "Changed outside"

        stored = repo.get(first.id)
        assert stored.title == SEED_MOVIES[0][1]
        assert stored.director.first_name == SEED_MOVIES[0][3]

    def test_concurrent_appends_are_not_lost(self):
        repo = InMemoryMovieRepository()

        def worker():
            for _ in range(200):
                repo.append(new_movie("1", "T", "O", "A", "B"))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(repo) == 1600
