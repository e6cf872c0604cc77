import pytest
from fastapi.testclient import TestClient

from api.main import create_app


@pytest.fixture
def client():
    """Client for a fresh app whose repository holds only the seed catalog."""
    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture
def new_movie_payload():
    return {
        "isbn": "1",
        "title": "T",
        "overview": "O",
        "director": {"firstName": "A", "lastName": "B"},
    }
