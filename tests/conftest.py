"""Pytest configuration and shared fixtures."""

import os

# Keep the suite well under the per-IP rate limit; must be set before the app is imported
os.environ.setdefault("RATE_LIMIT_DEFAULT", "1000/minute")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from film_views.main import app as fastapi_app  # noqa: E402
from film_views.models import FilmRecord  # noqa: E402
from film_views.store import FilmStore  # noqa: E402


@pytest.fixture
def test_client():
    """FastAPI test client with lifespan context."""
    with TestClient(fastapi_app) as client:
        yield client


@pytest.fixture
def inception():
    """The Inception record used across formatter tests."""
    return FilmRecord(
        title="Inception",
        year=2010,
        director="Christopher Nolan",
        actors=("Leonardo DiCaprio",),
    )


@pytest.fixture
def nolan_films(inception):
    """Two Christopher Nolan films in a fixed order."""
    return (
        inception,
        FilmRecord(
            title="The Dark Knight",
            year=2008,
            director="Christopher Nolan",
            actors=("Christian Bale",),
        ),
    )


@pytest.fixture
def nolan_store(nolan_films):
    """FilmStore holding the two Nolan films."""
    return FilmStore(nolan_films, {"Leonardo DiCaprio": 20_000_000})


@pytest.fixture
def empty_store():
    """FilmStore without any films."""
    return FilmStore()
