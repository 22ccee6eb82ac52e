"""Tests for film models."""

import pytest
from pydantic import ValidationError

from film_views.models import FilmRecord, FilmsResponse


class TestFilmRecord:
    """Tests for FilmRecord."""

    def test_film_record_creation(self):
        """Test creating a complete FilmRecord."""
        film = FilmRecord(title="Inception", year=2010, director="Christopher Nolan", actors=["Leonardo DiCaprio"])

        assert film.title == "Inception"
        assert film.year == 2010
        assert film.director == "Christopher Nolan"
        assert film.actors == ("Leonardo DiCaprio",)

    def test_film_record_absent_fields_default_to_empty(self):
        """Test that missing fields fall back to empty values."""
        film = FilmRecord()

        assert film.title == ""
        assert film.director == ""
        assert film.year is None
        assert film.actors == ()

    def test_film_record_is_immutable(self, inception):
        """Test that records cannot be modified after creation."""
        with pytest.raises(ValidationError):
            inception.title = "Tenet"

    def test_film_records_compare_by_value(self, inception):
        """Test that equal field values make equal records."""
        copy = FilmRecord(**inception.model_dump())

        assert copy == inception
        assert hash(copy) == hash(inception)


class TestFilmsResponse:
    """Tests for FilmsResponse."""

    def test_films_response_serializes_actors_as_list(self, inception):
        """Test JSON serialization of the collection listing."""
        response = FilmsResponse(count=1, films=[inception])

        data = response.model_dump(mode="json")

        assert data["count"] == 1
        assert data["films"][0]["actors"] == ["Leonardo DiCaprio"]

    def test_films_response_rejects_negative_count(self):
        """Test count validation."""
        with pytest.raises(ValidationError):
            FilmsResponse(count=-1, films=[])


class TestFilmRecordNoneValues:
    """Tests for explicit None values in record data."""

    def test_none_title_and_director_become_empty_text(self):
        """Test None title and director are stored as empty text."""
        film = FilmRecord.model_validate({"title": None, "year": 2001, "director": None, "actors": None})

        assert film.title == ""
        assert film.director == ""
        assert film.actors == ()
        assert film.year == 2001
