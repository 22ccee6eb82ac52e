"""Pydantic models for film data."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FilmRecord(BaseModel):
    """A single film's attributes.

    Records are immutable. ``title`` and ``director`` default to empty text
    and ``actors`` to an empty tuple, so a record missing them (or holding
    ``None``) still renders as empty text instead of failing. No content
    validation is applied.
    """

    model_config = ConfigDict(frozen=True)

    title: str = ""
    year: int | None = Field(default=None, description="Release year")
    director: str = ""
    actors: tuple[str, ...] = ()

    @field_validator("title", "director", mode="before")
    @classmethod
    def none_as_empty_text(cls, v: Any) -> Any:
        """Treat an explicit None like an absent field."""
        return "" if v is None else v

    @field_validator("actors", mode="before")
    @classmethod
    def none_as_no_actors(cls, v: Any) -> Any:
        """Treat an explicit None actor list as empty."""
        return () if v is None else v


FilmCollection = tuple[FilmRecord, ...]
"""Ordered, fixed sequence of films. Duplicate titles are allowed."""
