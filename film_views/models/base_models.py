"""Pydantic models for request/response validation."""

from typing import Any

from pydantic import BaseModel, Field

from film_views.models.film import FilmRecord


class HealthResponse(BaseModel):
    """Basic health check response."""

    status: str
    version: str


class FilmsResponse(BaseModel):
    """Film collection listing for the JSON API."""

    count: int = Field(..., ge=0, description="Number of films in the collection")
    films: list[FilmRecord] = Field(..., description="Films in collection order")


class ErrorDetail(BaseModel):
    """Structured error body."""

    code: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    """Error response envelope."""

    error: ErrorDetail
