"""Film Views models"""

from film_views.models.base_models import ErrorDetail, ErrorResponse, FilmsResponse, HealthResponse
from film_views.models.film import FilmCollection, FilmRecord

__all__ = [
    "ErrorDetail",
    "ErrorResponse",
    "FilmCollection",
    "FilmRecord",
    "FilmsResponse",
    "HealthResponse",
]
