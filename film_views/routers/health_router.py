"""Health endpoint."""

from fastapi import APIRouter

from film_views import __version__
from film_views.models import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Basic health check endpoint.

    Returns simple status for Docker healthcheck and basic monitoring.
    """
    return HealthResponse(status="ok", version=__version__)
