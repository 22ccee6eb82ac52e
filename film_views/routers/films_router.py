"""Film collection API routes."""

from fastapi import APIRouter, Depends

from film_views.dependencies import get_film_store
from film_views.models import FilmsResponse
from film_views.store import FilmStore

router = APIRouter()


@router.get(
    "",
    response_model=FilmsResponse,
    summary="List films",
    description="""
    Returns the film collection in its fixed order.

    Actor salaries are held by the store but never served.
    """,
    responses={
        200: {
            "description": "Successful response",
            "content": {
                "application/json": {
                    "example": {
                        "count": 1,
                        "films": [
                            {
                                "title": "Inception",
                                "year": 2010,
                                "director": "Christopher Nolan",
                                "actors": ["Leonardo DiCaprio"],
                            }
                        ],
                    }
                }
            },
        },
    },
)
async def list_films(store: FilmStore = Depends(get_film_store)):
    """Get the film collection.

    Args:
        store: Film store from dependency injection

    Returns:
        FilmsResponse with every film in collection order
    """
    films = store.get_films()
    return FilmsResponse(count=len(films), films=list(films))
