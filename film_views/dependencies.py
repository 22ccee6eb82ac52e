"""FastAPI dependencies for dependency injection."""

from fastapi import Request

from film_views.store import FilmStore


async def get_film_store(request: Request) -> FilmStore:
    """
    Get the film store from app state.

    Args:
        request: The FastAPI request object.

    Returns:
        The FilmStore built during application startup.

    Raises:
        RuntimeError: If the film store is not initialized.
    """
    store: FilmStore | None = getattr(request.app.state, "film_store", None)

    if store is None:
        raise RuntimeError("Film store not initialized.")

    return store
