"""Read-only film store."""

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

from film_views import film_data
from film_views.logging_config import get_logger, log_with_context
from film_views.models.film import FilmCollection, FilmRecord

logger = get_logger(__name__)


class FilmStore:
    """Immutable, ordered film collection plus the actor salary mapping.

    The store is built explicitly and handed to whoever renders from it;
    nothing reads film data from module-level state at render time.
    """

    def __init__(
        self,
        films: Iterable[FilmRecord | Mapping[str, Any]] = (),
        actor_salaries: Mapping[str, float] | None = None,
    ):
        self._films: FilmCollection = tuple(
            film if isinstance(film, FilmRecord) else FilmRecord.model_validate(film) for film in films
        )
        self._actor_salaries: Mapping[str, float] = MappingProxyType(dict(actor_salaries or {}))

    def get_films(self) -> FilmCollection:
        """Return the film collection.

        The same tuple is returned on every call for the lifetime of the store.
        """
        return self._films

    def get_actor_salaries(self) -> Mapping[str, float]:
        """Return a read-only view of actor salaries."""
        return self._actor_salaries

    def __len__(self) -> int:
        return len(self._films)

    def __repr__(self) -> str:
        return f"FilmStore(films={len(self._films)}, actor_salaries={len(self._actor_salaries)})"


def build_default_store() -> FilmStore:
    """Build a store from the bundled sample data."""
    store = FilmStore(film_data.FILMS, film_data.ACTOR_SALARIES)
    log_with_context(
        logger,
        "info",
        "Film store loaded",
        film_count=len(store),
        event_type="film_store_loaded",
    )
    return store
