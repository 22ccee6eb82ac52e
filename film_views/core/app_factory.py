"""Application factory for creating and configuring the FastAPI app."""

from fastapi import FastAPI

from film_views import __version__
from film_views.config import get_settings
from film_views.core.lifespan import lifespan
from film_views.core.middleware import setup_middleware
from film_views.middleware.error_handlers import register_error_handlers
from film_views.routers import films_router, health_router, view_router


def custom_openapi(app: FastAPI):
    """Generate OpenAPI schema without the HTML page and fragment routes."""
    if app.openapi_schema:
        return app.openapi_schema

    from fastapi.openapi.utils import get_openapi

    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
    )

    # HTML pages and fragments are not useful in API docs
    paths = openapi_schema.get("paths", {})
    for path in [p for p in paths if p.startswith(("/films/", "/fragments/"))]:
        del paths[path]

    app.openapi_schema = openapi_schema
    return app.openapi_schema


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    app = FastAPI(
        title="Film Views",
        description="""
        **Film Views** - a static film collection rendered as a table and as a list

        ## Pages
        - `/films/table` - films in a table (title, director)
        - `/films/list` - one line per film: "<title> - Directed by <director>"

        ## Fragments
        - `/fragments/table` and `/fragments/list` return only the rendered rows or items

        ## API
        - `/api/films` - the film collection as JSON
        - `/health` - basic health check
        """,
        version=__version__,
        lifespan=lifespan,
    )

    setup_middleware(app, settings)

    register_error_handlers(app)

    # View routes (HTML pages and fragments) - no prefix
    app.include_router(view_router.router, tags=["views"])

    app.include_router(health_router.router, tags=["health"])

    app.include_router(films_router.router, prefix="/api/films", tags=["films"])

    app.openapi = lambda: custom_openapi(app)

    return app
