"""Template rendering utilities for HTML views."""

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from film_views.config import Settings
from film_views.logging_config import get_logger, log_with_context
from film_views.rendering import MountPoint, render_into
from film_views.rendering.formatters import TEMPLATES_DIR
from film_views.store import FilmStore
from film_views.views.definitions import FilmView

logger = get_logger(__name__)

templates = Jinja2Templates(directory=TEMPLATES_DIR)


class TemplateRenderer:
    """Handles rendering of Jinja2 templates for all film views."""

    @staticmethod
    def render_view_mount(view: FilmView, store: FilmStore) -> MountPoint:
        """Fill a fresh mount point for ``view`` from the store.

        Args:
            view: View whose document and formatter are used
            store: Film store to read records from

        Returns:
            The populated mount point

        Raises:
            MissingMountException: If the view's document lacks its mount
            RenderException: If a record fails to render
        """
        document = view.create_document()
        films = store.get_films()
        render_into(document, view.mount_id, films, view.formatter)

        mount = document.get_mount(view.mount_id)
        log_with_context(
            logger,
            "info",
            "View rendered",
            view_name=view.name,
            mount_id=view.mount_id,
            fragment_count=len(mount),
            event_type="view_rendered",
        )
        return mount

    @staticmethod
    def render_page(request: Request, view: FilmView, store: FilmStore, settings: Settings) -> HTMLResponse:
        """Render a full page for ``view``.

        Args:
            request: FastAPI request object
            view: View to render
            store: Film store to read records from
            settings: Settings instance (must be provided by router via Depends)

        Returns:
            HTMLResponse with the complete page
        """
        mount = TemplateRenderer.render_view_mount(view, store)

        return templates.TemplateResponse(
            request,
            view.template,
            {
                "view": view,
                "mount": mount,
                "site_title": settings.site_title,
                "stylesheet_url": settings.stylesheet_url,
            },
        )

    @staticmethod
    def render_fragment(request: Request, view: FilmView, store: FilmStore) -> HTMLResponse:
        """Render only the mount content of ``view`` for HTMX partial updates.

        Args:
            request: FastAPI request object
            view: View to render
            store: Film store to read records from

        Returns:
            HTMLResponse with the view's fragments
        """
        mount = TemplateRenderer.render_view_mount(view, store)

        return templates.TemplateResponse(
            request,
            "fragments/mount_content.html",
            {"mount": mount},
        )
