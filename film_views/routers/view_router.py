"""Page/view routes for serving HTML pages and fragments."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from film_views.config import Settings, get_settings
from film_views.dependencies import get_film_store
from film_views.store import FilmStore
from film_views.views.definitions import TABLE_VIEW, get_view
from film_views.views.template_renderer import TemplateRenderer

router = APIRouter()


@router.get("/", include_in_schema=False)
async def index():
    """Redirect to the table view."""
    return RedirectResponse(url=f"/films/{TABLE_VIEW.name}")


@router.get("/films/{view_name}", response_class=HTMLResponse)
async def film_page(
    request: Request,
    view_name: str,
    store: FilmStore = Depends(get_film_store),
    settings: Settings = Depends(get_settings),
):
    """Render the full page of a film view."""
    return TemplateRenderer.render_page(request, get_view(view_name), store, settings)


@router.get("/fragments/{view_name}", response_class=HTMLResponse)
async def film_fragment(
    request: Request,
    view_name: str,
    store: FilmStore = Depends(get_film_store),
):
    """Render only the rows or items of a film view."""
    return TemplateRenderer.render_fragment(request, get_view(view_name), store)
