"""Formatters turning one film record into one fragment."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from film_views.models.film import FilmRecord

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"

fragment_env = Environment(
    loader=FileSystemLoader(TEMPLATES_DIR),
    autoescape=select_autoescape(["html"]),
)


def format_table_row(film: FilmRecord) -> Markup:
    """Table row with the film's title and director cells."""
    template = fragment_env.get_template("fragments/table_row.html")
    return Markup(template.render(film=film))


def format_list_item(film: FilmRecord) -> str:
    """Single line of the form ``"<title> - Directed by <director>"``.

    Returned as plain text; the mount escapes it on append.
    """
    return f"{film.title} - Directed by {film.director}"
