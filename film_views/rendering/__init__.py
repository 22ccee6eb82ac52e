"""Formatter, mount point and render primitives shared by every film view."""

from film_views.rendering.formatters import format_list_item, format_table_row
from film_views.rendering.mount import Document, Mount, MountPoint, TextStreamMount
from film_views.rendering.renderer import Formatter, render, render_into

__all__ = [
    "Document",
    "Formatter",
    "Mount",
    "MountPoint",
    "TextStreamMount",
    "format_list_item",
    "format_table_row",
    "render",
    "render_into",
]
