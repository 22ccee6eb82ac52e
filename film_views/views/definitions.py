"""Table and list view definitions."""

from dataclasses import dataclass

from film_views.exceptions import ViewNotFoundException
from film_views.rendering import Document, Formatter, MountPoint, format_list_item, format_table_row


@dataclass(frozen=True)
class FilmView:
    """One way of presenting the film collection.

    Attributes:
        name: URL-safe view name
        title: Heading shown on the page
        template: Page template containing the mount element
        mount_id: Identifier of the page's single mount element
        formatter: Record-to-fragment function for this view
        child_tag: Element each fragment is wrapped in, if any
        child_class: CSS class for the wrapping element
    """

    name: str
    title: str
    template: str
    mount_id: str
    formatter: Formatter
    child_tag: str | None = None
    child_class: str | None = None

    def create_document(self) -> Document:
        """Fresh document holding this view's empty mount point."""
        return Document([MountPoint(self.mount_id, child_tag=self.child_tag, child_class=self.child_class)])


TABLE_VIEW = FilmView(
    name="table",
    title="Films (table)",
    template="films_table.html",
    mount_id="films-table-body",
    formatter=format_table_row,
)

LIST_VIEW = FilmView(
    name="list",
    title="Films (list)",
    template="films_list.html",
    mount_id="films-list",
    formatter=format_list_item,
    child_tag="li",
    child_class="list-group-item",
)

VIEWS: dict[str, FilmView] = {view.name: view for view in (TABLE_VIEW, LIST_VIEW)}


def get_view(name: str) -> FilmView:
    """Look up a view by name.

    Raises:
        ViewNotFoundException: If no view has that name
    """
    try:
        return VIEWS[name]
    except KeyError:
        raise ViewNotFoundException(name, details={"available": sorted(VIEWS)}) from None
