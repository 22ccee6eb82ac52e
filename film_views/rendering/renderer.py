"""Render loop: format each record and append it to a mount, in order."""

from collections.abc import Callable, Iterable

from film_views.exceptions import RenderException
from film_views.logging_config import get_logger, log_with_context
from film_views.models.film import FilmRecord
from film_views.rendering.mount import Document, Mount

logger = get_logger(__name__)

Formatter = Callable[[FilmRecord], str]


def render(records: Iterable[FilmRecord], mount: Mount, formatter: Formatter) -> None:
    """Append ``formatter(record)`` to ``mount`` for every record, in order.

    Content already in the mount is kept, so rendering twice into the same
    mount duplicates every fragment. The first failure aborts the render;
    fragments appended before it stay where they are.

    Args:
        records: Films in display order
        mount: Sink receiving one fragment per record
        formatter: Pure function from a record to its fragment

    Raises:
        RenderException: If formatting or appending a record fails
    """
    mount_label = getattr(mount, "mount_id", type(mount).__name__)
    appended = 0

    for index, record in enumerate(records):
        try:
            mount.append(formatter(record))
        except Exception as e:
            log_with_context(
                logger,
                "error",
                "Render failed",
                mount_id=mount_label,
                index=index,
                title=getattr(record, "title", None),
                error=str(e),
                error_type=type(e).__name__,
                event_type="render_error",
            )
            raise RenderException(
                f"Failed to render record {index} into '{mount_label}'",
                details={"mount_id": mount_label, "index": index, "appended": appended},
            ) from e
        appended += 1

    log_with_context(
        logger,
        "debug",
        "Render complete",
        mount_id=mount_label,
        fragment_count=appended,
        event_type="render_complete",
    )


def render_into(document: Document, mount_id: str, records: Iterable[FilmRecord], formatter: Formatter) -> None:
    """Resolve ``mount_id`` in ``document`` and render into it.

    Raises:
        MissingMountException: If the document has no such mount point
        RenderException: If formatting or appending a record fails
    """
    render(records, document.get_mount(mount_id), formatter)
